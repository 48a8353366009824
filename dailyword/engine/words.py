"""
Word value types.

A Solution (the answer of a puzzle) and a Guess (what the player typed) share
the same shape:
  - exactly N characters
  - ASCII letters a–z only
  - stored lower-case (construction normalizes)

Construction is the only place a malformed word is rejected. Both
`Solution("rusty")` and `Solution.parse("rusty", N)` check the length against
N (WORD_LENGTH unless given).
"""

from __future__ import annotations

from dataclasses import dataclass, field

# Puzzle word length used when the caller does not pass one.
WORD_LENGTH = 5


class WordError(ValueError):
    """Raised when raw text is not a valid N-letter word."""


def _check_word(text: str, N: int) -> str:
    if not isinstance(text, str):
        raise WordError(f"word must be a string, got {type(text).__name__}")
    w = text.strip()
    if len(w) != N:
        if len(w) > N:
            raise WordError(f"too many letters: {len(w)}, must be {N}")
        raise WordError(f"too few letters: {len(w)}, must be {N}")
    if not (w.isascii() and w.isalpha()):
        raise WordError("cannot contain non ascii alphabetic letters")
    return w.lower()


@dataclass(frozen=True, order=True)
class Word:
    text: str
    N: int = field(default=WORD_LENGTH, compare=False, repr=False)

    def __post_init__(self):
        object.__setattr__(self, "text", _check_word(self.text, self.N))

    @classmethod
    def parse(cls, text: str, N: int = WORD_LENGTH):
        return cls(text, N)

    def __len__(self) -> int:
        return len(self.text)

    def __iter__(self):
        return iter(self.text)

    def __str__(self) -> str:
        return self.text


class Solution(Word):
    """The answer word of one puzzle."""


class Guess(Word):
    """A word submitted by a player."""

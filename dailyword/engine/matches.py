"""
Per-letter match classification and scored guesses.

Conventions:
  - '+' : exact   = correct letter in the correct position
  - '?' : present = correct letter in the wrong position
  - '-' : absent  = letter not present (or present fewer times than guessed)

A ScoredGuess is what the engine hands back for one guess against one
solution. Its compact text form is the comma-joined letters, e.g.

    R+,U-,S?,T+,Y?

and is the form clients and stored histories understand.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple


class LetterMatch(Enum):
    """Classification of a single guessed letter."""
    EXACT = "+"
    PRESENT = "?"
    ABSENT = "-"

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def from_symbol(cls, symbol: str) -> "LetterMatch":
        try:
            return cls(symbol)
        except ValueError as e:
            raise ValueError(f"must be one of +, ? or -: {symbol!r}") from e

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ScoredLetter:
    """One guessed letter (upper-case) with its classification."""
    char: str
    match: LetterMatch

    def __post_init__(self):
        c = self.char
        if len(c) != 1 or not (c.isascii() and c.isalpha()):
            raise ValueError(f"the character must be ascii alphabetic: {self.char!r}")
        object.__setattr__(self, "char", c.upper())

    @classmethod
    def parse(cls, text: str) -> "ScoredLetter":
        """Parse the two-character form, e.g. "R+" -> ScoredLetter('R', EXACT)."""
        if len(text) != 2:
            raise ValueError(f"value must contain exactly 2 characters: {text!r}")
        return cls(text[0], LetterMatch.from_symbol(text[1]))

    def __str__(self) -> str:
        return f"{self.char}{self.match.symbol}"


@dataclass(frozen=True)
class ScoredGuess:
    """
    Fixed-length, ordered sequence of ScoredLetter for one guess.

    The length is whatever the engine was asked to score; every consumer
    (history, codec) checks it against its own word length.
    """
    letters: Tuple[ScoredLetter, ...]

    SEPARATOR = ","

    def __post_init__(self):
        object.__setattr__(self, "letters", tuple(self.letters))
        if not self.letters:
            raise ValueError("a scored guess must contain at least one letter")

    def __len__(self) -> int:
        return len(self.letters)

    def __iter__(self) -> Iterator[ScoredLetter]:
        return iter(self.letters)

    def __getitem__(self, i: int) -> ScoredLetter:
        return self.letters[i]

    @property
    def is_solved(self) -> bool:
        """True iff every position is an exact match."""
        return all(l.match is LetterMatch.EXACT for l in self.letters)

    @property
    def word(self) -> str:
        return "".join(l.char for l in self.letters)

    @property
    def pattern(self) -> str:
        return "".join(l.match.symbol for l in self.letters)

    def format(self) -> str:
        return self.SEPARATOR.join(str(l) for l in self.letters)

    @classmethod
    def parse(cls, text: str) -> "ScoredGuess":
        """Inverse of format(): "R+,U-,S?,T+,Y?" -> ScoredGuess."""
        if not text:
            raise ValueError("empty scored guess")
        return cls(tuple(ScoredLetter.parse(part) for part in text.split(cls.SEPARATOR)))

    def __str__(self) -> str:
        return self.format()

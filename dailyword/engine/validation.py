"""
Guess validation.

This module answers the question: "Is this guess acceptable?"
A guess is valid iff:
  - it is a string
  - it is alphabetic a–z only
  - it has exact length N
  - it exists in the accepted-words dictionary

The dictionary is passed in by the caller (usually a WordList loaded once at
startup). Attempt limits are not checked here; that is the history's job.
"""

from typing import Container

from .words import Guess, WordError, WORD_LENGTH


class UnknownWordError(WordError):
    """The word is well-formed but not in the accepted-words dictionary."""


def parse_guess(word: str, allowed: Container[str], N: int = WORD_LENGTH) -> Guess:
    """
    Build a Guess from raw text, or raise.

    Raises:
      WordError        : wrong length or non-alphabetic characters
      UnknownWordError : not in `allowed`
    """
    guess = Guess.parse(word, N)
    if guess.text not in allowed:
        raise UnknownWordError(f"not in word list: {guess.text}")
    return guess


def validate_guess(word: str, allowed: Container[str], N: int = WORD_LENGTH) -> bool:
    """
    Return True if `word` is a valid guess per the rules above.

    Notes:
      - `allowed` should support fast membership checks (a WordList or set).
        Entries are expected lower-case.
    """
    try:
        parse_guess(word, allowed, N)
    except WordError:
        return False
    return True

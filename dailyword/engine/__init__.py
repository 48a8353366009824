from .matches import LetterMatch, ScoredLetter, ScoredGuess
from .words import Word, Solution, Guess, WordError, WORD_LENGTH
from .scoring import score, pattern
from .validation import validate_guess, parse_guess, UnknownWordError

__all__ = [
    "LetterMatch", "ScoredLetter", "ScoredGuess",
    "Word", "Solution", "Guess", "WordError", "WORD_LENGTH",
    "score", "pattern",
    "validate_guess", "parse_guess", "UnknownWordError",
]

"""
Stored forms of a SubmissionHistory.

Two encodings coexist and are kept independent of each other:

- records (JSON): one array per guess, one object per letter

      [[{"letter": "R", "matches": "+"}, {"letter": "U", "matches": "-"}, ...], ...]

  This is what gets persisted as the history blob.

- compact: one "R+,U-,S?,T+,Y?" string per guess, the form clients display.

Both decoders rebuild a SubmissionHistory, which re-checks length, ceiling and
"nothing after a solved guess".
"""

from __future__ import annotations

import json
from typing import Dict, List

from dailyword.engine import LetterMatch, ScoredGuess, ScoredLetter, WORD_LENGTH

from .submission import MAX_ATTEMPTS, SubmissionHistory

Record = Dict[str, str]


def _letter_to_record(letter: ScoredLetter) -> Record:
    return {"letter": letter.char, "matches": letter.match.symbol}


def _letter_from_record(rec) -> ScoredLetter:
    if not isinstance(rec, dict) or set(rec) != {"letter", "matches"}:
        raise ValueError(f"letter record must have exactly 'letter' and 'matches': {rec!r}")
    letter, matches = rec["letter"], rec["matches"]
    if not isinstance(letter, str) or not isinstance(matches, str):
        raise ValueError(f"letter record values must be strings: {rec!r}")
    return ScoredLetter(letter, LetterMatch.from_symbol(matches))


def to_records(history: SubmissionHistory) -> List[List[Record]]:
    return [[_letter_to_record(l) for l in g] for g in history]


def from_records(records, *, N: int = WORD_LENGTH,
                 max_attempts: int = MAX_ATTEMPTS) -> SubmissionHistory:
    """Rebuild a history from to_records() output (e.g. a decoded JSON column)."""
    if records is None:
        # A history row that was created but never submitted to.
        records = []
    if not isinstance(records, list):
        raise ValueError(f"history must be a list, got {type(records).__name__}")

    guesses: List[ScoredGuess] = []
    for i, word in enumerate(records, start=1):
        if not isinstance(word, list):
            raise ValueError(f"guess {i} must be a list, got {type(word).__name__}")
        guesses.append(ScoredGuess(tuple(_letter_from_record(r) for r in word)))
    return SubmissionHistory(guesses, N=N, max_attempts=max_attempts)


def dumps(history: SubmissionHistory) -> str:
    return json.dumps(to_records(history), separators=(",", ":"))


def loads(text: str, *, N: int = WORD_LENGTH,
          max_attempts: int = MAX_ATTEMPTS) -> SubmissionHistory:
    try:
        records = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"history is not valid JSON: {e}") from e
    return from_records(records, N=N, max_attempts=max_attempts)


def to_compact(history: SubmissionHistory) -> List[str]:
    return [g.format() for g in history]


def from_compact(words: List[str], *, N: int = WORD_LENGTH,
                 max_attempts: int = MAX_ATTEMPTS) -> SubmissionHistory:
    return SubmissionHistory([ScoredGuess.parse(w) for w in words],
                             N=N, max_attempts=max_attempts)

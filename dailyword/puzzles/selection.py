"""
Solution of the day.

Each date maps to one answer from the answers list. The pick is seeded from
the date (plus an optional per-deployment salt), so every process serving
the same lists agrees on the solution without coordinating.
"""

from __future__ import annotations

import hashlib
import logging
import random

from dailyword.datasets import WordList
from dailyword.engine import Solution

from .dates import PuzzleDate

logger = logging.getLogger(__name__)


def daily_seed(date: PuzzleDate, salt: str = "") -> int:
    digest = hashlib.sha256(f"{salt}:{date}".encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big")


def pick_solution(date: PuzzleDate, answers: WordList, *, salt: str = "") -> Solution:
    """Deterministically choose the solution for `date` from `answers`."""
    rng = random.Random(daily_seed(date, salt))
    word = answers.choice(rng)
    logger.debug("solution for %s picked from %d answer(s)", date, len(answers))
    return Solution.parse(word, answers.N)

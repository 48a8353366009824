"""
Accepted-words dictionary.

A WordList is built once at startup from a newline-separated file and then
only read. It is handed explicitly to whatever needs it (guess validation,
solution selection); nothing in the package keeps one as a module global.
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import FrozenSet, Iterable, Iterator, List

from dailyword.engine import WORD_LENGTH

from .io import read_words

logger = logging.getLogger(__name__)


class WordList:
    """Immutable set of lower-case N-letter words with case-insensitive lookup."""

    def __init__(self, words: Iterable[str], N: int = WORD_LENGTH):
        self.N = int(N)
        kept = []
        skipped = 0
        for w in words:
            w = w.strip().lower()
            # Same hygiene as the word types: exact length, ascii a–z only
            if len(w) == self.N and w.isascii() and w.isalpha():
                kept.append(w)
            else:
                skipped += 1
        if skipped:
            logger.warning("skipped %d word(s) that are not %d ascii letters", skipped, self.N)
        self._words: FrozenSet[str] = frozenset(kept)
        # Sorted once so iteration and choice() are reproducible for a given seed.
        self._ordered: List[str] = sorted(self._words)

    @classmethod
    def from_file(cls, path: Path | str, N: int = WORD_LENGTH) -> "WordList":
        wl = cls(read_words(path), N)
        logger.info("loaded %d %d-letter word(s) from %s", len(wl), N, path)
        return wl

    def __contains__(self, word) -> bool:
        return isinstance(word, str) and word.strip().lower() in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._ordered)

    def __getitem__(self, i: int) -> str:
        return self._ordered[i]

    def choice(self, rng: random.Random) -> str:
        if not self._ordered:
            raise ValueError("cannot choose from an empty word list")
        return rng.choice(self._ordered)

    def __repr__(self) -> str:
        return f"WordList({len(self)} words, N={self.N})"

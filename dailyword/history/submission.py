"""
Submission history for one (puzzle, player) pair.

The history is an append-only list of scored guesses plus two per-deployment
constants: the word length N and the attempt ceiling MAX. Its state is derived,
never stored:

  ACTIVE    : fewer than MAX guesses and none fully matched (initial state)
  SOLVED    : some guess was fully matched              (terminal)
  EXHAUSTED : MAX guesses, none fully matched           (terminal)

`submit` is the only mutation. It scores the guess, appends it and reports
the new state. A terminal history refuses further guesses with
AttemptsExhausted, so a solved puzzle cannot be scored again.

Persisting the history, and making the load -> submit -> store cycle atomic
per (puzzle, player), is the caller's responsibility.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List

from dailyword.engine import Guess, ScoredGuess, Solution, WordError, WORD_LENGTH, score

logger = logging.getLogger(__name__)

# Attempt ceiling used when the caller does not pass one (Wordle rules).
MAX_ATTEMPTS = 6


class HistoryState(Enum):
    ACTIVE = "active"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"

    @property
    def is_terminal(self) -> bool:
        return self is not HistoryState.ACTIVE


class AttemptsExhausted(Exception):
    """Raised by submit() once the history is solved or full."""

    def __init__(self, max: int):
        self.max = max
        super().__init__(
            f"submitted for too many times, exceeding the maximum constraint of {max}"
        )


@dataclass(frozen=True)
class SubmitResult:
    """What one successful submit() produced, plus the derived values after it."""
    scored: ScoredGuess
    count: int
    remaining: int
    letters_count: int
    state: HistoryState

    @property
    def is_solved(self) -> bool:
        return self.state is HistoryState.SOLVED

    @property
    def is_completed(self) -> bool:
        return self.state.is_terminal


class SubmissionHistory:
    """Ordered, bounded record of a player's scored guesses for one puzzle."""

    def __init__(self, guesses: Iterable[ScoredGuess] = (), *,
                 N: int = WORD_LENGTH, max_attempts: int = MAX_ATTEMPTS):
        if N <= 0:
            raise ValueError(f"N must be positive; got {N}")
        if max_attempts <= 0:
            raise ValueError(f"max_attempts must be positive; got {max_attempts}")
        self.N = int(N)
        self.max_attempts = int(max_attempts)
        self._guesses: List[ScoredGuess] = []

        # Loading a stored history goes through the same rules as submit().
        for i, g in enumerate(guesses, start=1):
            if len(g) != self.N:
                raise ValueError(f"guess {i} has {len(g)} letters, must be {self.N}")
            if self.state.is_terminal:
                raise ValueError(
                    f"guess {i} follows a history that is already {self.state.value}"
                )
            self._guesses.append(g)

    # ---- derived values ----

    def __len__(self) -> int:
        return len(self._guesses)

    def __iter__(self) -> Iterator[ScoredGuess]:
        return iter(self._guesses)

    def __getitem__(self, i: int) -> ScoredGuess:
        return self._guesses[i]

    def __eq__(self, other) -> bool:
        if not isinstance(other, SubmissionHistory):
            return NotImplemented
        return (self.N, self.max_attempts, self._guesses) == \
            (other.N, other.max_attempts, other._guesses)

    def __repr__(self) -> str:
        return (f"SubmissionHistory({[g.format() for g in self._guesses]!r}, "
                f"N={self.N}, max_attempts={self.max_attempts})")

    @property
    def guesses(self) -> List[ScoredGuess]:
        """A copy; the history itself only grows through submit()."""
        return list(self._guesses)

    @property
    def count(self) -> int:
        return len(self._guesses)

    @property
    def letters_count(self) -> int:
        return self.N

    @property
    def remaining(self) -> int:
        return self.max_attempts - self.count

    @property
    def is_full(self) -> bool:
        return self.count >= self.max_attempts

    @property
    def is_solved(self) -> bool:
        return any(g.is_solved for g in self._guesses)

    @property
    def state(self) -> HistoryState:
        if self.is_solved:
            return HistoryState.SOLVED
        if self.is_full:
            return HistoryState.EXHAUSTED
        return HistoryState.ACTIVE

    @property
    def is_completed(self) -> bool:
        return self.state.is_terminal

    # ---- the one mutation ----

    def submit(self, guess: Guess, solution: Solution) -> SubmitResult:
        """
        Score `guess` against `solution` and append it.

        Raises:
          AttemptsExhausted : the history is already solved or full
          WordError         : guess or solution is not N letters long
        """
        if self.state.is_terminal:
            logger.warning("rejected %s: history is %s after %d guess(es)",
                           guess, self.state.value, self.count)
            raise AttemptsExhausted(self.max_attempts)

        for label, word in (("guess", guess), ("solution", solution)):
            if len(word) != self.N:
                raise WordError(f"{label} has {len(word)} letters, must be {self.N}")

        scored = score(guess, solution)
        self._guesses.append(scored)
        state = self.state

        logger.info("submitted %s -> %s (%d/%d, %s)",
                    guess, scored.pattern, self.count, self.max_attempts, state.value)
        return SubmitResult(
            scored=scored,
            count=self.count,
            remaining=self.remaining,
            letters_count=self.N,
            state=state,
        )


def is_dirty(original: Solution, current: Solution) -> bool:
    """
    True when a puzzle's solution was replaced after the player started it.

    The history keeps being scored against the solution it started with;
    callers use this flag to tell the player the puzzle has changed.
    """
    return original.text != current.text

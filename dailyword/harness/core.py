"""
Replay harness.

- replay:       push one recorded sequence of typed words through a fresh
                SubmissionHistory for a known solution.
- replay_batch: many (answer, guesses) cases back to back.

Words are validated exactly as a live submission would be: malformed or
unknown words are recorded as rejected and do not use up an attempt. The
replay stops at the first terminal state; leftover words are ignored.

These functions are UI-agnostic so the CLI, notebooks or a test can share them.
"""

from __future__ import annotations

import time
from typing import Container, Dict, Iterable, List, Sequence, Tuple

from dailyword.engine import Solution, WordError, WORD_LENGTH, parse_guess
from dailyword.history import MAX_ATTEMPTS, SubmissionHistory, to_compact

Case = Tuple[str, Sequence[str]]  # (answer, typed words)


def replay(
        solution: Solution,
        guesses: Iterable[str],
        *,
        allowed: Container[str],
        N: int = WORD_LENGTH,
        max_attempts: int = MAX_ATTEMPTS,
) -> Dict:
    """
    Returns:
        dict with keys:
            answer (str), success (bool), guesses (int), state (str),
            history (list of compact scored guesses),
            rejected (list of (word, reason)), time_ms (float)
    """
    history = SubmissionHistory(N=N, max_attempts=max_attempts)
    rejected: List[Tuple[str, str]] = []

    t0 = time.perf_counter()
    for word in guesses:
        if history.is_completed:
            break
        try:
            guess = parse_guess(word, allowed, N)
        except WordError as e:
            rejected.append((word, str(e)))
            continue
        history.submit(guess, solution)
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "answer": solution.text,
        "success": history.is_solved,
        "guesses": history.count,
        "state": history.state.value,
        "history": to_compact(history),
        "rejected": rejected,
        "time_ms": dt,
    }


def replay_batch(
        cases: Iterable[Case],
        *,
        allowed: Container[str],
        N: int = WORD_LENGTH,
        max_attempts: int = MAX_ATTEMPTS,
) -> List[Dict]:
    """Replay every case; an answer that is not a valid N-letter word raises WordError."""
    out: List[Dict] = []
    for answer, words in cases:
        solution = Solution.parse(answer, N)
        out.append(replay(solution, words, allowed=allowed, N=N, max_attempts=max_attempts))
    return out

# apps/cli/play.py
"""
Play a daily puzzle in the terminal.

This script:
  1) Loads settings (.env + environment) and both word lists.
  2) Picks the solution of the requested date.
  3) Reads guesses from stdin, scores each one and prints it as R+,U-,S?,...
  4) Optionally keeps the attempt in a JSON file so a later run resumes it.

The JSON file holds the date, the solution the attempt started with and the
stored history. If the solution of the day changed since, the attempt is
still scored against the original one and flagged as dirty.

Usage:
    python -m apps.cli.play --date 2025-01-01 --state reports/attempt.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, Optional, Tuple

from dailyword.config import load_settings
from dailyword.datasets import WordList
from dailyword.engine import Solution, WordError, parse_guess
from dailyword.history import (
    AttemptsExhausted, SubmissionHistory, from_records, is_dirty, to_records,
)
from dailyword.logs import setup_logging
from dailyword.puzzles import PuzzleDate, PuzzleDateError, pick_solution

logger = logging.getLogger("dailyword.cli.play")


def _load_attempt(path: Optional[Path], date: PuzzleDate, todays: Solution, *,
                  N: int, max_attempts: int) -> Tuple[Solution, SubmissionHistory]:
    """Resume the stored attempt for `date`, or start a fresh one."""
    if path is None or not path.exists():
        return todays, SubmissionHistory(N=N, max_attempts=max_attempts)

    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("expected a JSON object")
    if data.get("date") != str(date):
        logger.info("state file holds %s, starting a new attempt for %s", data.get("date"), date)
        return todays, SubmissionHistory(N=N, max_attempts=max_attempts)

    original = Solution.parse(data["original_solution"], N)
    history = from_records(data.get("history"), N=N, max_attempts=max_attempts)
    return original, history


def _save_attempt(path: Path, date: PuzzleDate, original: Solution,
                  history: SubmissionHistory) -> None:
    payload: Dict = {
        "date": str(date),
        "original_solution": original.text,
        "is_completed": history.is_completed,
        "history": to_records(history),
    }
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")


def _print_board(history: SubmissionHistory) -> None:
    for g in history:
        print(f"  {g.format()}")
    print(f"  {history.remaining} attempt(s) left" if not history.is_completed
          else f"  {history.state.value}")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="dailyword: play a daily puzzle")
    ap.add_argument("--date", help="puzzle date YYYY-MM-DD (default: today)")
    ap.add_argument("--state", help="JSON file to resume from and save the attempt to")
    ap.add_argument("--env-file", help="path to a .env file (default: ./.env if present)")
    args = ap.parse_args(argv)

    settings = load_settings(args.env_file)
    setup_logging(settings.log_level)

    try:
        date = PuzzleDate.parse(args.date) if args.date else PuzzleDate.today()
    except PuzzleDateError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    N = settings.word_length
    answers = WordList.from_file(settings.answers_path, N)
    allowed = WordList.from_file(settings.allowed_path, N)

    todays = pick_solution(date, answers, salt=settings.puzzle_salt)
    state_path = Path(args.state) if args.state else None
    try:
        original, history = _load_attempt(state_path, date, todays,
                                          N=N, max_attempts=settings.max_attempts)
    except (ValueError, KeyError, TypeError) as e:
        print(f"error: corrupt state file {state_path}: {e}", file=sys.stderr)
        return 2

    print(f"Puzzle {date}: {N} letters, {settings.max_attempts} attempts")
    if is_dirty(original, todays):
        print("Note: this puzzle was replaced after you started; keeping your original one.")
    _print_board(history)

    while not history.is_completed:
        try:
            word = input("> ")
        except EOFError:
            break
        try:
            guess = parse_guess(word, allowed, N)
            result = history.submit(guess, original)
        except WordError as e:
            print(f"  {e}")
            continue
        except AttemptsExhausted as e:
            print(f"  {e}")
            break

        print(f"  {result.scored.format()}")
        if not result.is_completed:
            print(f"  {result.remaining} attempt(s) left")
        if state_path is not None:
            _save_attempt(state_path, date, original, history)

    if history.is_solved:
        print(f"Solved in {history.count}!")
    elif history.is_full:
        print(f"Out of attempts. The word was {original.text.upper()}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())

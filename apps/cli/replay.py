# apps/cli/replay.py
"""
Replay recorded guesses through the submission rules.

This script:
  1) Validates the word lists (prints counts + SHA, ensures answers ⊆ allowed).
  2) Reads a guess file: one "answer: guess guess ..." per line.
  3) Replays every case with a progress bar and writes:
       - CSV:  per-puzzle outcome + compact scored guesses
       - JSON: manifest with config, word list hashes, git commit, etc.

Usage:
    python -m apps.cli.replay --guesses games.txt --outdir reports
"""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from pathlib import Path

from tqdm import tqdm

from dailyword.config import load_settings
from dailyword.datasets import WordList, pretty_summary, validate_wordlists
from dailyword.engine import Solution, WordError
from dailyword.harness import (
    git_commit_or_unknown, read_cases, replay, timestamp_id, write_csv, write_manifest,
)
from dailyword.logs import setup_logging


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="dailyword: replay recorded guesses")
    ap.add_argument("--guesses", required=True, help="guess file, one 'answer: guess ...' per line")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--env-file", help="path to a .env file (default: ./.env if present)")
    ap.add_argument("--strict", action="store_true",
                    help="stop if the word lists fail validation")
    ap.add_argument("--no-progress", action="store_true", help="disable the progress bar")
    args = ap.parse_args(argv)

    settings = load_settings(args.env_file)
    setup_logging(settings.log_level)
    N = settings.word_length

    # 1) Word lists
    rep = validate_wordlists(N, settings.answers_path, settings.allowed_path)
    print(pretty_summary(rep))
    if args.strict and not rep["passed"]:
        for issue in rep["issues"]:
            print(f"  - {issue}", file=sys.stderr)
        return 1
    allowed = WordList.from_file(settings.allowed_path, N)

    # 2) Cases
    try:
        cases = read_cases(args.guesses)
    except (FileNotFoundError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    # 3) Replay
    results = []
    for answer, words in tqdm(cases, ncols=80, desc="Replaying", unit="puzzle",
                              disable=args.no_progress):
        try:
            solution = Solution.parse(answer, N)
        except WordError as e:
            print(f"skipping answer {answer!r}: {e}", file=sys.stderr)
            continue
        results.append(replay(solution, words, allowed=allowed, N=N,
                              max_attempts=settings.max_attempts))

    states = Counter(r["state"] for r in results)
    print(", ".join(f"{k}={v}" for k, v in sorted(states.items())) or "no cases")

    # 4) Outputs
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"replay_{run_id}.csv"
    manifest_path = outdir / f"replay_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_attempts=settings.max_attempts)
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": {
            "guesses": args.guesses,
            "word_length": N,
            "max_attempts": settings.max_attempts,
            "answers_path": settings.answers_path,
            "allowed_path": settings.allowed_path,
        },
        "wordlists": rep,
        "num_cases": len(results),
        "states": dict(states),
    }, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
I/O utilities for replay runs.

Responsibilities:
- read_cases:     parse a guess file, one "answer: word word ..." per line.
- write_csv:      one row per puzzle with its compact scored guesses.
- write_manifest: JSON manifest with config, list hashes and metadata.
- timestamp_id:   UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash.

Notes:
- Compact guesses are prefixed with an apostrophe so spreadsheet apps don't
  read strings like "-A?,..." or "+..." as formulas.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

from dailyword.datasets import read_lines

from .core import Case


def _excel_safe(text: str) -> str:
    return "'" + text if text else text


def read_cases(path: str) -> List[Case]:
    """
    Parse a guess file. Blank lines and lines starting with '#' are skipped.

        rusty: crane stare rusty
        speed: erase
    """
    cases: List[Case] = []
    for lineno, line in enumerate(read_lines(path), start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        answer, sep, rest = line.partition(":")
        if not sep or not answer.strip():
            raise ValueError(f"{path}:{lineno}: expected 'answer: guess guess ...'")
        cases.append((answer.strip(), rest.split()))
    return cases


def write_csv(results: List[Dict], path: str, max_attempts: int) -> str:
    """
    Schema (columns):
      answer, success, state, guesses, rejected, time_ms,
      guess_1, ..., guess_<max_attempts>
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["answer", "success", "state", "guesses", "rejected", "time_ms"]
    fields += [f"guess_{i}" for i in range(1, max_attempts + 1)]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()
        for r in results:
            row = {
                "answer": r["answer"],
                "success": r["success"],
                "state": r["state"],
                "guesses": r["guesses"],
                "rejected": len(r.get("rejected", [])),
                "time_ms": round(float(r["time_ms"]), 3),
            }
            hist = r.get("history", [])
            for i in range(1, max_attempts + 1):
                row[f"guess_{i}"] = _excel_safe(hist[i - 1]) if i <= len(hist) else ""
            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Typical keys: run_id, git_commit, config, wordlists, num_cases.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """Compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """Short git hash of the working tree, or 'unknown' if git is unavailable."""
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"

"""
Word list validator.

A deployment ships two lists for word length N:
  - answers_N.txt : the pool puzzle solutions are picked from
  - allowed_N.txt : every word a player may submit (must contain the answers)

Checks:
  - one lowercase a–z word of exact length N per line, no blank lines
  - no duplicates
  - answers ⊆ allowed
  - SHA-256 of the raw files, so a run manifest pins the exact lists used

Typical use:
    from dailyword.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists(5, "dailyword/datasets/data/answers_5.txt",
                                "dailyword/datasets/data/allowed_5.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str
    exists: bool
    count: int = 0           # valid words, duplicates included
    unique_count: int = 0
    invalid_lines: int = 0
    sha256: str = ""         # empty when the file is missing
    duplicates: List[str] = field(default_factory=list)


@dataclass
class ValidationReport:
    N: int
    answers: FileReport
    allowed: FileReport
    answers_subset_allowed: bool
    passed: bool
    issues: List[str]


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _is_valid_line(raw: str, N: int) -> bool:
    # Already-lowercase, ascii alphabetic and exactly N long; surrounding
    # whitespace is tolerated, blank lines are not.
    w = raw.strip()
    return len(w) == N and w.isascii() and w.isalpha() and w == w.lower()


def _scan(path: Path, N: int) -> Tuple[FileReport, List[str]]:
    """Return the report for one file and its valid words (in file order)."""
    if not path.exists():
        return FileReport(path=str(path), exists=False), []

    words: List[str] = []
    invalid = 0
    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            if _is_valid_line(raw, N):
                words.append(raw.strip())
            else:
                invalid += 1

    seen, dupes = set(), []
    for w in words:
        if w in seen and w not in dupes:
            dupes.append(w)
        seen.add(w)

    rep = FileReport(
        path=str(path),
        exists=True,
        count=len(words),
        unique_count=len(seen),
        invalid_lines=invalid,
        sha256=_sha256_file(path),
        duplicates=dupes,
    )
    return rep, words


def _file_issues(label: str, rep: FileReport) -> List[str]:
    if not rep.exists:
        return [f"{label} file not found: {rep.path}"]
    issues = []
    if rep.count == 0:
        issues.append(f"{label} file contains 0 valid words")
    if rep.invalid_lines:
        issues.append(f"{label} has {rep.invalid_lines} invalid line(s)")
    if rep.duplicates:
        issues.append(f"{label} contains duplicate lines (e.g., {rep.duplicates[:5]})")
    return issues


def validate_wordlists(N: int, answers_path: str, allowed_path: str) -> Dict:
    """
    Validate the answers/allowed word lists for length N.

    Returns a JSON-serializable dict (ValidationReport schema). `passed` is
    strict: both files present and non-empty, no invalid or duplicate lines,
    answers ⊆ allowed. `issues` lists every problem found.
    """
    ans_rep, answers = _scan(Path(answers_path), N)
    all_rep, allowed = _scan(Path(allowed_path), N)

    issues = _file_issues("answers", ans_rep) + _file_issues("allowed", all_rep)

    both_exist = ans_rep.exists and all_rep.exists
    missing = sorted(set(answers) - set(allowed))
    subset_ok = both_exist and not missing
    if both_exist and missing:
        issues.append(f"answers not subset of allowed (e.g., {missing[:5]})")

    rep = ValidationReport(
        N=N,
        answers=ans_rep,
        allowed=all_rep,
        answers_subset_allowed=subset_ok,
        passed=subset_ok and not issues,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    One-line summary for the console, e.g.

        N=5 | answers=120 (uniq=120, sha=abc123...) | allowed=240 (uniq=240, sha=def456...) | answers⊆allowed=True | OK
    """
    a = report["answers"]
    b = report["allowed"]
    status = "OK" if report["passed"] else "FAIL"
    return (
        f"N={report['N']} | answers={a['count']} (uniq={a['unique_count']}, sha={a['sha256'][:12]}) "
        f"| allowed={b['count']} (uniq={b['unique_count']}, sha={b['sha256'][:12]}) "
        f"| answers⊆allowed={report['answers_subset_allowed']} | {status}"
    )

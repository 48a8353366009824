from pathlib import Path
from dailyword.datasets import (
    DEFAULT_ALLOWED_PATH, DEFAULT_ANSWERS_PATH, pretty_summary, validate_wordlists,
)


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlists_happy_path(tmp_path: Path):
    ans = tmp_path / "answers_5.txt"
    allw = tmp_path / "allowed_5.txt"
    _write(ans, ["crane", "raise", "stare"])
    _write(allw, ["crane", "raise", "stare", "trace", "cared"])

    rep = validate_wordlists(5, str(ans), str(allw))
    assert rep["passed"] is True
    assert rep["issues"] == []
    assert rep["answers"]["count"] == 3 and len(rep["answers"]["sha256"]) == 64
    s = pretty_summary(rep)
    assert "N=5" in s and "answers⊆allowed=True" in s and s.endswith("OK")


def test_validate_wordlists_flags_errors(tmp_path: Path):
    # 'crane' (len 5) invalid for N=6, '???' invalid chars, 'Planet' not lowercase
    ans = tmp_path / "answers_6.txt"
    allw = tmp_path / "allowed_6.txt"
    ans.write_text("raiser\ncrane\n???\n", encoding="utf-8")
    allw.write_text("raiser\nPlanet\npalate\n\n", encoding="utf-8")

    rep = validate_wordlists(6, str(ans), str(allw))
    assert rep["passed"] is False
    assert rep["answers"]["invalid_lines"] == 2
    assert rep["allowed"]["invalid_lines"] == 2
    assert any("invalid" in msg for msg in rep["issues"])


def test_validate_wordlists_subset_and_duplicates(tmp_path: Path):
    ans = tmp_path / "answers_5.txt"
    allw = tmp_path / "allowed_5.txt"
    _write(ans, ["crane", "raise", "stare", "crane"])
    _write(allw, ["crane", "stare"])  # missing 'raise'

    rep = validate_wordlists(5, str(ans), str(allw))
    assert rep["passed"] is False
    assert rep["answers_subset_allowed"] is False
    assert rep["answers"]["duplicates"] == ["crane"]
    assert any("subset" in msg and "raise" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_wordlists_missing_file(tmp_path: Path):
    allw = tmp_path / "allowed_5.txt"
    _write(allw, ["crane"])
    rep = validate_wordlists(5, str(tmp_path / "nope.txt"), str(allw))
    assert rep["passed"] is False
    assert rep["answers"]["exists"] is False
    assert any("not found" in msg for msg in rep["issues"])
    assert "FAIL" in pretty_summary(rep)


def test_bundled_lists_pass():
    rep = validate_wordlists(5, str(DEFAULT_ANSWERS_PATH), str(DEFAULT_ALLOWED_PATH))
    assert rep["passed"] is True, rep["issues"]

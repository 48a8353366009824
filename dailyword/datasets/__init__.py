from pathlib import Path

from .validator import validate_wordlists, pretty_summary
from .io import read_lines, read_words, write_lines, unique_preserve_order
from .wordlist import WordList

# Bundled lists for N=5.
DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_ANSWERS_PATH = DATA_DIR / "answers_5.txt"
DEFAULT_ALLOWED_PATH = DATA_DIR / "allowed_5.txt"

__all__ = [
    "validate_wordlists", "pretty_summary",
    "read_lines", "read_words", "write_lines", "unique_preserve_order",
    "WordList",
    "DATA_DIR", "DEFAULT_ANSWERS_PATH", "DEFAULT_ALLOWED_PATH",
]

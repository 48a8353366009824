"""
Build a word list from a web page.

What it does:
- Downloads the page.
- Takes its visible text and keeps every token of exactly N ASCII letters.
- Lowercases and de-duplicates while preserving page order, then writes the list.

Usage:
    python -m script.fetch_words --url https://example.org/words --out dailyword/datasets/data/allowed_5.txt
    # alphabetically sorted, merged with what is already in the file:
    python -m script.fetch_words --url ... --out ... --merge --sort
"""

import re
import argparse
from pathlib import Path

import requests
from bs4 import BeautifulSoup

from dailyword.datasets import read_words, unique_preserve_order, write_lines


def extract_words(html: str, N: int) -> list[str]:
    soup = BeautifulSoup(html, "html.parser")
    text = soup.get_text("\n", strip=True)
    token_re = re.compile(rf"\b[A-Za-z]{{{N}}}\b")
    return unique_preserve_order(m.group(0).lower() for m in token_re.finditer(text))


def fetch_words(url: str, N: int) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return extract_words(r.text, N)


def main():
    ap = argparse.ArgumentParser(description="Extract N-letter words from a web page")
    ap.add_argument("--url", required=True)
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--out", default="dailyword/datasets/data/allowed_5.txt")
    ap.add_argument("--merge", action="store_true", help="keep the words already in --out")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "page order")
    args = ap.parse_args()

    words = fetch_words(args.url, args.N)
    if args.merge and Path(args.out).exists():
        words = unique_preserve_order(read_words(args.out) + words)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} unique words -> {args.out}")

if __name__ == "__main__":
    main()

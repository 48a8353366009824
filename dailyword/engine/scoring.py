"""
Wordle-style scoring for a single (guess, solution) pair.

Conventions:
  - EXACT   '+' : correct letter in the correct position
  - PRESENT '?' : correct letter in the wrong position
  - ABSENT  '-' : letter not present (or present fewer times than guessed)

This implementation is:
  - N-aware (any word length, as long as both sides agree)
  - duplicate-safe (respects true letter multiplicities in the solution)
  - deterministic (same inputs -> same outputs)

Algorithm (two-pass, canonical for Wordle):
  1) First pass marks all exact matches and counts the remaining (unmatched)
     letters of the solution.
  2) Second pass, left to right, marks a letter present only if the letter
     still has remaining count, consuming one instance each time.

Exact matches are therefore always credited before present ones, and a letter
that occurs k times in the solution is credited at most k times in total.
"""

from collections import Counter
from typing import List

from .matches import LetterMatch, ScoredGuess, ScoredLetter
from .words import Guess, Solution, WordError


def _classify(guess: str, solution: str) -> List[LetterMatch]:
    if len(guess) != len(solution):
        raise WordError(
            f"guess has {len(guess)} letters, solution has {len(solution)}"
        )

    marks = [LetterMatch.ABSENT] * len(guess)

    # Pass 1: exact matches; everything else in the solution is still claimable.
    remaining = Counter()
    for i, (g, s) in enumerate(zip(guess, solution)):
        if g == s:
            marks[i] = LetterMatch.EXACT
        else:
            remaining[s] += 1

    # Pass 2: present only while unclaimed instances are left.
    for i, g in enumerate(guess):
        if marks[i] is LetterMatch.EXACT:
            continue
        if remaining[g] > 0:
            marks[i] = LetterMatch.PRESENT
            remaining[g] -= 1

    return marks


def score(guess: Guess, solution: Solution) -> ScoredGuess:
    """
    Score `guess` against `solution`.

    Raises WordError when the two words differ in length.

    Examples:
      score(Guess("belle"), Solution("level")).format() -> "B-,E+,L?,L?,E?"
      score(Guess("erase"), Solution("speed")).pattern  -> "?--??"
    """
    marks = _classify(guess.text, solution.text)
    return ScoredGuess(tuple(ScoredLetter(c, m) for c, m in zip(guess.text, marks)))


def pattern(guess: str, solution: str) -> str:
    """
    Symbol string for two raw words, e.g. pattern("rusty", "rusty") -> "+++++".

    Case-insensitive convenience for tools and tests; no validation beyond
    the length check.
    """
    g = guess.strip().lower()
    s = solution.strip().lower()
    return "".join(m.symbol for m in _classify(g, s))

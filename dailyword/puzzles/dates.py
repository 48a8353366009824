"""Puzzle dates: one puzzle per calendar day, addressed as YYYY-MM-DD."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass


class PuzzleDateError(ValueError):
    pass


@dataclass(frozen=True, order=True)
class PuzzleDate:
    date: dt.date

    MIN = dt.date(1970, 1, 1)
    FORMAT = "%Y-%m-%d"

    def __post_init__(self):
        if self.date < self.MIN:
            raise PuzzleDateError("the date cannot be earlier than 1970-01-01")

    @classmethod
    def parse(cls, text: str) -> "PuzzleDate":
        try:
            d = dt.datetime.strptime(text.strip(), cls.FORMAT).date()
        except (ValueError, AttributeError) as e:
            raise PuzzleDateError("the date must be formatted as YYYY-MM-DD") from e
        return cls(d)

    @classmethod
    def today(cls) -> "PuzzleDate":
        return cls(dt.date.today())

    def __str__(self) -> str:
        return self.date.strftime(self.FORMAT)

from .dates import PuzzleDate, PuzzleDateError
from .selection import pick_solution, daily_seed

__all__ = ["PuzzleDate", "PuzzleDateError", "pick_solution", "daily_seed"]

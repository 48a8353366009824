from .submission import (
    SubmissionHistory, SubmitResult, HistoryState, AttemptsExhausted, MAX_ATTEMPTS, is_dirty,
)
from .serialization import to_records, from_records, dumps, loads, to_compact, from_compact

__all__ = [
    "SubmissionHistory", "SubmitResult", "HistoryState", "AttemptsExhausted",
    "MAX_ATTEMPTS", "is_dirty",
    "to_records", "from_records", "dumps", "loads", "to_compact", "from_compact",
]

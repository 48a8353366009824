from .core import replay, replay_batch
from .io import read_cases, write_csv, write_manifest, timestamp_id, git_commit_or_unknown

__all__ = [
    "replay", "replay_batch",
    "read_cases", "write_csv", "write_manifest", "timestamp_id", "git_commit_or_unknown",
]

"""
Deployment configuration.

Everything is read from environment variables with sensible defaults. A
`.env` file in the working directory (or the path passed to load_settings)
is loaded first; variables already set in the environment win.

Word length and attempt ceiling are fixed for the life of a process: load
the settings once at startup and pass them down.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from dailyword.datasets import DEFAULT_ALLOWED_PATH, DEFAULT_ANSWERS_PATH
from dailyword.engine import WORD_LENGTH
from dailyword.history import MAX_ATTEMPTS

ENV_PREFIX = "DAILYWORD_"


def _positive_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer; got {raw!r}") from e
    if value <= 0:
        raise ValueError(f"{ENV_PREFIX}{name} must be positive; got {value}")
    return value


@dataclass(frozen=True)
class Settings:
    word_length: int = WORD_LENGTH
    max_attempts: int = MAX_ATTEMPTS
    answers_path: str = str(DEFAULT_ANSWERS_PATH)
    allowed_path: str = str(DEFAULT_ALLOWED_PATH)
    puzzle_salt: str = ""
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if env is None else env
        return cls(
            word_length=_positive_int(env, "WORD_LENGTH", WORD_LENGTH),
            max_attempts=_positive_int(env, "MAX_ATTEMPTS", MAX_ATTEMPTS),
            answers_path=env.get(ENV_PREFIX + "ANSWERS_PATH", str(DEFAULT_ANSWERS_PATH)),
            allowed_path=env.get(ENV_PREFIX + "ALLOWED_PATH", str(DEFAULT_ALLOWED_PATH)),
            puzzle_salt=env.get(ENV_PREFIX + "PUZZLE_SALT", ""),
            log_level=env.get(ENV_PREFIX + "LOG_LEVEL", "INFO").upper(),
        )


def load_settings(env_file: Optional[str] = None) -> Settings:
    """Load `.env` (if any) into the process environment, then read Settings."""
    load_dotenv(env_file or find_dotenv(usecwd=True), override=False)
    return Settings.from_env()

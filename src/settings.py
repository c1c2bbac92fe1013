"""Runtime configuration.

Values come from the process environment; a .env file in the working
directory is loaded first and never overrides variables already set.
"""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from storage import DEFAULT_TODO_FILE

load_dotenv()

DEFAULT_LOG_LEVEL = logging.WARNING
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def truthy(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() not in {"0", "false", "no", "off", ""}


def _log_level(name: Optional[str]) -> int:
    if not name:
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else DEFAULT_LOG_LEVEL


@dataclass(frozen=True)
class Settings:
    todo_file: Path = DEFAULT_TODO_FILE
    log_level: int = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            todo_file=Path(env.get('TODO_FILE') or DEFAULT_TODO_FILE),
            log_level=_log_level(env.get('TODO_LOG_LEVEL')),
        )

"""
Runtime configuration, read once from the environment.

Only the package's log level is configurable. An unrecognised level falls
back to WARNING so that logging setup never breaks the code doing the work.
"""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}


def _parse_log_level(raw: Optional[str]) -> int:
    if raw is None:
        return logging.WARNING
    name = raw.strip().upper()
    if name not in _LOG_LEVELS:
        return logging.WARNING
    return getattr(logging, name)


@dataclass(frozen=True)
class RuntimeConfig:
    log_level: int = logging.WARNING

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        return cls(log_level=_parse_log_level(os.getenv("YIELD_TASKS_LOG_LEVEL")))


@lru_cache(maxsize=None)
def runtime_config() -> RuntimeConfig:
    return RuntimeConfig.from_env()


def reset_runtime_config() -> None:
    """Forget the cached config so the environment is read again."""
    runtime_config.cache_clear()

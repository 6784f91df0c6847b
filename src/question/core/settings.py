"""Environment configuration and logging setup."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import Any

from loguru import logger

from .errors import ConfigurationError


class EnvironmentSource:
    """Configuration source from environment variables."""

    def __init__(self, prefix: str = "QUESTION_", environ: dict[str, str] | None = None):
        self.prefix = prefix
        self.environ = environ if environ is not None else os.environ

    def get(self, key: str, default: Any = None) -> Any:
        env_key = f"{self.prefix}{key.upper()}"
        return self.environ.get(env_key, default)

    def get_float(self, key: str) -> float | None:
        raw = self.get(key)
        if raw is None or raw == "":
            return None
        try:
            return float(raw)
        except ValueError as e:
            raise ConfigurationError(
                f"{self.prefix}{key.upper()} must be a number, got {raw!r}"
            ) from e

    def get_int(self, key: str) -> int | None:
        raw = self.get(key)
        if raw is None or raw == "":
            return None
        try:
            return int(raw)
        except ValueError as e:
            raise ConfigurationError(
                f"{self.prefix}{key.upper()} must be an integer, got {raw!r}"
            ) from e


@dataclass(frozen=True)
class Settings:
    """Defaults read from the environment.

    - QUESTION_TIMEOUT: seconds allowed per question
    - QUESTION_ATTEMPTS: maximum attempts per question
    - QUESTION_LOG_LEVEL: loguru level for the package's logs
    """

    timeout: float | None = None
    attempts: int | None = None
    log_level: str | None = None

    @classmethod
    def from_env(cls, source: EnvironmentSource | None = None) -> Settings:
        source = source or EnvironmentSource()
        settings = cls(
            timeout=source.get_float("timeout"),
            attempts=source.get_int("attempts"),
            log_level=source.get("log_level") or None,
        )
        if settings.timeout is not None and settings.timeout < 0:
            raise ConfigurationError(f"Timeout must not be negative, got {settings.timeout}")
        if settings.attempts is not None and settings.attempts < 1:
            raise ConfigurationError(f"Attempts must be positive, got {settings.attempts}")
        return settings


_handler_id: int | None = None


def configure_logging(level: str | None = "DEBUG", sink: Any = None) -> None:
    """Enable the package's logs at ``level``; ``None`` disables them again.

    Logs go to stderr unless another loguru sink is given.
    """
    global _handler_id
    if _handler_id is not None:
        logger.remove(_handler_id)
        _handler_id = None

    if level is None:
        logger.disable("question")
        return

    logger.enable("question")
    _handler_id = logger.add(
        sink if sink is not None else sys.stderr,
        level=level.upper(),
        filter="question",
        format="<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | {message}",
    )

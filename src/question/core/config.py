"""Prompt configuration and outcome values.

PromptConfig describes one question. It is a frozen value: every change
produces a new configuration, so a configuration handed to the engine
cannot be altered while the question is being asked.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from datetime import timedelta
from typing import Any, Generic, TypeVar

from .errors import ConfigurationError, ProcessingError
from .rules import RuleSet

T = TypeVar("T")


class _Missing:
    """Marker for "no default configured"."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Final result of one ask: an accepted value or a processing error."""

    value: T | None = None
    error: ProcessingError | None = None

    @classmethod
    def success(cls, value: T) -> Outcome[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: ProcessingError) -> Outcome[T]:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


Parser = Callable[[str], T]
Feedback = Callable[[Outcome[T]], str | None]


def _identity(raw: str) -> Any:
    return raw


def coerce_timeout(timeout: float | timedelta | None) -> float | None:
    """Normalize a timeout to float seconds.

    Values that are not numbers are returned unchanged for check() to report.
    """
    if isinstance(timeout, timedelta):
        return timeout.total_seconds()
    if isinstance(timeout, (int, float)) and not isinstance(timeout, bool):
        return float(timeout)
    return timeout


@dataclass(frozen=True)
class PromptConfig(Generic[T]):
    """Immutable description of one question.

    Attributes:
        message: Text written before reading an answer
        help: Text written on retries, after the message
        default: Value accepted for an empty answer (MISSING for none)
        parser: Turns the trimmed raw line into a value; raises on bad input
        rules: Validation rules applied to the parsed value
        attempts: Maximum number of attempts (None for unbounded)
        timeout: Seconds allowed for the whole exchange (None to wait forever)
        feedback: Maps the final Outcome to a message written afterwards
        repeat_message: Write the message on every attempt, not only the first
        repeat_help: Write the help on every retry, not only the first
        show_parse_errors: Write the parser's explanation before retrying
    """

    message: str = ""
    help: str | None = None
    default: Any = MISSING
    parser: Parser = _identity
    rules: RuleSet = field(default_factory=RuleSet)
    attempts: int | None = None
    timeout: float | None = None
    feedback: Feedback | None = None
    repeat_message: bool = True
    repeat_help: bool = True
    show_parse_errors: bool = True

    @property
    def has_default(self) -> bool:
        return self.default is not MISSING

    def evolve(self, **changes: Any) -> PromptConfig[T]:
        """Return a copy with ``changes`` applied."""
        if "timeout" in changes:
            changes["timeout"] = coerce_timeout(changes["timeout"])
        return replace(self, **changes)

    def check(self) -> None:
        """Raise ConfigurationError if this configuration cannot be asked."""
        if not self.message:
            raise ConfigurationError("Question message must not be empty")
        if self.attempts is not None:
            if isinstance(self.attempts, bool) or not isinstance(self.attempts, int):
                raise ConfigurationError(f"Attempts must be an integer, got {self.attempts!r}")
            if self.attempts < 1:
                raise ConfigurationError(f"Attempts must be positive, got {self.attempts}")
        if self.timeout is not None:
            if isinstance(self.timeout, bool) or not isinstance(self.timeout, (int, float)):
                raise ConfigurationError(f"Timeout must be a number of seconds, got {self.timeout!r}")
            if self.timeout < 0:
                raise ConfigurationError(f"Timeout must not be negative, got {self.timeout}")
        if not callable(self.parser):
            raise ConfigurationError("Parser must be callable")
        if self.feedback is not None and not callable(self.feedback):
            raise ConfigurationError("Feedback must be callable")

"""Exception hierarchy for prompt processing.

This module defines every failure the prompt engine can report. The
taxonomy under ProcessingError is closed: a finished ask is either an
accepted value or exactly one of these errors.

Exception Hierarchy:
    QuestionError: Base exception for all question errors
    ├── ConfigurationError: Invalid prompt configuration
    └── ProcessingError: Failure while asking
        ├── ParseError: Raw input could not be parsed
        ├── ValidationError: Parsed value rejected by a rule
        ├── AttemptsExhausted: No more attempts left
        ├── Timeout: Answer did not arrive in time
        └── IoError: Reading or writing failed
            └── EndOfInput: Input source closed before an answer

Usage Patterns:
    Each exception carries the context needed to log or re-prompt:
    - ParseError: raw_input, cause
    - ValidationError: raw_input, rule_explanation
    - AttemptsExhausted: attempts, last_error
    - Timeout: elapsed (seconds)
    - IoError: cause

Example:
    >>> try:
    ...     answer = await yn().message("Continue? ").timeout(5).ask()
    ... except Timeout:
    ...     answer = True
    ... except IoError as e:
    ...     raise SystemExit(f"cannot read answer: {e.cause}")

    >>> match outcome.error:
    ...     case AttemptsExhausted(attempts=n):
    ...         print(f"gave up after {n} attempts")
    ...     case Timeout(elapsed=seconds):
    ...         print(f"no answer after {seconds:.1f}s")
"""

from __future__ import annotations


class QuestionError(Exception):
    """Base exception for all question-related errors."""

    pass


class ConfigurationError(QuestionError):
    """Raised when a prompt configuration is invalid.

    This occurs at ask time when:
    - The message is empty
    - Attempts is not a positive integer
    - Timeout is negative
    - A builder is asked a second time
    """

    pass


class ProcessingError(QuestionError):
    """Base class for the failures an ask can end with."""

    pass


class ParseError(ProcessingError):
    """Raised when the parser rejects the raw input."""

    __match_args__ = ("raw_input", "cause")

    def __init__(self, raw_input: str, cause: Exception | str | None = None):
        self.raw_input = raw_input
        self.cause = cause
        detail = f": {cause}" if cause is not None and str(cause) else ""
        super().__init__(f"Could not parse {raw_input!r}{detail}")

    @property
    def explanation(self) -> str | None:
        """Text to show the user before asking again."""
        if self.cause is None:
            return None
        return str(self.cause) or None


class ValidationError(ProcessingError):
    """Raised when a parsed value fails a validation rule."""

    __match_args__ = ("raw_input", "rule_explanation")

    def __init__(self, raw_input: str, rule_explanation: str | None = None):
        self.raw_input = raw_input
        self.rule_explanation = rule_explanation
        detail = f": {rule_explanation}" if rule_explanation else ""
        super().__init__(f"Input {raw_input!r} was rejected{detail}")

    @property
    def explanation(self) -> str | None:
        return self.rule_explanation


class AttemptsExhausted(ProcessingError):
    """Raised when every allowed attempt failed.

    The last recoverable failure is kept in ``last_error`` so callers can
    tell why the final attempt was rejected.
    """

    __match_args__ = ("attempts",)

    def __init__(
        self, attempts: int, last_error: ParseError | ValidationError | None = None
    ):
        self.attempts = attempts
        self.last_error = last_error
        super().__init__(f"No more attempts to answer this question ({attempts} used)")


class Timeout(ProcessingError):
    """Raised when the answer did not arrive within the configured duration."""

    __match_args__ = ("elapsed",)

    def __init__(self, elapsed: float):
        self.elapsed = elapsed
        super().__init__(f"Question could not be answered in time ({elapsed:.2f}s elapsed)")


class IoError(ProcessingError):
    """Raised when displaying messages or reading input fails.

    I/O failures are never retried.
    """

    __match_args__ = ("cause",)

    def __init__(self, cause: Exception | None = None, message: str | None = None):
        self.cause = cause
        if message is None:
            message = f"Problems with displaying messages or reading input: {cause}"
        super().__init__(message)


class EndOfInput(IoError):
    """Raised when the input source reached end of file while asking."""

    def __init__(self, cause: Exception | None = None):
        super().__init__(cause, "EOF reached while asking for input")

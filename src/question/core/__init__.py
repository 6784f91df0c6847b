"""Core prompt engine: configuration, rules, I/O bindings, and errors."""

from .builder import QuestionBuilder
from .config import MISSING, Outcome, PromptConfig
from .engine import PromptEngine, ask, ask_and_wait, try_ask
from .errors import (
    AttemptsExhausted,
    ConfigurationError,
    EndOfInput,
    IoError,
    ParseError,
    ProcessingError,
    QuestionError,
    Timeout,
    ValidationError,
)
from .io import (
    AsyncStreamReader,
    BufferReader,
    BufferWriter,
    LineReader,
    QueueReader,
    StreamReader,
    StreamWriter,
    TextWriter,
)
from .rules import Rule, RuleSet
from .settings import EnvironmentSource, Settings, configure_logging

__all__ = [
    # Engine
    "PromptEngine",
    "ask",
    "ask_and_wait",
    "try_ask",
    # Configuration
    "PromptConfig",
    "QuestionBuilder",
    "Outcome",
    "MISSING",
    "Rule",
    "RuleSet",
    # I/O
    "LineReader",
    "TextWriter",
    "StreamReader",
    "AsyncStreamReader",
    "BufferReader",
    "QueueReader",
    "StreamWriter",
    "BufferWriter",
    # Errors
    "QuestionError",
    "ConfigurationError",
    "ProcessingError",
    "ParseError",
    "ValidationError",
    "AttemptsExhausted",
    "Timeout",
    "IoError",
    "EndOfInput",
    # Settings
    "EnvironmentSource",
    "Settings",
    "configure_logging",
]

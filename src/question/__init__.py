"""Question - asynchronous prompts for command-line programs.

Question reads a line of text, parses it into a typed value, validates it
against your rules, and either returns the value or tells you precisely
why it could not, optionally bounded by a timeout and a number of
attempts.

Key Features:
    - Async-first engine with a blocking ask_and_wait() for scripts
    - Immutable, chainable builders that can be shared as templates
    - Ordered validation rules with explanations shown on retry
    - Closed error taxonomy: parse, validation, attempts, timeout, I/O
    - Works with stdin/stdout, files, asyncio streams, or in-memory buffers

Quick Start:
    >>> from question import yn, number
    >>>
    >>> # Blocking, in a script
    >>> if yn().message("Continue? (y/n) ").default(True).ask_and_wait():
    ...     print("Carrying on")
    >>>
    >>> # Awaited, with a time limit and limited attempts
    >>> size = await number(int, 1, 3) \\
    ...     .message("Pick 1-3: ") \\
    ...     .attempts(3) \\
    ...     .timeout(10) \\
    ...     .ask()

Logging is silent by default; call configure_logging("DEBUG") to see
what the engine is doing.
"""

__version__ = "0.1.0"

from loguru import logger

from question.core import (
    MISSING,
    AsyncStreamReader,
    AttemptsExhausted,
    BufferReader,
    BufferWriter,
    ConfigurationError,
    EndOfInput,
    EnvironmentSource,
    IoError,
    LineReader,
    Outcome,
    ParseError,
    ProcessingError,
    PromptConfig,
    PromptEngine,
    QuestionBuilder,
    QuestionError,
    QueueReader,
    Rule,
    RuleSet,
    Settings,
    StreamReader,
    StreamWriter,
    TextWriter,
    Timeout,
    ValidationError,
    ask,
    ask_and_wait,
    configure_logging,
    try_ask,
)
from question.core import rules
from question.standard import date, number, question, select, text, yn

logger.disable("question")

__all__ = [
    # Asking
    "ask",
    "ask_and_wait",
    "try_ask",
    "PromptEngine",
    # Builders
    "QuestionBuilder",
    "question",
    "text",
    "yn",
    "date",
    "number",
    "select",
    # Configuration
    "PromptConfig",
    "Outcome",
    "MISSING",
    "Rule",
    "RuleSet",
    "rules",
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

"""Fluent question builder.

This module provides the QuestionBuilder class which offers a chainable
API for configuring a question and asking it. Every configuration method
returns a new builder, so a partially configured builder can be shared as
a template. Asking consumes the builder it is called on.

Examples:
    Yes/no question with a default and a time limit:

    >>> agreed = await QuestionBuilder(parse_yes_no) \\
    ...     .message("Shall I continue? (you have 5 seconds to answer) ") \\
    ...     .default(True) \\
    ...     .timeout(5) \\
    ...     .ask()

    Constrained number, asked synchronously:

    >>> chosen = QuestionBuilder(int) \\
    ...     .message("Please input a number between 2 and 4, that is not 3.\\n") \\
    ...     .help("Please, try again: ") \\
    ...     .rule(lambda n: 2 <= n <= 4) \\
    ...     .rule(lambda n: n != 3, "This value is not allowed.") \\
    ...     .ask_and_wait()
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import timedelta
from typing import Any, Generic, TypeVar

from .config import MISSING, Feedback, Outcome, Parser, PromptConfig, coerce_timeout
from .engine import PromptEngine, ask_and_wait, ensure_no_running_loop
from .errors import ConfigurationError
from .io import LineReader, TextWriter, stdin_reader, stdout_writer
from .rules import Rule

T = TypeVar("T")


class QuestionBuilder(Generic[T]):
    """Chainable configuration for one question.

    A builder holds an immutable PromptConfig plus the reader and writer
    to use. Configuration methods never modify the builder they are called
    on; terminal methods (ask, try_ask, ask_and_wait) may be called once.
    """

    def __init__(
        self,
        parser: Parser | None = None,
        *,
        config: PromptConfig[T] | None = None,
        reader: LineReader | None = None,
        writer: TextWriter | None = None,
    ):
        if config is None:
            config = PromptConfig()
        if parser is not None:
            config = config.evolve(parser=parser)
        self._config = config
        self._reader = reader
        self._writer = writer
        self._consumed = False

    def _evolve(self, **changes: Any) -> QuestionBuilder[T]:
        reader = changes.pop("reader", self._reader)
        writer = changes.pop("writer", self._writer)
        config = self._config.evolve(**changes) if changes else self._config
        return QuestionBuilder(config=config, reader=reader, writer=writer)

    @property
    def config(self) -> PromptConfig[T]:
        return self._config

    @property
    def consumed(self) -> bool:
        return self._consumed

    # Message-related

    def message(self, message: Any, *, repeat: bool = True) -> QuestionBuilder[T]:
        """Set the prompt text; with ``repeat=False`` it is shown only once."""
        return self._evolve(message=str(message), repeat_message=repeat)

    def help(self, help: Any, *, repeat: bool = True) -> QuestionBuilder[T]:
        """Set the text shown on retries; with ``repeat=False`` only on the first."""
        return self._evolve(help=str(help), repeat_help=repeat)

    def feedback(self, feedback: Feedback | None) -> QuestionBuilder[T]:
        """Set the function that turns the final Outcome into a closing message."""
        return self._evolve(feedback=feedback)

    def on_success(self, message: Callable[[T], str | None]) -> QuestionBuilder[T]:
        """Feedback shown only when a value was accepted."""
        return self.feedback(lambda outcome: message(outcome.value) if outcome.ok else None)

    # Parsing and validation

    def parser(self, parser: Parser, *, show_errors: bool = True) -> QuestionBuilder[T]:
        """Set the parser; ``show_errors`` controls whether its errors are displayed."""
        return self._evolve(parser=parser, show_parse_errors=show_errors)

    def quiet_parse_errors(self) -> QuestionBuilder[T]:
        return self._evolve(show_parse_errors=False)

    def rule(
        self, predicate: Callable[[T], bool], explanation: str | None = None
    ) -> QuestionBuilder[T]:
        """Add a validation rule after the existing ones."""
        return self._evolve(rules=self._config.rules.add(predicate, explanation))

    def rules(self, *rules: Rule) -> QuestionBuilder[T]:
        """Add ready-made rules in order."""
        return self._evolve(rules=self._config.rules.extend(rules))

    def clear_rules(self) -> QuestionBuilder[T]:
        """Forget all validation rules."""
        return self._evolve(rules=type(self._config.rules)())

    # Policies

    def default(self, value: Any = MISSING) -> QuestionBuilder[T]:
        """Value accepted when the answer is empty; call with no argument to unset.

        The default is returned as-is: it is not parsed or validated.
        """
        return self._evolve(default=value)

    def attempts(self, attempts: int | None) -> QuestionBuilder[T]:
        """Maximum number of attempts; None for unbounded."""
        return self._evolve(attempts=attempts)

    def timeout(self, timeout: float | timedelta | None) -> QuestionBuilder[T]:
        """Time allowed for the whole question; None to wait forever."""
        return self._evolve(timeout=coerce_timeout(timeout))

    # Input and output

    def reader(self, reader: LineReader) -> QuestionBuilder[T]:
        return self._evolve(reader=reader)

    def writer(self, writer: TextWriter) -> QuestionBuilder[T]:
        return self._evolve(writer=writer)

    # Terminal operations

    def build(self) -> PromptConfig[T]:
        """Return the configuration without asking."""
        return self._config

    def _consume(self) -> tuple[PromptConfig[T], LineReader, TextWriter]:
        if self._consumed:
            raise ConfigurationError("This question has already been asked")
        self._consumed = True
        reader = self._reader if self._reader is not None else stdin_reader()
        writer = self._writer if self._writer is not None else stdout_writer()
        return self._config, reader, writer

    async def try_ask(self) -> Outcome[T]:
        """Ask the question and return its Outcome."""
        config, reader, writer = self._consume()
        return await PromptEngine(config, reader, writer).run()

    async def ask(self) -> T:
        """Ask the question and return the accepted value.

        Raises:
            ProcessingError: The subclass describing why no value was accepted
        """
        outcome = await self.try_ask()
        return outcome.unwrap()

    def ask_and_wait(self) -> T:
        """Blocking version of ask()."""
        ensure_no_running_loop()
        config, reader, writer = self._consume()
        return ask_and_wait(config, reader, writer)

    def __repr__(self) -> str:
        return f"QuestionBuilder({self._config.message!r}, consumed={self._consumed})"

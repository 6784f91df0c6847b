"""The prompt engine: read, parse, validate, retry.

One ask runs as a single task. Each attempt writes the prompt, reads one
line, and either accepts it or reports why it was rejected before asking
again:

    message (+ help on retries) -> read line -> empty with default? -> default
                                              -> parse -> rules -> value

Parse and validation failures are retried until the attempt limit is
reached. I/O failures and timeouts end the ask immediately. Whatever the
result, the feedback function runs exactly once afterwards.

Suspension points are the line read and the timer. When a timeout is
configured the whole loop races the timer and is cancelled if the timer
fires first; the feedback still runs against the Timeout outcome.

Example:
    >>> config = PromptConfig(message="Pick 1-3: ", parser=int).evolve(
    ...     rules=RuleSet().add(lambda n: 1 <= n <= 3, "value must be in [1,3]"),
    ...     attempts=3,
    ... )
    >>> value = await ask(config, BufferReader("5\\n2\\n"), BufferWriter())
    >>> value
    2
"""

from __future__ import annotations

import asyncio
import time
from typing import Generic, TypeVar

from loguru import logger

from .config import Outcome, PromptConfig
from .errors import (
    AttemptsExhausted,
    EndOfInput,
    IoError,
    ParseError,
    Timeout,
    ValidationError,
)
from .io import LineReader, TextWriter, stdin_reader, stdout_writer

T = TypeVar("T")

# Raised by streams that are closed or broken
_IO_FAILURES = (OSError, ValueError, EOFError)


class PromptEngine(Generic[T]):
    """Drives one question against a reader and a writer.

    An engine is single use: create one per ask.
    """

    def __init__(self, config: PromptConfig[T], reader: LineReader, writer: TextWriter):
        self.config = config
        self.reader = reader
        self.writer = writer
        self.attempts_used = 0
        self.parser_calls = 0
        self._help_shown = False

    async def run(self) -> Outcome[T]:
        """Ask the question and return its outcome.

        Raises:
            ConfigurationError: If the configuration cannot be asked
        """
        self.config.check()
        started = time.monotonic()

        if self.config.timeout is None:
            outcome = await self._loop()
        else:
            try:
                outcome = await asyncio.wait_for(self._loop(), self.config.timeout)
            except asyncio.TimeoutError:
                elapsed = time.monotonic() - started
                logger.warning(
                    f"Question timed out after {elapsed:.2f}s "
                    f"({self.attempts_used} attempt(s) started)"
                )
                outcome = Outcome.failure(Timeout(elapsed))

        return await self._give_feedback(outcome)

    async def _loop(self) -> Outcome[T]:
        config = self.config
        while True:
            try:
                await self._prompt()
                raw = await self._read()
            except IoError as e:
                logger.warning(f"Question aborted by I/O failure: {e}")
                return Outcome.failure(e)

            self.attempts_used += 1
            logger.debug(f"Attempt {self.attempts_used} received {raw!r}")

            if raw == "" and config.has_default:
                logger.debug("Empty answer, using the default value")
                return Outcome.success(config.default)

            result = self._process(raw)
            if isinstance(result, Outcome):
                logger.debug(f"Answer accepted after {self.attempts_used} attempt(s)")
                return result

            if config.attempts is not None and self.attempts_used >= config.attempts:
                logger.debug(f"No attempts left after {self.attempts_used}: {result}")
                if config.attempts == 1:
                    # Nothing was retried: the rejection itself is the answer
                    return Outcome.failure(result)
                return Outcome.failure(AttemptsExhausted(self.attempts_used, result))

            logger.debug(f"Attempt {self.attempts_used} rejected: {result}")
            try:
                await self._explain(result)
            except IoError as e:
                logger.warning(f"Question aborted by I/O failure: {e}")
                return Outcome.failure(e)

    def _process(self, raw: str) -> Outcome[T] | ParseError | ValidationError:
        """Parse and validate one answer."""
        self.parser_calls += 1
        try:
            value = self.config.parser(raw)
        except ParseError as e:
            return e
        except Exception as e:
            return ParseError(raw, e)

        broken = self.config.rules.evaluate(value)
        if broken is not None:
            return ValidationError(raw, broken.explanation)
        return Outcome.success(value)

    async def _prompt(self) -> None:
        config = self.config
        first = self.attempts_used == 0
        if first or config.repeat_message:
            await self._write(config.message)
        if not first and config.help and (config.repeat_help or not self._help_shown):
            await self._write(config.help)
            self._help_shown = True

    async def _explain(self, error: ParseError | ValidationError) -> None:
        if isinstance(error, ParseError) and not self.config.show_parse_errors:
            return
        explanation = error.explanation
        if explanation:
            if not explanation.endswith("\n"):
                explanation += "\n"
            await self._write(explanation)

    async def _read(self) -> str:
        try:
            line = await self.reader.readline()
        except _IO_FAILURES as e:
            raise IoError(e) from e
        if line == "":
            raise EndOfInput()
        return line.rstrip("\r\n")

    async def _write(self, text: str) -> None:
        try:
            await self.writer.write(text)
            await self.writer.flush()
        except _IO_FAILURES as e:
            raise IoError(e) from e

    async def _give_feedback(self, outcome: Outcome[T]) -> Outcome[T]:
        if self.config.feedback is None:
            return outcome
        message = self.config.feedback(outcome)
        if not message:
            return outcome
        try:
            await self._write(message)
        except IoError as e:
            logger.warning(f"Could not write feedback: {e}")
            return Outcome.failure(e)
        return outcome


def _resolve_io(
    reader: LineReader | None, writer: TextWriter | None
) -> tuple[LineReader, TextWriter]:
    return (
        reader if reader is not None else stdin_reader(),
        writer if writer is not None else stdout_writer(),
    )


async def try_ask(
    config: PromptConfig[T],
    reader: LineReader | None = None,
    writer: TextWriter | None = None,
) -> Outcome[T]:
    """Ask a question and return its Outcome instead of raising.

    The reader and writer default to standard input and output.

    Raises:
        ConfigurationError: If the configuration cannot be asked
    """
    reader, writer = _resolve_io(reader, writer)
    return await PromptEngine(config, reader, writer).run()


async def ask(
    config: PromptConfig[T],
    reader: LineReader | None = None,
    writer: TextWriter | None = None,
) -> T:
    """Ask a question and return the accepted value.

    Raises:
        ProcessingError: The subclass describing why no value was accepted
        ConfigurationError: If the configuration cannot be asked
    """
    outcome = await try_ask(config, reader, writer)
    return outcome.unwrap()


def ensure_no_running_loop() -> None:
    """Raise RuntimeError when called from inside a running event loop."""
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        # No event loop - safe to run our own
        return

    raise RuntimeError(
        "Cannot ask synchronously inside a running event loop. "
        "Use 'await ask(...)' instead."
    )


def ask_and_wait(
    config: PromptConfig[T],
    reader: LineReader | None = None,
    writer: TextWriter | None = None,
) -> T:
    """Blocking version of ask() for code without an event loop.

    Raises:
        RuntimeError: If called while an event loop is running
    """
    ensure_no_running_loop()
    return asyncio.run(ask(config, reader, writer))

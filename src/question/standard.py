"""Ready-made questions for common answer shapes.

Each function returns a QuestionBuilder already configured with a parser
(and, where it makes sense, rules and help text). Callers still set the
message and any policy they need:

    >>> proceed = yn().message("Continue? (y/n) ").attempts(2).ask_and_wait()
    >>> when = await date().message("Please input your awaited date: ").ask()
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from .core.builder import QuestionBuilder
from .core.rules import between

T = TypeVar("T")

TRUE_TOKENS = frozenset({"y", "yes", "t", "true"})
FALSE_TOKENS = frozenset({"n", "no", "f", "false"})


def parse_yes_no(raw: str) -> bool:
    """Read y/yes/t/true and n/no/f/false, ignoring case and surrounding spaces."""
    token = raw.strip().lower()
    if token in TRUE_TOKENS:
        return True
    if token in FALSE_TOKENS:
        return False
    raise ValueError("Please answer yes or no.")


def date_parser(fmt: str = "%Y-%m-%d") -> Callable[[str], dt.date]:
    def parse(raw: str) -> dt.date:
        try:
            return dt.datetime.strptime(raw.strip(), fmt).date()
        except ValueError as e:
            raise ValueError(f"Use a {fmt} format please.") from e

    return parse


def question(parser: Callable[[str], T] = str) -> QuestionBuilder[T]:
    """Question whose answer is converted with ``parser`` (plain text by default)."""
    return QuestionBuilder(parser)


def text() -> QuestionBuilder[str]:
    return QuestionBuilder(str)


def yn() -> QuestionBuilder[bool]:
    """Yes/No question."""
    return QuestionBuilder(parse_yes_no)


def date(fmt: str = "%Y-%m-%d") -> QuestionBuilder[dt.date]:
    """Calendar date in the ``fmt`` strptime format."""
    return QuestionBuilder(date_parser(fmt))


def number(
    kind: Callable[[str], Any] = int,
    minimum: Any = None,
    maximum: Any = None,
) -> QuestionBuilder:
    """Number converted with ``kind``, optionally bounded (inclusive)."""
    name = getattr(kind, "__name__", "number")

    def parse(raw: str) -> Any:
        try:
            return kind(raw.strip())
        except (ValueError, ArithmeticError) as e:
            raise ValueError(f"Please enter a valid {name}.") from e

    builder = QuestionBuilder(parse)
    if minimum is not None and maximum is not None:
        builder = builder.rules(between(minimum, maximum))
    elif minimum is not None:
        builder = builder.rule(lambda value: value >= minimum, f"value must be at least {minimum}")
    elif maximum is not None:
        builder = builder.rule(lambda value: value <= maximum, f"value must be at most {maximum}")
    return builder


def select(options: Sequence[T], message: str | None = None) -> QuestionBuilder[T]:
    """Single choice among ``options``.

    The answer may be the 1-based position of an option or its exact text.
    The numbered option list follows ``message`` when one is given and is
    repeated as help text on retries.
    """
    choices = list(options)
    if not choices:
        raise ValueError("select() needs at least one option")
    labels = [str(choice) for choice in choices]

    def parse(raw: str) -> T:
        answer = raw.strip()
        if answer.isdigit() and 1 <= int(answer) <= len(choices):
            return choices[int(answer) - 1]
        if answer in labels:
            return choices[labels.index(answer)]
        raise ValueError(f"Please choose a number between 1 and {len(choices)}.")

    listing = "".join(f"  {i}. {label}\n" for i, label in enumerate(labels, start=1))
    builder = QuestionBuilder(parse).help(listing)
    if message is not None:
        separator = "" if message.endswith("\n") else "\n"
        builder = builder.message(f"{message}{separator}{listing}", repeat=False)
    return builder

"""Ordered validation rules applied to parsed answers.

A RuleSet is evaluated in insertion order and stops at the first rule
that does not hold. Rules must be pure: the engine evaluates them again
on every attempt.
"""

from __future__ import annotations

from collections.abc import Callable, Collection, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")

Predicate = Callable[[T], bool]


@dataclass(frozen=True)
class Rule(Generic[T]):
    """A predicate over a parsed value and the text shown when it fails."""

    predicate: Predicate
    explanation: str | None = None

    def holds(self, value: T) -> bool:
        return bool(self.predicate(value))


class RuleSet(Generic[T]):
    """Immutable, ordered collection of rules.

    Examples:
        >>> rules = RuleSet().add(lambda n: n > 0, "must be positive")
        >>> rules.evaluate(-1).explanation
        'must be positive'
        >>> rules.evaluate(5) is None
        True
    """

    __slots__ = ("_rules",)

    def __init__(self, rules: Iterable[Rule[T]] = ()):
        self._rules: tuple[Rule[T], ...] = tuple(rules)

    def add(self, predicate: Predicate, explanation: str | None = None) -> RuleSet[T]:
        """Return a new set with one more rule at the end."""
        return RuleSet((*self._rules, Rule(predicate, explanation)))

    def extend(self, rules: Iterable[Rule[T]]) -> RuleSet[T]:
        """Return a new set with ``rules`` appended in order."""
        return RuleSet((*self._rules, *rules))

    def evaluate(self, value: T) -> Rule[T] | None:
        """Return the first rule that does not hold, or None if all pass."""
        for rule in self._rules:
            if not rule.holds(value):
                return rule
        return None

    def passes(self, value: T) -> bool:
        return self.evaluate(value) is None

    def __iter__(self) -> Iterator[Rule[T]]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __bool__(self) -> bool:
        return bool(self._rules)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RuleSet):
            return NotImplemented
        return self._rules == other._rules

    def __hash__(self) -> int:
        return hash(self._rules)

    def __repr__(self) -> str:
        return f"RuleSet({list(self._rules)!r})"


# Ready-made rules


def between(low: Any, high: Any, explanation: str | None = None) -> Rule:
    """Value must lie in the closed range [low, high]."""
    return Rule(
        lambda value: low <= value <= high,
        explanation or f"value must be in [{low},{high}]",
    )


def one_of(options: Collection[Any], explanation: str | None = None) -> Rule:
    """Value must be one of ``options``."""
    allowed = tuple(options)
    return Rule(
        lambda value: value in allowed,
        explanation or f"value must be one of: {', '.join(map(str, allowed))}",
    )


def not_in(values: Collection[Any], explanation: str | None = None) -> Rule:
    """Value must not be any of ``values``."""
    rejected = tuple(values)
    return Rule(lambda value: value not in rejected, explanation or "This value is not allowed.")


def non_blank(explanation: str | None = None) -> Rule:
    """Text must contain something besides whitespace."""
    return Rule(lambda value: bool(str(value).strip()), explanation or "Answer can not be empty.")


def max_length(limit: int, explanation: str | None = None) -> Rule:
    return Rule(
        lambda value: len(value) <= limit,
        explanation or f"answer must be at most {limit} characters",
    )

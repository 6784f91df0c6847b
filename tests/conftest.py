"""Shared test fixtures and utilities."""

import pytest

from question.core.config import PromptConfig
from question.core.io import BufferReader, BufferWriter
from question.core.rules import RuleSet
from question.standard import parse_yes_no


@pytest.fixture
def writer():
    """Collects everything the engine writes."""
    return BufferWriter()


@pytest.fixture
def reader_for():
    """Build an in-memory reader from lines."""

    def make(*lines: str) -> BufferReader:
        return BufferReader(list(lines))

    return make


class CountingParser:
    """Parser wrapper that records how often it ran."""

    def __init__(self, parse=str):
        self.parse = parse
        self.calls: list[str] = []

    def __call__(self, raw: str):
        self.calls.append(raw)
        return self.parse(raw)


class ExplodingParser(CountingParser):
    """Parser that rejects every input."""

    def __init__(self):
        super().__init__(self._explode)

    @staticmethod
    def _explode(raw: str):
        raise ValueError(f"unexpected parse of {raw!r}")


@pytest.fixture
def counting_parser():
    return CountingParser


@pytest.fixture
def exploding_parser():
    return ExplodingParser()


@pytest.fixture
def yn_config():
    """Continue? (y/n) with two attempts and no default."""
    return PromptConfig(message="Continue? (y/n) ", parser=parse_yes_no, attempts=2)


@pytest.fixture
def pick_config():
    """Pick 1-3 with a range rule and a single attempt."""
    return PromptConfig(
        message="Pick 1-3: ",
        parser=int,
        rules=RuleSet().add(lambda n: 1 <= n <= 3, "value must be in [1,3]"),
        attempts=1,
    )

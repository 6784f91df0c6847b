"""Tests for the ready-made questions."""

import datetime as dt

import pytest

from question import date, number, question, select, text, yn
from question.core.errors import AttemptsExhausted, ParseError, ValidationError
from question.core.io import BufferReader, BufferWriter
from question.standard import date_parser, parse_yes_no


def with_input(builder, *lines):
    writer = BufferWriter()
    return builder.reader(BufferReader(list(lines))).writer(writer), writer


class TestYesNo:
    """Test yes/no questions."""

    @pytest.mark.unit
    @pytest.mark.parametrize("raw", ["y", "yes", "Y", "YES", "t", "true", " True "])
    def test_true_tokens(self, raw):
        assert parse_yes_no(raw) is True

    @pytest.mark.unit
    @pytest.mark.parametrize("raw", ["n", "no", "N", "f", "false", "FALSE"])
    def test_false_tokens(self, raw):
        assert parse_yes_no(raw) is False

    @pytest.mark.unit
    @pytest.mark.parametrize("raw", ["maybe", "nah", "", "yess"])
    def test_other_tokens(self, raw):
        with pytest.raises(ValueError, match="yes or no"):
            parse_yes_no(raw)

    @pytest.mark.unit
    async def test_retry_then_yes(self):
        builder, writer = with_input(yn().message("Continue? (y/n) ").attempts(2), "maybe", "y")
        assert await builder.ask() is True

    @pytest.mark.unit
    async def test_attempts_exhausted(self):
        builder, _ = with_input(yn().message("Continue? (y/n) ").attempts(2), "maybe", "nah")
        with pytest.raises(AttemptsExhausted) as exc_info:
            await builder.ask()
        assert exc_info.value.attempts == 2

    @pytest.mark.unit
    async def test_default(self):
        builder, writer = with_input(
            yn()
            .message("Shall I continue? (you have 5 seconds to answer) ")
            .default(True)
            .timeout(5)
            .on_success(lambda agreed: "Super!\n" if agreed else "Okay, shutting down...\n"),
            "",
        )

        assert await builder.ask() is True
        assert writer.getvalue() == "Shall I continue? (you have 5 seconds to answer) Super!\n"

    @pytest.mark.unit
    async def test_input_false(self):
        builder, writer = with_input(
            yn()
            .message("Shall I continue? ")
            .default(True)
            .on_success(lambda agreed: "Super!\n" if agreed else "Okay, shutting down...\n"),
            "false",
        )

        assert await builder.ask() is False
        assert writer.getvalue() == "Shall I continue? Okay, shutting down...\n"


class TestDate:
    """Test date questions."""

    @pytest.mark.unit
    def test_parser(self):
        assert date_parser()("2200-01-01") == dt.date(2200, 1, 1)
        assert date_parser("%d/%m/%Y")("31/12/1999") == dt.date(1999, 12, 31)

    @pytest.mark.unit
    def test_parser_explains_format(self):
        with pytest.raises(ValueError, match="Use a %Y-%m-%d format please."):
            date_parser()("tomorrow")

    @pytest.mark.unit
    async def test_retry_on_empty_line(self):
        builder, writer = with_input(
            date()
            .message("Please input your awaited date: ", repeat=False)
            .on_success(lambda day: "Thank you!"),
            "",
            "2200-01-01",
        )

        assert await builder.ask() == dt.date(2200, 1, 1)
        assert writer.getvalue() == (
            "Please input your awaited date: "
            "Use a %Y-%m-%d format please.\n"
            "Thank you!"
        )


class TestNumber:
    """Test number questions."""

    @pytest.mark.unit
    async def test_range(self):
        builder, _ = with_input(number(int, 1, 3).message("Pick 1-3: ").attempts(1), "5")

        with pytest.raises(ValidationError) as exc_info:
            await builder.ask()

        assert exc_info.value.raw_input == "5"
        assert exc_info.value.rule_explanation == "value must be in [1,3]"

    @pytest.mark.unit
    async def test_float_with_minimum(self):
        builder, writer = with_input(number(float, minimum=0.5).message("Ratio? "), "0.1", "x", "0.75")

        assert await builder.ask() == 0.75
        assert "value must be at least 0.5\n" in writer.getvalue()
        assert "Please enter a valid float.\n" in writer.getvalue()

    @pytest.mark.unit
    async def test_maximum_only(self):
        builder, _ = with_input(number(maximum=10).message("Count? ").attempts(1), "11")
        with pytest.raises(ValidationError, match="at most 10"):
            await builder.ask()


class TestSelect:
    """Test single-choice questions."""

    @pytest.mark.unit
    def test_needs_options(self):
        with pytest.raises(ValueError):
            select([])

    @pytest.mark.unit
    async def test_by_index_or_label(self):
        builder, _ = with_input(select(["red", "green"]).message("Colour? "), "2")
        assert await builder.ask() == "green"

        builder, _ = with_input(select(["red", "green"]).message("Colour? "), "red")
        assert await builder.ask() == "red"

    @pytest.mark.unit
    async def test_listing_in_message_and_help(self):
        builder, writer = with_input(select([10, 20], "Size?"), "0", "20")

        assert await builder.ask() == 20
        assert writer.getvalue() == (
            "Size?\n  1. 10\n  2. 20\n"
            "Please choose a number between 1 and 2.\n"
            "  1. 10\n  2. 20\n"
        )

    @pytest.mark.unit
    async def test_out_of_range_index(self):
        builder, _ = with_input(select(["a"]).message("Pick: ").attempts(1), "3")
        with pytest.raises(ParseError):
            await builder.ask()


class TestGeneric:
    """Test question() and text()."""

    @pytest.mark.unit
    async def test_question_with_parser(self):
        builder, _ = with_input(question(float).message("Value? "), "2.5")
        assert await builder.ask() == 2.5

    @pytest.mark.unit
    async def test_text_keeps_spaces(self):
        builder, _ = with_input(text().message("Name? "), "  Ada Lovelace ")
        assert await builder.ask() == "  Ada Lovelace "

    @pytest.mark.unit
    def test_text_sync(self):
        builder, _ = with_input(text().message("Name? "), "Ada")
        assert builder.ask_and_wait() == "Ada"

"""Command line interface: ask one question from a shell script.

Prompts go to stderr and the accepted answer is printed on stdout, so the
answer can be captured:

    $ name=$(question text "Your name?")
    $ question yn "Deploy now?" --default no --timeout 30 && ./deploy.sh

Exit status:
    0    answer accepted
    1    answer rejected (parse, validation, or attempts exhausted)
    2    invalid usage or environment
    3    input closed or I/O failure
    124  no answer before the timeout
"""

from __future__ import annotations

import datetime as dt
import sys
from collections.abc import Callable
from typing import Any

import click
from loguru import logger

from .core.builder import QuestionBuilder
from .core.errors import ConfigurationError, IoError, ProcessingError, Timeout
from .core.io import stderr_writer, stdin_reader
from .core.settings import Settings, configure_logging
from .standard import date as date_question
from .standard import date_parser, number, parse_yes_no, select, text, yn

EXIT_REJECTED = 1
EXIT_IO = 3
EXIT_TIMEOUT = 124


def question_options(func: Callable) -> Callable:
    """Options shared by every question command."""
    func = click.option("--attempts", type=click.IntRange(min=1), help="Maximum attempts")(func)
    func = click.option("--timeout", type=click.FloatRange(min=0), help="Seconds to wait")(func)
    func = click.option("--help-text", help="Text shown before asking again")(func)
    func = click.option("--default", "default", help="Answer used for an empty line")(func)
    func = click.argument("message")(func)
    return func


def _prompt_text(message: str) -> str:
    return message if message[-1:].isspace() else f"{message} "


def _convert_default(raw: str | None, parser: Callable[[str], Any]) -> Any:
    if raw is None:
        return None
    try:
        return parser(raw)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--default") from e


def _integer_bound(value: float | None, hint: str) -> int | None:
    if value is None:
        return None
    if not value.is_integer():
        raise click.BadParameter(
            f"{value} is not a whole number; use --float for decimal answers", param_hint=hint
        )
    return int(value)


def run_question(
    builder: QuestionBuilder,
    settings: Settings,
    *,
    message: str,
    default: Any = None,
    help_text: str | None = None,
    attempts: int | None = None,
    timeout: float | None = None,
    render: Callable[[Any], str] = str,
    repeat_message: bool = True,
) -> None:
    """Ask with stdin/stderr, print the answer, or exit with the failure status."""
    builder = (
        builder.message(_prompt_text(message), repeat=repeat_message)
        .attempts(attempts if attempts is not None else settings.attempts)
        .timeout(timeout if timeout is not None else settings.timeout)
        .reader(stdin_reader())
        .writer(stderr_writer())
    )
    if default is not None:
        builder = builder.default(default)
    if help_text:
        builder = builder.help(_prompt_text(help_text))

    try:
        value = builder.ask_and_wait()
    except ConfigurationError as e:
        raise click.UsageError(str(e)) from e
    except Timeout as e:
        click.echo(f"\nError: {e}", err=True)
        sys.exit(EXIT_TIMEOUT)
    except IoError as e:
        click.echo(f"\nError: {e}", err=True)
        sys.exit(EXIT_IO)
    except ProcessingError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_REJECTED)

    click.echo(render(value))


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log what the prompt engine does")
@click.version_option(package_name="question")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Ask a question on the terminal and print the answer."""
    try:
        settings = Settings.from_env()
    except ConfigurationError as e:
        raise click.UsageError(str(e)) from e

    level = "DEBUG" if verbose else settings.log_level
    if level:
        logger.remove()
        configure_logging(level)
    ctx.obj = settings


@main.command("text")
@question_options
@click.pass_obj
def text_command(settings: Settings, message, default, help_text, timeout, attempts):
    """Ask for free text."""
    run_question(
        text(),
        settings,
        message=message,
        default=default,
        help_text=help_text,
        attempts=attempts,
        timeout=timeout,
    )


@main.command("yn")
@question_options
@click.pass_obj
def yn_command(settings: Settings, message, default, help_text, timeout, attempts):
    """Ask a yes/no question; prints "yes" or "no"."""
    run_question(
        yn(),
        settings,
        message=message,
        default=_convert_default(default, parse_yes_no),
        help_text=help_text,
        attempts=attempts,
        timeout=timeout,
        render=lambda value: "yes" if value else "no",
    )


@main.command("date")
@question_options
@click.option("--format", "fmt", default="%Y-%m-%d", show_default=True, help="strptime format")
@click.pass_obj
def date_command(settings: Settings, message, default, help_text, timeout, attempts, fmt):
    """Ask for a calendar date; prints it in ISO format."""
    run_question(
        date_question(fmt),
        settings,
        message=message,
        default=_convert_default(default, date_parser(fmt)),
        help_text=help_text,
        attempts=attempts,
        timeout=timeout,
        render=dt.date.isoformat,
    )


@main.command("number")
@question_options
@click.option("--float", "as_float", is_flag=True, help="Accept decimal numbers")
@click.option("--min", "minimum", type=float, help="Smallest accepted value")
@click.option("--max", "maximum", type=float, help="Largest accepted value")
@click.pass_obj
def number_command(
    settings: Settings, message, default, help_text, timeout, attempts, as_float, minimum, maximum
):
    """Ask for a number, optionally within bounds."""
    kind = float if as_float else int
    if not as_float:
        minimum = _integer_bound(minimum, "--min")
        maximum = _integer_bound(maximum, "--max")

    run_question(
        number(kind, minimum, maximum),
        settings,
        message=message,
        default=_convert_default(default, kind),
        help_text=help_text,
        attempts=attempts,
        timeout=timeout,
    )


@main.command("select")
@question_options
@click.option("-o", "--option", "options", multiple=True, required=True, help="A choice (repeat)")
@click.pass_obj
def select_command(settings: Settings, message, default, help_text, timeout, attempts, options):
    """Ask to pick one of the given options."""
    if default is not None and default not in options:
        raise click.BadParameter("must be one of the options", param_hint="--default")

    builder = select(options, message)
    run_question(
        builder,
        settings,
        message=builder.config.message,
        default=default,
        help_text=help_text,
        attempts=attempts,
        timeout=timeout,
        repeat_message=False,
    )


if __name__ == "__main__":
    main()

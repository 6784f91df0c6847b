"""
Outcome Handling Example

This example demonstrates deciding policy from the error taxonomy:
- try_ask() returns an Outcome instead of raising
- Timeouts fall back to a default, I/O failures are fatal
- Engine logs enabled with configure_logging()

Run this example:
    python examples/03_outcomes.py
"""

import asyncio
import sys

from question import (
    AttemptsExhausted,
    IoError,
    ParseError,
    Timeout,
    ValidationError,
    configure_logging,
    date,
)


async def main() -> int:
    configure_logging("DEBUG")

    outcome = await (
        date()
        .message("Please input your awaited date (YYYY-MM-DD): ")
        .attempts(3)
        .timeout(30)
        .try_ask()
    )

    match outcome.error:
        case None:
            print(f"Thank you! Waiting for {outcome.value:%A %d %B %Y}.")
        case Timeout(elapsed):
            print(f"\nNo answer after {elapsed:.0f}s, assuming today.")
        case AttemptsExhausted(attempts):
            print(f"Gave up after {attempts} attempts.", file=sys.stderr)
            return 1
        case ParseError() | ValidationError() as error:
            print(f"Rejected: {error}", file=sys.stderr)
            return 1
        case IoError(cause):
            print(f"Cannot read the answer: {cause}", file=sys.stderr)
            return 2
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))

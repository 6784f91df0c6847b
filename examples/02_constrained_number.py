"""
Constrained Number Example

This example demonstrates validation rules and retries:
- Rules evaluated in order, the first failure is explained
- Help text shown before asking again
- A limited number of attempts

Run this example:
    python examples/02_constrained_number.py
"""

import asyncio

from question import AttemptsExhausted, number


async def main() -> None:
    question = (
        number(int, 2, 4)
        .message("Please input a number between 2 and 4, that is not 3.\n", repeat=False)
        .help("Please, try again: ")
        .rule(lambda n: n != 3, "This value is not allowed.")
        .attempts(3)
        .on_success(lambda n: f"You chose {n}!\n")
    )

    try:
        await question.ask()
    except AttemptsExhausted as e:
        print(f"You did not manage to answer the question ({e.attempts} attempts).")


if __name__ == "__main__":
    asyncio.run(main())

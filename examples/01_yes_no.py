"""
Yes/No Question Example

This example demonstrates the simplest blocking question:
- A ready-made yes/no parser
- A default used when the answer is empty
- A time limit that falls back to the default
- Feedback written once the answer is known

Run this example:
    python examples/01_yes_no.py
"""

from question import Timeout, yn


def main() -> None:
    question = (
        yn()
        .message("Shall I continue? (you have 5 seconds to answer) ")
        .default(True)
        .timeout(5)
        .on_success(lambda agreed: "Super!\n" if agreed else "Okay, shutting down...\n")
    )

    try:
        agreed = question.ask_and_wait()
    except Timeout:
        print("\nNo answer, continuing.")
        agreed = True

    if agreed:
        print("Continuing...")


if __name__ == "__main__":
    main()

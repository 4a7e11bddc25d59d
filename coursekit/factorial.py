"""Factorial of a whole number."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence


def factorial(number: int) -> int:
    """Return ``number!``; any number of 1 or less gives 1."""
    result = 1
    for factor in range(2, number + 1):
        result *= factor
    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Read a number from standard input and print its factorial."""
    argparse.ArgumentParser(description="Print the factorial of a number.").parse_args(argv)
    try:
        number = int(input("Enter a number: "))
    except (EOFError, ValueError):
        print("error: expected a whole number", file=sys.stderr)
        return 1
    print(factorial(number))
    return 0


if __name__ == "__main__":
    sys.exit(main())
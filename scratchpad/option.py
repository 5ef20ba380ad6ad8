"""An optional result: a value for non-negative input, nothing otherwise."""

from __future__ import annotations

import argparse
import math
import sys
from typing import Sequence

ERROR_MESSAGE = "Some error done occured cro"


def non_negative(value: float) -> float | None:
    """Truncate ``value`` toward zero and return it, or None if it is negative."""
    if not math.isfinite(value):
        raise ValueError("value must be finite")
    whole = int(value)
    if whole < 0:
        return None
    return float(whole)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a number (argument or standard input) and print the optional result."""
    parser = argparse.ArgumentParser(description="Report a non-negative whole number.")
    parser.add_argument("value", nargs="?", help="number to check; read from stdin if absent")
    args = parser.parse_args(argv)

    text = args.value
    if text is None:
        tokens = sys.stdin.read().split()
        if not tokens:
            parser.error("expected a number")
        text = tokens[0]
    try:
        result = non_negative(float(text))
    except ValueError as exc:
        parser.error(f"invalid number {text!r}: {exc}")

    if result is None:
        print(ERROR_MESSAGE)
    else:
        print(f"{result:f}")
    return 0
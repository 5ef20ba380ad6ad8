"""Brute-force subset-sum solver and a random input generator for it."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Iterable, Sequence

TEST_COUNT_RANGE = (1, 100)
ARRAY_LENGTH_RANGE = (1, 25)
ELEMENT_RANGE = (-100, 100)
TARGET_RANGE = (-100, 100)


def solve(values: Iterable[int], target: int) -> list[int] | None:
    """Return the first subset, in bitmask order, whose sum is ``target``.

    Subsets are tried for masks 0, 1, 2, ... where bit ``j`` selects the
    ``j``-th value; the chosen elements keep their original order.
    Returns ``None`` when no subset adds up to the target.
    """
    data = list(values)
    for mask in range(1 << len(data)):
        subset = [value for j, value in enumerate(data) if (mask >> j) & 1]
        if sum(subset) == target:
            return subset
    return None


def parse_cases(text: str) -> list[tuple[list[int], int]]:
    """Parse the whitespace-separated problem format into ``(values, target)`` pairs."""
    tokens = iter(text.split())

    def next_int(what: str) -> int:
        try:
            token = next(tokens)
        except StopIteration:
            raise ValueError(f"unexpected end of input while reading {what}") from None
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer for {what}, got {token!r}") from None

    count = next_int("the number of test cases")
    if count < 0:
        raise ValueError("the number of test cases must not be negative")
    cases = []
    for _ in range(count):
        length = next_int("the array length")
        if length < 0:
            raise ValueError("the array length must not be negative")
        values = [next_int("an array element") for _ in range(length)]
        target = next_int("the target sum")
        cases.append((values, target))
    return cases


def generate_input(rng: random.Random | None = None) -> str:
    """Return a random problem file in the format that ``parse_cases`` reads."""
    rng = rng if rng is not None else random.Random()
    count = rng.randint(*TEST_COUNT_RANGE)
    lines = [str(count)]
    for _ in range(count):
        length = rng.randint(*ARRAY_LENGTH_RANGE)
        lines.append(str(length))
        lines.append("".join(f"{rng.randint(*ELEMENT_RANGE)} " for _ in range(length)))
        lines.append(str(rng.randint(*TARGET_RANGE)))
    return "\n".join(lines) + "\n"


def _format_subset(subset: Sequence[int]) -> str:
    return "[ " + "".join(f"{value} " for value in subset) + "]"


def main(argv: Sequence[str] | None = None) -> int:
    """Solve every case in the input file (or standard input) and print the results."""
    parser = argparse.ArgumentParser(description="Find a subset with a given sum.")
    parser.add_argument("input", nargs="?", default="-", help="problem file, '-' for stdin")
    args = parser.parse_args(argv)

    if args.input == "-":
        text = sys.stdin.read()
    else:
        with open(args.input, encoding="ascii") as handle:
            text = handle.read()

    try:
        cases = parse_cases(text)
    except ValueError as exc:
        parser.error(str(exc))

    for values, target in cases:
        result = solve(values, target)
        print(_format_subset(result) if result else "Not possible")
    return 0


def generate_main(argv: Sequence[str] | None = None) -> int:
    """Print a randomly generated problem file."""
    parser = argparse.ArgumentParser(description="Generate random subset-sum problems.")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    print(generate_input(random.Random(args.seed)), end="")
    return 0
"""Linear search for the first occurrence of a key."""

from __future__ import annotations

import argparse
import random
from typing import Iterable, Sequence

DEFAULT_SEED = 25
DEFAULT_KEY = 4
DEFAULT_SIZE = 10000
VALUE_LIMIT = 101


def search(values: Iterable[int], key: int) -> int | None:
    """Return the index of the first element equal to ``key``, or None."""
    return next((index for index, value in enumerate(values) if value == key), None)


def main(argv: Sequence[str] | None = None) -> int:
    """Search a seeded random list of values in [0, 100] for a key."""
    parser = argparse.ArgumentParser(description="Find a key in random data.")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED)
    parser.add_argument("--key", type=int, default=DEFAULT_KEY)
    parser.add_argument("--size", type=int, default=DEFAULT_SIZE)
    args = parser.parse_args(argv)
    if args.size < 0:
        parser.error("size must not be negative")

    rng = random.Random(args.seed)
    values = [rng.randrange(VALUE_LIMIT) for _ in range(args.size)]
    location = search(values, args.key)
    if location is None:
        print("Key not found")
    else:
        print(f"Key found at: {location}")
    return 0
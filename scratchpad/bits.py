"""Bit manipulation on 64-bit fields and on the bits of a single-precision float."""

from __future__ import annotations

import argparse
import struct
from typing import Sequence

FIELD_BITS = 64
ALL_SET = (1 << FIELD_BITS) - 1
FLOAT_SIGN_BIT = 31
DEFAULT_VALUE = -234.1


def _check(field: int, n: int) -> None:
    if not 0 <= field <= ALL_SET:
        raise ValueError(f"field must fit in {FIELD_BITS} unsigned bits")
    if not 0 <= n < FIELD_BITS:
        raise ValueError(f"bit index must be between 0 and {FIELD_BITS - 1}")


def set_bit(field: int, n: int) -> int:
    """Return ``field`` with bit ``n`` set."""
    _check(field, n)
    return field | (1 << n)


def clear_bit(field: int, n: int) -> int:
    """Return ``field`` with bit ``n`` cleared."""
    _check(field, n)
    return field & ~(1 << n) & ALL_SET


def toggle_bit(field: int, n: int) -> int:
    """Return ``field`` with bit ``n`` inverted."""
    _check(field, n)
    return field ^ (1 << n)


def flip_float_sign(value: float) -> float:
    """Round ``value`` to single precision and invert its IEEE-754 sign bit."""
    try:
        (raw,) = struct.unpack("<I", struct.pack("<f", value))
    except OverflowError:
        raise ValueError("value does not fit in a single-precision float") from None
    raw = toggle_bit(raw, FLOAT_SIGN_BIT)
    (flipped,) = struct.unpack("<f", struct.pack("<I", raw))
    return flipped


def main(argv: Sequence[str] | None = None) -> int:
    """Print a number (by default -234.1) with its float sign bit flipped."""
    parser = argparse.ArgumentParser(
        description="Flip the IEEE-754 sign bit of a single-precision float."
    )
    parser.add_argument(
        "value",
        nargs="?",
        type=float,
        default=DEFAULT_VALUE,
        help="number to flip (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    try:
        flipped = flip_float_sign(args.value)
    except ValueError as exc:
        parser.error(str(exc))
    print(f"{flipped:f}")
    return 0
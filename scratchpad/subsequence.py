"""Check whether one string is a subsequence of another."""

from __future__ import annotations

from typing import Sequence

_SAMPLE_TEXT = "dsahjpjauf"
_SAMPLE_PATTERNS = ("ahjpjau", "ja", "ahbwzgqnuk", "tnmlanowax")


def is_subsequence(text: str, pattern: str) -> bool:
    """Return True if the characters of ``pattern`` appear in ``text`` in order."""
    if len(text) < len(pattern):
        return False
    remaining = iter(text)
    return all(char in remaining for char in pattern)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the match result for a fixed set of sample strings."""
    for pattern in _SAMPLE_PATTERNS:
        print(f"{_SAMPLE_TEXT} {pattern}: {int(is_subsequence(_SAMPLE_TEXT, pattern))}")
    return 0
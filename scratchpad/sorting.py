"""Comparison sorts and a small merge-sort timing benchmark."""

from __future__ import annotations

import argparse
import random
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Sequence

DEFAULT_SIZES = (10000, 20000, 30000, 40000, 50000, 2000000)
DEFAULT_PARALLEL_DEPTH = 6
_RAND_LIMIT = 2**31


def _merge(left: list, right: list, ties_from_left: bool) -> list:
    """Merge two sorted lists; on equal keys take from ``left`` only if asked."""
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j] or (ties_from_left and not right[j] < left[i]):
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list:
    """Return a sorted copy; the left half takes the middle element."""
    data = list(values)
    if len(data) <= 1:
        return data
    mid = (len(data) - 1) // 2 + 1
    return _merge(merge_sort(data[:mid]), merge_sort(data[mid:]), ties_from_left=False)


def top_down_merge_sort(values: Iterable[Any]) -> list:
    """Return a stably sorted copy using a top-down split at ``n // 2``."""
    data = list(values)
    if len(data) <= 1:
        return data
    mid = len(data) // 2
    return _merge(
        top_down_merge_sort(data[:mid]),
        top_down_merge_sort(data[mid:]),
        ties_from_left=True,
    )


def _partition(data: list, begin: int, end: int) -> int:
    pivot = data[end]
    boundary = begin
    for i in range(begin, end):
        if data[i] < pivot:
            data[boundary], data[i] = data[i], data[boundary]
            boundary += 1
    data[boundary], data[end] = data[end], data[boundary]
    return boundary


def quicksort(values: Iterable[Any]) -> list:
    """Return a sorted copy using Lomuto partitioning around the last element."""
    data = list(values)
    stack = [(0, len(data) - 1)]
    while stack:
        begin, end = stack.pop()
        while begin < end:
            pos = _partition(data, begin, end)
            # Recurse into the smaller side, iterate over the larger one.
            if pos - begin < end - pos:
                stack.append((pos + 1, end))
                end = pos - 1
            else:
                stack.append((begin, pos - 1))
                begin = pos + 1
    return data


def _combine(data: list, start: int, mid: int, end: int) -> None:
    data[start:end + 1] = _merge(
        data[start:mid + 1], data[mid + 1:end + 1], ties_from_left=False
    )


def _merge_sort_range(data: list, start: int, end: int) -> None:
    if start >= end:
        return
    mid = (start + end) // 2
    _merge_sort_range(data, start, mid)
    _merge_sort_range(data, mid + 1, end)
    _combine(data, start, mid, end)


def _run_in_threads(*tasks: Callable[[], None]) -> None:
    errors: list[BaseException] = []

    def guarded(task: Callable[[], None]) -> None:
        try:
            task()
        except BaseException as exc:  # re-raised in the calling thread
            errors.append(exc)

    threads = [threading.Thread(target=guarded, args=(task,)) for task in tasks]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    if errors:
        raise errors[0]


def _parallel_range(data: list, start: int, end: int, depth: int, max_depth: int) -> None:
    if start >= end:
        return
    mid = (start + end) // 2
    if depth < max_depth:
        _run_in_threads(
            lambda: _parallel_range(data, start, mid, depth + 1, max_depth),
            lambda: _parallel_range(data, mid + 1, end, depth + 1, max_depth),
        )
    else:
        _merge_sort_range(data, start, mid)
        _merge_sort_range(data, mid + 1, end)
    _combine(data, start, mid, end)


def parallel_merge_sort(values: Iterable[Any], max_depth: int = DEFAULT_PARALLEL_DEPTH) -> list:
    """Return a sorted copy, sorting halves in threads down to ``max_depth`` levels."""
    if max_depth < 0:
        raise ValueError("max_depth must not be negative")
    data = list(values)
    _parallel_range(data, 0, len(data) - 1, 0, max_depth)
    return data


def _out_of_order(a: Any, b: Any, descending: bool) -> bool:
    return a < b if descending else b < a


def insertion_sort(values: Iterable[Any], descending: bool = False) -> list:
    """Return a sorted copy built by swapping each element back into place."""
    data = list(values)
    for i in range(1, len(data)):
        j = i
        while j > 0 and _out_of_order(data[j - 1], data[j], descending):
            data[j], data[j - 1] = data[j - 1], data[j]
            j -= 1
    return data


def selection_sort(values: Iterable[Any], descending: bool = False) -> list:
    """Return a sorted copy by repeatedly selecting the extreme remaining element."""
    data = list(values)
    for i in range(len(data) - 1):
        best = i
        for j in range(i + 1, len(data)):
            if _out_of_order(data[best], data[j], descending):
                best = j
        if best != i:
            data[i], data[best] = data[best], data[i]
    return data


def bubble_sort(values: Iterable[Any], descending: bool = False) -> list:
    """Return a sorted copy; each pass stops at the last swap of the previous one."""
    data = list(values)
    length = len(data)
    while length > 1:
        last_swap = 0
        for i in range(1, length):
            if _out_of_order(data[i - 1], data[i], descending):
                data[i - 1], data[i] = data[i], data[i - 1]
                last_swap = i
        length = last_swap
    return data


@dataclass(frozen=True)
class BenchmarkResult:
    """Seconds taken to merge-sort random, already sorted and reversed input."""

    size: int
    random_input: float
    sorted_input: float
    reversed_input: float


def _timed(values: Sequence[Any]) -> tuple[list, float]:
    start = time.perf_counter()
    result = top_down_merge_sort(values)
    return result, time.perf_counter() - start


def benchmark(sizes: Iterable[int] = DEFAULT_SIZES, seed: int | None = None) -> list[BenchmarkResult]:
    """Time the merge sort on random, sorted and reversed lists of each size."""
    sizes = list(sizes)
    if any(size < 0 for size in sizes):
        raise ValueError("sizes must not be negative")
    rng = random.Random(seed)
    results = []
    for size in sizes:
        data = [rng.randrange(_RAND_LIMIT) for _ in range(size)]
        data, random_time = _timed(data)
        data, sorted_time = _timed(data)
        data.reverse()
        _, reversed_time = _timed(data)
        results.append(BenchmarkResult(size, random_time, sorted_time, reversed_time))
    return results


def main(argv: Sequence[str] | None = None) -> int:
    """Run the merge-sort benchmark and record the timings in a data file."""
    parser = argparse.ArgumentParser(description="Time merge sort on various inputs.")
    parser.add_argument("--sizes", type=int, nargs="+", default=list(DEFAULT_SIZES))
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--output", default="mergeSort.dat")
    args = parser.parse_args(argv)

    try:
        results = benchmark(args.sizes, args.seed)
    except ValueError as exc:
        parser.error(str(exc))

    print("\nMerge Sort:")
    with open(args.output, "w", encoding="ascii") as out:
        for row in results:
            print(f"\nFor {row.size} inputs:")
            timings = (row.random_input, row.sorted_input, row.reversed_input)
            for seconds in timings:
                print(f"Time difference: {seconds:f}")
            out.write(f"{row.size} " + " ".join(f"{t:f}" for t in timings) + "\n")
    return 0
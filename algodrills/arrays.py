"""Array drills: target sums, range updates, records, rotations and swaps."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence


def _pairs_after(ordered: Sequence[int], start: int, target: int) -> list[tuple[int, int]]:
    """Distinct pairs (x, target - x) with x taken from ordered[start:] and its partner later."""
    found: list[tuple[int, int]] = []
    last: int | None = None
    for offset, value in enumerate(ordered[start:], start=start):
        if last is not None and value <= last:
            continue
        if target - value in ordered[offset + 1:]:
            found.append((value, target - value))
            last = value
    return found


def target_sum_pairs(values: Iterable[int], target: int) -> list[tuple[int, int]]:
    """Pairs of elements summing to target, smaller first, each first value reported once."""
    ordered = sorted(values)
    return _pairs_after(ordered, 0, target)


def target_sum_triplets(values: Iterable[int], target: int) -> list[tuple[int, int, int]]:
    """Triplets of elements summing to target, in ascending order within each triplet."""
    ordered = sorted(values)
    return [
        (first, second, third)
        for index, first in enumerate(ordered)
        for second, third in _pairs_after(ordered, index + 1, target - first)
    ]


def array_manipulation(n: int, queries: Iterable[Sequence[int]]) -> int:
    """Largest value after adding k to positions a..b (1-based, inclusive) for each query."""
    queries = list(queries)
    if not queries:
        return 0
    deltas = [0] * (n + 1)
    for a, b, k in queries:
        if not 1 <= a <= b <= n:
            raise ValueError(f"query range {a}..{b} outside 1..{n}")
        deltas[a - 1] += k
        deltas[b] -= k
    best = 0
    running = 0
    for delta in deltas[:n]:
        running += delta
        best = max(best, running)
    return best


def birthday_cake_candles(heights: Sequence[int]) -> int:
    """Number of candles that share the tallest height."""
    if not heights:
        return 0
    tallest = max(heights)
    return sum(1 for height in heights if height == tallest)


def breaking_records(scores: Sequence[int]) -> tuple[int, int]:
    """Times the season high was raised and times the season low was lowered."""
    if len(scores) <= 1:
        return (0, 0)
    high = low = scores[0]
    most = least = 0
    for score in scores[1:]:
        if score > high:
            high = score
            most += 1
        if score < low:
            low = score
            least += 1
    return (most, least)


def flatland_space_stations(n: int, stations: Iterable[int]) -> int:
    """Greatest distance from any of n cities (0-based) to its nearest space station."""
    ordered = sorted(stations)
    if not ordered:
        raise ValueError("at least one space station is required")
    edge = max(ordered[0], n - ordered[-1] - 1)
    widest_gap = max((b - a for a, b in zip(ordered, ordered[1:])), default=0)
    return max(edge, widest_gap // 2)


def rotate_left(values: Sequence[int], d: int) -> list[int]:
    """A copy of values rotated d places to the left."""
    items = list(values)
    if len(items) <= 1:
        return items
    shift = d % len(items)
    return items[shift:] + items[:shift]


def minimum_swaps(values: Sequence[int]) -> int:
    """Fewest swaps that sort a permutation of 1..n."""
    n = len(values)
    if sorted(values) != list(range(1, n + 1)):
        raise ValueError("values must be a permutation of 1..n")
    seen = [False] * n
    swaps = 0
    for start in range(n):
        length = 0
        position = start
        while not seen[position]:
            seen[position] = True
            position = values[position] - 1
            length += 1
        if length:
            swaps += length - 1
    return swaps


def ransom_note(magazine: Iterable[str], ransom: Iterable[str]) -> bool:
    """Whether every word of the note can be cut from the magazine, each word used once."""
    available = Counter(magazine)
    needed = Counter(ransom)
    return all(available[word] >= count for word, count in needed.items())
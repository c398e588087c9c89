"""Sorting drills: swap and inversion counts, queue bribes and string permutations."""

from __future__ import annotations

from typing import Iterator, Sequence


class TooChaoticError(ValueError):
    """Raised when a queue needs someone to have bribed more than two people."""


def bubble_sort_swaps(values: Sequence[int]) -> int:
    """Number of adjacent swaps bubble sort makes to sort values."""
    items = list(values)
    swaps = 0
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swaps += 1
                swapped = True
        if not swapped:
            break
    return swaps


def _merge(first: list[int], second: list[int]) -> tuple[list[int], int]:
    merged: list[int] = []
    inversions = 0
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] <= second[j]:
            merged.append(first[i])
            i += 1
        else:
            inversions += len(first) - i
            merged.append(second[j])
            j += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    return merged, inversions


def _merge_sort(items: list[int]) -> tuple[list[int], int]:
    if len(items) <= 1:
        return items, 0
    mid = (len(items) + 1) // 2
    left, left_count = _merge_sort(items[:mid])
    right, right_count = _merge_sort(items[mid:])
    merged, cross = _merge(left, right)
    return merged, left_count + right_count + cross


def merge_sort_inversions(values: Sequence[int]) -> tuple[list[int], int]:
    """Sorted copy of values together with the number of inversions it had."""
    return _merge_sort(list(values))


def _check_chaos(queue: Sequence[int]) -> None:
    for position, sticker in enumerate(queue):
        if sticker - position - 1 > 2:
            raise TooChaoticError("Too chaotic")


def minimum_bribes(queue: Sequence[int]) -> int:
    """Fewest bribes that produce queue from 1..n, looking only where a briber can reach."""
    _check_chaos(queue)
    return sum(
        1
        for position, sticker in enumerate(queue)
        for earlier in queue[max(sticker - 2, 0):position]
        if earlier > sticker
    )


def minimum_bribes_bubble(queue: Sequence[int]) -> int:
    """Fewest bribes that produce queue, counted as bubble-sort swaps."""
    _check_chaos(queue)
    return bubble_sort_swaps(queue)


def minimum_bribes_merge(queue: Sequence[int]) -> int:
    """Fewest bribes that produce queue, counted as merge-sort inversions."""
    _check_chaos(queue)
    return merge_sort_inversions(queue)[1]


def permutations(text: str) -> list[str]:
    """All arrangements of text, built by inserting each next character at every position."""
    if len(text) <= 1:
        return [text]

    def extend(current: str) -> Iterator[str]:
        if len(current) == len(text):
            yield current
            return
        ch = text[len(current)]
        yield from extend(ch + current)
        for i in range(1, len(current)):
            yield from extend(current[:i] + ch + current[i:])
        yield from extend(current + ch)

    return list(extend(text[0]))
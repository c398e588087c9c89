"""Text patterns of numbers and stars, returned as lists of output lines."""

from __future__ import annotations


def _spaced(values) -> str:
    return "".join(f"{v} " for v in values)


def _tabbed(values) -> str:
    return "".join(f"{v}\t" for v in values)


def hourglass(n: int) -> list[str]:
    """Numbers shrinking towards a single 0 and growing back out again."""
    top = [
        "  " * (line - 1)
        + _spaced(range(n - line + 1, -1, -1))
        + _spaced(range(1, n - line + 2))
        for line in range(1, n + 1)
    ]
    middle = "  " * n + "0"
    bottom = [
        "  " * (n - line) + _spaced(range(line, -1, -1)) + _spaced(range(1, line + 1))
        for line in range(1, n + 1)
    ]
    return [*top, middle, *bottom]


def inverted_hourglass(n: int) -> list[str]:
    """Numbers growing in from both sides to a full middle row, then receding."""
    top = [
        _spaced(range(n, n - line, -1))
        + "  " * (2 * n + 1 - 2 * line)
        + _spaced(range(n - line + 1, n + 1))
        for line in range(1, n + 1)
    ]
    middle = _spaced(range(n, 0, -1)) + "0 " + _spaced(range(1, n + 1))
    bottom = [
        _spaced(range(n, line - 1, -1))
        + "  " * (2 * line - 1)
        + _spaced(range(line, n + 1))
        for line in range(1, n + 1)
    ]
    return [*top, middle, *bottom]


def magic(n: int) -> list[str]:
    """A block of stars with a diamond-shaped hole in the middle."""
    width = 2 * n - 1

    def row(offset: int) -> str:
        begin, end = n - offset, n - 2 + offset
        return "".join(" " if begin <= k <= end else "*" for k in range(width))

    offsets = [*range(n), *range(n - 2, -1, -1)]
    return [row(offset) for offset in offsets]


def mountain(n: int) -> list[str]:
    """Rows of 1..n..1 with a gap that narrows towards the last row."""
    lines = []
    for line in range(1, n + 1):
        begin, end = line + 1, 2 * n - 1 - line
        lines.append(
            "".join(
                "\t" if begin <= s <= end else f"{min(s, 2 * n - s)}\t"
                for s in range(1, 2 * n)
            )
        )
    return lines


def numbers_and_stars(n: int) -> list[str]:
    """Counting runs that shorten while a run of stars lengthens by two."""
    return [
        _spaced(range(1, n - line + 2)) + "* " * max(0, 2 * line - 3)
        for line in range(1, n + 1)
    ]


def numbers_and_stars_ascending(n: int) -> list[str]:
    """Digits 1..line followed by stars padding each row to n characters."""
    return [
        "".join(str(v) for v in range(1, line + 1)) + "*" * (n - line)
        for line in range(1, n + 1)
    ]


def number_ladder(n: int) -> list[str]:
    """Consecutive integers laid out one more per row."""
    lines = []
    start = 1
    for line in range(1, n + 1):
        lines.append(_tabbed(range(start, start + line)))
        start += line
    return lines


def _pyramid_row(n: int, line: int) -> str:
    return (
        "\t" * (n - line)
        + _tabbed(range(line, 2 * line))
        + _tabbed(range(2 * line - 2, line - 1, -1))
    )


def triangle(n: int) -> list[str]:
    """A centred pyramid whose row k reads k..2k-1..k."""
    return [_pyramid_row(n, line) for line in range(1, n + 1)]


def rhombus(n: int) -> list[str]:
    """The pyramid of triangle() mirrored below its widest row."""
    lines = [*range(1, n + 1), *range(n - 1, 0, -1)]
    return [_pyramid_row(n, line) for line in lines]


def with_zeros(n: int) -> list[str]:
    """Row k holds k entries: k at both ends and zeros between."""
    return [
        _tabbed(line if k in (1, line) else 0 for k in range(1, line + 1))
        for line in range(1, n + 1)
    ]
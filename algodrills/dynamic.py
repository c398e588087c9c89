"""Dynamic-programming drills: minimum-cost grid path and the wine-selling problem."""

from __future__ import annotations

from functools import lru_cache
from typing import Sequence

Matrix = Sequence[Sequence[int]]


def _check_matrix(cost: Matrix) -> tuple[int, int]:
    if not cost or not cost[0]:
        raise ValueError("cost matrix must not be empty")
    return len(cost), len(cost[0])


def min_cost_recursive(cost: Matrix, i: int, j: int) -> int:
    """Cheapest cost from (0, 0) to (i, j) moving only right or down, by plain recursion."""
    if i < 0 or j < 0:
        return 0
    if i == 0 and j == 0:
        return cost[0][0]
    if i == 0:
        return cost[i][j] + min_cost_recursive(cost, i, j - 1)
    if j == 0:
        return cost[i][j] + min_cost_recursive(cost, i - 1, j)
    return cost[i][j] + min(
        min_cost_recursive(cost, i - 1, j),
        min_cost_recursive(cost, i, j - 1),
    )


def min_cost_memo(cost: Matrix) -> int:
    """Cheapest cost from the top-left to the bottom-right cell, memoised top-down."""
    rows, cols = _check_matrix(cost)

    @lru_cache(maxsize=None)
    def best(i: int, j: int) -> int:
        if i == 0 and j == 0:
            return cost[0][0]
        if i == 0:
            return cost[i][j] + best(i, j - 1)
        if j == 0:
            return cost[i][j] + best(i - 1, j)
        return cost[i][j] + min(best(i - 1, j), best(i, j - 1))

    return best(rows - 1, cols - 1)


def min_cost_bottom_up(cost: Matrix) -> int:
    """Cheapest cost from the top-left to the bottom-right cell, filled row by row."""
    _check_matrix(cost)
    previous: list[int] = []
    for row in cost:
        current: list[int] = []
        for j, value in enumerate(row):
            if not previous and not current:
                current.append(value)
            elif not previous:
                current.append(current[-1] + value)
            elif not current:
                current.append(previous[0] + value)
            else:
                current.append(value + min(current[-1], previous[j]))
        previous = current
    return previous[-1]


def wine_profit_recursive(wines: Sequence[int]) -> int:
    """Best total when selling one wine per year from either end, price times year."""

    def best(left: int, right: int, day: int) -> int:
        if left > right:
            return 0
        return max(
            wines[left] * day + best(left + 1, right, day + 1),
            wines[right] * day + best(left, right - 1, day + 1),
        )

    return best(0, len(wines) - 1, 1)


def wine_profit_memo(wines: Sequence[int]) -> int:
    """Best wine-selling total, memoised over the remaining interval."""
    n = len(wines)

    @lru_cache(maxsize=None)
    def best(left: int, right: int) -> int:
        if left > right:
            return 0
        day = n - (right - left)
        return max(
            wines[left] * day + best(left + 1, right),
            wines[right] * day + best(left, right - 1),
        )

    return best(0, n - 1)


def wine_profit_bottom_up(wines: Sequence[int]) -> int:
    """Best wine-selling total, computed over intervals from short to long."""
    n = len(wines)
    if n == 0:
        return 0
    table = [[0] * n for _ in range(n)]
    for i in range(n - 1, -1, -1):
        for j in range(i, n):
            day = n - (j - i)
            take_left = table[i + 1][j] if i + 1 <= j else 0
            take_right = table[i][j - 1] if j - 1 >= i else 0
            table[i][j] = max(take_left + wines[i] * day, take_right + wines[j] * day)
    return table[0][n - 1]
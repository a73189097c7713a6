"""Grid, digit and sequence exercises of intermediate difficulty."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import groupby

_SCORE_RANGE = range(101)
_SMALL_PRIMES = (2, 3, 5, 7, 11)


def most_frequent_score(scores: Iterable[int]) -> int:
    """Return the score from 0 to 100 seen most often; ties go to the higher score.

    Raises ``ValueError`` for a score outside 0..100.
    """
    counts: Counter[int] = Counter()
    for score in scores:
        if score not in _SCORE_RANGE:
            raise ValueError(f"score out of range 0..100: {score}")
        counts[score] += 1
    return max(_SCORE_RANGE, key=lambda score: (counts[score], score))


def last_number_seen(n: int) -> int:
    """Return the first multiple ``k * n`` at which every digit 0-9 has appeared.

    Digits are collected from ``n``, ``2n``, ``3n`` and so on.  Raises
    ``ValueError`` for ``n`` below 1, for which the digits never all appear.
    """
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    seen: set[str] = set()
    multiple = 0
    while len(seen) < 10:
        multiple += n
        seen.update(str(multiple))
    return multiple


def max_profit(prices: Sequence[int]) -> int:
    """Return the best total profit from buying one unit a day and selling at peaks."""
    if not prices:
        return 0
    peak = prices[-1]
    total = 0
    for price in reversed(prices):
        if peak >= price:
            total += peak - price
        else:
            peak = price
    return total


def factor_counts(n: int) -> tuple[int, int, int, int, int]:
    """Return the exponents of 2, 3, 5, 7 and 11 in ``n``.

    Raises ``ValueError`` when ``n`` is below 1 or has any other prime factor.
    """
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    remaining = n
    exponents = []
    for prime in _SMALL_PRIMES:
        count = 0
        while remaining % prime == 0:
            remaining //= prime
            count += 1
        exponents.append(count)
    if remaining != 1:
        raise ValueError(f"{n} has a prime factor other than 2, 3, 5, 7 and 11")
    return tuple(exponents)  # type: ignore[return-value]


def snail(n: int) -> list[list[int]]:
    """Return an ``n`` by ``n`` grid filled 1, 2, 3, ... clockwise from the top left."""
    if n < 0:
        raise ValueError(f"size must not be negative, got {n}")
    grid = [[0] * n for _ in range(n)]
    row, col = 0, 0
    d_row, d_col = 0, 1
    for value in range(1, n * n + 1):
        grid[row][col] = value
        next_row, next_col = row + d_row, col + d_col
        if not (0 <= next_row < n and 0 <= next_col < n) or grid[next_row][next_col]:
            d_row, d_col = d_col, -d_row
            next_row, next_col = row + d_row, col + d_col
        row, col = next_row, next_col
    return grid


def _open_run_lengths(line: Iterable[int]) -> Iterable[int]:
    for is_open, cells in groupby(line, key=lambda cell: cell == 1):
        if is_open:
            yield sum(1 for _ in cells)


def count_word_slots(grid: Sequence[Sequence[int]], k: int) -> int:
    """Count horizontal and vertical runs of open cells (1) exactly ``k`` long."""
    lines = [*grid, *zip(*grid)]
    return sum(1 for line in lines for length in _open_run_lengths(line) if length == k)


def alternating_sum(n: int) -> int:
    """Return 1 - 2 + 3 - 4 ... up to ``n``."""
    return sum(value if value % 2 else -value for value in range(1, n + 1))


def max_fly_kill(grid: Sequence[Sequence[int]], m: int) -> int:
    """Return the largest sum of any ``m`` by ``m`` square in the grid, at least 0."""
    height = len(grid)
    width = len(grid[0]) if grid else 0
    best = 0
    for top in range(height - m + 1):
        for left in range(width - m + 1):
            total = sum(sum(row[left:left + m]) for row in grid[top:top + m])
            best = max(best, total)
    return best
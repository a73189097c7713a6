"""Warm-up exercises: simple loops, digits, dates and small aggregates."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_DAYS_IN_MONTH = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def countdown(n: int) -> list[int]:
    """Return the integers from ``n`` down to 0 inclusive."""
    return list(range(n, -1, -1))


def diagonal_pattern(size: int = 5) -> list[str]:
    """Return ``size`` rows of '+' with '#' on the main diagonal."""
    return ["".join("#" if col == row else "+" for col in range(size)) for row in range(size)]


def alphabet_positions(text: str) -> list[int]:
    """Map each upper-case letter to its position in the alphabet (A is 1)."""
    return [ord(char) - 64 for char in text]


def format_date(text: str) -> str | None:
    """Format an eight-digit ``YYYYMMDD`` string as ``YYYY/MM/DD``.

    Returns ``None`` when the month or day is out of range.  Raises
    ``ValueError`` when the text is too short or the month or day is not
    numeric.
    """
    if len(text) < 8:
        raise ValueError(f"date needs 8 characters, got {len(text)}: {text!r}")
    year, month, day = text[0:4], text[4:6], text[6:8]
    m = int(month)
    d = int(day)
    if 1 <= m <= 12 and d <= 31 and d <= _DAYS_IN_MONTH[m]:
        return f"{year}/{month}/{day}"
    return None


def digit_sum(n: int) -> int:
    """Return the sum of the decimal digits of a positive integer (0 otherwise)."""
    total = 0
    while n > 0:
        n, digit = divmod(n, 10)
        total += digit
    return total


def median(values: Iterable[int]) -> int:
    """Return the middle element of the sorted values."""
    ordered = sorted(values)
    if not ordered:
        raise ValueError("median of an empty sequence")
    return ordered[len(ordered) // 2]


def maximum(values: Iterable[int]) -> int:
    """Return the largest value, never less than 0."""
    return max([0, *values])


def compare(a: int, b: int) -> str:
    """Return '>', '=' or '<' describing how ``a`` relates to ``b``."""
    if a > b:
        return ">"
    if a == b:
        return "="
    return "<"


def rounded_average(values: Sequence[int]) -> int:
    """Return the mean of the values, rounded half away from zero."""
    if not values:
        raise ValueError("average of an empty sequence")
    total = sum(values)
    count = len(values)
    sign = -1 if total < 0 else 1
    quotient, remainder = divmod(abs(total), count)
    if 2 * remainder >= count:
        quotient += 1
    return sign * quotient


def odd_sum(values: Iterable[int]) -> int:
    """Return the sum of the odd values."""
    return sum(value for value in values if value % 2 != 0)
"""Building view exercise."""

from __future__ import annotations

from collections.abc import Sequence


def view_count(heights: Sequence[int]) -> int:
    """Count floors that have open view on both sides.

    A floor of a building has a view when no building within two places
    to the left or right reaches it.  The first and last two positions are
    never counted.
    """
    total = 0
    for index in range(2, len(heights) - 2):
        neighbours = max(
            heights[index - 2],
            heights[index - 1],
            heights[index + 1],
            heights[index + 2],
        )
        if heights[index] > neighbours:
            total += heights[index] - neighbours
    return total
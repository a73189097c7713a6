import pytest

from drillbook.level3 import view_count


def test_worked_example():
    assert view_count([0, 0, 254, 185, 76, 227, 84, 175, 0, 0]) == 111


def test_single_tower_sees_everything():
    assert view_count([0, 0, 42, 0, 0]) == 42


@pytest.mark.parametrize("heights", [[], [5], [0, 9, 0], [0, 0, 9, 0]])
def test_too_short_has_no_view(heights):
    assert view_count(heights) == 0


def test_flat_row_has_no_view():
    assert view_count([10] * 12) == 0


def test_edges_never_count():
    assert view_count([50, 50, 0, 0, 0, 50, 50]) == 0
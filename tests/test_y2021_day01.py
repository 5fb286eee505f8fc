import pytest

from adventsolve.y2021_day01 import count_increases

EXAMPLE = "199\n200\n208\n210\n200\n207\n240\n269\n260\n263\n"


def test_example_single():
    assert count_increases(EXAMPLE, 1) == 7


def test_example_window():
    assert count_increases(EXAMPLE, 3) == 5


def test_decreasing_never_increases():
    assert count_increases("5\n4\n3\n2\n1\n", 1) == 0
    assert count_increases("5\n4\n3\n2\n1\n", 3) == 0


def test_too_few_measurements():
    assert count_increases("1\n2\n", 3) == 0


def test_invalid_window():
    with pytest.raises(ValueError):
        count_increases(EXAMPLE, 0)
import pytest

from adventsolve.y2022_day01 import top_calories

EXAMPLE = (
    "1000\n2000\n3000\n\n4000\n\n5000\n6000\n\n7000\n8000\n9000\n\n10000\n"
)


def test_example_top_one():
    assert top_calories(EXAMPLE, 1) == 24000


def test_example_top_three():
    assert top_calories(EXAMPLE, 3) == 45000


def test_more_elves_than_exist_sums_everything():
    lines = [line for line in EXAMPLE.split("\n") if line]
    assert top_calories(EXAMPLE, 100) == sum(int(line) for line in lines)


def test_top_is_monotonic():
    totals = [top_calories(EXAMPLE, n) for n in range(6)]
    assert totals == sorted(totals)
    assert totals[0] == 0


def test_negative_raises():
    with pytest.raises(ValueError):
        top_calories(EXAMPLE, -1)


def test_bad_number_raises():
    with pytest.raises(ValueError):
        top_calories("100\nabc\n", 1)
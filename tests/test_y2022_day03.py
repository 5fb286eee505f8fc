import pytest

from adventsolve.y2022_day03 import badge_priorities, priority, shared_item_priorities

EXAMPLE = (
    "vJrwpWtwJgWrhcsFMMfFFhFp\n"
    "jqHRNqRjqzjGDLGLrGLsFMfFZSrLrFZsSL\n"
    "PmmdzqPrVvPwwTWBwg\n"
    "wMqvLMZHhHMvwLHjbvcjnnSBnvTQFn\n"
    "ttgJtRGJQctTZtZT\n"
    "CrZsJsPPZsGzwwsLwLmpwMDw\n"
)


def test_example_badges():
    assert badge_priorities(EXAMPLE) == 70


@pytest.mark.parametrize("item,expected", [("a", 1), ("A", 27)])
def test_priority_pins(item, expected):
    assert priority(item) == expected


def test_priorities_are_consecutive():
    lower = [priority(chr(c)) for c in range(ord("a"), ord("z") + 1)]
    upper = [priority(chr(c)) for c in range(ord("A"), ord("Z") + 1)]
    assert lower + upper == list(range(1, 53))


def test_no_shared_items_scores_zero():
    assert shared_item_priorities("abcdef\n") == 0


def test_shared_item_counted_once():
    assert shared_item_priorities("aabaac\n") == priority("a")


def test_incomplete_group_ignored():
    lines = EXAMPLE.split("\n")
    first_group = "\n".join(lines[:3])
    four_lines = "\n".join(lines[:4])
    assert badge_priorities(four_lines) == badge_priorities(first_group)
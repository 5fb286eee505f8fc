import pytest

from adventsolve.y2021_day02 import dive, dive_with_aim

EXAMPLE = "forward 5\ndown 5\nforward 8\nup 3\ndown 8\nforward 2\n"


def test_dive_example():
    assert dive(EXAMPLE) == 150


def test_dive_with_aim_example():
    assert dive_with_aim(EXAMPLE) == 900


def test_unknown_commands_are_ignored():
    noisy = "sideways 7\n" + EXAMPLE + "backward 3\n"
    assert dive(noisy) == dive(EXAMPLE)
    assert dive_with_aim(noisy) == dive_with_aim(EXAMPLE)


def test_no_depth_gives_zero():
    assert dive("forward 9\n") == 0
    assert dive_with_aim("down 4\nup 4\nforward 9\n") == 0


def test_malformed_line():
    with pytest.raises(ValueError):
        dive("forward\n")
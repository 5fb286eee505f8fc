import pytest

from adventsolve.y2022_day02 import score_by_hand, score_by_outcome

EXAMPLE = "A Y\nB X\nC Z\n"


def test_example_by_hand():
    assert score_by_hand(EXAMPLE) == 15


def test_example_by_outcome():
    assert score_by_outcome(EXAMPLE) == 12


def test_single_winning_round():
    assert score_by_hand("A Y") == 8


def test_scores_add_over_rounds():
    lines = EXAMPLE.split()
    rounds = [f"{a} {b}" for a, b in zip(lines[::2], lines[1::2])]
    assert sum(score_by_hand(r) for r in rounds) == score_by_hand(EXAMPLE)
    assert sum(score_by_outcome(r) for r in rounds) == score_by_outcome(EXAMPLE)


def test_draw_outcome_matches_same_shape():
    for opponent, response in zip("ABC", "XYZ"):
        assert score_by_outcome(f"{opponent} Y") == score_by_hand(
            f"{opponent} {response}"
        )


def test_unknown_symbol_raises():
    with pytest.raises(ValueError):
        score_by_hand("D X")
    with pytest.raises(ValueError):
        score_by_outcome("A Q")


def test_missing_column_raises():
    with pytest.raises(ValueError):
        score_by_hand("A")
import pytest

from adventsolve.y2015_day05 import count_nice1, count_nice2, is_nice1, is_nice2

NICE2_CASES = [
    ("qjhvhtzxzqqjkmpb", True),
    ("xxyxx", True),
    ("uurcxstgmygtbstg", False),
    ("ieodomkazucvgmuy", False),
]


@pytest.mark.parametrize(("word", "expected"), NICE2_CASES)
def test_is_nice2(word, expected):
    assert is_nice2(word) is expected


def test_is_nice2_short_words():
    assert is_nice2("") is False
    assert is_nice2("a") is False


@pytest.mark.parametrize("bad", ["ab", "cd", "pq", "xy"])
def test_forbidden_pair_is_never_nice1(bad):
    word = "aeiouu" + bad
    assert is_nice1("aeiouu") is True
    assert is_nice1(word) is False


def test_nice1_needs_three_vowels_and_double():
    assert is_nice1("aaa") is True
    assert is_nice1("aabb") is False
    assert is_nice1("aeiou") is False


def test_count_nice2():
    text = "\n".join(word for word, _ in NICE2_CASES) + "\n"
    assert count_nice2(text) == 2


def test_count_nice1_matches_words():
    words = ["aaa", "aabb", "aeiouu", "aeiouuab"]
    text = "\n".join(words) + "\n"
    assert count_nice1(text) == sum(is_nice1(w) for w in words)
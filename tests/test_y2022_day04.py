import pytest

from adventsolve.y2022_day04 import SectionRange, count_contained, count_overlapping

EXAMPLE = "2-4,6-8\n2-3,4-5\n5-7,7-9\n2-8,3-7\n6-6,4-6\n2-6,4-8\n"


def test_example_contained():
    assert count_contained(EXAMPLE) == 2


def test_example_overlapping():
    assert count_overlapping(EXAMPLE) == 4


def test_contains():
    assert SectionRange(2, 8).contains(SectionRange(3, 7))
    assert SectionRange(4, 6).contains(SectionRange(6, 6))
    assert not SectionRange(3, 7).contains(SectionRange(2, 8))


def test_overlaps_is_symmetric():
    a, b = SectionRange(5, 7), SectionRange(7, 9)
    assert a.overlaps_with(b) and b.overlaps_with(a)
    c, d = SectionRange(2, 4), SectionRange(6, 8)
    assert not c.overlaps_with(d) and not d.overlaps_with(c)


def test_contained_never_exceeds_overlapping():
    for line in EXAMPLE.split():
        assert count_contained(line) <= count_overlapping(line)


def test_parse():
    assert SectionRange.parse("12-34") == SectionRange(12, 34)


def test_invalid_pair_raises():
    with pytest.raises(ValueError):
        count_overlapping("2-4\n")
    with pytest.raises(ValueError):
        count_contained("2-4-5,1-2\n")
import pytest

from rustdrill.drills.primitives import (
    check_array_size,
    classify_char,
    describe_cat,
    nice_slice,
    second,
    time_greetings,
)


def test_time_greetings_morning_only():
    assert time_greetings(True, False) == ["Good morning!"]


def test_time_greetings_both_and_none():
    assert time_greetings(True, True) == ["Good morning!", "Good evening!"]
    assert time_greetings(False, False) == []


@pytest.mark.parametrize(
    "ch, expected",
    [
        ("C", "Alphabetical!"),
        ("a", "Alphabetical!"),
        ("7", "Numerical!"),
        ("!", "Neither alphabetic nor numeric!"),
    ],
)
def test_classify_char(ch, expected):
    assert classify_char(ch) == expected


def test_classify_char_rejects_strings():
    with pytest.raises(ValueError):
        classify_char("ab")


def test_check_array_size_big_enough():
    assert check_array_size("abcdefghijklmnopqrstuvwxyz" * 5) == "Wow, that's a big array!"


def test_check_array_size_too_small():
    with pytest.raises(ValueError, match="not big enough"):
        check_array_size(list(range(99)))


def test_slice_out_of_array():
    assert nice_slice([1, 2, 3, 4, 5]) == [2, 3, 4]


def test_slice_of_tuple_keeps_type():
    assert nice_slice((1, 2, 3, 4, 5)) == (2, 3, 4)


def test_slice_of_short_sequence_fails():
    with pytest.raises(IndexError):
        nice_slice([1, 2, 3])


def test_describe_cat():
    assert describe_cat(("Furry McFurson", 3.5)) == "Furry McFurson is 3.5 years old."


def test_indexing_tuple():
    assert second((1, 2, 3)) == 2
import pytest

from rustdrill.drills.move_semantics import (
    add_through_references,
    fill_vec,
    last_char,
    new_filled_vec,
    string_uppercase,
)


def test_fill_vec():
    assert fill_vec([22, 44, 66]) == [22, 44, 66, 88]


def test_fill_vec_keeps_original():
    vec0 = [22, 44, 66]
    vec1 = fill_vec(vec0)
    assert vec0 == [22, 44, 66]
    assert vec1 == [22, 44, 66, 88]


def test_new_filled_vec():
    assert new_filled_vec() == [22, 44, 66, 88]


def test_add_through_references():
    assert add_through_references(100) == 1200


def test_last_char():
    assert last_char("Rust is great!") == "!"


def test_last_char_of_empty_string():
    with pytest.raises(ValueError):
        last_char("")


def test_string_uppercase():
    assert string_uppercase("Rust is great!") == "RUST IS GREAT!"
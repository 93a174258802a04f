"""Tests for point document decoding and point selection."""

import pytest
from core.errors import InvalidDigit, InsufficientPoints, MalformedDocument
from document import (Point, load_threshold, load_points, select_points,
                      count_entries)


def test_threshold_int_and_string():
    assert load_threshold({"keys": {"n": 4, "k": 3}}) == 3
    assert load_threshold({"keys": {"k": " 3 "}}) == 3
    assert load_threshold({"keys": {"k": 3.0}}) == 3

@pytest.mark.parametrize("doc", [
    {},
    {"keys": {}},
    {"keys": 3},
    {"keys": {"k": "three"}},
    {"keys": {"k": 2.5}},
    {"keys": {"k": True}},
    {"keys": {"k": None}},
    {"keys": {"k": 0}},
    {"keys": {"k": -1}},
])
def test_threshold_malformed(doc):
    with pytest.raises(MalformedDocument):
        load_threshold(doc)

def test_document_not_object():
    with pytest.raises(MalformedDocument):
        load_threshold([1, 2, 3])
    with pytest.raises(MalformedDocument):
        load_points("points")

def test_load_points():
    doc = {
        "keys": {"n": 3, "k": 2},
        "1": {"base": "10", "value": "4"},
        "2": {"base": 2, "value": "111"},
        "3": {"base": "16", "value": "FF"},
    }
    assert load_points(doc) == [Point(1, 4), Point(2, 7), Point(3, 255)]

def test_load_points_signed_and_huge_x():
    big = str(10 ** 40)
    doc = {"keys": {"k": 1}, "-5": {"base": 10, "value": "1"},
           big: {"base": 10, "value": "2"}}
    assert load_points(doc) == [Point(-5, 1), Point(10 ** 40, 2)]

@pytest.mark.parametrize("entry", [
    {"value": "1"},
    {"base": 10},
    {"base": "ten", "value": "1"},
    {"base": 1, "value": "1"},
    {"base": 37, "value": "1"},
    {"base": 10, "value": 12},
    "12",
])
def test_load_points_malformed_entry(entry):
    with pytest.raises(MalformedDocument):
        load_points({"keys": {"k": 1}, "1": entry})

def test_load_points_non_decimal_key():
    for key in ("x", "0x10", "1.5", "1_0", ""):
        with pytest.raises(MalformedDocument):
            load_points({"keys": {"k": 1}, key: {"base": 10, "value": "1"}})

def test_load_points_invalid_digit():
    with pytest.raises(InvalidDigit):
        load_points({"keys": {"k": 1}, "1": {"base": "10", "value": "1g"}})

def test_select_sorts_by_integer_x():
    pts = [Point(10, 0), Point(9, 0), Point(100, 0), Point(-2, 0)]
    assert [p.x for p in select_points(pts, 4)] == [-2, 9, 10, 100]

def test_select_beyond_machine_word():
    huge = 1 << 100
    pts = [Point(huge + 1, 0), Point(huge, 0), Point(3, 0)]
    assert [p.x for p in select_points(pts, 2)] == [3, huge]

def test_select_first_k():
    pts = [Point(x, x) for x in (5, 1, 4, 2, 3)]
    assert select_points(pts, 3) == [Point(1, 1), Point(2, 2), Point(3, 3)]

def test_select_insufficient():
    with pytest.raises(InsufficientPoints) as exc:
        select_points([Point(1, 1), Point(2, 2)], 3)
    assert exc.value.available == 2
    assert exc.value.required == 3

def test_point_immutable():
    p = Point(1, 2)
    with pytest.raises(AttributeError):
        p.x = 3

def test_load_points_decodes_only_first_k():
    doc = {
        "keys": {"k": 2},
        "9": {"base": "2", "value": "12"},
        "1": {"base": "10", "value": "3"},
        "7": "not an object",
        "2": {"base": "10", "value": "5"},
        "8": {"base": 99, "value": "1"},
    }
    assert load_points(doc, 2) == [Point(1, 3), Point(2, 5)]

def test_load_points_selected_entry_still_validated():
    doc = {"keys": {"k": 2},
           "1": {"base": "10", "value": "3"},
           "2": {"base": "2", "value": "12"},
           "9": {"base": "10", "value": "1"}}
    with pytest.raises(InvalidDigit):
        load_points(doc, 2)

def test_load_points_insufficient_before_decoding():
    doc = {"keys": {"k": 3},
           "1": {"base": "10", "value": "zz"},
           "2": {"base": "10", "value": "5"}}
    with pytest.raises(InsufficientPoints):
        load_points(doc, 3)

def test_load_points_bad_key_beyond_k():
    doc = {"keys": {"k": 1}, "1": {"base": 10, "value": "1"},
           "x": {"base": 10, "value": "2"}}
    with pytest.raises(MalformedDocument):
        load_points(doc, 1)

def test_load_points_key_over_4300_digits():
    key = "1" * 5000
    doc = {"keys": {"k": 1}, key: {"base": 10, "value": "7"}}
    [point] = load_points(doc, 1)
    assert point.x == int(key)
    assert point.y == 7

def test_count_entries():
    doc = {"keys": {"k": 1}, "1": {}, "2": {}}
    assert count_entries(doc) == 2

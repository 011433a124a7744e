import pytest

from basekit.slices import (
    cut,
    ints_to_strings,
    in_slice,
    insert,
    intersect,
    merge,
    sort_ascending,
    sort_descending,
    strings_to_ints,
    unique,
    unset,
)

A = ["a0", "b1", "a3", "c2", "d3", "e4", "a3", "d3"]
B = ["11", "22", "33", "44", "c2", "a0"]


def test_sort_descending_source_case():
    assert sort_descending(A) == ["e4", "d3", "d3", "c2", "b1", "a3", "a3", "a0"]


def test_sort_ascending_is_reverse_of_descending():
    assert sort_ascending(A) == list(reversed(sort_descending(A)))
    assert sort_ascending(A)[0] == "a0"


def test_sorting_leaves_input_unchanged():
    original = list(A)
    sort_ascending(A)
    sort_descending(A)
    assert A == original


def test_in_slice():
    assert in_slice(A, "c2")
    assert not in_slice(A, "zz")
    assert in_slice([6, 7, 8], 7)


def test_cut():
    assert cut(A, 1, 3) == ["b1", "a3", "c2"]
    assert cut(A, 6, 10) == ["a3", "d3"]
    assert cut(A, len(A), 2) == []


def test_cut_out_of_range():
    with pytest.raises(IndexError):
        cut(A, len(A) + 1, 1)
    with pytest.raises(IndexError):
        cut(A, -1, 2)


def test_merge():
    assert merge([11, 22, 33], [44, 55, 66, 77]) == [11, 22, 33, 44, 55, 66, 77]
    assert merge(A, B) == A + B


def test_unset():
    result = unset(A, 2)
    assert len(result) == len(A) - 1
    assert result == A[:2] + A[3:]
    with pytest.raises(IndexError):
        unset(A, len(A))


def test_insert():
    result = insert(A, 4, "111")
    assert result[4] == "111"
    assert unset(result, 4) == A
    assert insert([], 0, "x") == ["x"]
    with pytest.raises(IndexError):
        insert(A, len(A) + 1, "x")


def test_intersect():
    assert intersect(A, B) == ["a0", "c2"]
    assert intersect(["a", "b", "a"], ["a"]) == ["a", "a"]
    assert intersect(A, []) == []


def test_unique():
    assert unique(A) == ["a0", "b1", "a3", "c2", "d3", "e4"]
    assert unique([]) == []


def test_strings_to_ints():
    assert strings_to_ints(["11", "22", "-3", "+4"]) == [11, 22, -3, 4]
    assert strings_to_ints(["c2", "", " 5", "1.5"]) == [0, 0, 0, 0]
    assert strings_to_ints([]) == []


def test_ints_strings_round_trip():
    numbers = [11, 22, 33, -7, 0]
    assert strings_to_ints(ints_to_strings(numbers)) == numbers
    assert ints_to_strings([]) == []
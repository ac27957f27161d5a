import pytest

from drillbook.searching import (
    binary_search,
    binary_search_all,
    linear_search,
    search_ordered_matrix,
)

NUMBERS = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
UNSORTED = [8, 3, 8, 2, -4, 3, 0, 0, 1, 10]
ORDERED = [[3, 30, 38], [36, 43, 60], [40, 51, 69]]


def test_linear_search_finds_all():
    positions = linear_search(UNSORTED, 8)
    assert len(positions) == UNSORTED.count(8)
    assert all(UNSORTED[p] == 8 for p in positions)
    assert positions == sorted(positions)


def test_linear_search_missing():
    assert linear_search(NUMBERS, 11) == []


@pytest.mark.parametrize("target", NUMBERS)
def test_binary_search_present(target):
    index = binary_search(NUMBERS, target)
    assert NUMBERS[index] == target


@pytest.mark.parametrize("target", [0, 11, 5.5])
def test_binary_search_absent(target):
    assert binary_search(NUMBERS, target) is None


def test_binary_search_empty():
    assert binary_search([], 3) is None
    assert binary_search_all([], 3) == []


def test_binary_search_first_of_duplicates():
    data = sorted(UNSORTED)
    assert binary_search(data, 8) == data.index(8)


@pytest.mark.parametrize("target", sorted(set(UNSORTED)))
def test_binary_search_all_matches_linear(target):
    data = sorted(UNSORTED)
    assert binary_search_all(data, target) == linear_search(data, target)


def test_binary_search_all_missing():
    assert binary_search_all(sorted(UNSORTED), 7) == []


@pytest.mark.parametrize("target", [2, 31, 39, 70, 44])
def test_ordered_matrix_missing(target):
    assert search_ordered_matrix(ORDERED, target) is None


def test_ordered_matrix_first_column_hit():
    assert search_ordered_matrix(ORDERED, 36) == (1, 0)


def test_ordered_matrix_empty():
    assert search_ordered_matrix([], 5) is None
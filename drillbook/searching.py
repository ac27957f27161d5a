"""Linear and binary searches over lists and row-ordered matrices."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Sequence
from typing import Any


def linear_search(values: Iterable[Any], target: Any) -> list[int]:
    """Return every position at which ``target`` occurs."""
    return [index for index, value in enumerate(values) if value == target]


def binary_search(sorted_values: Sequence[Any], target: Any) -> int | None:
    """Return the first position of ``target`` in ascending data, or None."""
    index = bisect_left(sorted_values, target)
    if index < len(sorted_values) and sorted_values[index] == target:
        return index
    return None


def binary_search_all(sorted_values: Sequence[Any], target: Any) -> list[int]:
    """Return every position of ``target`` in ascending data."""
    return list(
        range(bisect_left(sorted_values, target), bisect_right(sorted_values, target))
    )


def search_ordered_matrix(
    matrix: Sequence[Sequence[Any]], target: Any
) -> tuple[int, int] | None:
    """Find ``target`` in a matrix whose rows and first column ascend.

    The candidate row is the last one whose first element does not exceed
    the target; only that row is scanned. Returns ``(row, column)`` or None.
    """
    guessed = -1
    for row_index, row in enumerate(matrix):
        if not row:
            continue
        if row[0] == target:
            return row_index, 0
        if row[0] > target:
            break
        guessed = row_index
    if guessed < 0:
        return None
    for column, value in enumerate(matrix[guessed]):
        if value == target:
            return guessed, column
    return None
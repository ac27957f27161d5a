"""Classic comparison sorts over lists of comparable values.

Every function returns a new list and leaves its input untouched.
"""

from __future__ import annotations

from bisect import insort
from collections.abc import Iterable, Sequence
from typing import Any


def _out_of_order(left: Any, right: Any, reverse: bool) -> bool:
    return left < right if reverse else left > right


def exchange_sort(values: Iterable[Any], reverse: bool = False) -> list[Any]:
    """Sort by comparing each position with every later one and swapping."""
    result = list(values)
    size = len(result)
    for i in range(size - 1):
        for j in range(i + 1, size):
            if _out_of_order(result[i], result[j], reverse):
                result[i], result[j] = result[j], result[i]
    return result


def bubble_sort(values: Iterable[Any], reverse: bool = False) -> list[Any]:
    """Sort by repeatedly swapping adjacent pairs that are out of order."""
    result = list(values)
    size = len(result)
    for settled in range(size):
        for j in range(size - 1 - settled):
            if _out_of_order(result[j], result[j + 1], reverse):
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def selection_sort(values: Iterable[Any], reverse: bool = False) -> list[Any]:
    """Sort by moving the smallest (or largest) remaining value to the front."""
    result = list(values)
    size = len(result)
    for i in range(size - 1):
        chosen = i
        for j in range(i + 1, size):
            if _out_of_order(result[chosen], result[j], reverse):
                chosen = j
        result[i], result[chosen] = result[chosen], result[i]
    return result


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort ascending by inserting each value into an already sorted prefix."""
    result: list[Any] = []
    for value in values:
        insort(result, value)
    return result


def _merge(left: Sequence[Any], right: Sequence[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Stable ascending sort by recursively splitting and merging halves."""
    items = list(values)
    if len(items) < 2:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def bottom_up_merge_sort(values: Iterable[Any]) -> list[Any]:
    """Stable ascending sort merging runs of width 1, 2, 4, ... iteratively."""
    result = list(values)
    size = len(result)
    width = 1
    while width < size:
        for start in range(0, size - 1, 2 * width):
            mid = min(start + width, size)
            end = min(start + 2 * width, size)
            result[start:end] = _merge(result[start:mid], result[mid:end])
        width *= 2
    return result


def _partition(items: list[Any], low: int, high: int, inclusive: bool) -> int:
    pivot = items[high]
    boundary = low - 1
    for j in range(low, high):
        if items[j] <= pivot if inclusive else items[j] < pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    boundary += 1
    items[boundary], items[high] = items[high], items[boundary]
    return boundary


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Ascending recursive quicksort using the last element as pivot."""
    result = list(values)

    def _sort(low: int, high: int) -> None:
        if low < high:
            pivot_index = _partition(result, low, high, inclusive=False)
            _sort(low, pivot_index - 1)
            _sort(pivot_index + 1, high)

    _sort(0, len(result) - 1)
    return result


def iterative_quick_sort(values: Iterable[Any]) -> list[Any]:
    """Ascending quicksort driven by an explicit stack of ranges."""
    result = list(values)
    if len(result) < 2:
        return result
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        pivot_index = _partition(result, low, high, inclusive=True)
        if pivot_index - 1 > low:
            pending.append((low, pivot_index - 1))
        if pivot_index + 1 < high:
            pending.append((pivot_index + 1, high))
    return result


def sort_descending(values: Iterable[Any]) -> list[Any]:
    """Sort values from largest to smallest."""
    return sorted(values, reverse=True)


def sort_strings(lines: Iterable[str], ignore_case: bool = False) -> list[str]:
    """Sort lines alphabetically.

    With ``ignore_case`` the lines are lowered first and returned lowered.
    """
    items = [line.lower() for line in lines] if ignore_case else list(lines)
    return exchange_sort(items)


def format_chain(values: Iterable[Any], symbol: str) -> str:
    """Render values right-aligned in six columns, joined by a four-column symbol."""
    return f"{symbol:>4}".join(f"{value:>6}" for value in values)
"""Integer matrix operations and property checks on lists of rows."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

Matrix = list[list[Any]]


class NotSquareError(ValueError):
    """Raised when an operation needs a square matrix and gets another shape."""


def _shape(matrix: Sequence[Sequence[Any]]) -> tuple[int, int]:
    rows = len(matrix)
    columns = len(matrix[0]) if rows else 0
    if any(len(row) != columns for row in matrix):
        raise ValueError("matrix rows must all have the same length")
    return rows, columns


def _require_square(matrix: Sequence[Sequence[Any]]) -> int:
    rows, columns = _shape(matrix)
    if rows != columns:
        raise NotSquareError(
            f"a square matrix is required, got {rows} x {columns}"
        )
    return rows


def identity(size: int) -> Matrix:
    """Return the ``size`` x ``size`` identity matrix."""
    if size < 0:
        raise ValueError("size must not be negative")
    return [[1 if row == column else 0 for column in range(size)] for row in range(size)]


def transpose(matrix: Sequence[Sequence[Any]]) -> Matrix:
    """Return the transpose: rows become columns."""
    _shape(matrix)
    return [list(column) for column in zip(*matrix)]


def multiply(left: Sequence[Sequence[Any]], right: Sequence[Sequence[Any]]) -> Matrix:
    """Return the matrix product ``left`` x ``right``."""
    left_rows, inner = _shape(left)
    right_rows, right_columns = _shape(right)
    if inner != right_rows:
        raise ValueError(
            f"cannot multiply {left_rows} x {inner} by {right_rows} x {right_columns}"
        )
    columns = transpose(right) if right_rows else []
    return [
        [sum(a * b for a, b in zip(row, column)) for column in columns]
        for row in left
    ]


def matrix_power(matrix: Sequence[Sequence[Any]], exponent: int) -> Matrix:
    """Return ``matrix`` raised to a non-negative integer ``exponent``."""
    size = _require_square(matrix)
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    result = identity(size)
    for _ in range(exponent):
        result = multiply(result, matrix)
    return result


def is_identity(matrix: Sequence[Sequence[Any]]) -> bool:
    """True if the matrix is square with ones on the diagonal and zeros elsewhere."""
    size = _require_square(matrix)
    return [list(row) for row in matrix] == identity(size)


def is_orthogonal(matrix: Sequence[Sequence[Any]]) -> bool:
    """True if the matrix times its transpose is the identity."""
    _require_square(matrix)
    return is_identity(multiply(matrix, transpose(matrix)))


def is_idempotent(matrix: Sequence[Sequence[Any]]) -> bool:
    """True if the matrix squared equals itself."""
    _require_square(matrix)
    return multiply(matrix, matrix) == [list(row) for row in matrix]


def is_involutory(matrix: Sequence[Sequence[Any]]) -> bool:
    """True if the matrix squared is the identity."""
    _require_square(matrix)
    return is_identity(multiply(matrix, matrix))


def is_nilpotent(matrix: Sequence[Sequence[Any]], index: int) -> bool:
    """True if the matrix raised to ``index`` is the zero matrix."""
    _require_square(matrix)
    if index < 1:
        raise ValueError("index must be at least 1")
    product = matrix_power(matrix, index)
    return all(value == 0 for row in product for value in row)


def is_symmetric(matrix: Sequence[Sequence[Any]]) -> bool:
    """True if the matrix equals its transpose."""
    _require_square(matrix)
    return transpose(matrix) == [list(row) for row in matrix]


def is_skew_symmetric(matrix: Sequence[Sequence[Any]]) -> bool:
    """True if the matrix equals the negation of its transpose."""
    _require_square(matrix)
    flipped = transpose(matrix)
    return all(
        value == -other
        for row, flipped_row in zip(matrix, flipped)
        for value, other in zip(row, flipped_row)
    )


def reverse_rows(matrix: Sequence[Sequence[Any]]) -> Matrix:
    """Return the matrix with its row order reversed."""
    _shape(matrix)
    return [list(row) for row in reversed(matrix)]


def rotate_anticlockwise(matrix: Sequence[Sequence[Any]]) -> Matrix:
    """Rotate a square matrix by 90 degrees anticlockwise."""
    _require_square(matrix)
    return reverse_rows(transpose(matrix))


def spiral(matrix: Sequence[Sequence[Any]]) -> list[Any]:
    """Return the elements in clockwise spiral order from the top-left corner."""
    rows, columns = _shape(matrix)
    top, bottom, left, right = 0, rows - 1, 0, columns - 1
    order: list[Any] = []
    while top <= bottom and left <= right:
        order.extend(matrix[top][left : right + 1])
        top += 1
        order.extend(matrix[row][right] for row in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            order.extend(matrix[bottom][column] for column in range(right, left - 1, -1))
            bottom -= 1
        if left <= right:
            order.extend(matrix[row][left] for row in range(bottom, top - 1, -1))
            left += 1
    return order


def snake(matrix: Sequence[Sequence[Any]]) -> list[Any]:
    """Return the elements row by row, reversing every second row."""
    _shape(matrix)
    order: list[Any] = []
    for index, row in enumerate(matrix):
        order.extend(row if index % 2 == 0 else reversed(row))
    return order


def triangle_sums(matrix: Sequence[Sequence[Any]]) -> tuple[Any, Any]:
    """Return ``(upper, lower)`` triangle sums; both include the diagonal."""
    _shape(matrix)
    upper = sum(value for i, row in enumerate(matrix) for value in row[i:])
    lower = sum(value for i, row in enumerate(matrix) for value in row[: i + 1])
    return upper, lower


def _format_row(row: Sequence[Any], width: int) -> str:
    return "".join(f"{value:>{width}}" for value in row)


def format_matrix(matrix: Sequence[Sequence[Any]], width: int = 4) -> str:
    """Render the matrix one row per line, each value right-aligned in ``width``."""
    _shape(matrix)
    return "\n".join(_format_row(row, width) for row in matrix)


def side_by_side(
    left: Sequence[Sequence[Any]], right: Sequence[Sequence[Any]], width: int = 4
) -> str:
    """Render two matrices beside each other with an arrow on the middle row."""
    _shape(left)
    _shape(right)
    if len(left) != len(right):
        raise ValueError("both matrices must have the same number of rows")
    middle = len(left) // 2
    lines = []
    for index, (left_row, right_row) in enumerate(zip(left, right)):
        gap = "    --->\t" if index == middle else "\t\t"
        lines.append(_format_row(left_row, width) + gap + _format_row(right_row, width))
    return "\n".join(lines)
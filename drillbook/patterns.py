"""Text patterns: butterflies, diamonds, pyramids and Pascal's triangle.

Each function returns the pattern as lines joined by newlines.
"""

from __future__ import annotations

from drillbook.arithmetic import pascal_row


def _require_size(value: int) -> None:
    if value < 0:
        raise ValueError(f"size must not be negative, got {value}")


def butterfly(length: int) -> str:
    """Two star wings that meet in the middle and spread apart again."""
    _require_size(length)
    lines = []
    for i in range(length):
        wing = "*" * (i + 1)
        lines.append(wing + " " * (2 * length - 2 - 2 * i) + wing)
    for i in range(length):
        wing = "*" * (length - i)
        lines.append(wing + " " * (2 * i) + wing)
    return "\n".join(lines)


def floyd(height: int) -> str:
    """Floyd's triangle: consecutive numbers, one more on each row."""
    _require_size(height)
    lines = []
    value = 1
    for row in range(1, height + 1):
        lines.append("  ".join(str(n) for n in range(value, value + row)))
        value += row
    return "\n".join(lines)


def hollow_diamond(height: int) -> str:
    """The outline of a diamond whose upper half has ``height`` rows."""
    _require_size(height)
    lines = []
    for t in range(height):
        line = " " * (height - t - 1) + "*"
        if t:
            line += " " * (2 * t - 1) + "*"
        lines.append(line)
    for b in range(height - 1, 0, -1):
        line = " " * (height - b) + "*"
        if b != 1:
            line += " " * (2 * (b - 1) - 1) + "*"
        lines.append(line)
    return "\n".join(lines)


def number_pyramid(height: int) -> str:
    """A centred pyramid whose rows count up to the row number and back down."""
    _require_size(height)
    lines = []
    for i in range(height):
        rising = "".join(str(n) for n in range(1, i + 2))
        falling = "".join(str(n) for n in range(i, 0, -1))
        lines.append(" " * (height - i - 1) + rising + falling)
    return "\n".join(lines)


def symbol_triangle(height: int, symbol: str = "*") -> str:
    """A centred triangle of ``symbol`` with odd-width rows."""
    _require_size(height)
    return "\n".join(
        " " * (height - i - 1) + symbol * (2 * i + 1) for i in range(height)
    )


def pascal_triangle(height: int) -> str:
    """Rows 0..``height`` of Pascal's triangle, left-aligned in four columns."""
    _require_size(height)
    return "\n".join(
        "".join(f"{value:<4}" for value in pascal_row(i)).rstrip()
        for i in range(height + 1)
    )


def pascal_pyramid(height: int) -> str:
    """Rows 0..``height`` of Pascal's triangle, indented into a pyramid."""
    _require_size(height)
    return "\n".join(
        "  " * (height - i + 1) + "".join(f"{value:>4}" for value in pascal_row(i))
        for i in range(height + 1)
    )
"""Conversions between decimal and binary, octal and hexadecimal notation."""

from __future__ import annotations

from collections.abc import Callable


def _require_non_negative(number: int) -> None:
    if number < 0:
        raise ValueError(f"expected a non-negative integer, got {number}")


def binary_to_decimal(binary_digits: int | str) -> int:
    """Read a number written with the digits 0 and 1 as binary.

    ``binary_digits`` may be an int such as ``1011`` or a string such as
    ``"1011"``; both give 11.
    """
    if isinstance(binary_digits, int):
        _require_non_negative(binary_digits)
    digits = str(binary_digits).strip()
    if not digits or set(digits) - {"0", "1"}:
        raise ValueError(f"not a binary number: {binary_digits!r}")
    return int(digits, 2)


def decimal_to_binary(number: int) -> int:
    """Return the binary digits of ``number`` read as a decimal int (5 -> 101)."""
    _require_non_negative(number)
    return int(format(number, "b"))


def decimal_to_octal(number: int) -> int:
    """Return the octal digits of ``number`` read as a decimal int (8 -> 10)."""
    _require_non_negative(number)
    return int(format(number, "o"))


def decimal_to_hex(number: int) -> str:
    """Return ``number`` in upper-case hexadecimal digits."""
    _require_non_negative(number)
    return format(number, "X")


def binary_string(number: int) -> str:
    """Return the binary digits of ``number``, most significant first."""
    _require_non_negative(number)
    if number == 0:
        return "0"
    stack: list[int] = []
    while number > 0:
        number, bit = divmod(number, 2)
        stack.append(bit)
    return "".join(str(bit) for bit in reversed(stack))


def bitwise_report(first: int, second: int) -> str:
    """Describe AND, OR, XOR and shifts of two integers, one result per line."""
    lines = [
        f"Bitwise & (AND) Operator : {first & second}",
        f"Bitwise |  (OR) Operator : {first | second}",
        f"Bitwise ^ (XOR) Operator : {first ^ second}",
        f"Bitwise << (Left Shift) Operator for {first} by 2 is : {first << 2}",
        f"Bitwise << (Left Shift) Operator for {second} by 2 is : {second << 2}",
        f"Bitwise >> (Right Shift) Operator for {first} by 1 is : {first >> 1}",
        f"Bitwise >> (Right Shift) Operator for {second} by 1 is : {second >> 1}",
    ]
    return "\n".join(lines)


_CONVERTERS: dict[int, Callable[[int], object]] = {
    2: decimal_to_binary,
    8: decimal_to_octal,
    16: decimal_to_hex,
}


def conversion_table(base: int, count: int = 10) -> str:
    """List 1..``count`` beside their form in ``base`` (2, 8 or 16)."""
    try:
        convert = _CONVERTERS[base]
    except KeyError:
        raise ValueError(f"unsupported base {base}; choose 2, 8 or 16") from None
    return "\n".join(f"{i:<3} =  {convert(i)}" for i in range(1, count + 1))
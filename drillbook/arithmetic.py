"""Integer arithmetic exercises: divisors, factorials, Fibonacci terms and more."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Sequence
from functools import reduce
from operator import xor
from typing import Any


def _require_positive(*numbers: int) -> None:
    if not numbers:
        raise ValueError("at least one number is required")
    for number in numbers:
        if number < 1:
            raise ValueError(f"expected a positive integer, got {number}")


def gcd(first: int, second: int) -> int:
    """Greatest common divisor of two positive integers."""
    _require_positive(first, second)
    return math.gcd(first, second)


def lcm(*args: int) -> int:
    """Least common multiple of one or more positive integers."""
    _require_positive(*args)
    return reduce(lambda acc, value: acc * value // math.gcd(acc, value), args)


def factorial(n: int) -> int:
    """Return n! for a non-negative integer."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    return math.factorial(n)


def _check_selection(n: int, r: int) -> None:
    if n < 0 or r < 0 or r > n:
        raise ValueError(f"need 0 <= r <= n, got n={n}, r={r}")


def combinations(n: int, r: int) -> int:
    """Number of ways to choose ``r`` of ``n`` items, order ignored (nCr)."""
    _check_selection(n, r)
    return factorial(n) // (factorial(r) * factorial(n - r))


def permutations(n: int, r: int) -> int:
    """Number of ordered arrangements of ``r`` of ``n`` items (nPr)."""
    _check_selection(n, r)
    return factorial(n) // factorial(n - r)


def pascal_row(n: int) -> list[int]:
    """Row ``n`` of Pascal's triangle, counting from row 0."""
    if n < 0:
        raise ValueError("row number must not be negative")
    return [combinations(n, k) for k in range(n + 1)]


def power(base: int, exponent: int) -> int:
    """Raise ``base`` to a non-negative integer ``exponent`` by repeated product."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    return math.prod([base] * exponent)


def fibonacci(n: int) -> int:
    """The n-th Fibonacci term, where terms 0, 1 and 2 are all 1."""
    previous, current = 1, 1
    for _ in range(2, n):
        previous, current = current, previous + current
    return current


def fibonacci_series(limit: int = 89) -> list[int]:
    """Terms 1, 1, 2, ... up to and including the first one not below ``limit``."""
    series = [1, 1]
    previous, current = 1, 1
    term = 0
    while term < limit:
        term = previous + current
        series.append(term)
        previous, current = current, term
    return series


def fibonacci_between(start: int, end: int) -> list[int]:
    """Fibonacci terms within ``start``..``end`` inclusive.

    A start of 0 lists the seed terms 0 and 1 before the generated ones.
    """
    terms = [0, 1] if start == 0 else []
    first, last = 0, 1
    while last <= end:
        total = first + last
        if start <= total <= end:
            terms.append(total)
        first, last = last, total
    return terms


def is_fibonacci(number: int) -> bool:
    """True if ``number`` is a term of the Fibonacci sequence."""
    if number in (0, 1):
        return True
    previous, current = 0, 1
    total = 0
    while total <= number:
        total = previous + current
        if total == number:
            return True
        previous, current = current, total
    return False


def is_perfect(number: int) -> bool:
    """True if ``number`` equals the sum of its proper divisors."""
    if number < 1:
        return False
    return sum(d for d in range(1, number // 2 + 1) if number % d == 0) == number


def is_prime(number: int) -> bool:
    """True if ``number`` is a prime."""
    if number < 2:
        return False
    return all(number % d for d in range(2, math.isqrt(number) + 1))


def primes_up_to(limit: int) -> list[int]:
    """All primes from 2 up to ``limit`` inclusive."""
    return [n for n in range(2, limit + 1) if is_prime(n)]


def multiples_of_three(limit: int) -> list[int]:
    """Numbers from 1 to ``limit`` that are divisible by 3."""
    return list(range(3, limit + 1, 3))


def factor_pairs(number: int) -> list[tuple[int, int]]:
    """Pairs ``(big, small)`` with ``big * small == number`` and ``big >= small``.

    Pairs are ordered by descending ``big``.
    """
    if number < 1:
        return []
    return [
        (number // small, small)
        for small in range(1, math.isqrt(number) + 1)
        if number % small == 0
    ]


def second_largest(values: Iterable[Any]) -> Any | None:
    """The largest value below the maximum, or None if every value is equal."""
    items = list(values)
    if not items:
        raise ValueError("second_largest() needs at least one value")
    largest = max(items)
    return max((value for value in items if value != largest), default=None)


def sum_of_cubes(limit: int) -> int:
    """Sum of ``c ** 3`` for ``c`` from 1 to ``limit``."""
    return sum(c * c * c for c in range(1, limit + 1))


def extremes(first: Any, second: Any, third: Any) -> tuple[Any, Any]:
    """Return ``(maximum, minimum)`` of three values."""
    values = (first, second, third)
    return max(values), min(values)


def swap(first: Any, second: Any) -> tuple[Any, Any]:
    """Return the two values in exchanged order."""
    return second, first


def reverse_number(number: int) -> int:
    """Reverse the decimal digits of a positive number; non-positive gives 0."""
    reversed_digits = 0
    while number > 0:
        number, digit = divmod(number, 10)
        reversed_digits = reversed_digits * 10 + digit
    return reversed_digits


def is_palindrome_number(number: int) -> bool:
    """True if the number reads the same with its digits reversed."""
    return reverse_number(number) == number


def digit_sum(number: int) -> int:
    """Sum of the decimal digits of ``number``, ignoring its sign."""
    number = abs(number)
    total = 0
    while number > 0:
        number, digit = divmod(number, 10)
        total += digit
    return total


def is_power_of_two(number: int) -> bool:
    """True if ``number`` is 1, 2, 4, 8, ..."""
    return number >= 1 and number & (number - 1) == 0


def single_number(values: Iterable[int]) -> int:
    """The one value without a partner, when every other value appears twice."""
    return reduce(xor, values, 0)


def unpaired_values(values: Iterable[Any]) -> list[Any]:
    """Values that occur exactly once, in their original order."""
    items = list(values)
    counts = Counter(items)
    return [value for value in items if counts[value] == 1]


def intersection(first: Iterable[Any], second: Iterable[Any]) -> list[Any]:
    """Values of ``first`` that also occur in ``second``, in ``first``'s order."""
    others = list(second)
    return [value for value in first if value in others]


def reversed_values(values: Sequence[Any]) -> list[Any]:
    """A new list holding the values in reverse order."""
    return list(reversed(values))
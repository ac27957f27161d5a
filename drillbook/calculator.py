"""A small calculator that keeps a history of its first calculations."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence

HISTORY_LIMIT = 20

_MENU = (
    "\n* C A L C U L A T O R\n\n"
    "\n  1. ADD        (+)"
    "\n  2. Divide     (/)"
    "\n  3. Subtract   (-)"
    "\n  4. Multiply   (x)"
    "\n  5. Percentage (%)"
    "\n  6. Check  History"
    "\n\n  0. Close  Program"
)


def _require_numbers(numbers: Sequence[int]) -> None:
    if not numbers:
        raise ValueError("at least one number is required")


def _truncated_remainder(dividend: int, divisor: int) -> int:
    remainder = abs(dividend) % abs(divisor)
    return -remainder if dividend < 0 else remainder


class Calculator:
    """Arithmetic on integers; the first twenty results are kept as text."""

    def __init__(self) -> None:
        self._history: list[str] = []

    def _record(self, entry: str) -> None:
        if len(self._history) < HISTORY_LIMIT:
            self._history.append(entry)

    def add(self, *args: int) -> int:
        """Sum of the numbers."""
        _require_numbers(args)
        total = sum(args)
        self._record(" + ".join(str(n) for n in args) + f" = {total}")
        return total

    def subtract(self, *args: int) -> int:
        """First number minus the rest; a single number is negated."""
        _require_numbers(args)
        first, *rest = args
        result = first - sum(rest) if rest else -first
        self._record(" - ".join(str(n) for n in args) + f" = {result}")
        return result

    def multiply(self, *args: int) -> int:
        """Product of the numbers."""
        _require_numbers(args)
        product = 1
        for number in args:
            product *= number
        self._record(" x ".join(str(n) for n in args) + f" = {product}")
        return product

    def divide(self, dividend: int, divisor: int) -> tuple[float, int]:
        """Return ``(quotient, remainder)``; the remainder takes the dividend's sign."""
        if divisor == 0:
            raise ZeroDivisionError(f"can't divide by {divisor}")
        quotient = dividend / divisor
        remainder = _truncated_remainder(dividend, divisor)
        self._record(
            f"{dividend} / {divisor} = {quotient:f} & Remainder = {remainder}"
        )
        return quotient, remainder

    def percentage(self, obtained: int, total: int) -> float:
        """``obtained`` as a percentage of ``total``."""
        if total == 0:
            raise ZeroDivisionError(f"can't divide by {total}")
        percent = obtained / total * 100
        self._record(f"{obtained} / {total} = {percent:f}")
        return percent

    def history(self) -> list[str]:
        """The recorded calculations, oldest first."""
        return list(self._history)


def _read_int(prompt: str) -> int:
    while True:
        text = input(prompt)
        try:
            return int(text.strip())
        except ValueError:
            print("\ninvalid input")


def _read_numbers() -> list[int]:
    while True:
        count = _read_int("\n\nHow many numbers : ")
        if count >= 1:
            break
        print("\n  error : invalid input\n")
    print()
    return [_read_int(f"enter number ({i}) : ") for i in range(1, count + 1)]


def _read_divisor(prompt: str) -> int:
    while True:
        divisor = _read_int(prompt)
        if divisor != 0:
            return divisor
        print(f"\nCan't divided by {divisor}\n")


def _run_add(calculator: Calculator) -> None:
    numbers = _read_numbers()
    total = calculator.add(*numbers)
    listed = "".join(f"{n}," for n in numbers)
    print(f"\n\nsum of {listed} is :: {total}")


def _run_subtract(calculator: Calculator) -> None:
    numbers = _read_numbers()
    result = calculator.subtract(*numbers)
    listed = "".join(f"{n}," for n in numbers)
    print(f"\n\nSubtraction of {listed} is :: {result}")


def _run_multiply(calculator: Calculator) -> None:
    numbers = _read_numbers()
    product = calculator.multiply(*numbers)
    listed = " X ".join(str(n) for n in numbers)
    print(f"\n\nMultiplication answer of {listed} is :: {product}")


def _run_divide(calculator: Calculator) -> None:
    dividend = _read_int("\nEnter Dividend : ")
    divisor = _read_divisor("Enter devisor : ")
    quotient, remainder = calculator.divide(dividend, divisor)
    print(
        f"\nThe Quotient of {dividend}/{divisor} is : {quotient:g}"
        f" & Remainder is : {remainder}"
    )


def _run_percentage(calculator: Calculator) -> None:
    obtained = _read_int("\nEnter number : ")
    total = _read_divisor("Enter total : ")
    percent = calculator.percentage(obtained, total)
    print(f"\n{obtained}/{total} : {percent:g}%")


def _show_history(calculator: Calculator) -> None:
    entries = calculator.history()
    if not entries:
        print("\n\n\t Nothing here!\n")
        return
    print("\n")
    for entry in entries:
        print(entry)
    print()


_ACTIONS: dict[str, Callable[[Calculator], None]] = {
    "1": _run_add,
    "2": _run_divide,
    "3": _run_subtract,
    "4": _run_multiply,
    "5": _run_percentage,
    "6": _show_history,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive calculator menu until the user chooses 0."""
    parser = argparse.ArgumentParser(
        prog="drillbook-calculator",
        description="Interactive calculator with a history of results.",
    )
    parser.parse_args(argv)
    calculator = Calculator()
    try:
        while True:
            print(_MENU)
            choice = input("  ~  Enter choice:").strip()
            if choice == "0":
                return 0
            action = _ACTIONS.get(choice)
            if action is None:
                print("\n  error # invalid input\n")
                continue
            action(calculator)
    except EOFError:
        return 0
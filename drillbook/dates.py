"""Date parsing, formatting and age calculations in day/month/year terms."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Union

DateLike = Union[date, tuple[int, int, int]]

# Days per month, indexed 1..12; February is always 28 here.
_DAYS_IN_MONTH = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

_MONTH_ABBREVIATIONS = (
    "", "jan", "feb", "mar", "apr", "may", "jun",
    "jul", "aug", "sep", "oct", "nov", "dec",
)


class InvalidDateError(ValueError):
    """Raised when a date is malformed or out of range."""


@dataclass(frozen=True)
class Age:
    """An age broken into whole years, months and days."""

    years: int
    months: int
    days: int

    def __str__(self) -> str:
        return format_age(self)


def is_leap_year(year: int) -> bool:
    """True for Gregorian leap years."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def _parts(value: DateLike) -> tuple[int, int, int]:
    """Return ``(day, month, year)`` from a date or a ``(day, month, year)`` tuple."""
    if isinstance(value, date):
        return value.day, value.month, value.year
    try:
        day, month, year = value
        return int(day), int(month), int(year)
    except (TypeError, ValueError) as exc:
        raise InvalidDateError(f"expected (day, month, year), got {value!r}") from exc


def _days_before_birth_month(birth_month: int, birth_year: int) -> int:
    previous = birth_month - 1
    if previous in (4, 6, 9, 11):
        return 30
    if previous == 2:
        return 29 if is_leap_year(birth_year) else 28
    return 31


def age_on(birth: date, today: date | None = None) -> Age:
    """Age on ``today`` (the local date by default) of someone born on ``birth``.

    When the day difference is negative a month is borrowed, worth the length
    of the month before the birth month.
    """
    today = today or date.today()
    days = today.day - birth.day
    months = today.month - birth.month
    years = today.year - birth.year
    if days < 0:
        months -= 1
        days += _days_before_birth_month(birth.month, birth.year)
    if months < 0:
        years -= 1
        months += 12
    return Age(years, months, days)


def age_between(birth: DateLike, current: DateLike) -> Age:
    """Age at ``current`` of someone born on ``birth``.

    Both may be dates or ``(day, month, year)`` tuples. February always has
    28 days here; a borrowed month is worth the length of the month that
    follows the current one.
    """
    birth_day, birth_month, birth_year = _parts(birth)
    current_day, current_month, current_year = _parts(current)
    if not (1 <= birth_month <= 12 and 1 <= current_month <= 12):
        raise InvalidDateError("month must be between 1 and 12")
    if not 1 <= birth_day <= _DAYS_IN_MONTH[birth_month]:
        raise InvalidDateError(f"invalid birth day {birth_day} for month {birth_month}")
    if not 1 <= current_day <= _DAYS_IN_MONTH[current_month]:
        raise InvalidDateError(
            f"invalid current day {current_day} for month {current_month}"
        )
    if (birth_year, birth_month, birth_day) > (current_year, current_month, current_day):
        raise InvalidDateError("birth date is after the current date")

    years = current_year - birth_year
    if birth_day <= current_day:
        days = current_day - birth_day
        if birth_month > current_month:
            years -= 1
            current_month += 12
        months = current_month - birth_month
    else:
        borrowed = _DAYS_IN_MONTH[current_month % 12 + 1]
        days = current_day + borrowed - birth_day
        if birth_month < current_month:
            months = current_month - birth_month - 1
        else:
            months = current_month + 12 - birth_month - 1
            years -= 1
    return Age(years, months, days)


def format_age(age: Age) -> str:
    """Render an age as ``YY/MM/DD`` with each field zero-padded to two digits."""
    return f"{age.years:02d}/{age.months:02d}/{age.days:02d}"


def today_string(today: date | None = None, short_year: bool = False) -> str:
    """Render ``today`` (the local date by default) as ``dd/mm/yyyy`` or ``dd/mm/yy``."""
    today = today or date.today()
    return today.strftime("%d/%m/%y" if short_year else "%d/%m/%Y")


def split_date(text: str) -> tuple[int, int, int]:
    """Split ``dd/mm/yyyy`` text into ``(day, month, year)``."""
    pieces = text.strip().split("/")
    if len(pieces) != 3:
        raise InvalidDateError(f"expected dd/mm/yyyy, got {text!r}")
    try:
        day, month, year = (int(piece) for piece in pieces)
    except ValueError as exc:
        raise InvalidDateError(f"expected dd/mm/yyyy, got {text!r}") from exc
    return day, month, year


def parse_compact_date(number: int) -> tuple[int, int, int]:
    """Split an integer written as ``yyyymmdd`` into ``(day, month, year)``."""
    if number <= 0:
        raise InvalidDateError("invalid date")
    year, rest = divmod(number, 10000)
    month, day = divmod(rest, 100)
    return day, month, year


def parse_digits_date(text: str) -> tuple[int, int, int]:
    """Split ``ddmmyyyy`` digits into ``(day, month, year)``."""
    text = text.strip()
    if not text:
        raise InvalidDateError("invalid date (no entry)")
    try:
        return int(text[0:2]), int(text[2:4]), int(text[4:])
    except ValueError as exc:
        raise InvalidDateError(f"expected ddmmyyyy digits, got {text!r}") from exc


def month_number(name: str) -> int:
    """Number (1-12) of the first month whose three-letter name contains ``name``."""
    wanted = name.strip().lower()
    if not wanted:
        raise InvalidDateError("month name is empty")
    for number, abbreviation in enumerate(_MONTH_ABBREVIATIONS):
        if number and wanted in abbreviation:
            return number
    raise InvalidDateError(f"unknown month {name!r}")


def parse_month_day_year(text: str) -> tuple[int, int, int]:
    """Parse text such as ``"Mar 23 2004"`` into ``(day, month, year)``."""
    pieces = text.split()
    if len(pieces) != 3:
        raise InvalidDateError(f"expected 'Mon dd yyyy', got {text!r}")
    month_name, day_text, year_text = pieces
    try:
        day, year = int(day_text), int(year_text)
    except ValueError as exc:
        raise InvalidDateError(f"expected 'Mon dd yyyy', got {text!r}") from exc
    return day, month_number(month_name), year
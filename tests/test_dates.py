from datetime import date

import pytest

from drillbook.dates import (
    Age,
    InvalidDateError,
    age_between,
    age_on,
    format_age,
    is_leap_year,
    month_number,
    parse_compact_date,
    parse_digits_date,
    parse_month_day_year,
    split_date,
    today_string,
)


@pytest.mark.parametrize(
    "year, expected",
    [(2000, True), (1900, False), (2024, True), (2023, False)],
)
def test_is_leap_year(year, expected):
    assert is_leap_year(year) is expected


def test_age_on_birthday_has_no_months_or_days():
    assert age_on(date(2000, 5, 10), date(2020, 5, 10)) == Age(20, 0, 0)


def test_age_on_borrows_length_of_month_before_birth_month():
    # Birth month March: the month before is February of a leap year (29 days).
    assert age_on(date(2000, 3, 20), date(2010, 3, 10)) == Age(9, 11, 19)


def test_age_on_defaults_to_today():
    assert age_on(date.today()) == Age(0, 0, 0)


def test_age_between_same_day_and_month():
    age = age_between((15, 6, 1990), (15, 6, 2000))
    assert (age.months, age.days) == (0, 0)
    assert age.years == 2000 - 1990


def test_age_between_borrowing_case():
    assert age_between((20, 1, 2000), (10, 3, 2024)) == Age(24, 1, 20)


def test_age_between_accepts_dates_and_tuples_alike():
    assert age_between(date(1995, 8, 30), date(2021, 2, 3)) == age_between(
        (30, 8, 1995), (3, 2, 2021)
    )


@pytest.mark.parametrize(
    "birth, current",
    [
        ((1, 1, 2030), (1, 1, 2020)),
        ((1, 13, 2000), (1, 1, 2020)),
        ((29, 2, 2000), (1, 1, 2020)),
        ((1, 1, 2000), (32, 1, 2020)),
        ((20, 3, 2020), (10, 3, 2020)),
        ((1, 5, 2020), (1, 3, 2020)),
    ],
)
def test_age_between_rejects_invalid_input(birth, current):
    with pytest.raises(InvalidDateError):
        age_between(birth, current)


def test_format_age_pads_fields():
    assert format_age(Age(5, 3, 7)) == "05/03/07"
    assert str(Age(5, 3, 7)) == "05/03/07"


def test_today_string_formats():
    day = date(2004, 3, 23)
    assert today_string(day) == "23/03/2004"
    assert today_string(day, short_year=True) == "23/03/04"


def test_split_date_round_trips_today_string():
    day = date(2011, 11, 5)
    assert split_date(today_string(day)) == (day.day, day.month, day.year)


@pytest.mark.parametrize("text", ["", "12-03-2004", "aa/bb/cccc", "1/2"])
def test_split_date_rejects_bad_text(text):
    with pytest.raises(InvalidDateError):
        split_date(text)


def test_parse_compact_date():
    assert parse_compact_date(20040323) == (23, 3, 2004)


@pytest.mark.parametrize("number", [0, -20040323])
def test_parse_compact_date_rejects_non_positive(number):
    with pytest.raises(InvalidDateError):
        parse_compact_date(number)


def test_parse_digits_date():
    assert parse_digits_date("23032004") == (23, 3, 2004)


@pytest.mark.parametrize("text", ["", "ab032004", "12/03/2004"])
def test_parse_digits_date_rejects_bad_text(text):
    with pytest.raises(InvalidDateError):
        parse_digits_date(text)


def test_month_number_matches_each_abbreviation():
    names = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
             "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]
    assert [month_number(name) for name in names] == list(range(1, 13))


def test_month_number_ignores_case():
    assert month_number("DEC") == month_number("dec")


@pytest.mark.parametrize("name", ["xyz", "", "march"])
def test_month_number_rejects_unknown(name):
    with pytest.raises(InvalidDateError):
        month_number(name)


def test_parse_month_day_year():
    assert parse_month_day_year("Mar 23 2004") == (23, 3, 2004)


@pytest.mark.parametrize("text", ["Mar 23", "Mar xx 2004", "Foo 23 2004"])
def test_parse_month_day_year_rejects_bad_text(text):
    with pytest.raises(InvalidDateError):
        parse_month_day_year(text)
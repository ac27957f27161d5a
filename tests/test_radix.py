import pytest

from drillbook.radix import (
    binary_string,
    binary_to_decimal,
    bitwise_report,
    conversion_table,
    decimal_to_binary,
    decimal_to_hex,
    decimal_to_octal,
)


@pytest.mark.parametrize("number", [0, 1, 2, 5, 10, 255, 1024, 99999])
def test_binary_round_trip(number):
    assert binary_to_decimal(decimal_to_binary(number)) == number


@pytest.mark.parametrize("number", [0, 1, 7, 8, 64, 511, 4096])
def test_octal_digits_read_back(number):
    assert int(str(decimal_to_octal(number)), 8) == number


@pytest.mark.parametrize("number", [0, 9, 10, 15, 16, 255, 48879])
def test_hex_digits_read_back(number):
    text = decimal_to_hex(number)
    assert int(text, 16) == number
    assert text == text.upper()


def test_binary_from_string_and_int_agree():
    assert binary_to_decimal("1011") == binary_to_decimal(1011)
    assert binary_to_decimal("0001011") == binary_to_decimal("1011")


@pytest.mark.parametrize("number", [1, 2, 3, 17, 1000, 2**20 + 3])
def test_binary_string_matches_digit_form(number):
    assert binary_string(number) == str(decimal_to_binary(number))


def test_binary_string_zero():
    assert binary_string(0) == "0"


@pytest.mark.parametrize("bad", ["102", "", "abc", 12])
def test_binary_to_decimal_rejects_non_binary(bad):
    with pytest.raises(ValueError):
        binary_to_decimal(bad)


@pytest.mark.parametrize(
    "func", [decimal_to_binary, decimal_to_octal, decimal_to_hex, binary_string]
)
def test_negative_numbers_rejected(func):
    with pytest.raises(ValueError):
        func(-1)


def test_binary_to_decimal_rejects_negative_int():
    with pytest.raises(ValueError):
        binary_to_decimal(-101)


def _values(report):
    return [int(line.rsplit(":", 1)[1]) for line in report.splitlines()]


@pytest.mark.parametrize("first,second", [(12, 10), (7, 0), (255, 128), (3, 5)])
def test_bitwise_report_invariants(first, second):
    report = bitwise_report(first, second)
    lines = report.splitlines()
    assert len(lines) == 7
    and_, or_, xor_, left_a, left_b, right_a, right_b = _values(report)
    assert and_ + or_ == first + second
    assert xor_ == or_ - and_
    assert left_a == first * 4 and left_b == second * 4
    assert right_a == first // 2 and right_b == second // 2
    assert "(AND)" in lines[0] and "(XOR)" in lines[2]


@pytest.mark.parametrize("base", [2, 8, 16])
def test_conversion_table_reads_back(base):
    lines = conversion_table(base, 12).splitlines()
    assert len(lines) == 12
    for expected, line in enumerate(lines, start=1):
        left, right = line.split("=")
        assert int(left) == expected
        assert int(right.strip(), base) == expected


def test_conversion_table_format():
    assert conversion_table(2, 3).splitlines()[0] == "1   =  1"


def test_conversion_table_default_count():
    assert len(conversion_table(8).splitlines()) == 10


def test_conversion_table_rejects_unknown_base():
    with pytest.raises(ValueError):
        conversion_table(3)
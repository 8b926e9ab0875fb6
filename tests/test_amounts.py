import pytest

from app.amounts import (
    AmountParseError,
    canonicalize_amount,
    convert_decimal_comma,
    drop_comma_grouping,
    drop_dot_grouping,
    normalize_amount,
    strip_whitespace,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1.234", 1234.0),
        ("1.234,56", 1234.56),
        ("12,5", 12.5),
        ("12.5", 12.5),
        ("1,234.56", 1234.56),
        ("1.234.567", 1234567.0),
        ("1 234,50", 1234.5),
        ("-42", -42.0),
        ("0", 0.0),
        ("1.2345", 1.2345),
    ],
)
def test_normalize_amount(raw, expected):
    assert normalize_amount(raw) == expected


def test_three_digit_run_is_always_grouping():
    # "1,234" is never read as 1.234
    assert normalize_amount("1,234") == 1234.0
    assert normalize_amount("0,125") == 125.0


@pytest.mark.parametrize("raw", ["abc", "€100", "12abc", "nan", "inf", "1_000", "1e400"])
def test_normalize_amount_rejects_non_numeric(raw):
    with pytest.raises(AmountParseError):
        normalize_amount(raw)


def test_amount_parse_error_is_value_error():
    with pytest.raises(ValueError):
        normalize_amount("abc")


def test_empty_amount_is_zero():
    assert normalize_amount("") == 0.0
    assert normalize_amount("   ") == 0.0


def test_steps_are_independent():
    assert strip_whitespace(" 1 234 ,5\t") == "1234,5"
    assert drop_dot_grouping("1.234,56") == "1234,56"
    assert drop_dot_grouping("1.23") == "1.23"
    assert drop_comma_grouping("1,234.5") == "1234.5"
    assert drop_comma_grouping("1,2345") == "1,2345"
    assert convert_decimal_comma("1234,56") == "1234.56"
    assert convert_decimal_comma("10,555") == "10,555"


def test_canonicalize_applies_steps_in_order():
    assert canonicalize_amount("1.234.567,8") == "1234567.8"

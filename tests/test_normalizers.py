from datetime import date
from decimal import Decimal

import pytest

from statement_converter.errors import (
    MalformedAmountError,
    MalformedDateError,
    UnknownCategoryError,
)
from statement_converter.models import TransactionKind
from statement_converter.normalizers import parse_amount, parse_date, parse_kind


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("$1,234.56", "1234.56"),
        ("1234.56", "1234.56"),
        ("-$1,234.56", "-1234.56"),
        ("$-1,234.56", "-1234.56"),
        ("  $100.00 ", "100.00"),
        ("€2,000", "2000"),
        ("$1,000,000.5", "1000000.5"),
        ("($12.00)", "-12.00"),
        ("+5", "5"),
    ],
)
def test_parse_amount_strips_symbol_and_separators(raw, expected):
    assert parse_amount(raw) == expected


def test_parse_amount_is_numerically_equal_to_source():
    assert Decimal(parse_amount("$1,234.56")) == Decimal("1234.56")


@pytest.mark.parametrize("raw", ["", "   ", None, "$$100", "abc", "1e5", "NaN", "$", "-(5)"])
def test_parse_amount_rejects_non_numerals(raw):
    with pytest.raises(MalformedAmountError):
        parse_amount(raw)


def test_parse_date_exact_format():
    assert parse_date("03/14/2024") == date(2024, 3, 14)
    assert parse_date(" 01/02/2023 ") == date(2023, 1, 2)


@pytest.mark.parametrize(
    "raw",
    ["3/14/2024", "2024-03-14", "03/14/24", "13/01/2024", "02/30/2024", "", None, "03/14/2024 10:00"],
)
def test_parse_date_rejects_deviations(raw):
    with pytest.raises(MalformedDateError):
        parse_date(raw)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Buy", TransactionKind.BUY),
        ("SELL", TransactionKind.SELL),
        (" dividend ", TransactionKind.DIVIDEND),
    ],
)
def test_parse_kind_case_insensitive(raw, expected):
    assert parse_kind(raw) is expected


@pytest.mark.parametrize("raw", ["Transfer", "Unknown", "", None])
def test_parse_kind_unknown_category(raw):
    with pytest.raises(UnknownCategoryError):
        parse_kind(raw)

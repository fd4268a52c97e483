"""Field normalizers for fund-export rows.

Each helper takes the raw text of one cell and returns its typed value, or
raises a :class:`~statement_converter.errors.ConversionError` subclass. The
helpers know nothing about column names; the adapter in
:mod:`statement_converter.ingest.adapters.fund_export_csv` wires them to the
columns of a row.
"""

from __future__ import annotations

import re
from datetime import date, datetime

from .errors import MalformedAmountError, MalformedDateError, UnknownCategoryError
from .models import TransactionKind

CURRENCY_SYMBOLS = frozenset("$€£¥")
THOUSANDS_SEPARATOR = ","
DATE_FORMAT = "%m/%d/%Y"

# strptime alone accepts "1/2/2023"; the export always zero-pads.
_DATE_SHAPE = re.compile(r"\d{2}/\d{2}/\d{4}")
_NUMERAL = re.compile(r"\d+(?:\.\d*)?|\.\d+")


def parse_amount(raw: str | None) -> str:
    """Return ``raw`` as a plain decimal numeral.

    Strips one optional leading currency symbol and every thousands
    separator, keeping sign and decimal point. The digits are not re-quantized:
    ``"$1,234.5"`` becomes ``"1234.5"``. Accounting parentheses mark a
    negative amount: ``"($12.00)"`` becomes ``"-12.00"``.
    """

    if raw is None:
        raise MalformedAmountError("amount is required")
    s = raw.strip()
    if not s:
        raise MalformedAmountError("amount is empty")

    negative = False
    if s.startswith("(") and s.endswith(")"):
        negative = True
        s = s[1:-1].strip()

    sign = ""
    if s[:1] in {"-", "+"}:
        sign, s = s[0], s[1:].lstrip()
    if s[:1] in CURRENCY_SYMBOLS:
        s = s[1:].lstrip()
    # "$-12.00" puts the sign after the symbol
    if not sign and s[:1] in {"-", "+"}:
        sign, s = s[0], s[1:].lstrip()

    s = s.replace(THOUSANDS_SEPARATOR, "")
    # Plain numerals only; Decimal() would also take "NaN" and exponents.
    if not _NUMERAL.fullmatch(s):
        raise MalformedAmountError(f"invalid amount: {raw!r}")

    if negative:
        if sign == "-":
            raise MalformedAmountError(f"invalid amount: {raw!r}")
        sign = "-"
    return f"{'-' if sign == '-' else ''}{s}"


def parse_date(raw: str | None) -> date:
    """Parse an exact ``MM/DD/YYYY`` date."""

    s = (raw or "").strip()
    if not _DATE_SHAPE.fullmatch(s):
        raise MalformedDateError(f"invalid MM/DD/YYYY date: {raw!r}")
    try:
        return datetime.strptime(s, DATE_FORMAT).date()
    except ValueError as exc:
        raise MalformedDateError(f"invalid MM/DD/YYYY date: {raw!r}") from exc


def parse_kind(raw: str | None) -> TransactionKind:
    """Map a category cell (``Buy``, ``sell``, ``DIVIDEND``...) to its kind."""

    name = (raw or "").strip().upper()
    for kind in TransactionKind.known():
        if kind.name == name:
            return kind
    raise UnknownCategoryError(f"unknown transaction category: {raw!r}")


__all__ = ["parse_amount", "parse_date", "parse_kind"]

"""Adapter for mapping a fund-account CSV export to :class:`Transaction` rows.

Layout
------
- Rows 1-2: human-readable banner (account name, export timestamp). Dropped.
- Row 3: column header. Must contain at least
  ``Category, Date, Description, Amount, Fund, Shares``.
- Rows 4+: one transaction per row, matched positionally against the header.

Mapping rules
-------------
- ``kind``: ``Category`` uppercased, looked up among Buy/Sell/Dividend
- ``date``: ``Date`` as exact ``MM/DD/YYYY``
- ``description``: ``Description`` verbatim
- ``amount``: ``Amount`` without currency symbol and thousands separators
- ``security``: ``Fund`` verbatim
- ``quantity``: ``Shares`` verbatim

Failure mode
------------
The first bad row aborts the whole parse. The raised
:class:`~statement_converter.errors.ConversionError` carries the 1-based line
number of that row.
"""

from __future__ import annotations

import csv
from collections.abc import Iterable, Mapping, Sequence
from typing import TextIO

from ...errors import ConversionError, MissingColumnsError
from ...logging_setup import get_logger
from ...models import Transaction
from ...normalizers import parse_amount, parse_date, parse_kind

BANNER_ROWS = 2

REQUIRED_COLUMNS: tuple[str, ...] = (
    "Category",
    "Date",
    "Description",
    "Amount",
    "Fund",
    "Shares",
)

logger = get_logger(__name__)


def to_transaction(row: Mapping[str, str]) -> Transaction:
    """Convert one header-keyed row into a :class:`Transaction`."""

    return Transaction(
        kind=parse_kind(row.get("Category")),
        date=parse_date(row.get("Date")),
        description=row.get("Description") or "",
        amount=parse_amount(row.get("Amount")),
        security=row.get("Fund") or "",
        quantity=row.get("Shares") or "",
    )


def _check_header(header: Sequence[str], *, line: int) -> list[str]:
    # Exports occasionally pad header cells with spaces
    names = [h.strip() for h in header]
    missing = [col for col in REQUIRED_COLUMNS if col not in names]
    if missing:
        raise MissingColumnsError(
            "CSV header mismatch for fund export. Missing columns: " + ", ".join(missing),
            line=line,
        )
    return names


def parse_rows(rows: Iterable[Sequence[str]]) -> list[Transaction]:
    """Parse tokenised table rows into transactions, in input order.

    ``rows`` includes the two banner rows and the header row. A table with no
    data rows (or no header at all) yields an empty list.
    """

    header: list[str] | None = None
    out: list[Transaction] = []
    for lineno, cells in enumerate(rows, start=1):
        if lineno <= BANNER_ROWS:
            continue
        if header is None:
            header = _check_header(cells, line=lineno)
            continue
        # Skip blank lines (all values empty)
        if all((c or "").strip() == "" for c in cells):
            continue
        padded = list(cells) + [""] * (len(header) - len(cells))
        record = dict(zip(header, padded, strict=False))
        try:
            out.append(to_transaction(record))
        except ConversionError as exc:
            exc.line = lineno
            raise

    logger.debug("parsed %d transaction(s)", len(out))
    return out


def read_table(stream: TextIO, *, delimiter: str = ",") -> list[Transaction]:
    """Tokenise ``stream`` as delimited text and parse it with :func:`parse_rows`.

    ``stream`` should be opened with ``newline=''`` so quoted fields with
    embedded newlines survive.
    """

    reader = csv.reader(stream, delimiter=delimiter)
    return parse_rows(reader)


__all__ = ["BANNER_ROWS", "REQUIRED_COLUMNS", "parse_rows", "read_table", "to_transaction"]

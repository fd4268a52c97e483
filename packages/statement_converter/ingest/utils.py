"""Ingest utilities shared by the CLI and the API facade.

Exposes a single helper to load transactions from a fund-export CSV given as a
filesystem path, or from standard input when the path is ``-``.
"""

from __future__ import annotations

import sys
from os import PathLike
from pathlib import Path

from ..models import Transaction
from .adapters.fund_export_csv import read_table

STDIN_PATH = "-"


def load_transactions(
    csv_path: str | PathLike[str] | None,
    *,
    delimiter: str = ",",
) -> list[Transaction]:
    """Read a fund-export CSV and return its transactions in input order.

    ``None`` or ``"-"`` reads from ``sys.stdin``. Files are decoded as UTF-8,
    tolerating a leading byte-order mark as written by spreadsheet tools.
    """

    if csv_path is None or str(csv_path) == STDIN_PATH:
        return read_table(sys.stdin, delimiter=delimiter)

    p = Path(csv_path)
    with p.open(encoding="utf-8-sig", newline="") as f:
        return read_table(f, delimiter=delimiter)


__all__ = ["STDIN_PATH", "load_transactions"]

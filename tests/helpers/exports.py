"""Builders for fund-export CSV text used across tests."""

from __future__ import annotations

HEADER = "Category,Date,Description,Amount,Fund,Shares"
BANNER = "Account Activity,Brokerage\nDownloaded,01/05/2024 10:15 AM\n"


def make_export(*data_rows: str, header: str = HEADER) -> str:
    """Return export text: two banner rows, ``header``, then ``data_rows``."""

    return BANNER + "\n".join((header, *data_rows)) + "\n"

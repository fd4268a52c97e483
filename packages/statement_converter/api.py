"""Public API for ``statement_converter``.

Two entry points wrap parse → render:

- :func:`convert` for an already-open text stream.
- :func:`convert_file` for a filesystem path (or ``-`` for stdin).

Both read the entire input before rendering, and any error aborts the run
before a single byte of output is produced.
"""

from __future__ import annotations

from datetime import datetime
from os import PathLike
from typing import TextIO

from .config import StatementSettings
from .ingest.adapters.fund_export_csv import read_table
from .ingest.utils import load_transactions
from .logging_setup import get_logger
from .models import Transaction
from .ofx import StatementRenderer

logger = get_logger(__name__)


def _render(
    transactions: list[Transaction],
    settings: StatementSettings,
    now: datetime | None,
) -> str:
    ids = [tx.unique_id for tx in transactions]
    dupes = len(ids) - len(set(ids))
    if dupes:
        # Rows differing only in description share an id; emitted as-is.
        logger.debug("%d transaction(s) share a FITID with an earlier row", dupes)
    return StatementRenderer(settings).render(transactions, now=now)


def convert(
    stream: TextIO,
    *,
    settings: StatementSettings | None = None,
    now: datetime | None = None,
) -> str:
    """Convert a fund-export CSV stream into an OFX statement string."""

    settings = settings or StatementSettings()
    transactions = read_table(stream, delimiter=settings.delimiter)
    return _render(transactions, settings, now)


def convert_file(
    csv_path: str | PathLike[str] | None,
    *,
    settings: StatementSettings | None = None,
    now: datetime | None = None,
) -> str:
    """Convert the CSV at ``csv_path`` (``None``/``-`` for stdin) to OFX."""

    settings = settings or StatementSettings()
    transactions = load_transactions(csv_path, delimiter=settings.delimiter)
    logger.info("loaded %d transaction(s) from %s", len(transactions), csv_path or "-")
    return _render(transactions, settings, now)


__all__ = ["convert", "convert_file"]

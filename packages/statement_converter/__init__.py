"""Public interface for the ``statement_converter`` package.

Converts fund/brokerage CSV exports into OFX investment statements. This
module only re-exports the stable import surface; there is no runtime logic
here.
"""

from .api import convert, convert_file
from .config import StatementSettings
from .errors import (
    ConversionError,
    EmptyStatementError,
    MalformedAmountError,
    MalformedDateError,
    MissingColumnsError,
    UnknownCategoryError,
    UnsupportedTransactionKindError,
)
from .ingest.adapters.fund_export_csv import parse_rows, read_table
from .models import Transaction, TransactionKind, derive_unique_id
from .normalizers import parse_amount, parse_date, parse_kind
from .ofx import OfxTemplates, StatementRenderer

__all__ = [
    # API
    "convert",
    "convert_file",
    "parse_rows",
    "read_table",
    "parse_amount",
    "parse_date",
    "parse_kind",
    "derive_unique_id",
    # Rendering / config
    "OfxTemplates",
    "StatementRenderer",
    "StatementSettings",
    # Models
    "Transaction",
    "TransactionKind",
    # Errors
    "ConversionError",
    "EmptyStatementError",
    "MalformedAmountError",
    "MalformedDateError",
    "MissingColumnsError",
    "UnknownCategoryError",
    "UnsupportedTransactionKindError",
]

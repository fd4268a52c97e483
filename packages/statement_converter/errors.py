"""Exception taxonomy for ``statement_converter``.

Every failure raised while turning an export into a statement derives from
:class:`ConversionError`, a ``ValueError`` subclass, so callers can catch the
whole family at once. All of them are fatal to a run: there is no retry and no
partial output.
"""

from __future__ import annotations


class ConversionError(ValueError):
    """Base class for parse and render failures.

    ``line`` is the 1-based line of the input table that triggered the error,
    when known.
    """

    def __init__(self, message: str, *, line: int | None = None) -> None:
        super().__init__(message)
        self.line = line

    def __str__(self) -> str:
        base = super().__str__()
        return f"line {self.line}: {base}" if self.line is not None else base


# ---- Parser ------------------------------------------------------------------


class UnknownCategoryError(ConversionError):
    """The row's category matches none of Buy, Sell, Dividend."""


class MalformedDateError(ConversionError):
    """The date field is not exactly ``MM/DD/YYYY``."""


class MalformedAmountError(ConversionError):
    """The amount field is not a decimal numeral after cleanup."""


class MissingColumnsError(ConversionError):
    """The header row lacks one or more required columns."""


# ---- Renderer ----------------------------------------------------------------


class UnsupportedTransactionKindError(ConversionError):
    """A transaction whose kind has no record template reached the renderer."""


class EmptyStatementError(ConversionError):
    """Rendering was attempted with zero transactions."""


__all__ = [
    "ConversionError",
    "EmptyStatementError",
    "MalformedAmountError",
    "MalformedDateError",
    "MissingColumnsError",
    "UnknownCategoryError",
    "UnsupportedTransactionKindError",
]

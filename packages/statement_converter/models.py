"""Data models for ``statement_converter``.

A :class:`Transaction` is one parsed row of a fund/brokerage export. Instances
are frozen: they are built once by the row parser and only read afterwards by
the renderer. Collections of transactions are plain lists kept in input order.
"""

from __future__ import annotations

import hashlib
import json
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from enum import Enum


class TransactionKind(Enum):
    """Closed set of transaction kinds found in an export.

    ``UNKNOWN`` is never produced by the parser. It exists so a record built
    by hand (or by a future source) without a recognised kind has an explicit
    value the renderer refuses.
    """

    BUY = "BUY"
    SELL = "SELL"
    DIVIDEND = "DIVIDEND"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def known(cls) -> tuple[TransactionKind, ...]:
        """Kinds that can be parsed from input and rendered."""

        return (cls.BUY, cls.SELL, cls.DIVIDEND)


def derive_unique_id(
    *,
    kind: TransactionKind,
    date: date,
    amount: str,
    security: str,
    quantity: str,
) -> str:
    """Compute a stable SHA-256 identifier for a transaction.

    Fields used: kind (enum name), date (YYYY-MM-DD), amount, security,
    quantity. ``description`` is deliberately not part of the payload, so two
    rows that differ only in description share an id.
    """

    payload = {
        "kind": kind.name,
        "date": date.isoformat(),
        "amount": amount,
        "security": security,
        "quantity": quantity,
    }
    # Ensure deterministic JSON serialization
    data = json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(data.encode("utf-8")).hexdigest()


@dataclass(frozen=True, slots=True)
class Transaction:
    """A single parsed transaction row.

    Attributes
    ----------
    kind:
        Buy, sell or dividend (reinvestment).
    date:
        Trade date; no time-of-day.
    description:
        Free text copied verbatim from the export; rendered as the memo.
    amount:
        Decimal numeral as text, currency symbol and thousands separators
        removed, sign preserved (e.g. ``"-1234.56"``).
    security:
        Fund/security identifier, rendered as a CUSIP.
    quantity:
        Share count as text, copied verbatim.
    unique_id:
        Explicit identifier, or derived with :func:`derive_unique_id` when
        left empty.
    """

    kind: TransactionKind
    date: date
    description: str
    amount: str
    security: str
    quantity: str
    unique_id: str = ""

    def __post_init__(self) -> None:
        if not self.unique_id:
            object.__setattr__(
                self,
                "unique_id",
                derive_unique_id(
                    kind=self.kind,
                    date=self.date,
                    amount=self.amount,
                    security=self.security,
                    quantity=self.quantity,
                ),
            )


type Transactions = Sequence[Transaction]
"""An ordered sequence of transactions for one statement (input order)."""


__all__ = ["Transaction", "TransactionKind", "Transactions", "derive_unique_id"]

"""OFX (SGML flavour) investment statement renderer.

The renderer owns its templates: an :class:`OfxTemplates` value is built once
at import time (:data:`DEFAULT_TEMPLATES`) and handed to every
:class:`StatementRenderer`. Record templates are selected by an exhaustive
``match`` over :class:`~statement_converter.models.TransactionKind`; the
``UNKNOWN`` kind has no template and is rejected.

Sign convention for ``<TOTAL>``
-------------------------------
- ``BUY``: the stored amount negated (cash leaves the account).
- ``SELL`` and ``DIVIDEND``: the stored amount as-is.

All timestamps use ``YYYYMMDDhhmmss``; trade dates and the statement period
zero-fill the time of day.
"""

from __future__ import annotations

import html
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import assert_never

from .config import StatementSettings
from .errors import EmptyStatementError, UnsupportedTransactionKindError
from .logging_setup import get_logger
from .models import Transaction, TransactionKind, Transactions

logger = get_logger(__name__)

TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"

_HEADER = "DATA:OFXSGML\nENCODING:UTF-8\n"

_ENVELOPE = """\
<OFX>
<INVSTMTMSGSRSV1>
<INVSTMTTRNRS>
<INVSTMTRS>
<DTASOF>{generated_at}</DTASOF>
<CURDEF>{currency}</CURDEF>
<INVACCTFROM>
<BROKERID>{broker_id}</BROKERID>
<ACCTID>{account_id}</ACCTID>
</INVACCTFROM>
<INVTRANLIST><DTSTART>{start}</DTSTART><DTEND>{end}</DTEND>
{records}
</INVTRANLIST>
</INVSTMTRS>
</INVSTMTTRNRS>
</INVSTMTMSGSRSV1>
</OFX>
"""

_INVTRAN_AND_SECID = """\
<INVTRAN>
<FITID>{fitid}</FITID>
<DTTRADE>{dttrade}</DTTRADE>
<MEMO>{memo}</MEMO>
</INVTRAN>
<SECID>
<UNIQUEID>{security}</UNIQUEID>
<UNIQUEIDTYPE>CUSIP</UNIQUEIDTYPE>
</SECID>"""

_BUY = (
    "<BUYSTOCK>\n<INVBUY>\n"
    + _INVTRAN_AND_SECID
    + """
<UNITS>{units}</UNITS>
<TOTAL>{total}</TOTAL>
<SUBACCTSEC>CASH</SUBACCTSEC>
<SUBACCTFUND>CASH</SUBACCTFUND>
</INVBUY>
<BUYTYPE>BUY</BUYTYPE>
</BUYSTOCK>"""
)

_SELL = (
    "<SELLSTOCK>\n<INVSELL>\n"
    + _INVTRAN_AND_SECID
    + """
<UNITS>{units}</UNITS>
<TOTAL>{total}</TOTAL>
<SUBACCTSEC>CASH</SUBACCTSEC>
<SUBACCTFUND>CASH</SUBACCTFUND>
</INVSELL>
<SELLTYPE>SELL</SELLTYPE>
</SELLSTOCK>"""
)

_REINVEST = (
    "<REINVEST>\n"
    + _INVTRAN_AND_SECID
    + """
<INCOMETYPE>DIV</INCOMETYPE>
<TOTAL>{total}</TOTAL>
<SUBACCTSEC>CASH</SUBACCTSEC>
<UNITS>{units}</UNITS>
</REINVEST>"""
)


@dataclass(frozen=True, slots=True)
class OfxTemplates:
    """Document header, envelope, and one record template per renderable kind."""

    header: str
    envelope: str
    buy: str
    sell: str
    reinvest: str
    timestamp_format: str = TIMESTAMP_FORMAT


DEFAULT_TEMPLATES = OfxTemplates(
    header=_HEADER,
    envelope=_ENVELOPE,
    buy=_BUY,
    sell=_SELL,
    reinvest=_REINVEST,
)


def format_timestamp(value: date | datetime, fmt: str = TIMESTAMP_FORMAT) -> str:
    """Format ``value`` as ``YYYYMMDDhhmmss``; plain dates get ``000000``."""

    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    return value.strftime(fmt)


def negate_amount(amount: str) -> str:
    """Return the decimal numeral ``amount`` with its sign flipped."""

    return str(-Decimal(amount))


def _escape(text: str) -> str:
    # SGML content: only &, < and > are significant.
    return html.escape(text, quote=False)


class StatementRenderer:
    """Render transactions into one OFX investment statement.

    Parameters
    ----------
    settings:
        Account metadata for the envelope. Defaults to
        :class:`~statement_converter.config.StatementSettings` defaults.
    templates:
        Template set; :data:`DEFAULT_TEMPLATES` unless overridden.
    """

    def __init__(
        self,
        settings: StatementSettings | None = None,
        templates: OfxTemplates = DEFAULT_TEMPLATES,
    ) -> None:
        self.settings = settings or StatementSettings()
        self.templates = templates

    def render_record(self, tx: Transaction) -> str:
        """Render the single record block for ``tx``."""

        match tx.kind:
            case TransactionKind.BUY:
                template, total = self.templates.buy, negate_amount(tx.amount)
            case TransactionKind.SELL:
                template, total = self.templates.sell, tx.amount
            case TransactionKind.DIVIDEND:
                template, total = self.templates.reinvest, tx.amount
            case TransactionKind.UNKNOWN:
                raise UnsupportedTransactionKindError(
                    f"no record template for transaction kind {tx.kind.name} "
                    f"(id {tx.unique_id})"
                )
            case _:
                assert_never(tx.kind)

        return template.format(
            fitid=_escape(tx.unique_id),
            dttrade=format_timestamp(tx.date, self.templates.timestamp_format),
            memo=_escape(tx.description),
            security=_escape(tx.security),
            units=_escape(tx.quantity),
            total=total,
        )

    def render(self, transactions: Transactions, *, now: datetime | None = None) -> str:
        """Render the full document for ``transactions`` (input order kept).

        ``now`` stamps ``<DTASOF>``; the current wall-clock time when omitted.
        Raises :class:`EmptyStatementError` for an empty sequence, since the
        statement period is undefined without at least one trade date.
        """

        if not transactions:
            raise EmptyStatementError("no transactions to render")

        # An unsupported record aborts here, before the envelope is built.
        records = [self.render_record(tx) for tx in transactions]

        start = min(tx.date for tx in transactions)
        end = max(tx.date for tx in transactions)
        generated_at = now if now is not None else datetime.now()
        logger.debug(
            "rendering %d record(s) for period %s..%s", len(records), start, end
        )

        fmt = self.templates.timestamp_format
        body = self.templates.envelope.format(
            generated_at=format_timestamp(generated_at, fmt),
            currency=self.settings.currency,
            broker_id=_escape(self.settings.broker_id),
            account_id=_escape(self.settings.account_id),
            start=format_timestamp(start, fmt),
            end=format_timestamp(end, fmt),
            records="\n".join(records),
        )
        return self.templates.header + body


__all__ = [
    "DEFAULT_TEMPLATES",
    "TIMESTAMP_FORMAT",
    "OfxTemplates",
    "StatementRenderer",
    "format_timestamp",
    "negate_amount",
]

"""Statement settings for ``statement_converter``.

:class:`StatementSettings` carries the account metadata written into every
statement envelope plus the input delimiter. Values come from, in order of
precedence: explicit overrides (CLI options), environment variables, and the
defaults below. Entry points call ``load_dotenv`` first so a local ``.env``
populates the environment without overriding variables already set.

Environment variables
---------------------
- ``STATEMENT_BROKER_ID``: ``<BROKERID>`` of the statement.
- ``STATEMENT_ACCOUNT_ID``: ``<ACCTID>`` of the statement.
- ``STATEMENT_DELIMITER``: one input delimiter character (``\\t`` for tab).
"""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_BROKER_ID = "vanguard.com"
DEFAULT_ACCOUNT_ID = "Brokerage"
DEFAULT_CURRENCY = "USD"
DEFAULT_DELIMITER = ","

_ENV_KEYS = {
    "broker_id": "STATEMENT_BROKER_ID",
    "account_id": "STATEMENT_ACCOUNT_ID",
    "delimiter": "STATEMENT_DELIMITER",
}


class StatementSettings(BaseModel):
    """Immutable, validated account metadata and input options."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    broker_id: str = DEFAULT_BROKER_ID
    account_id: str = DEFAULT_ACCOUNT_ID
    currency: str = DEFAULT_CURRENCY
    delimiter: str = DEFAULT_DELIMITER

    @field_validator("broker_id", "account_id")
    @classmethod
    def _non_empty(cls, v: str) -> str:
        s = v.strip()
        if not s:
            raise ValueError("must be a non-empty string")
        return s

    @field_validator("currency")
    @classmethod
    def _iso_currency(cls, v: str) -> str:
        s = v.strip().upper()
        if len(s) != 3 or not s.isalpha():
            raise ValueError("currency must be a three-letter ISO 4217 code")
        return s

    @field_validator("delimiter", mode="before")
    @classmethod
    def _single_char(cls, v: Any) -> Any:
        if isinstance(v, str):
            # A literal tab is awkward in .env files and shell options.
            if v in {"\\t", "tab", "TAB"}:
                return "\t"
            if len(v) != 1:
                raise ValueError("delimiter must be a single character")
        return v

    @classmethod
    def from_env(cls, **overrides: Any) -> StatementSettings:
        """Build settings from the environment, then apply non-``None`` overrides."""

        values: dict[str, Any] = {}
        for field, key in _ENV_KEYS.items():
            raw = os.getenv(key)
            if raw:
                values[field] = raw
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


__all__ = [
    "DEFAULT_ACCOUNT_ID",
    "DEFAULT_BROKER_ID",
    "DEFAULT_CURRENCY",
    "DEFAULT_DELIMITER",
    "StatementSettings",
]

import pytest
from pydantic import ValidationError

from statement_converter.config import (
    DEFAULT_ACCOUNT_ID,
    DEFAULT_BROKER_ID,
    StatementSettings,
)


def test_defaults():
    s = StatementSettings.from_env()
    assert s.broker_id == DEFAULT_BROKER_ID
    assert s.account_id == DEFAULT_ACCOUNT_ID
    assert s.currency == "USD"
    assert s.delimiter == ","


def test_environment_then_overrides(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("STATEMENT_BROKER_ID", "env.example")
    monkeypatch.setenv("STATEMENT_ACCOUNT_ID", "env-acct")

    s = StatementSettings.from_env(account_id="cli-acct", delimiter=None)
    assert s.broker_id == "env.example"
    assert s.account_id == "cli-acct"
    assert s.delimiter == ","


def test_tab_delimiter_escape(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("STATEMENT_DELIMITER", "\\t")
    assert StatementSettings.from_env().delimiter == "\t"
    assert StatementSettings(delimiter="\t").delimiter == "\t"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"broker_id": "  "},
        {"account_id": ""},
        {"currency": "US"},
        {"currency": "U$D"},
        {"delimiter": ",;"},
        {"unexpected": "x"},
    ],
)
def test_invalid_settings(kwargs):
    with pytest.raises(ValidationError):
        StatementSettings(**kwargs)


def test_currency_is_uppercased_and_settings_frozen():
    s = StatementSettings(currency="usd")
    assert s.currency == "USD"
    with pytest.raises(ValidationError):
        s.currency = "EUR"

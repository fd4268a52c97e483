"""Pytest configuration and shared fixtures.

The CLI resolves settings from ``STATEMENT_*`` environment variables and from
a ``.env`` file in the working directory. To keep tests hermetic, an autouse
fixture clears those variables and moves each test into its own temporary
directory so a developer's local ``.env`` never leaks in.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from tests.helpers.exports import make_export

_ENV_VARS = (
    "STATEMENT_BROKER_ID",
    "STATEMENT_ACCOUNT_ID",
    "STATEMENT_DELIMITER",
    "STATEMENT_CONVERTER_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _isolate_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _ENV_VARS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def frozen_now() -> datetime:
    return datetime(2024, 1, 5, 10, 15, 30)


@pytest.fixture
def sample_export() -> str:
    return make_export(
        'Buy,03/01/2023,Fund purchase,"$1,000.00",ABC123,10.5',
        "Dividend,02/15/2023,Dividend reinvestment,$12.34,ABC123,0.123",
        "Sell,01/01/2023,Fund redemption,$50.00,XYZ789,1",
    )

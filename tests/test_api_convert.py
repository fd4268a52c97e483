import io
from pathlib import Path

import pytest

from statement_converter import StatementSettings, convert, convert_file
from statement_converter.errors import EmptyStatementError, UnknownCategoryError
from tests.helpers.exports import make_export

_DATA = Path(__file__).resolve().parent / "data" / "fund_export_sample.csv"


def test_convert_single_buy(frozen_now):
    text = make_export("Buy,01/02/2023,Fund purchase,$100.00,ABC123,5")
    doc = convert(io.StringIO(text, newline=""), now=frozen_now)

    assert doc.count("<BUYSTOCK>") == 1
    assert "<TOTAL>-100.00</TOTAL>" in doc
    assert "<UNITS>5</UNITS>" in doc
    assert "<DTTRADE>20230102000000</DTTRADE>" in doc


def test_convert_file_sample(frozen_now):
    doc = convert_file(_DATA, now=frozen_now)

    assert "<DTSTART>20230102000000</DTSTART><DTEND>20230301000000</DTEND>" in doc
    assert "<MEMO>Redemption, partial</MEMO>" in doc
    assert "<TOTAL>1050.00</TOTAL>" in doc
    assert "<TOTAL>12.34</TOTAL>" in doc


def test_conversion_is_deterministic_apart_from_clock(frozen_now):
    assert convert_file(_DATA, now=frozen_now) == convert_file(_DATA, now=frozen_now)


def test_duplicate_ids_are_emitted_as_is(frozen_now):
    text = make_export(
        "Buy,01/02/2023,first memo,$100.00,ABC123,5",
        "Buy,01/02/2023,second memo,$100.00,ABC123,5",
    )
    doc = convert(io.StringIO(text, newline=""), now=frozen_now)
    fitids = [part.split("</FITID>", 1)[0] for part in doc.split("<FITID>")[1:]]
    assert len(fitids) == 2
    assert fitids[0] == fitids[1]


def test_settings_flow_into_envelope(frozen_now):
    text = make_export(
        "Sell\t01/02/2023\tx\t$1.00\tA\t1",
        header="Category\tDate\tDescription\tAmount\tFund\tShares",
    )
    settings = StatementSettings(account_id="Roth", delimiter="\t")
    doc = convert(io.StringIO(text, newline=""), settings=settings, now=frozen_now)
    assert "<ACCTID>Roth</ACCTID>" in doc
    assert "<TOTAL>1.00</TOTAL>" in doc


def test_header_only_input_is_an_empty_statement():
    with pytest.raises(EmptyStatementError):
        convert(io.StringIO(make_export(), newline=""))


def test_unknown_category_aborts():
    text = make_export(
        "Buy,01/02/2023,ok,$1.00,A,1",
        "Transfer,01/03/2023,move,$5.00,A,1",
    )
    with pytest.raises(UnknownCategoryError):
        convert(io.StringIO(text, newline=""))

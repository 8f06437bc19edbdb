"""Tests for the ledger JSON mapping."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from ledger_dashboard.domain.models import AccountRecord, Amount
from ledger_dashboard.infrastructure.ledger_json import (
    parse_account_names,
    parse_accounts,
    parse_amount,
    parse_quantity,
    parse_tags,
    parse_transactions,
)


def test_parse_quantity_prefers_mantissa() -> None:
    raw = {
        "decimalMantissa": 1050,
        "decimalPlaces": 2,
        "floatingPoint": 10.499999,
    }
    assert parse_quantity(raw) == Decimal("10.50")


def test_parse_quantity_falls_back_to_floating_point() -> None:
    assert parse_quantity({"floatingPoint": 0.1}) == Decimal("0.1")
    assert parse_quantity(50000) == Decimal("50000")


def test_parse_quantity_rejects_missing_value() -> None:
    with pytest.raises(ValueError):
        parse_quantity({"decimalPlaces": 2})


def test_parse_amount() -> None:
    raw = {"acommodity": "usd", "aquantity": {"floatingPoint": -12}}
    assert parse_amount(raw) == Amount(currency="usd", quantity=Decimal("-12"))


def test_parse_tags_accepts_pairs_and_scalars() -> None:
    assert parse_tags([["txid", "a"], "flag"]) == (("txid", "a"), ("flag",))
    assert parse_tags(None) == ()


def test_parse_transactions_unwraps_register_rows_and_skips_bad_ones():
    logger = MagicMock()
    transaction = {
        "tdate": "2024-01-01",
        "tdescription": "Opening",
        "tindex": 1,
        "ttags": [],
        "tpostings": [
            {
                "paccount": "asset:bank",
                "pamount": [
                    {"acommodity": "vnd", "aquantity": {"floatingPoint": 5}}
                ],
            },
            {"paccount": "equity:opening", "pamount": []},
        ],
    }
    payload = [
        [transaction, "2024-01-01", [], []],
        {"tdescription": "no date"},
        42,
    ]

    transactions = parse_transactions(payload, logger)

    assert len(transactions) == 1
    assert transactions[0].postings[0].amounts[0].quantity == Decimal("5")
    assert not transactions[0].postings[1].has_amount
    assert logger.warning.call_count == 2


def test_parse_account_names_drops_blanks() -> None:
    assert parse_account_names(["asset", " ", "", "asset:bank"]) == [
        "asset",
        "asset:bank",
    ]


def test_parse_accounts() -> None:
    logger = MagicMock()
    payload = [
        {"aname": "asset:bank", "aparent_": "asset"},
        {"aname": "asset", "aparent_": ""},
        "expense",
        {"aparent_": "asset"},
    ]

    accounts = parse_accounts(payload, logger)

    assert accounts == [
        AccountRecord(name="asset:bank", parent_name="asset"),
        AccountRecord(name="asset", parent_name=None),
        AccountRecord(name="expense"),
    ]
    logger.warning.assert_called_once()

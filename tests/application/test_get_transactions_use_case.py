"""Tests for the GetTransactionsUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

from ledger_dashboard.application.use_cases.get_transactions import (
    GetTransactionsUseCase,
)
from ledger_dashboard.infrastructure.ledger_json import parse_transactions


def _wire_posting(account: str, quantity) -> dict:
    amounts = []
    if quantity is not None:
        amounts = [
            {"acommodity": "vnd", "aquantity": {"floatingPoint": quantity}}
        ]
    return {"paccount": account, "pamount": amounts}


def test_execute_builds_record_from_wire_transaction() -> None:
    payload = [
        {
            "tdate": "2024-03-01",
            "tdescription": "Lunch",
            "tindex": 7,
            "ttags": [["t", "tx123"]],
            "tpostings": [
                _wire_posting("expense:food", 50000),
                _wire_posting("asset:bank", 50000),
            ],
        }
    ]
    client = MagicMock()
    client.list_all_transactions.return_value = parse_transactions(
        payload,
        MagicMock(),
    )

    records = GetTransactionsUseCase(client, logger=MagicMock()).execute()

    assert len(records) == 1
    record = records[0]
    assert record.id == "tx123"
    assert record.index == 7
    assert record.category == "expense:food"
    assert record.account == "asset:bank"
    assert record.amount == Decimal("50000")
    assert record.description == "Lunch"


def test_execute_skips_malformed_transactions_and_warns() -> None:
    payload = [
        {
            "tdate": "2024-03-01",
            "tindex": 1,
            "ttags": [],
            "tpostings": [
                _wire_posting("expense:food", 1),
                _wire_posting("asset:bank", -1),
            ],
        },
        {
            "tdate": "2024-03-02",
            "tindex": 2,
            "ttags": [["txid", "ok"]],
            "tpostings": [
                _wire_posting("expense:food", 2),
                _wire_posting("asset:bank", -2),
            ],
        },
    ]
    client = MagicMock()
    client.list_all_transactions.return_value = parse_transactions(
        payload,
        MagicMock(),
    )
    logger = MagicMock()

    records = GetTransactionsUseCase(client, logger=logger).execute()

    assert [record.id for record in records] == ["ok"]
    logger.warning.assert_called_once()


def test_execute_uses_configured_tag() -> None:
    payload = [
        {
            "tdate": "2024-03-02",
            "tindex": 2,
            "ttags": [["ref", "R-9"], ["t", "other"]],
            "tpostings": [
                _wire_posting("expense:food", 2),
                _wire_posting("asset:bank", -2),
            ],
        },
    ]
    client = MagicMock()
    client.list_all_transactions.return_value = parse_transactions(
        payload,
        MagicMock(),
    )

    records = GetTransactionsUseCase(
        client,
        logger=MagicMock(),
        txid_tag="ref",
    ).execute()

    assert records[0].id == "R-9"

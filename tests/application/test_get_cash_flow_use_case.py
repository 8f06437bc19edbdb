"""Tests for the GetCashFlowUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

from ledger_dashboard.application.use_cases.get_cash_flow import (
    GetCashFlowUseCase,
)
from ledger_dashboard.domain.models import (
    Amount,
    Asset,
    Posting,
    Transaction,
)


def _transfer(date: str, source: str, target: str, quantity: str, currency):
    value = Decimal(quantity)
    return Transaction(
        index=1,
        date=date,
        description="",
        postings=(
            Posting(
                account=target,
                amounts=(Amount(currency=currency, quantity=value),),
            ),
            Posting(
                account=source,
                amounts=(Amount(currency=currency, quantity=-value),),
            ),
        ),
    )


def test_execute_sums_asset_movements_within_range() -> None:
    client = MagicMock()
    client.list_all_transactions.return_value = [
        _transfer("2024-01-05", "revenue:salary", "asset:bank", "1000", "vnd"),
        _transfer("2024-01-06", "asset:bank", "expense:food", "200", "vnd"),
        _transfer("2024-01-07", "asset:bank", "asset:cash", "300", "vnd"),
        _transfer("2024-01-08", "revenue:gift", "asset:dbs", "50", "sgd"),
        _transfer("2023-12-31", "revenue:salary", "asset:bank", "9", "vnd"),
    ]

    statement = GetCashFlowUseCase(client, logger=MagicMock()).execute(
        start_date="2024-01-01",
        end_date="2024-12-31",
    )

    assert statement.start_date == "2024-01-01"
    assert statement.end_date == "2024-12-31"
    assert statement.cash_flows == (
        Asset(name="asset:dbs", amount=Decimal("50"), currency="sgd"),
        Asset(name="asset:bank", amount=Decimal("500"), currency="vnd"),
        Asset(name="asset:cash", amount=Decimal("300"), currency="vnd"),
    )


def test_execute_without_range_includes_everything() -> None:
    client = MagicMock()
    client.list_all_transactions.return_value = [
        _transfer("1997-01-01", "equity:opening", "asset:bank", "5", "vnd"),
    ]

    statement = GetCashFlowUseCase(client, logger=MagicMock()).execute()

    assert statement.start_date == ""
    assert [item.amount for item in statement.cash_flows] == [Decimal("5")]

"""Tests for the composition root."""

from unittest.mock import MagicMock

from ledger_dashboard.application.use_cases.get_balance_sheet import (
    GetBalanceSheetUseCase,
)
from ledger_dashboard.application.use_cases.get_cash_flow import (
    GetCashFlowUseCase,
)
from ledger_dashboard.application.use_cases.get_income_statement import (
    GetIncomeStatementUseCase,
)
from ledger_dashboard.application.use_cases.get_transactions import (
    GetTransactionsUseCase,
)
from ledger_dashboard.infrastructure import container
from ledger_dashboard.infrastructure.hledger_client import HttpLedgerClient
from ledger_dashboard.infrastructure.settings import LedgerSettings


def test_build_ledger_client_uses_settings(monkeypatch) -> None:
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())
    settings = LedgerSettings(base_url="http://ledger.test", timeout=5.0)

    client = container.build_ledger_client(settings)

    assert isinstance(client, HttpLedgerClient)
    client.close()


def test_build_balance_sheet_use_case_uses_fetch_workers(monkeypatch) -> None:
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())
    settings = LedgerSettings(fetch_workers=2)

    use_case = container.build_balance_sheet_use_case(
        MagicMock(),
        settings=settings,
    )

    assert isinstance(use_case, GetBalanceSheetUseCase)
    assert use_case._max_workers == 2


def test_build_transactions_use_case_uses_txid_tag(monkeypatch) -> None:
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())

    use_case = container.build_transactions_use_case(
        MagicMock(),
        settings=LedgerSettings(txid_tag="ref"),
    )

    assert isinstance(use_case, GetTransactionsUseCase)
    assert use_case._txid_tag == "ref"


def test_builders_share_provided_client(monkeypatch) -> None:
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())
    ledger_client = MagicMock()

    income = container.build_income_statement_use_case(ledger_client)
    cash_flow = container.build_cash_flow_use_case(ledger_client)
    assets = container.build_account_assets_use_case(ledger_client)

    assert isinstance(income, GetIncomeStatementUseCase)
    assert isinstance(cash_flow, GetCashFlowUseCase)
    assert income._ledger_client is ledger_client
    assert cash_flow._ledger_client is ledger_client
    assert assets._ledger_client is ledger_client

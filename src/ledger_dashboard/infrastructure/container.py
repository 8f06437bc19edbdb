"""Composition root for wiring infrastructure adapters."""

from ledger_dashboard.application.ports.ledger_client import LedgerClientPort
from ledger_dashboard.application.use_cases.get_account_assets import (
    GetAccountAssetsUseCase,
)
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
from ledger_dashboard.infrastructure.hledger_client import HttpLedgerClient
from ledger_dashboard.infrastructure.logging.logger import get_app_logger
from ledger_dashboard.infrastructure.settings import LedgerSettings


def build_ledger_client(
    settings: LedgerSettings | None = None,
) -> LedgerClientPort:
    """Return the HTTP ledger client."""
    resolved = settings or LedgerSettings.from_env()
    return HttpLedgerClient(
        resolved.base_url,
        timeout=resolved.timeout,
        logger=get_app_logger(),
    )


def build_account_assets_use_case(
    ledger_client: LedgerClientPort | None = None,
) -> GetAccountAssetsUseCase:
    """Return the per-account balance use case."""
    return GetAccountAssetsUseCase(
        ledger_client or build_ledger_client(),
        logger=get_app_logger(),
    )


def build_balance_sheet_use_case(
    ledger_client: LedgerClientPort | None = None,
    settings: LedgerSettings | None = None,
) -> GetBalanceSheetUseCase:
    """Return the balance sheet use case."""
    resolved = settings or LedgerSettings.from_env()
    return GetBalanceSheetUseCase(
        ledger_client or build_ledger_client(resolved),
        logger=get_app_logger(),
        max_workers=resolved.fetch_workers,
    )


def build_income_statement_use_case(
    ledger_client: LedgerClientPort | None = None,
) -> GetIncomeStatementUseCase:
    """Return the income statement use case."""
    return GetIncomeStatementUseCase(
        ledger_client or build_ledger_client(),
        logger=get_app_logger(),
    )


def build_transactions_use_case(
    ledger_client: LedgerClientPort | None = None,
    settings: LedgerSettings | None = None,
) -> GetTransactionsUseCase:
    """Return the transaction list use case."""
    resolved = settings or LedgerSettings.from_env()
    return GetTransactionsUseCase(
        ledger_client or build_ledger_client(resolved),
        logger=get_app_logger(),
        txid_tag=resolved.txid_tag,
    )


def build_cash_flow_use_case(
    ledger_client: LedgerClientPort | None = None,
) -> GetCashFlowUseCase:
    """Return the cash flow use case."""
    return GetCashFlowUseCase(
        ledger_client or build_ledger_client(),
        logger=get_app_logger(),
    )


__all__ = [
    "build_ledger_client",
    "build_account_assets_use_case",
    "build_balance_sheet_use_case",
    "build_income_statement_use_case",
    "build_transactions_use_case",
    "build_cash_flow_use_case",
]

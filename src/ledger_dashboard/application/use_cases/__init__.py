"""Application use cases package."""

from .get_account_assets import GetAccountAssetsUseCase
from .get_balance_sheet import BalanceSheet, GetBalanceSheetUseCase
from .get_cash_flow import CashFlowStatement, GetCashFlowUseCase
from .get_income_statement import GetIncomeStatementUseCase, IncomeStatement
from .get_transactions import GetTransactionsUseCase, TransactionRecord

__all__ = [
    "GetAccountAssetsUseCase",
    "GetBalanceSheetUseCase",
    "BalanceSheet",
    "GetCashFlowUseCase",
    "CashFlowStatement",
    "GetIncomeStatementUseCase",
    "IncomeStatement",
    "GetTransactionsUseCase",
    "TransactionRecord",
]

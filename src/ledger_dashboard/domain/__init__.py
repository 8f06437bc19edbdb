"""Domain package for ledger reporting rules and models."""

from .constants import (
    ASSET_ROOT,
    DEFAULT_TXID_TAG,
    EXPENSE_ROOT,
    MAX_BALANCE_SHEET_LEVEL,
    MIN_BALANCE_SHEET_LEVEL,
    OPENING_BALANCE_YEAR,
    REVENUE_ROOT,
)
from .errors import InvalidArgumentError
from .models import (
    AccountBucket,
    AccountRecord,
    Amount,
    Asset,
    BalanceSheet,
    CashFlowStatement,
    Expense,
    IncomeStatement,
    Posting,
    Revenue,
    Split,
    Transaction,
    TransactionRecord,
)

__all__ = [
    "ASSET_ROOT",
    "DEFAULT_TXID_TAG",
    "EXPENSE_ROOT",
    "MAX_BALANCE_SHEET_LEVEL",
    "MIN_BALANCE_SHEET_LEVEL",
    "OPENING_BALANCE_YEAR",
    "REVENUE_ROOT",
    "InvalidArgumentError",
    "AccountBucket",
    "AccountRecord",
    "Amount",
    "Asset",
    "BalanceSheet",
    "CashFlowStatement",
    "Expense",
    "IncomeStatement",
    "Posting",
    "Revenue",
    "Split",
    "Transaction",
    "TransactionRecord",
]

"""Domain models package."""

from .ledger import AccountRecord, Amount, Posting, Transaction
from .reports import (
    AccountBucket,
    Asset,
    BalanceSheet,
    CashFlowStatement,
    Expense,
    IncomeStatement,
    Revenue,
    Split,
    TransactionRecord,
)

__all__ = [
    "AccountRecord",
    "Amount",
    "Posting",
    "Transaction",
    "AccountBucket",
    "Asset",
    "BalanceSheet",
    "CashFlowStatement",
    "Expense",
    "IncomeStatement",
    "Revenue",
    "Split",
    "TransactionRecord",
]

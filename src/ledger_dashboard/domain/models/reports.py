"""Domain models for report snapshots."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Asset:
    """Signed balance of an account in one currency."""

    name: str
    amount: Decimal
    currency: str


@dataclass(frozen=True)
class Revenue:
    """Revenue line, displayed positive."""

    name: str
    amount: Decimal
    currency: str
    date: str


@dataclass(frozen=True)
class Expense:
    """Expense line as recorded in the ledger."""

    name: str
    amount: Decimal
    currency: str
    date: str


@dataclass(frozen=True)
class AccountBucket:
    """Items collapsed under an account-name prefix.

    Attributes:
        name: Prefix made of the first ``level`` account segments.
        amount: Sum of the grouped item amounts.
        currency: Currency shared by every grouped item.
        children: Grouped items whose names are deeper than the prefix.
    """

    name: str
    amount: Decimal
    currency: str
    children: tuple = ()


@dataclass(frozen=True)
class Split:
    """Single leg of a multi-posting transaction."""

    category: str
    amount: Decimal
    currency: str


@dataclass(frozen=True)
class TransactionRecord:
    """User-facing transaction row.

    ``amount`` is positive when money leaves ``account`` and negative when
    it comes in.
    """

    index: int
    date: str
    id: str
    description: str
    amount: Decimal
    currency: str
    category: str
    account: str
    splits: tuple[Split, ...] | None = None


@dataclass(frozen=True)
class BalanceSheet:
    """Asset balances for a year. Liabilities are not modeled."""

    date: str
    assets: tuple[Asset, ...]
    liabilities: tuple[Asset, ...] = ()


@dataclass(frozen=True)
class IncomeStatement:
    """Revenues and expenses; the caller derives the date range."""

    start_date: str
    end_date: str
    revenues: tuple[Revenue, ...]
    expenses: tuple[Expense, ...]


@dataclass(frozen=True)
class CashFlowStatement:
    """Net movement of asset accounts over a period."""

    start_date: str
    end_date: str
    cash_flows: tuple[Asset, ...]


__all__ = [
    "Asset",
    "Revenue",
    "Expense",
    "AccountBucket",
    "Split",
    "TransactionRecord",
    "BalanceSheet",
    "IncomeStatement",
    "CashFlowStatement",
]

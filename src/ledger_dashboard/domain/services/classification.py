"""Domain services classifying postings into report lines."""

from ledger_dashboard.domain.constants import (
    EXPENSE_ROOT,
    OPENING_BALANCE_YEAR,
    REVENUE_ROOT,
)
from ledger_dashboard.domain.models import Expense, Revenue, Transaction
from ledger_dashboard.domain.services.accounts import root_segment


def is_in_balance_year(transaction_date: str, year: str) -> bool:
    """Return True when a transaction belongs to a balance sheet year.

    Opening balances dated in ``OPENING_BALANCE_YEAR`` are always kept.

    Args:
        transaction_date: ISO-like transaction date.
        year: Selected year as a string.
    """
    return transaction_date.startswith(
        OPENING_BALANCE_YEAR
    ) or transaction_date.startswith(year)


def is_in_date_range(
    transaction_date: str,
    start_date: str | None,
    end_date: str | None,
) -> bool:
    """Return True when an ISO date falls within the inclusive range."""
    day = transaction_date[:10]
    if start_date and day < start_date:
        return False
    if end_date and day > end_date:
        return False
    return True


def classify_transaction(
    transaction: Transaction,
) -> tuple[list[Revenue], list[Expense]]:
    """Split a transaction's postings into revenue and expense lines.

    Expense amounts are kept as recorded. Revenue postings are credits, so
    their amounts are negated to read positive. Postings under other roots
    and postings without amount are ignored.

    Args:
        transaction: Parsed ledger transaction.

    Returns:
        tuple[list[Revenue], list[Expense]]: Lines carrying the transaction
        date.
    """
    revenues: list[Revenue] = []
    expenses: list[Expense] = []
    for posting in transaction.postings:
        if not posting.has_amount:
            continue
        root = root_segment(posting.account)
        if root not in (EXPENSE_ROOT, REVENUE_ROOT):
            continue
        for amount in posting.amounts:
            if root == EXPENSE_ROOT:
                expenses.append(
                    Expense(
                        name=posting.account,
                        amount=amount.quantity,
                        currency=amount.currency,
                        date=transaction.date,
                    )
                )
            else:
                revenues.append(
                    Revenue(
                        name=posting.account,
                        amount=-amount.quantity,
                        currency=amount.currency,
                        date=transaction.date,
                    )
                )
    return revenues, expenses


__all__ = [
    "is_in_balance_year",
    "is_in_date_range",
    "classify_transaction",
]

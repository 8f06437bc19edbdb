"""Pure presentation helpers for the Streamlit dashboard.

Nothing here performs IO. The page functions in ``app`` load report
snapshots through the use cases and pass them through these helpers to
filter by period, sort, group by nested level and truncate before
rendering.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Literal

from ledger_dashboard.domain.models import (
    AccountBucket,
    Expense,
    IncomeStatement,
    TransactionRecord,
)
from ledger_dashboard.domain.services.aggregation import (
    NamedAmount,
    group_by_nested_level,
    sort_by_currency_then_amount,
    sort_by_currency_then_name,
    sum_by_currency,
)


TOTAL_PERIOD = "total"
MAX_TRANSACTION_ROWS = 200

SortOrder = Literal["name", "amount"]
TransactionSort = Literal["date", "amount"]


@dataclass(frozen=True)
class DayGroup:
    """Transactions of one day with their per-currency sum."""

    date: str
    records: tuple[TransactionRecord, ...]
    totals: dict[str, Decimal]


def matches_period(date: str, period: str) -> bool:
    """Return True when ``date`` falls in a ``YYYY`` or ``YYYY-MM`` period.

    ``TOTAL_PERIOD`` (or an empty period) keeps every date.
    """
    if not period or period == TOTAL_PERIOD:
        return True
    return date.startswith(period)


def month_options(year: int) -> list[str]:
    """Return the period choices for a year, latest month first."""
    months = [f"{year:04d}-{month:02d}" for month in range(12, 0, -1)]
    return [TOTAL_PERIOD, *months]


def filter_income_statement(
    statement: IncomeStatement,
    period: str,
) -> IncomeStatement:
    """Keep lines of a period and fill in the statement's date range.

    Args:
        statement: Unfiltered income statement.
        period: ``YYYY``, ``YYYY-MM`` or ``TOTAL_PERIOD``.

    Returns:
        IncomeStatement: Filtered copy whose start/end dates span the kept
        lines (empty strings when nothing is kept).
    """
    revenues = tuple(
        item
        for item in statement.revenues
        if matches_period(item.date, period)
    )
    expenses = tuple(
        item
        for item in statement.expenses
        if matches_period(item.date, period)
    )
    dates = sorted(item.date for item in (*revenues, *expenses))
    return replace(
        statement,
        revenues=revenues,
        expenses=expenses,
        start_date=dates[0] if dates else "",
        end_date=dates[-1] if dates else "",
    )


def select_transactions(
    records: Sequence[TransactionRecord],
    query: str = "",
    category: str = "",
    period: str = TOTAL_PERIOD,
    sort_by: TransactionSort = "date",
    limit: int = MAX_TRANSACTION_ROWS,
) -> list[TransactionRecord]:
    """Filter, sort and truncate transaction records for display.

    Args:
        records: Records from ``GetTransactionsUseCase``.
        query: Case-insensitive substring of the description.
        category: Case-insensitive substring of the category.
        period: ``YYYY``, ``YYYY-MM`` or ``TOTAL_PERIOD``.
        sort_by: ``date`` (newest first, then highest index) or ``amount``
            (largest absolute amount first).
        limit: Maximum number of rows returned.

    Returns:
        list[TransactionRecord]: Rows ready to render.
    """
    query_lower = query.strip().lower()
    category_lower = category.strip().lower()
    filtered = []
    for record in records:
        if query_lower and query_lower not in record.description.lower():
            continue
        if category_lower and category_lower not in record.category.lower():
            continue
        if not matches_period(record.date, period):
            continue
        filtered.append(record)

    if sort_by == "amount":
        filtered.sort(key=lambda record: abs(record.amount), reverse=True)
    else:
        filtered.sort(
            key=lambda record: (record.date, record.index),
            reverse=True,
        )
    return filtered[:limit]


def group_by_day(records: Iterable[TransactionRecord]) -> list[DayGroup]:
    """Group records by day, latest day first.

    Records keep their incoming order inside a day. Each group carries the
    signed sum of its amounts per currency.
    """
    days: dict[str, list[TransactionRecord]] = {}
    for record in records:
        days.setdefault(record.date[:10], []).append(record)
    return [
        DayGroup(
            date=day,
            records=tuple(days[day]),
            totals=sum_by_currency(days[day]),
        )
        for day in sorted(days, reverse=True)
    ]


def income_expense_totals(
    records: Iterable[TransactionRecord],
) -> tuple[dict[str, Decimal], dict[str, Decimal]]:
    """Split record amounts into income and expense totals per currency.

    Positive amounts left the funding account and count as expenses.
    Negative amounts count as income, reported as positive values.

    Returns:
        tuple[dict, dict]: ``(income, expenses)`` keyed by currency code.
    """
    income: dict[str, Decimal] = {}
    expenses: dict[str, Decimal] = {}
    for record in records:
        if record.amount < 0:
            income[record.currency] = (
                income.get(record.currency, Decimal("0")) - record.amount
            )
        else:
            expenses[record.currency] = (
                expenses.get(record.currency, Decimal("0")) + record.amount
            )
    return (
        {currency: income[currency] for currency in sorted(income)},
        {currency: expenses[currency] for currency in sorted(expenses)},
    )


def grouped_rows(
    items: Iterable[NamedAmount],
    level: int,
    order: SortOrder = "name",
) -> list[AccountBucket]:
    """Group items at a nested level and order them for a table.

    ``name`` ordering suits the balance sheet; ``amount`` (descending)
    suits the income statement. Both order by currency first.
    """
    buckets = group_by_nested_level(items, level).values()
    if order == "amount":
        return sort_by_currency_then_amount(buckets)
    return sort_by_currency_then_name(buckets)


def statement_categories(statement: IncomeStatement, level: int) -> list[str]:
    """Return distinct account prefixes of a statement at ``level``.

    Revenues come first, then expenses, each in first-seen order.
    """
    names = [
        key[0]
        for items in (statement.revenues, statement.expenses)
        for key in group_by_nested_level(items, level)
    ]
    return list(dict.fromkeys(names))


def monthly_expense_totals(
    expenses: Iterable[Expense],
    year: int,
) -> list[dict[str, str | float]]:
    """Return the expense total of each month of ``year``.

    Returns:
        list[dict]: ``{"month": "YYYY-MM", "expense": float}`` for January
        through December, zero for months without expenses.
    """
    totals = {
        f"{year:04d}-{month:02d}": Decimal("0") for month in range(1, 13)
    }
    for expense in expenses:
        month = expense.date[:7]
        if month in totals:
            totals[month] += expense.amount
    return [
        {"month": month, "expense": float(amount)}
        for month, amount in totals.items()
    ]


def format_amount(value: Decimal, currency: str) -> str:
    """Format an amount with thousands separators and its currency."""
    if value == value.to_integral_value():
        return f"{value:,.0f} {currency}"
    return f"{value:,.2f} {currency}"


def format_currency_totals(items: Iterable[NamedAmount]) -> str:
    """Return per-currency totals joined for a single table cell."""
    return format_totals(sum_by_currency(items))


def format_totals(totals: dict[str, Decimal]) -> str:
    """Join already computed per-currency totals for display."""
    return ", ".join(
        format_amount(amount, currency) for currency, amount in totals.items()
    )


__all__ = [
    "TOTAL_PERIOD",
    "MAX_TRANSACTION_ROWS",
    "matches_period",
    "month_options",
    "filter_income_statement",
    "select_transactions",
    "DayGroup",
    "group_by_day",
    "income_expense_totals",
    "grouped_rows",
    "statement_categories",
    "monthly_expense_totals",
    "format_amount",
    "format_currency_totals",
    "format_totals",
]

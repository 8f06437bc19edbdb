"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date

import altair as alt
import streamlit as st

from ledger_dashboard.adapters.interface.streamlit.views import (
    filter_income_statement,
    format_amount,
    format_currency_totals,
    format_totals,
    group_by_day,
    grouped_rows,
    income_expense_totals,
    month_options,
    monthly_expense_totals,
    select_transactions,
    statement_categories,
)
from ledger_dashboard.application.ports.ledger_client import (
    LedgerClientError,
    LedgerClientPort,
)
from ledger_dashboard.domain.models import (
    BalanceSheet,
    CashFlowStatement,
    IncomeStatement,
    TransactionRecord,
)
from ledger_dashboard.infrastructure.container import (
    build_balance_sheet_use_case,
    build_cash_flow_use_case,
    build_income_statement_use_case,
    build_ledger_client,
    build_transactions_use_case,
)
from ledger_dashboard.infrastructure.logging.logger import get_usage_logger


PAGES = (
    "Overview",
    "Balance Sheet",
    "Income Statement",
    "Transactions",
    "Cash Flow",
)
NESTED_LEVELS = (1, 2, 3)
PAGE_KEY = "page"
CATEGORY_KEY = "transactions_category"
PERIOD_KEY = "transactions_period"


@st.cache_resource
def _ledger_client() -> LedgerClientPort:
    """HTTP client shared by every session of the app."""
    return build_ledger_client()


def _fetch_balance_sheet(level: int, year: int) -> BalanceSheet:
    """Fetch the balance sheet through the ledger client."""
    return build_balance_sheet_use_case(_ledger_client()).execute(
        level=level,
        year=year,
    )


@st.cache_data(show_spinner=False, ttl=60)
def _load_balance_sheet(level: int, year: int) -> BalanceSheet:
    """Cached wrapper around _fetch_balance_sheet."""
    return _fetch_balance_sheet(level, year)


def _fetch_income_statement() -> IncomeStatement:
    """Fetch the unfiltered income statement."""
    return build_income_statement_use_case(_ledger_client()).execute()


@st.cache_data(show_spinner=False, ttl=60)
def _load_income_statement() -> IncomeStatement:
    """Cached wrapper around _fetch_income_statement."""
    return _fetch_income_statement()


def _fetch_transactions() -> list[TransactionRecord]:
    """Fetch every transaction record."""
    return build_transactions_use_case(_ledger_client()).execute()


@st.cache_data(show_spinner=False, ttl=60)
def _load_transactions() -> list[TransactionRecord]:
    """Cached wrapper around _fetch_transactions."""
    return _fetch_transactions()


def _fetch_cash_flow(
    start_date: str | None,
    end_date: str | None,
) -> CashFlowStatement:
    """Fetch asset movements for a period."""
    return build_cash_flow_use_case(_ledger_client()).execute(
        start_date=start_date,
        end_date=end_date,
    )


@st.cache_data(show_spinner=False, ttl=60)
def _load_cash_flow(
    start_date: str | None,
    end_date: str | None,
) -> CashFlowStatement:
    """Cached wrapper around _fetch_cash_flow."""
    return _fetch_cash_flow(start_date, end_date)


def _year_options(today: date) -> list[int]:
    return [today.year + 1, today.year, today.year - 1]


def _bucket_table(items, level: int, order: str) -> list[dict[str, str]]:
    return [
        {
            "Account": bucket.name,
            "Amount": format_amount(bucket.amount, bucket.currency),
        }
        for bucket in grouped_rows(items, level, order=order)
    ]


def _render_overview(today: date) -> None:
    """Render the monthly expenses chart of the current year."""
    statement = _load_income_statement()
    data = monthly_expense_totals(statement.expenses, today.year)
    st.subheader(f"Expenses per month ({today.year})")
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadiusTopLeft=4,
        cornerRadiusTopRight=4,
        color="#60a5fa",
    ).encode(
        x=alt.X("month:N", title=None),
        y=alt.Y("expense:Q", title="Expense"),
        tooltip=[alt.Tooltip("month:N"), alt.Tooltip("expense:Q")],
    )
    st.altair_chart(chart, width="stretch")


def _render_balance_sheet(today: date) -> None:
    """Render assets at the selected nesting level and year."""
    level = st.sidebar.selectbox("Nested level", NESTED_LEVELS, index=1)
    year = st.sidebar.selectbox("Year", _year_options(today), index=1)
    sheet = _load_balance_sheet(level, year)

    st.subheader(f"Assets ({sheet.date})")
    if not sheet.assets:
        st.info("No asset balances for this year.")
    else:
        st.dataframe(
            _bucket_table(sheet.assets, level, "name"),
            width="stretch",
            hide_index=True,
        )
        st.metric("Total assets", format_currency_totals(sheet.assets))
    st.subheader("Liabilities")
    st.caption("No liabilities")
    st.metric("Net worth", format_currency_totals(sheet.assets) or "0")


def _open_transactions(category: str, period: str) -> None:
    """Switch to the transactions page filtered by category and period."""
    st.session_state[CATEGORY_KEY] = category
    st.session_state[PERIOD_KEY] = period
    st.session_state[PAGE_KEY] = "Transactions"


def _render_income_statement(today: date) -> None:
    """Render revenues and expenses for the selected month."""
    level = st.sidebar.selectbox("Nested level", NESTED_LEVELS, index=1)
    year = st.sidebar.selectbox("Year", _year_options(today), index=1)
    period = st.sidebar.selectbox("Month", month_options(year), index=0)
    statement = filter_income_statement(_load_income_statement(), period)

    if statement.start_date:
        st.caption(f"{statement.start_date} to {statement.end_date}")
    revenue_col, expense_col = st.columns(2)
    with revenue_col:
        st.subheader("Revenues")
        st.dataframe(
            _bucket_table(statement.revenues, level, "amount"),
            width="stretch",
            hide_index=True,
        )
        st.metric(
            "Total revenues",
            format_currency_totals(statement.revenues),
        )
    with expense_col:
        st.subheader("Expenses")
        st.dataframe(
            _bucket_table(statement.expenses, level, "amount"),
            width="stretch",
            hide_index=True,
        )
        st.metric(
            "Total expenses",
            format_currency_totals(statement.expenses),
        )

    categories = statement_categories(statement, level)
    if categories:
        category = st.selectbox("Category", categories)
        st.button(
            "Show transactions",
            on_click=_open_transactions,
            args=(category, period),
        )


def _transaction_rows(
    records: Sequence[TransactionRecord],
) -> list[dict[str, str]]:
    return [
        {
            "Date": record.date,
            "Description": record.description,
            "Amount": format_amount(record.amount, record.currency),
            "Category": record.category,
            "Account": record.account,
        }
        for record in records
    ]


def _period_options(today: date) -> list[str]:
    options = month_options(today.year)
    # A period handed over from another page may lie in another year.
    handed = st.session_state.get(PERIOD_KEY)
    if handed and handed not in options:
        options.insert(1, handed)
    return options


def _render_transactions(today: date) -> None:
    """Render searchable transactions grouped by day."""
    query = st.text_input("Search", placeholder="Search transactions...")
    category = st.text_input(
        "Category",
        placeholder="Enter category...",
        key=CATEGORY_KEY,
    )
    period = st.selectbox("Month", _period_options(today), key=PERIOD_KEY)
    sort_by = st.selectbox("Sort by", ["date", "amount"], index=0)
    records = select_transactions(
        _load_transactions(),
        query=query,
        category=category,
        period=period,
        sort_by=sort_by,
    )

    income, expenses = income_expense_totals(records)
    income_col, expense_col = st.columns(2)
    with income_col:
        st.metric("Income", format_totals(income) or "0")
    with expense_col:
        st.metric("Expenses", format_totals(expenses) or "0")
    st.caption(f"{len(records)} transactions shown")

    if sort_by == "amount":
        st.dataframe(
            _transaction_rows(records),
            width="stretch",
            hide_index=True,
        )
        return
    for day in group_by_day(records):
        st.markdown(f"**{day.date}** {format_totals(day.totals)}")
        st.dataframe(
            _transaction_rows(day.records),
            width="stretch",
            hide_index=True,
        )


def _render_cash_flow(today: date) -> None:
    """Render asset movements for the current year."""
    level = st.sidebar.selectbox("Nested level", NESTED_LEVELS, index=1)
    start = f"{today.year}-01-01"
    end = today.isoformat()
    statement = _load_cash_flow(start, end)
    st.subheader(
        f"Cash flow from {statement.start_date} to {statement.end_date}"
    )
    st.dataframe(
        _bucket_table(statement.cash_flows, level, "amount"),
        width="stretch",
        hide_index=True,
    )
    st.metric("Total cash flow", format_currency_totals(statement.cash_flows))


_RENDERERS = {
    "Overview": _render_overview,
    "Balance Sheet": _render_balance_sheet,
    "Income Statement": _render_income_statement,
    "Transactions": _render_transactions,
    "Cash Flow": _render_cash_flow,
}


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Ledger Dashboard", layout="wide")
    st.title("Ledger Dashboard")

    page = st.sidebar.selectbox("Page", PAGES, key=PAGE_KEY)
    get_usage_logger().info(f"Page viewed: {page}")
    try:
        _RENDERERS[page](date.today())
    except LedgerClientError as exc:
        st.error(f"Ledger backend unavailable: {exc}")


if __name__ == "__main__":  # pragma: no cover
    main()

"""Domain constants for ledger reporting."""

ACCOUNT_SEPARATOR = ":"

ASSET_ROOT = "asset"
EXPENSE_ROOT = "expense"
REVENUE_ROOT = "revenue"

# Opening balances were booked in this year and belong to every balance sheet.
OPENING_BALANCE_YEAR = "1997"

MIN_BALANCE_SHEET_LEVEL = 1
MAX_BALANCE_SHEET_LEVEL = 3

DEFAULT_TXID_TAG = "txid"


__all__ = [
    "ACCOUNT_SEPARATOR",
    "ASSET_ROOT",
    "EXPENSE_ROOT",
    "REVENUE_ROOT",
    "OPENING_BALANCE_YEAR",
    "MIN_BALANCE_SHEET_LEVEL",
    "MAX_BALANCE_SHEET_LEVEL",
    "DEFAULT_TXID_TAG",
]

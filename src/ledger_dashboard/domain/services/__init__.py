"""Domain services package."""

from .accounts import (
    account_depth,
    is_under_account,
    level_key,
    root_segment,
    split_account,
)
from .aggregation import (
    group_by_nested_level,
    sort_by_currency_then_amount,
    sort_by_currency_then_name,
    sum_by_currency,
    total_amount,
)
from .classification import (
    classify_transaction,
    is_in_balance_year,
    is_in_date_range,
)
from .transactions import build_transaction_record, extract_transaction_id

__all__ = [
    "account_depth",
    "is_under_account",
    "level_key",
    "root_segment",
    "split_account",
    "group_by_nested_level",
    "sort_by_currency_then_amount",
    "sort_by_currency_then_name",
    "sum_by_currency",
    "total_amount",
    "classify_transaction",
    "is_in_balance_year",
    "is_in_date_range",
    "build_transaction_record",
    "extract_transaction_id",
]

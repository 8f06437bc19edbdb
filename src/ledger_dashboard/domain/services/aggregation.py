"""Domain services aggregating named, currency-tagged amounts."""

from collections.abc import Iterable, Sequence
from decimal import Decimal
from typing import Protocol, TypeVar

from ledger_dashboard.domain.errors import InvalidArgumentError
from ledger_dashboard.domain.models import AccountBucket
from ledger_dashboard.domain.services.accounts import account_depth, level_key


class CurrencyAmount(Protocol):
    amount: Decimal
    currency: str


class NamedAmount(CurrencyAmount, Protocol):
    name: str


NamedT = TypeVar("NamedT", bound=NamedAmount)


def group_by_nested_level(
    items: Iterable[NamedAmount],
    level: int,
) -> dict[tuple[str, str], AccountBucket]:
    """Collapse items into buckets keyed by an account-name prefix.

    Items are bucketed by ``(prefix, currency)`` so amounts in different
    currencies are never summed together. Items deeper than ``level`` are
    kept as the bucket's children for drill-down.

    Args:
        items: Objects exposing ``name``, ``amount`` and ``currency``.
        level: Number of leading account segments forming the key.

    Returns:
        dict[tuple[str, str], AccountBucket]: Buckets in first-seen order.

    Raises:
        InvalidArgumentError: If ``level`` is lower than 1.
    """
    if level < 1:
        raise InvalidArgumentError(f"Nested level must be >= 1, got {level}")

    totals: dict[tuple[str, str], Decimal] = {}
    children: dict[tuple[str, str], list[NamedAmount]] = {}
    for item in items:
        key = (level_key(item.name, level), item.currency)
        if key not in totals:
            totals[key] = Decimal("0")
            children[key] = []
        totals[key] += item.amount
        if account_depth(item.name) > level:
            children[key].append(item)

    return {
        key: AccountBucket(
            name=key[0],
            amount=amount,
            currency=key[1],
            children=tuple(children[key]),
        )
        for key, amount in totals.items()
    }


def sum_by_currency(
    items: Iterable[CurrencyAmount],
    drop_zero: bool = False,
) -> dict[str, Decimal]:
    """Total signed amounts per currency code.

    Args:
        items: Objects exposing ``amount`` and ``currency``.
        drop_zero: Whether to discard currencies summing to zero.

    Returns:
        dict[str, Decimal]: Totals ordered by currency code.
    """
    totals: dict[str, Decimal] = {}
    for item in items:
        totals[item.currency] = (
            totals.get(item.currency, Decimal("0")) + item.amount
        )
    return {
        currency: totals[currency]
        for currency in sorted(totals)
        if not (drop_zero and totals[currency] == 0)
    }


def sort_by_currency_then_name(items: Iterable[NamedT]) -> list[NamedT]:
    """Order items by currency, then account name ascending."""
    return sorted(items, key=lambda item: (item.currency, item.name))


def sort_by_currency_then_amount(items: Iterable[NamedT]) -> list[NamedT]:
    """Order items by currency, then amount descending."""
    return sorted(items, key=lambda item: (item.currency, -item.amount))


def total_amount(items: Sequence[CurrencyAmount]) -> Decimal:
    """Sum amounts regardless of currency."""
    return sum((item.amount for item in items), Decimal("0"))


__all__ = [
    "group_by_nested_level",
    "sum_by_currency",
    "sort_by_currency_then_name",
    "sort_by_currency_then_amount",
    "total_amount",
]

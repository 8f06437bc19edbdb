"""Domain models for raw ledger records."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Amount:
    """Quantity of a single commodity."""

    currency: str
    quantity: Decimal


@dataclass(frozen=True)
class Posting:
    """One account leg of a double-entry transaction.

    Attributes:
        account: Colon-delimited account path, e.g. ``asset:bank:checking``.
        amounts: Amount pairs carried by the leg. An empty tuple means the
            posting is ignored by every aggregation.
    """

    account: str
    amounts: tuple[Amount, ...] = ()

    @property
    def has_amount(self) -> bool:
        return bool(self.amounts)


@dataclass(frozen=True)
class Transaction:
    """Ledger event with its ordered postings.

    Attributes:
        index: Sequence number assigned by the ledger.
        date: ISO-like date string (``YYYY-MM-DD``).
        description: Free-text payee/description.
        postings: Ordered legs of the transaction.
        tags: Tag tuples, usually ``(name, value)`` pairs.
    """

    index: int
    date: str
    description: str
    postings: tuple[Posting, ...] = ()
    tags: tuple[tuple[str, ...], ...] = ()


@dataclass(frozen=True)
class AccountRecord:
    """Account declared in the ledger."""

    name: str
    parent_name: str | None = None


__all__ = ["Amount", "Posting", "Transaction", "AccountRecord"]

"""Mapping from the ledger's JSON wire format to domain models.

Transactions look like::

    {"tdate": "2024-03-01", "tdescription": "Lunch", "tindex": 7,
     "ttags": [["txid", "tx123"]],
     "tpostings": [{"paccount": "expense:food",
                    "pamount": [{"acommodity": "vnd",
                                 "aquantity": {"floatingPoint": 50000}}]}]}

Records that cannot be mapped are skipped with a warning so one bad entry
never aborts a whole report.
"""

from collections.abc import Iterable
from decimal import Decimal

from ledger_dashboard.domain.models import (
    AccountRecord,
    Amount,
    Posting,
    Transaction,
)
from ledger_dashboard.utils.decimal_utils import (
    coerce_decimal,
    decimal_from_mantissa,
)


def parse_quantity(raw) -> Decimal:
    """Return the exact quantity of an ``aquantity`` object.

    The integer mantissa and decimal places are preferred over the float
    rendering when both are present.

    Raises:
        ValueError: If no numeric value can be read.
    """
    if not isinstance(raw, dict):
        return coerce_decimal(raw)
    mantissa = raw.get("decimalMantissa")
    places = raw.get("decimalPlaces")
    if isinstance(mantissa, int) and isinstance(places, int):
        return decimal_from_mantissa(mantissa, places)
    if "floatingPoint" not in raw:
        raise ValueError(f"Quantity without value: {raw!r}")
    return coerce_decimal(raw["floatingPoint"])


def parse_amount(raw: dict) -> Amount:
    """Map a ``pamount`` entry to an Amount."""
    return Amount(
        currency=str(raw["acommodity"]),
        quantity=parse_quantity(raw["aquantity"]),
    )


def parse_posting(raw: dict) -> Posting:
    """Map a ``tpostings`` entry to a Posting."""
    return Posting(
        account=str(raw["paccount"]),
        amounts=tuple(parse_amount(item) for item in raw.get("pamount") or []),
    )


def parse_tags(raw) -> tuple[tuple[str, ...], ...]:
    """Map ``ttags`` (array of arrays) to tag tuples."""
    tags = []
    for tag in raw or []:
        if isinstance(tag, (list, tuple)):
            tags.append(tuple(str(part) for part in tag))
        else:
            tags.append((str(tag),))
    return tuple(tags)


def parse_transaction(raw: dict) -> Transaction:
    """Map a transaction object to a Transaction.

    Raises:
        KeyError: If a required field is missing.
        TypeError: If a field has an unexpected shape.
        ValueError: If an amount is not numeric.
    """
    return Transaction(
        index=int(raw.get("tindex") or 0),
        date=str(raw["tdate"]),
        description=str(raw.get("tdescription") or ""),
        postings=tuple(
            parse_posting(item) for item in raw.get("tpostings") or []
        ),
        tags=parse_tags(raw.get("ttags")),
    )


def _unwrap_transaction(entry):
    # Account registers return rows whose first object is the transaction.
    if isinstance(entry, dict):
        return entry
    if isinstance(entry, (list, tuple)):
        for item in entry:
            if isinstance(item, dict):
                return item
    raise TypeError(f"Unexpected transaction entry: {type(entry).__name__}")


def parse_transactions(payload: Iterable, logger) -> list[Transaction]:
    """Map a list of transaction entries, skipping malformed ones.

    Args:
        payload: Decoded JSON array of transactions or register rows.
        logger: Logger used for warnings.

    Returns:
        list[Transaction]: Transactions in payload order.
    """
    transactions: list[Transaction] = []
    for position, entry in enumerate(payload or []):
        try:
            transactions.append(parse_transaction(_unwrap_transaction(entry)))
        except (KeyError, TypeError, ValueError) as exc:
            logger.warning(
                f"Skipping malformed transaction #{position}: {exc!r}"
            )
    return transactions


def parse_account_names(payload: Iterable) -> list[str]:
    """Map the account-names array, dropping blank entries."""
    return [str(name) for name in payload or [] if str(name).strip()]


def parse_accounts(payload: Iterable, logger) -> list[AccountRecord]:
    """Map account objects (``aname``/``aparent_``) to AccountRecords."""
    accounts: list[AccountRecord] = []
    for entry in payload or []:
        if isinstance(entry, str):
            accounts.append(AccountRecord(name=entry))
            continue
        if not isinstance(entry, dict) or not entry.get("aname"):
            logger.warning(f"Skipping malformed account entry: {entry!r}")
            continue
        parent = entry.get("aparent_") or entry.get("aparent")
        if not isinstance(parent, str) or not parent:
            parent = None
        accounts.append(
            AccountRecord(
                name=str(entry["aname"]),
                parent_name=parent,
            )
        )
    return accounts


__all__ = [
    "parse_quantity",
    "parse_amount",
    "parse_posting",
    "parse_tags",
    "parse_transaction",
    "parse_transactions",
    "parse_account_names",
    "parse_accounts",
]

"""Domain services building user-facing transaction records."""

from ledger_dashboard.domain.constants import DEFAULT_TXID_TAG
from ledger_dashboard.domain.models import (
    Split,
    Transaction,
    TransactionRecord,
)


def extract_transaction_id(
    tags: tuple[tuple[str, ...], ...],
    tag_key: str = DEFAULT_TXID_TAG,
) -> str | None:
    """Return the external identifier stored in a transaction's tags.

    The tag named ``tag_key`` wins. Ledgers tagged before named ids were
    introduced carry the id as the value of their last tag, so without a
    named tag the last tag holding a value is used. Valueless tags such as
    ``reviewed:`` are passed over.

    Args:
        tags: Tag tuples, usually ``(name, value)``.
        tag_key: Name of the tag holding the identifier.

    Returns:
        str | None: Identifier, or None when the transaction has no usable tag.
    """
    for tag in tags:
        if len(tag) >= 2 and tag[0] == tag_key and tag[-1]:
            return tag[-1]
    for tag in reversed(tags):
        if len(tag) >= 2 and tag[-1]:
            return tag[-1]
    return None


def build_transaction_record(
    transaction: Transaction,
    tag_key: str = DEFAULT_TXID_TAG,
) -> TransactionRecord | None:
    """Build the display record of a transaction.

    Two-posting transactions read category and amount from the first leg and
    the account from the second. Larger transactions read the account from
    the last leg, use its negated amount, and list every leg as a split.

    Args:
        transaction: Parsed ledger transaction.
        tag_key: Name of the tag holding the identifier.

    Returns:
        TransactionRecord | None: Record, or None when the transaction has
        fewer than two postings, no identifier, or no amount on the leg that
        supplies it.
    """
    postings = transaction.postings
    if len(postings) < 2:
        return None
    transaction_id = extract_transaction_id(transaction.tags, tag_key)
    if transaction_id is None:
        return None

    category_posting = postings[0]
    account_posting = postings[-1]
    splits = None
    if len(postings) == 2:
        if not category_posting.has_amount:
            return None
        amount = category_posting.amounts[0].quantity
        currency = category_posting.amounts[0].currency
    else:
        if not account_posting.has_amount:
            return None
        amount = -account_posting.amounts[0].quantity
        currency = account_posting.amounts[0].currency
        splits = tuple(
            Split(
                category=posting.account,
                amount=posting.amounts[0].quantity,
                currency=posting.amounts[0].currency,
            )
            for posting in postings
            if posting.has_amount
        )

    return TransactionRecord(
        index=transaction.index,
        date=transaction.date,
        id=transaction_id,
        description=transaction.description,
        amount=amount,
        currency=currency,
        category=category_posting.account,
        account=account_posting.account,
        splits=splits,
    )


__all__ = ["extract_transaction_id", "build_transaction_record"]

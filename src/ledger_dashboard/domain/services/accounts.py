"""Domain helpers for colon-delimited account paths."""

from ledger_dashboard.domain.constants import ACCOUNT_SEPARATOR


def split_account(name: str) -> list[str]:
    """Split an account path into its segments.

    Args:
        name: Account path such as ``asset:bank:checking``.

    Returns:
        list[str]: Path segments; empty for an empty name.
    """
    if not name:
        return []
    return name.split(ACCOUNT_SEPARATOR)


def account_depth(name: str) -> int:
    """Return the number of segments of an account path."""
    return len(split_account(name))


def root_segment(name: str) -> str:
    """Return the first segment of an account path."""
    parts = split_account(name)
    return parts[0] if parts else ""


def level_key(name: str, level: int) -> str:
    """Return the account prefix made of the first ``level`` segments.

    Args:
        name: Account path.
        level: Number of segments to keep.

    Returns:
        str: Prefix key; the full name when it is shallower than ``level``.
    """
    return ACCOUNT_SEPARATOR.join(split_account(name)[:level])


def is_under_account(candidate: str, account: str) -> bool:
    """Return True when ``candidate`` is ``account`` or one of its children.

    ``asset:bank`` matches ``asset:bank:checking`` but not ``asset:banking``.
    """
    if candidate == account:
        return True
    return candidate.startswith(account + ACCOUNT_SEPARATOR)


__all__ = [
    "split_account",
    "account_depth",
    "root_segment",
    "level_key",
    "is_under_account",
]

"""Application ports package."""

from .ledger_client import LedgerClientError, LedgerClientPort

__all__ = ["LedgerClientError", "LedgerClientPort"]

"""Application port for the ledger backend.

The ledger is the system of record for transactions; the dashboard only
reads from it. Infrastructure adapters translate the ledger's wire format
into domain models before returning them.
"""

from typing import Protocol

from ledger_dashboard.domain.models import AccountRecord, Transaction


class LedgerClientError(RuntimeError):
    """Raised when the ledger backend answers with a non-success response.

    Attributes:
        status_code: HTTP status of the response, or None when no response
            was received.
        body: Raw response body as returned by the backend.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str = "",
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class LedgerClientPort(Protocol):
    """Port exposing read access to the ledger backend."""

    def list_account_names(self) -> list[str]:
        """Return every account path declared or used in the ledger."""

    def list_accounts(self) -> list[AccountRecord]:
        """Return account records with their parents."""

    def list_transactions_for_account(self, name: str) -> list[Transaction]:
        """Return transactions touching ``name`` or one of its children."""

    def list_all_transactions(self) -> list[Transaction]:
        """Return every transaction of the ledger."""

    def close(self) -> None:
        """Release connections held by the client."""


__all__ = ["LedgerClientError", "LedgerClientPort"]

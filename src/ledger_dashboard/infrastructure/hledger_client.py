"""HTTP adapter for an hledger-web style ledger API."""

from urllib.parse import quote

import httpx

from ledger_dashboard.application.ports.ledger_client import (
    LedgerClientError,
    LedgerClientPort,
)
from ledger_dashboard.domain.models import AccountRecord, Transaction
from ledger_dashboard.infrastructure.ledger_json import (
    parse_account_names,
    parse_accounts,
    parse_transactions,
)
from ledger_dashboard.infrastructure.logging.logger import get_app_logger


class HttpLedgerClient(LedgerClientPort):
    """Ledger client issuing JSON GET requests with httpx.

    Non-success responses are raised as ``LedgerClientError`` with the
    backend's status and body. Requests are not retried.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float | None = 30.0,
        logger=None,
        client: httpx.Client | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Root URL of the ledger API.
            timeout: Seconds to wait for each response.
            logger: Optional logger compatible with logging.Logger-like API.
            client: Optional preconfigured httpx client (tests, pooling).
        """
        self._logger = logger or get_app_logger()
        self._client = client or httpx.Client(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    def list_account_names(self) -> list[str]:
        return parse_account_names(self._get_json("/accountnames"))

    def list_accounts(self) -> list[AccountRecord]:
        return parse_accounts(self._get_json("/accounts"), self._logger)

    def list_transactions_for_account(self, name: str) -> list[Transaction]:
        path = f"/accounttransactions/{quote(name, safe=':')}"
        return parse_transactions(self._get_json(path), self._logger)

    def list_all_transactions(self) -> list[Transaction]:
        return parse_transactions(
            self._get_json("/transactions"),
            self._logger,
        )

    def close(self) -> None:
        """Release pooled connections."""
        self._client.close()

    def __enter__(self) -> "HttpLedgerClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _get_json(self, path: str):
        """GET ``path`` and decode its JSON body.

        Args:
            path: Endpoint path relative to the base URL.

        Returns:
            Decoded JSON value.

        Raises:
            LedgerClientError: On transport failure, non-success status, or a
                body that is not JSON.
        """
        try:
            response = self._client.get(path)
        except httpx.HTTPError as exc:
            self._logger.error(f"Ledger request {path} failed: {exc}")
            raise LedgerClientError(
                f"Ledger request {path} failed: {exc}"
            ) from exc

        if not response.is_success:
            self._logger.error(
                f"Ledger request {path} returned {response.status_code}"
            )
            raise LedgerClientError(
                f"Ledger request {path} returned {response.status_code}",
                status_code=response.status_code,
                body=response.text,
            )
        try:
            return response.json()
        except ValueError as exc:
            raise LedgerClientError(
                f"Ledger response for {path} is not JSON",
                status_code=response.status_code,
                body=response.text,
            ) from exc


__all__ = ["HttpLedgerClient"]

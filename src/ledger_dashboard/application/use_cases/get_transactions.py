"""Use case to list ledger transactions for display."""

from ledger_dashboard.application.ports.ledger_client import LedgerClientPort
from ledger_dashboard.domain.constants import DEFAULT_TXID_TAG
from ledger_dashboard.domain.models import TransactionRecord
from ledger_dashboard.domain.services.transactions import (
    build_transaction_record,
)
from ledger_dashboard.infrastructure.logging.logger import get_app_logger


class GetTransactionsUseCase:
    """Turn ledger transactions into display records."""

    def __init__(
        self,
        ledger_client: LedgerClientPort,
        logger=None,
        txid_tag: str = DEFAULT_TXID_TAG,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_client: Port providing ledger transactions.
            logger: Optional logger compatible with logging.Logger-like API.
            txid_tag: Name of the tag holding transaction identifiers.
        """
        self._ledger_client = ledger_client
        self._logger = logger or get_app_logger()
        self._txid_tag = txid_tag

    def execute(self) -> list[TransactionRecord]:
        """Return records in ledger order.

        Transactions that cannot produce a record (fewer than two postings,
        no identifier tag, missing amount) are skipped without failing the
        batch.
        """
        transactions = self._ledger_client.list_all_transactions()
        records: list[TransactionRecord] = []
        skipped = 0
        for transaction in transactions:
            record = build_transaction_record(transaction, self._txid_tag)
            if record is None:
                skipped += 1
                self._logger.debug(
                    f"Skipping transaction {transaction.index} "
                    f"({transaction.date} {transaction.description!r})"
                )
                continue
            records.append(record)

        if skipped:
            self._logger.warning(
                f"Skipped {skipped} of {len(transactions)} transactions "
                f"without identifier or amount"
            )
        self._logger.info(f"Listed {len(records)} transactions")
        return records


__all__ = ["GetTransactionsUseCase", "TransactionRecord"]

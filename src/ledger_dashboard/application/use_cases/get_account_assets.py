"""Use case to compute the balances of a single asset account."""

from decimal import Decimal

from ledger_dashboard.application.ports.ledger_client import LedgerClientPort
from ledger_dashboard.domain.errors import InvalidArgumentError
from ledger_dashboard.domain.models import Asset
from ledger_dashboard.domain.services.accounts import is_under_account
from ledger_dashboard.domain.services.classification import (
    is_in_balance_year,
)
from ledger_dashboard.infrastructure.logging.logger import get_app_logger


class GetAccountAssetsUseCase:
    """Sum an account's postings per currency for a balance sheet year."""

    def __init__(
        self,
        ledger_client: LedgerClientPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_client: Port providing ledger transactions.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_client = ledger_client
        self._logger = logger or get_app_logger()

    def execute(
        self,
        account_name: str,
        year: int | str | None,
    ) -> list[Asset]:
        """Return one Asset per currency with a non-zero balance.

        Postings are kept when they belong to the account or one of its
        children, carry an amount, and are dated in ``year`` or in the
        opening-balance year.

        Args:
            account_name: Account path to total.
            year: Balance sheet year.

        Returns:
            list[Asset]: Balances named after ``account_name``, ordered by
            currency.

        Raises:
            InvalidArgumentError: If ``year`` is missing.
        """
        year_text = "" if year is None else str(year).strip()
        if not year_text:
            raise InvalidArgumentError(
                f"Missing year for account transactions of {account_name}"
            )

        transactions = self._ledger_client.list_transactions_for_account(
            account_name
        )
        totals: dict[str, Decimal] = {}
        for transaction in transactions:
            if not is_in_balance_year(transaction.date, year_text):
                continue
            for posting in transaction.postings:
                if not posting.has_amount:
                    continue
                if not is_under_account(posting.account, account_name):
                    continue
                for amount in posting.amounts:
                    totals[amount.currency] = (
                        totals.get(amount.currency, Decimal("0"))
                        + amount.quantity
                    )

        assets = [
            Asset(name=account_name, amount=amount, currency=currency)
            for currency, amount in sorted(totals.items())
            if amount != 0
        ]
        self._logger.debug(
            f"Account {account_name}: {len(transactions)} transactions, "
            f"{len(assets)} balances for {year_text}"
        )
        return assets


__all__ = ["GetAccountAssetsUseCase"]

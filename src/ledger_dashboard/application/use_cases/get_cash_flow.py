"""Use case to compute asset account movements over a period."""

from decimal import Decimal

from ledger_dashboard.application.ports.ledger_client import LedgerClientPort
from ledger_dashboard.domain.constants import ASSET_ROOT
from ledger_dashboard.domain.models import Asset, CashFlowStatement
from ledger_dashboard.domain.services.accounts import root_segment
from ledger_dashboard.domain.services.aggregation import (
    sort_by_currency_then_amount,
)
from ledger_dashboard.domain.services.classification import is_in_date_range
from ledger_dashboard.infrastructure.logging.logger import get_app_logger


class GetCashFlowUseCase:
    """Sum asset postings per account and currency within a date range."""

    def __init__(self, ledger_client: LedgerClientPort, logger=None) -> None:
        self._ledger_client = ledger_client
        self._logger = logger or get_app_logger()

    def execute(
        self,
        start_date: str | None = None,
        end_date: str | None = None,
    ) -> CashFlowStatement:
        """Return net asset movements.

        Args:
            start_date: Optional inclusive lower bound (``YYYY-MM-DD``).
            end_date: Optional inclusive upper bound (``YYYY-MM-DD``).

        Returns:
            CashFlowStatement: Non-zero movements ordered by currency, then
            amount descending.
        """
        transactions = self._ledger_client.list_all_transactions()
        totals: dict[tuple[str, str], Decimal] = {}
        for transaction in transactions:
            if not is_in_date_range(transaction.date, start_date, end_date):
                continue
            for posting in transaction.postings:
                if root_segment(posting.account) != ASSET_ROOT:
                    continue
                for amount in posting.amounts:
                    key = (posting.account, amount.currency)
                    totals[key] = (
                        totals.get(key, Decimal("0")) + amount.quantity
                    )

        cash_flows = sort_by_currency_then_amount(
            Asset(name=name, amount=amount, currency=currency)
            for (name, currency), amount in totals.items()
            if amount != 0
        )
        self._logger.info(
            f"Cash flow {start_date or '*'}..{end_date or '*'}: "
            f"{len(cash_flows)} account movements"
        )
        return CashFlowStatement(
            start_date=start_date or "",
            end_date=end_date or "",
            cash_flows=tuple(cash_flows),
        )


__all__ = ["GetCashFlowUseCase", "CashFlowStatement"]

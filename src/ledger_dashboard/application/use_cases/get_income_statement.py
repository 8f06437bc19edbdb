"""Use case to classify ledger postings into an income statement."""

from ledger_dashboard.application.ports.ledger_client import LedgerClientPort
from ledger_dashboard.domain.models import Expense, IncomeStatement, Revenue
from ledger_dashboard.domain.services.classification import (
    classify_transaction,
)
from ledger_dashboard.infrastructure.logging.logger import get_app_logger


class GetIncomeStatementUseCase:
    """Build revenue and expense lines from every ledger transaction."""

    def __init__(self, ledger_client: LedgerClientPort, logger=None) -> None:
        self._ledger_client = ledger_client
        self._logger = logger or get_app_logger()

    def execute(self) -> IncomeStatement:
        """Return the income statement.

        The date range is left empty; callers filter lines by month or year
        and derive it from what they keep.
        """
        transactions = self._ledger_client.list_all_transactions()
        revenues: list[Revenue] = []
        expenses: list[Expense] = []
        for transaction in transactions:
            transaction_revenues, transaction_expenses = classify_transaction(
                transaction
            )
            revenues.extend(transaction_revenues)
            expenses.extend(transaction_expenses)

        self._logger.info(
            f"Income statement from {len(transactions)} transactions: "
            f"{len(revenues)} revenues, {len(expenses)} expenses"
        )
        return IncomeStatement(
            start_date="",
            end_date="",
            revenues=tuple(revenues),
            expenses=tuple(expenses),
        )


__all__ = ["GetIncomeStatementUseCase", "IncomeStatement"]

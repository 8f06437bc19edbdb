"""Use case to assemble the balance sheet from asset accounts."""

from concurrent.futures import ThreadPoolExecutor

from ledger_dashboard.application.ports.ledger_client import LedgerClientPort
from ledger_dashboard.application.use_cases.get_account_assets import (
    GetAccountAssetsUseCase,
)
from ledger_dashboard.domain.constants import (
    ASSET_ROOT,
    MAX_BALANCE_SHEET_LEVEL,
    MIN_BALANCE_SHEET_LEVEL,
)
from ledger_dashboard.domain.errors import InvalidArgumentError
from ledger_dashboard.domain.models import Asset, BalanceSheet
from ledger_dashboard.domain.services.accounts import (
    account_depth,
    root_segment,
)
from ledger_dashboard.infrastructure.logging.logger import get_app_logger


DEFAULT_MAX_WORKERS = 4


class GetBalanceSheetUseCase:
    """Compute asset balances at a nesting level for a year."""

    def __init__(
        self,
        ledger_client: LedgerClientPort,
        logger=None,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_client: Port providing account names and transactions.
            logger: Optional logger compatible with logging.Logger-like API.
            max_workers: Maximum concurrent per-account fetches.
        """
        self._ledger_client = ledger_client
        self._logger = logger or get_app_logger()
        self._max_workers = max(1, max_workers)
        self._account_assets = GetAccountAssetsUseCase(
            ledger_client,
            logger=self._logger,
        )

    def execute(self, level: int, year: int) -> BalanceSheet:
        """Return the balance sheet.

        Args:
            level: Account depth to report (1 to 3).
            year: Year whose postings are included, with opening balances.

        Returns:
            BalanceSheet: Asset balances per account and currency.

        Raises:
            InvalidArgumentError: If ``level`` is outside the supported range.
        """
        if not MIN_BALANCE_SHEET_LEVEL <= level <= MAX_BALANCE_SHEET_LEVEL:
            raise InvalidArgumentError(
                f"Balance sheet level must be between "
                f"{MIN_BALANCE_SHEET_LEVEL} and {MAX_BALANCE_SHEET_LEVEL}, "
                f"got {level}"
            )

        account_names = [
            name
            for name in self._ledger_client.list_account_names()
            if account_depth(name) == level
            and root_segment(name) == ASSET_ROOT
        ]
        self._logger.info(
            f"Balance sheet {year} level {level}: "
            f"{len(account_names)} asset accounts"
        )

        assets: list[Asset] = []
        for account_assets in self._fetch_all(account_names, year):
            assets.extend(account_assets)

        return BalanceSheet(
            date=str(year),
            assets=tuple(assets),
            liabilities=(),
        )

    def _fetch_all(
        self,
        account_names: list[str],
        year: int,
    ) -> list[list[Asset]]:
        if self._max_workers == 1 or len(account_names) <= 1:
            return [
                self._account_assets.execute(name, year)
                for name in account_names
            ]
        with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
            return list(
                pool.map(
                    lambda name: self._account_assets.execute(name, year),
                    account_names,
                )
            )


__all__ = ["GetBalanceSheetUseCase", "BalanceSheet"]

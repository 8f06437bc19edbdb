"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from ledger_dashboard.domain.constants import DEFAULT_TXID_TAG
from ledger_dashboard.infrastructure.logging.logger import get_app_logger


DEFAULT_BASE_URL = "http://127.0.0.1:5000"
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_FETCH_WORKERS = 4


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for reaching the ledger backend.

    Attributes:
        base_url: Root URL of the ledger JSON API.
        timeout: Seconds to wait for a ledger response.
        fetch_workers: Concurrent per-account fetches for the balance sheet.
        txid_tag: Tag name holding transaction identifiers.
    """

    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    fetch_workers: int = DEFAULT_FETCH_WORKERS
    txid_tag: str = DEFAULT_TXID_TAG

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables and ``.env``.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        base_url = os.getenv("LEDGER_API_BASE_URL", "").strip()
        txid_tag = os.getenv("LEDGER_TXID_TAG", "").strip()
        return cls(
            base_url=(base_url or DEFAULT_BASE_URL).rstrip("/"),
            timeout=cls._parse_number(
                "LEDGER_API_TIMEOUT",
                DEFAULT_TIMEOUT_SECONDS,
                float,
                logger,
            ),
            fetch_workers=cls._parse_number(
                "LEDGER_FETCH_WORKERS",
                DEFAULT_FETCH_WORKERS,
                int,
                logger,
            ),
            txid_tag=txid_tag or DEFAULT_TXID_TAG,
        )

    @staticmethod
    def _parse_number(name: str, default, cast, logger):
        """Read a positive number from the environment.

        Args:
            name: Environment variable name.
            default: Value used when unset or invalid.
            cast: ``int`` or ``float``.
            logger: Logger used for warnings.

        Returns:
            The parsed value, or ``default``.
        """
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = cast(raw.strip())
        except ValueError:
            logger.warning(f"Invalid {name}={raw!r}; using {default}")
            return default
        if value <= 0:
            logger.warning(f"Non-positive {name}={raw!r}; using {default}")
            return default
        return value


__all__ = ["LedgerSettings"]

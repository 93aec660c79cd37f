"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
from datetime import date
import os
from typing import Optional

from src.domain.constants import ANCHOR_DATE, HOME_CURRENCY, LOCAL_CURRENCY
from src.domain.services.normalization import (
    normalize_currency_code,
    parse_iso_date,
)
from src.domain.services.registry import AccountResolutionPolicy
from src.infrastructure.logging.logger import get_app_logger

DEFAULT_RATES_API_URL = (
    "https://latest.currency-api.pages.dev/v1/currencies/{currency}.json"
)

_FALSE_VALUES = ("0", "false", "no", "off")


@dataclass(frozen=True)
class TrackerSettings:
    """Settings for balance reconciliation and its collaborators.

    Attributes:
        home_currency: Currency of the net-worth aggregation.
        local_currency: Default currency of synthesized accounts.
        anchor_date: Cutoff for un-checkpointed accounts in dynamic mode.
        dynamic_accounts: Whether unmatched names synthesize accounts.
        user_id: Store scope; None selects the anonymous/local scope.
        rates_api_url: Rate endpoint with a ``{currency}`` placeholder.
        rates_timeout: Rate request timeout in seconds.
    """

    home_currency: str = HOME_CURRENCY
    local_currency: str = LOCAL_CURRENCY
    anchor_date: Optional[date] = ANCHOR_DATE
    dynamic_accounts: bool = True
    user_id: Optional[str] = None
    rates_api_url: str = DEFAULT_RATES_API_URL
    rates_timeout: float = 8.0

    @classmethod
    def from_env(cls) -> "TrackerSettings":
        """Build settings from environment variables.

        Returns:
            TrackerSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        dynamic_raw = os.getenv("DYNAMIC_ACCOUNTS", "true").strip().lower()
        return cls(
            home_currency=(
                normalize_currency_code(os.getenv("HOME_CURRENCY"))
                or HOME_CURRENCY
            ),
            local_currency=(
                normalize_currency_code(os.getenv("LOCAL_CURRENCY"))
                or LOCAL_CURRENCY
            ),
            anchor_date=cls._parse_anchor(os.getenv("ANCHOR_DATE"), logger),
            dynamic_accounts=dynamic_raw not in _FALSE_VALUES,
            user_id=(os.getenv("TRACKER_USER_ID") or "").strip() or None,
            rates_api_url=os.getenv("RATES_API_URL", DEFAULT_RATES_API_URL),
            rates_timeout=cls._parse_timeout(
                os.getenv("RATES_TIMEOUT"),
                logger,
            ),
        )

    def resolution_policy(self) -> AccountResolutionPolicy:
        """Return the account resolution policy these settings select."""
        if self.dynamic_accounts:
            return AccountResolutionPolicy.hybrid(
                anchor_date=self.anchor_date,
                local_currency=self.local_currency,
            )
        return AccountResolutionPolicy.legacy(
            local_currency=self.local_currency,
        )

    @staticmethod
    def _parse_anchor(raw_value: str | None, logger) -> date | None:
        """Parse the anchor date, keeping the default when invalid.

        Args:
            raw_value: Raw ``YYYY-MM-DD`` value or None.
            logger: Logger used for warnings.

        Returns:
            date | None: Anchor date; None when explicitly disabled.
        """
        if raw_value is None:
            return ANCHOR_DATE
        cleaned = raw_value.strip().lower()
        if cleaned in ("", "none", "off"):
            return None
        parsed = parse_iso_date(cleaned)
        if parsed is None:
            logger.warning(
                f"Invalid ANCHOR_DATE '{raw_value}'. "
                f"Expected format YYYY-MM-DD; using {ANCHOR_DATE}."
            )
            return ANCHOR_DATE
        return parsed

    @staticmethod
    def _parse_timeout(raw_value: str | None, logger) -> float:
        if not raw_value:
            return 8.0
        try:
            return float(raw_value)
        except ValueError:
            logger.warning(f"Invalid RATES_TIMEOUT '{raw_value}'; using 8")
            return 8.0


__all__ = ["TrackerSettings", "DEFAULT_RATES_API_URL"]

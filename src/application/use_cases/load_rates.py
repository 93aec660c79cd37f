"""Use case to load home-currency rates with a built-in fallback."""

from src.application.ports.rates_provider import (
    RatesProviderPort,
    RatesUnavailableError,
)
from src.domain.constants import DEFAULT_RATES, HOME_CURRENCY
from src.domain.models.finance import RatesSnapshot
from src.domain.services.valuation import build_rate_table
from src.infrastructure.logging.logger import get_app_logger


class LoadRatesUseCase:
    """Fetch live rates, falling back to the built-in table on failure."""

    def __init__(
        self,
        rates_provider: RatesProviderPort | None,
        home_currency: str = HOME_CURRENCY,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            rates_provider: Port providing live rates; None means offline.
            home_currency: Currency all rates are expressed in.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._rates_provider = rates_provider
        self._home_currency = home_currency
        self._logger = logger or get_app_logger()

    def execute(self) -> RatesSnapshot:
        """Return the current rate table.

        Returns:
            RatesSnapshot: Live rates merged over the defaults, or the
            defaults alone flagged as not live.
        """
        if self._rates_provider is None:
            return RatesSnapshot(rates=dict(DEFAULT_RATES), is_live=False)
        try:
            api_rates = self._rates_provider.fetch_rates(self._home_currency)
        except RatesUnavailableError as exc:
            self._logger.warning(
                f"Failed to fetch rates, using built-in table: {exc}"
            )
            return RatesSnapshot(rates=dict(DEFAULT_RATES), is_live=False)

        rates = build_rate_table(api_rates)
        self._logger.info(
            f"Loaded {len(api_rates)} live rates for {self._home_currency}"
        )
        return RatesSnapshot(rates=rates, is_live=True)


__all__ = ["LoadRatesUseCase", "RatesSnapshot"]

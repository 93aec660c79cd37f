"""HTTP rate provider backed by the public currency-api dataset."""

from typing import Mapping

import requests

from src.application.ports.rates_provider import (
    RatesProviderPort,
    RatesUnavailableError,
)
from src.infrastructure.settings import DEFAULT_RATES_API_URL


class CurrencyApiRatesProvider(RatesProviderPort):
    """Fetch rates from an endpoint shaped like currency-api.

    The payload is ``{"date": ..., "<base>": {"<code>": rate, ...}}`` with
    lowercase codes and rates in units per one base unit.
    """

    def __init__(
        self,
        url_template: str = DEFAULT_RATES_API_URL,
        timeout: float = 8.0,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the provider.

        Args:
            url_template: Endpoint with a ``{currency}`` placeholder.
            timeout: Request timeout in seconds.
            session: Optional session, mainly for tests.
        """
        self._url_template = url_template
        self._timeout = timeout
        self._session = session or requests.Session()

    def fetch_rates(self, base_currency: str) -> Mapping[str, object]:
        base = base_currency.strip().lower()
        url = self._url_template.format(currency=base)
        try:
            resp = self._session.get(url, timeout=self._timeout)
            resp.raise_for_status()
            payload = resp.json()
        except (requests.RequestException, ValueError) as exc:
            raise RatesUnavailableError(
                f"Rate request to {url} failed: {exc}"
            ) from exc

        rates = payload.get(base) if isinstance(payload, dict) else None
        if not isinstance(rates, dict) or not rates:
            raise RatesUnavailableError(
                f"Rate payload from {url} has no '{base}' table"
            )
        return rates


__all__ = ["CurrencyApiRatesProvider"]

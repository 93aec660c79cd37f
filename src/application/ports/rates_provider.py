"""Port for fetching live currency rates."""

from typing import Mapping, Protocol


class RatesUnavailableError(RuntimeError):
    """Raised when live rates cannot be fetched or parsed."""


class RatesProviderPort(Protocol):
    """Port exposing live exchange rates relative to a base currency."""

    def fetch_rates(self, base_currency: str) -> Mapping[str, object]:
        """Return units of each currency per one ``base_currency`` unit.

        Raises:
            RatesUnavailableError: On transport or payload errors.
        """


__all__ = ["RatesProviderPort", "RatesUnavailableError"]

"""Tests for the HTTP rate provider."""

from unittest.mock import MagicMock

import pytest
import requests

from src.application.ports.rates_provider import RatesUnavailableError
from src.infrastructure.rates_provider import CurrencyApiRatesProvider


def _session(payload=None, error: Exception | None = None) -> MagicMock:
    session = MagicMock()
    response = MagicMock()
    if error is not None:
        session.get.side_effect = error
    response.json.return_value = payload
    session.get.return_value = response
    return session


def test_fetch_rates_returns_base_table() -> None:
    """The table keyed by the lowercase base currency is returned."""
    session = _session({"date": "2026-01-10", "rub": {"usd": 0.0125}})
    provider = CurrencyApiRatesProvider(
        url_template="https://rates.example/{currency}.json",
        timeout=3,
        session=session,
    )

    rates = provider.fetch_rates("RUB")

    assert rates == {"usd": 0.0125}
    session.get.assert_called_once_with(
        "https://rates.example/rub.json",
        timeout=3,
    )


def test_fetch_rates_wraps_transport_errors() -> None:
    """Network failures surface as RatesUnavailableError."""
    provider = CurrencyApiRatesProvider(
        session=_session(error=requests.ConnectionError("down"))
    )

    with pytest.raises(RatesUnavailableError):
        provider.fetch_rates("RUB")


def test_fetch_rates_rejects_payload_without_base_table() -> None:
    """Payloads missing the base table are rejected."""
    provider = CurrencyApiRatesProvider(session=_session({"usd": {}}))

    with pytest.raises(RatesUnavailableError):
        provider.fetch_rates("RUB")

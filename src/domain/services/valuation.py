"""Conversion of account balances into the home currency."""

from collections.abc import Mapping
from decimal import Decimal
from logging import Logger

from src.domain.constants import DEFAULT_RATES, HOME_CURRENCY
from src.domain.models.accounts import AccountStatus
from src.domain.models.finance import ValuationResult
from src.domain.services.normalization import normalize_currency_code
from src.utils.decimal_utils import coerce_decimal


def resolve_rate(
    currency: str | None,
    rates: Mapping[str, Decimal],
    fallback_rates: Mapping[str, Decimal] = DEFAULT_RATES,
) -> Decimal | None:
    """Return the home-currency rate for ``currency``, if any is known."""
    code = normalize_currency_code(currency)
    if code is None:
        return None
    rate = rates.get(code) or fallback_rates.get(code)
    return coerce_decimal(rate) if rate else None


def valuate(
    accounts: list[AccountStatus],
    rates: Mapping[str, Decimal],
    fallback_rates: Mapping[str, Decimal] = DEFAULT_RATES,
    *,
    home_currency: str = HOME_CURRENCY,
    is_live_rates: bool = False,
    logger: Logger | None = None,
) -> ValuationResult:
    """Set each account's home-currency equivalent and sum net worth.

    A currency missing from both rate tables is valued at a rate of one,
    i.e. treated as the home currency.

    Args:
        accounts: Replayed account statuses; updated in place.
        rates: Preferred rate table.
        fallback_rates: Table consulted when ``rates`` lacks a currency.
        home_currency: Currency of the result.
        is_live_rates: Whether ``rates`` came from a live provider.
        logger: Optional logger for diagnostics.

    Returns:
        ValuationResult: Accounts and their total in the home currency.
    """
    total = Decimal("0")
    for status in accounts:
        rate = resolve_rate(status.currency, rates, fallback_rates)
        if rate is None:
            rate = Decimal("1")
            if logger is not None:
                logger.debug(
                    f"No rate for {status.currency!r} on account "
                    f"'{status.name}'; valuing at 1"
                )
        status.rub_equivalent = status.current * rate
        total += status.rub_equivalent

    return ValuationResult(
        accounts=accounts,
        total_net_worth=total,
        currency_code=home_currency,
        is_live_rates=is_live_rates,
    )


def build_rate_table(
    api_rates: Mapping[str, object],
    fallback_rates: Mapping[str, Decimal] = DEFAULT_RATES,
) -> dict[str, Decimal]:
    """Merge provider rates over the fallback table.

    Args:
        api_rates: Units of each currency per one home-currency unit.
        fallback_rates: Built-in home-currency rates.

    Returns:
        dict[str, Decimal]: Home-currency value of one unit per currency.
    """
    table = dict(fallback_rates)
    for currency, raw_rate in api_rates.items():
        code = normalize_currency_code(str(currency))
        rate = coerce_decimal(raw_rate)
        if code is None or not rate.is_finite() or rate <= 0:
            continue
        table[code] = Decimal("1") / rate
    if "USD" in table:
        table["USDT"] = table["USD"]
    return table


__all__ = ["resolve_rate", "valuate", "build_rate_table"]

"""Domain constants for the balance reconciliation engine."""

from datetime import date
from decimal import Decimal

HOME_CURRENCY = "RUB"
LOCAL_CURRENCY = "THB"

# Un-checkpointed accounts ignore transactions on or before this day when
# accounts are discovered dynamically.
ANCHOR_DATE = date(2026, 1, 6)

# Home-currency value of one unit, used when live rates are unavailable.
DEFAULT_RATES: dict[str, Decimal] = {
    "USDT": Decimal("98"),
    "USD": Decimal("98"),
    "THB": Decimal("2.8"),
    "RUB": Decimal("1"),
    "MYR": Decimal("23"),
    "HKD": Decimal("13"),
    "BTC": Decimal("9500000"),
}

UNCATEGORIZED = "Uncategorized"

INITIAL_BALANCE_MARKERS = ("initial balance", "start balance")

CRYPTO_CODES = ("USDT", "BTC", "ETH")
FIAT_CODES = ("RUB", "USD", "EUR", "GBP")
BANK_NAME_KEYWORDS = ("bank", "card", "main")
CRYPTO_NAME_KEYWORDS = ("btc", "usdt")


__all__ = [
    "HOME_CURRENCY",
    "LOCAL_CURRENCY",
    "ANCHOR_DATE",
    "DEFAULT_RATES",
    "UNCATEGORIZED",
    "INITIAL_BALANCE_MARKERS",
    "CRYPTO_CODES",
    "FIAT_CODES",
    "BANK_NAME_KEYWORDS",
    "CRYPTO_NAME_KEYWORDS",
]

"""Domain models for valuation and account synchronization results."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from src.domain.models.accounts import Account, AccountStatus


@dataclass(frozen=True)
class RatesSnapshot:
    """Home-currency value of one unit per currency code.

    Attributes:
        rates: Mapping of currency code to home-currency rate.
        is_live: False when the built-in fallback table is in use.
    """

    rates: dict[str, Decimal]
    is_live: bool = False


@dataclass(frozen=True)
class ValuationResult:
    """Account balances with home-currency equivalents and net worth."""

    accounts: list[AccountStatus]
    total_net_worth: Decimal
    currency_code: str
    is_live_rates: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly report."""
        return {
            "currency_code": self.currency_code,
            "is_live_rates": self.is_live_rates,
            "total_net_worth": str(self.total_net_worth),
            "accounts": [status.to_dict() for status in self.accounts],
        }


@dataclass(frozen=True)
class CurrencyUpdate:
    """Currency correction for an existing stored account."""

    account_id: str
    name: str
    previous_currency: str
    currency: str


@dataclass(frozen=True)
class AccountSyncPlan:
    """Accounts to create and currencies to correct in the account store."""

    to_create: list[Account] = field(default_factory=list)
    to_update: list[CurrencyUpdate] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.to_create and not self.to_update


__all__ = [
    "RatesSnapshot",
    "ValuationResult",
    "CurrencyUpdate",
    "AccountSyncPlan",
]

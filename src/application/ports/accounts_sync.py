"""Port for writing account sync results into the account store."""

from typing import Protocol

from src.domain.models.accounts import Account
from src.domain.models.finance import CurrencyUpdate


class AccountsDestinationPort(Protocol):
    """Port exposing write access to the durable account store."""

    def create_accounts(
        self,
        accounts: list[Account],
        user_id: str | None,
    ) -> int:
        """Insert new accounts and return how many were written."""

    def update_currencies(self, updates: list[CurrencyUpdate]) -> int:
        """Apply currency corrections and return how many were written."""


__all__ = ["AccountsDestinationPort"]

"""Ports for reading persisted accounts and transactions."""

from typing import Protocol

from src.domain.models.accounts import Account
from src.domain.models.transactions import Transaction


class AccountsRepositoryPort(Protocol):
    """Port exposing read access to the durable account store."""

    def fetch_accounts(self, user_id: str | None) -> list[Account]:
        """Return the accounts of a user, oldest first.

        A ``user_id`` of None selects the anonymous/local scope.
        """


class TransactionsRepositoryPort(Protocol):
    """Port exposing read access to stored transactions."""

    def fetch_transactions(self, user_id: str | None) -> list[Transaction]:
        """Return the transactions of a user in any order."""


__all__ = ["AccountsRepositoryPort", "TransactionsRepositoryPort"]

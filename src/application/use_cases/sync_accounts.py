"""Use case for registering accounts discovered in imported transactions.

This module defines a small ETL-style use case that:

* reads the user's accounts from the durable store;
* plans which transaction account names are missing and which stored
  currencies disagree with the inferred ones;
* inserts the missing accounts and applies the currency corrections.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from src.application.ports.accounts_repository import AccountsRepositoryPort
from src.application.ports.accounts_sync import AccountsDestinationPort
from src.domain.constants import LOCAL_CURRENCY
from src.domain.models.transactions import Transaction
from src.domain.services.account_sync import plan_account_sync
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class SyncAccountsResult:
    """Result of a sync_accounts run.

    Attributes:
        source_count: Number of accounts already in the store.
        created_count: Number of accounts inserted.
        updated_count: Number of stored currencies corrected.
    """

    source_count: int
    created_count: int
    updated_count: int


class SyncAccountsUseCase:
    """Synchronize transaction account names into the account store."""

    def __init__(
        self,
        accounts_repository: AccountsRepositoryPort,
        destination: AccountsDestinationPort,
        local_currency: str = LOCAL_CURRENCY,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            accounts_repository: Port providing the stored accounts.
            destination: Port writing new accounts and corrections.
            local_currency: Default currency of inferred accounts.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._accounts_repository = accounts_repository
        self._destination = destination
        self._local_currency = local_currency
        self._logger = logger or get_app_logger()

    def run(
        self,
        transactions: Iterable[Transaction],
        user_id: str | None,
    ) -> SyncAccountsResult:
        """Execute the synchronization job.

        Args:
            transactions: Imported transactions.
            user_id: Store scope; nothing is written without a user.

        Returns:
            SyncAccountsResult: Summary of how many rows were written.
        """
        transactions = list(transactions)
        if not transactions or not user_id:
            return SyncAccountsResult(0, 0, 0)

        existing = self._accounts_repository.fetch_accounts(user_id)
        plan = plan_account_sync(
            transactions,
            existing,
            local_currency=self._local_currency,
        )

        created = 0
        if plan.to_create:
            created = self._destination.create_accounts(
                plan.to_create,
                user_id,
            )
            self._logger.info(f"Created {created} new accounts")
        updated = 0
        if plan.to_update:
            for update in plan.to_update:
                self._logger.info(
                    f"Updating account '{update.name}' currency from "
                    f"{update.previous_currency} to {update.currency}"
                )
            updated = self._destination.update_currencies(plan.to_update)

        return SyncAccountsResult(
            source_count=len(existing),
            created_count=created,
            updated_count=updated,
        )


__all__ = ["SyncAccountsUseCase", "SyncAccountsResult"]

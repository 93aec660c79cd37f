"""CLI adapter registering transaction accounts in the account store.

This module reads the stored transactions of the configured user, wires the
SyncAccountsUseCase to the concrete database adapter, and reports how many
accounts were created or corrected.
"""

from src.infrastructure.container import (
    build_database_adapter,
    build_sync_accounts_use_case,
    build_transactions_repository,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.infrastructure.settings import TrackerSettings


def main() -> None:
    """Run the accounts synchronization use case."""
    logger = get_app_logger()
    settings = TrackerSettings.from_env()
    get_usage_logger().info(
        f"sync-accounts invoked for user={settings.user_id}"
    )
    if settings.user_id is None:
        logger.warning("TRACKER_USER_ID is required to sync accounts.")
        return

    try:
        db_adapter = build_database_adapter()
        transactions = build_transactions_repository(
            db_adapter
        ).fetch_transactions(settings.user_id)
        use_case = build_sync_accounts_use_case(settings, db_adapter)
        result = use_case.run(transactions, settings.user_id)
    except RuntimeError as exc:
        logger.error(str(exc))
        return

    print(
        f"Created {result.created_count} accounts and updated "
        f"{result.updated_count} currencies."
    )


if __name__ == "__main__":  # pragma: no cover
    main()

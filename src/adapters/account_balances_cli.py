"""CLI adapter printing current account balances as a JSON report.

This module wires the GetAccountBalancesUseCase to the configured store and
rate provider. The user scope and engine options come from the environment
(see ``TrackerSettings``).
"""

import json

from src.infrastructure.container import build_account_balances_use_case
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.infrastructure.settings import TrackerSettings


def main() -> None:
    """Run the account balances use case and print the report."""
    logger = get_app_logger()
    settings = TrackerSettings.from_env()
    get_usage_logger().info(
        f"account-balances invoked for user={settings.user_id}"
    )
    try:
        use_case = build_account_balances_use_case(settings)
        result = use_case.execute(user_id=settings.user_id)
    except RuntimeError as exc:
        logger.error(str(exc))
        return

    if not result.is_live_rates:
        logger.warning("Live rates unavailable; balances use built-in rates")
    print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))


if __name__ == "__main__":  # pragma: no cover
    main()

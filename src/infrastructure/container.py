"""Composition root for wiring infrastructure adapters."""

from src.application.ports.accounts_repository import (
    AccountsRepositoryPort,
    TransactionsRepositoryPort,
)
from src.application.ports.accounts_sync import AccountsDestinationPort
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.rates_provider import RatesProviderPort
from src.application.use_cases.get_account_balances import (
    GetAccountBalancesUseCase,
)
from src.application.use_cases.load_rates import LoadRatesUseCase
from src.application.use_cases.sync_accounts import SyncAccountsUseCase
from src.infrastructure.accounts_repository import (
    SqlAlchemyAccountsRepository,
    SqlAlchemyTransactionsRepository,
)
from src.infrastructure.accounts_sync import SqlAlchemyAccountsDestination
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.rates_provider import CurrencyApiRatesProvider
from src.infrastructure.settings import TrackerSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_accounts_repository(
    db_port: DatabaseEnginePort | None = None,
) -> AccountsRepositoryPort:
    """Return the persisted accounts repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyAccountsRepository(resolved_db, logger=get_app_logger())


def build_transactions_repository(
    db_port: DatabaseEnginePort | None = None,
) -> TransactionsRepositoryPort:
    """Return the stored transactions repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyTransactionsRepository(
        resolved_db,
        logger=get_app_logger(),
    )


def build_accounts_destination(
    db_port: DatabaseEnginePort | None = None,
) -> AccountsDestinationPort:
    """Return the account store destination adapter."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyAccountsDestination(resolved_db)


def build_rates_provider(
    settings: TrackerSettings | None = None,
) -> RatesProviderPort:
    """Return the live rate provider."""
    resolved = settings or TrackerSettings.from_env()
    return CurrencyApiRatesProvider(
        url_template=resolved.rates_api_url,
        timeout=resolved.rates_timeout,
    )


def build_account_balances_use_case(
    settings: TrackerSettings | None = None,
    db_port: DatabaseEnginePort | None = None,
) -> GetAccountBalancesUseCase:
    """Return the account balances use case wired to configured adapters."""
    resolved = settings or TrackerSettings.from_env()
    resolved_db = db_port or build_database_adapter()
    logger = get_app_logger()
    rates_use_case = LoadRatesUseCase(
        build_rates_provider(resolved),
        home_currency=resolved.home_currency,
        logger=logger,
    )
    return GetAccountBalancesUseCase(
        accounts_repository=build_accounts_repository(resolved_db),
        transactions_repository=build_transactions_repository(resolved_db),
        rates_use_case=rates_use_case,
        policy=resolved.resolution_policy(),
        home_currency=resolved.home_currency,
        logger=logger,
    )


def build_sync_accounts_use_case(
    settings: TrackerSettings | None = None,
    db_port: DatabaseEnginePort | None = None,
) -> SyncAccountsUseCase:
    """Return the account sync use case wired to configured adapters."""
    resolved = settings or TrackerSettings.from_env()
    resolved_db = db_port or build_database_adapter()
    return SyncAccountsUseCase(
        accounts_repository=build_accounts_repository(resolved_db),
        destination=build_accounts_destination(resolved_db),
        local_currency=resolved.local_currency,
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_accounts_repository",
    "build_transactions_repository",
    "build_accounts_destination",
    "build_rates_provider",
    "build_account_balances_use_case",
    "build_sync_accounts_use_case",
]

"""Application use cases package."""

from .get_account_balances import GetAccountBalancesUseCase, ValuationResult
from .load_rates import LoadRatesUseCase, RatesSnapshot
from .sync_accounts import SyncAccountsResult, SyncAccountsUseCase

__all__ = [
    "GetAccountBalancesUseCase",
    "ValuationResult",
    "LoadRatesUseCase",
    "RatesSnapshot",
    "SyncAccountsUseCase",
    "SyncAccountsResult",
]

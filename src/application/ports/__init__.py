"""Application ports package."""

from .accounts_repository import (
    AccountsRepositoryPort,
    TransactionsRepositoryPort,
)
from .accounts_sync import AccountsDestinationPort
from .database import DatabaseEnginePort
from .rates_provider import RatesProviderPort, RatesUnavailableError

__all__ = [
    "AccountsRepositoryPort",
    "TransactionsRepositoryPort",
    "AccountsDestinationPort",
    "DatabaseEnginePort",
    "RatesProviderPort",
    "RatesUnavailableError",
]

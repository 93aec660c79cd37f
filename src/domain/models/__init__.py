"""Domain models package."""

from .accounts import Account, AccountStatus, AccountType, CheckpointState
from .finance import (
    AccountSyncPlan,
    CurrencyUpdate,
    RatesSnapshot,
    ValuationResult,
)
from .transactions import Transaction, TransactionType

__all__ = [
    "Account",
    "AccountStatus",
    "AccountType",
    "CheckpointState",
    "AccountSyncPlan",
    "CurrencyUpdate",
    "RatesSnapshot",
    "ValuationResult",
    "Transaction",
    "TransactionType",
]

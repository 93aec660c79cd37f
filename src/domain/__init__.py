"""Domain package for business rules and core models."""

from .constants import ANCHOR_DATE, DEFAULT_RATES, HOME_CURRENCY, LOCAL_CURRENCY
from .models import (
    Account,
    AccountStatus,
    AccountSyncPlan,
    AccountType,
    CheckpointState,
    CurrencyUpdate,
    RatesSnapshot,
    Transaction,
    TransactionType,
    ValuationResult,
)
from .services import (
    AccountRegistry,
    AccountResolutionPolicy,
    build_rate_table,
    infer_account_details,
    plan_account_sync,
    reconcile_balances,
    replay,
    should_apply,
    valuate,
)

__all__ = [
    "ANCHOR_DATE",
    "DEFAULT_RATES",
    "HOME_CURRENCY",
    "LOCAL_CURRENCY",
    "Account",
    "AccountStatus",
    "AccountSyncPlan",
    "AccountType",
    "CheckpointState",
    "CurrencyUpdate",
    "RatesSnapshot",
    "Transaction",
    "TransactionType",
    "ValuationResult",
    "AccountRegistry",
    "AccountResolutionPolicy",
    "build_rate_table",
    "infer_account_details",
    "plan_account_sync",
    "reconcile_balances",
    "replay",
    "should_apply",
    "valuate",
]

"""Domain services package."""

from .account_sync import collect_account_currencies, plan_account_sync
from .checkpoint import should_apply
from .checkpoints import build_checkpoint, checkpoint_candidates
from .currency_inference import AccountDetails, infer_account_details
from .normalization import (
    is_initial_balance_note,
    normalize_account_name,
    normalize_currency_code,
    parse_iso_date,
)
from .registry import AccountRegistry, AccountResolutionPolicy
from .replay import (
    canonical_order,
    canonical_sort_key,
    destination_credit,
    effective_amount,
    reconcile_balances,
    replay,
)
from .valuation import build_rate_table, resolve_rate, valuate

__all__ = [
    "collect_account_currencies",
    "plan_account_sync",
    "should_apply",
    "build_checkpoint",
    "checkpoint_candidates",
    "AccountDetails",
    "infer_account_details",
    "is_initial_balance_note",
    "normalize_account_name",
    "normalize_currency_code",
    "parse_iso_date",
    "AccountRegistry",
    "AccountResolutionPolicy",
    "canonical_order",
    "canonical_sort_key",
    "destination_credit",
    "effective_amount",
    "reconcile_balances",
    "replay",
    "build_rate_table",
    "resolve_rate",
    "valuate",
]

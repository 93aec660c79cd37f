"""Checkpoint gate deciding which transactions affect an account.

A checkpoint asserts an account's balance as of a calendar day and,
optionally, as of a specific transaction on that day. Transactions already
reflected in the stored balance must not be replayed again.
"""

from decimal import Decimal

from src.domain.models.accounts import AccountStatus, CheckpointState
from src.domain.models.transactions import Transaction
from src.domain.services.normalization import (
    is_initial_balance_note,
    parse_iso_date,
)
from src.domain.services.registry import AccountResolutionPolicy

_OPENING_BALANCE_EPSILON = Decimal("0.01")


def should_apply(
    status: AccountStatus,
    tx: Transaction,
    policy: AccountResolutionPolicy,
) -> bool:
    """Return True when ``tx`` should change ``status.current``.

    Transactions must be passed in canonical order: on the checkpoint day
    the result depends on whether the checkpoint transaction was already
    walked, which is recorded in ``status.checkpoint_state``.

    Args:
        status: Account being replayed; its checkpoint state may advance.
        tx: Transaction touching the account.
        policy: Resolution policy of the current replay.

    Returns:
        bool: Whether the transaction's effect applies to the account.
    """
    tx_day = parse_iso_date(tx.date)
    if tx_day is None:
        return False

    account = status.account
    checkpoint_day = parse_iso_date(account.balance_date)
    if checkpoint_day is not None:
        if tx_day < checkpoint_day:
            return False
        if tx_day > checkpoint_day:
            return True
        return _apply_on_checkpoint_day(status, tx)

    if policy.dynamic_accounts:
        anchor = policy.anchor_date
        return anchor is None or tx_day > anchor

    if (
        is_initial_balance_note(tx.note)
        and abs(account.balance) > _OPENING_BALANCE_EPSILON
    ):
        return False
    return True


def _apply_on_checkpoint_day(status: AccountStatus, tx: Transaction) -> bool:
    checkpoint_tx_id = status.account.balance_checkpoint_tx_id
    if not checkpoint_tx_id:
        # The stored balance closes the whole day.
        return False
    if status.checkpoint_state is CheckpointState.PAST_CHECKPOINT:
        return True
    if tx.id == checkpoint_tx_id:
        status.checkpoint_state = CheckpointState.PAST_CHECKPOINT
        return False
    status.checkpoint_state = CheckpointState.AT_CHECKPOINT_PENDING
    return False


__all__ = ["should_apply"]

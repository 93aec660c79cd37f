"""Helpers for choosing and recording account balance checkpoints."""

from collections.abc import Iterable
from dataclasses import replace
from datetime import date
from decimal import Decimal

from src.domain.models.accounts import Account
from src.domain.models.transactions import Transaction
from src.domain.services.normalization import normalize_account_name


def checkpoint_candidates(
    transactions: Iterable[Transaction],
    account_name: str,
    limit: int = 50,
) -> list[Transaction]:
    """Return the most recent transactions touching an account.

    Outgoing transactions match on ``account``; incoming transfers match
    on ``category``. Results are newest day first and, within a day, in
    file order (lowest index first).

    Args:
        transactions: Transactions in any order.
        account_name: Account display name.
        limit: Maximum number of transactions returned.

    Returns:
        list[Transaction]: Candidate checkpoint transactions.
    """
    target = normalize_account_name(account_name)
    if not target:
        return []
    touching = [
        tx
        for tx in transactions
        if normalize_account_name(tx.account) == target
        or (tx.is_transfer and normalize_account_name(tx.category) == target)
    ]
    touching.sort(key=lambda tx: tx.index or 0)
    touching.sort(key=lambda tx: tx.date, reverse=True)
    return touching[:limit]


def build_checkpoint(
    account: Account,
    balance: Decimal,
    on_date: date,
    checkpoint_tx_id: str | None = None,
) -> Account:
    """Return ``account`` asserting ``balance`` as of a day or transaction.

    Args:
        account: Account to checkpoint.
        balance: Balance including ``checkpoint_tx_id`` when given,
            otherwise the closing balance of ``on_date``.
        on_date: Checkpoint day.
        checkpoint_tx_id: Last transaction included in ``balance``.

    Returns:
        Account: Updated copy of the account.
    """
    return replace(
        account,
        balance=balance,
        balance_date=on_date.isoformat(),
        balance_checkpoint_tx_id=checkpoint_tx_id,
    )


__all__ = ["checkpoint_candidates", "build_checkpoint"]

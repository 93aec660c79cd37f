"""Replay of transactions into account running balances."""

from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from src.domain.constants import HOME_CURRENCY, UNCATEGORIZED
from src.domain.models.accounts import Account, AccountStatus
from src.domain.models.transactions import Transaction
from src.domain.services.checkpoint import should_apply
from src.domain.services.normalization import (
    normalize_currency_code,
    parse_iso_date,
)
from src.domain.services.registry import (
    AccountRegistry,
    AccountResolutionPolicy,
)


def canonical_sort_key(tx: Transaction) -> tuple[int, str, int]:
    """Sort key giving date ascending, then index descending.

    Transactions with an unparseable date sort after every dated one.
    """
    tx_day = parse_iso_date(tx.date)
    index = tx.index or 0
    if tx_day is None:
        return (1, "", -index)
    return (0, tx_day.isoformat(), -index)


def canonical_order(transactions: Iterable[Transaction]) -> list[Transaction]:
    """Return a new list of transactions in replay order."""
    return sorted(transactions, key=canonical_sort_key)


def effective_amount(
    status: AccountStatus,
    tx: Transaction,
    home_currency: str = HOME_CURRENCY,
) -> Decimal:
    """Return the signed amount a transaction adds to its source account.

    Foreign-currency accounts use the transaction's original amount when
    it is expressed in the account's currency. Amounts are applied as
    given; the producer owns the sign convention.
    """
    account_currency = normalize_currency_code(status.currency)
    original_currency = normalize_currency_code(tx.original_currency)
    if (
        account_currency != normalize_currency_code(home_currency)
        and original_currency is not None
        and original_currency == account_currency
        and tx.original_amount
    ):
        return tx.original_amount
    return tx.amount


def destination_credit(tx: Transaction) -> Decimal:
    """Return the positive amount a transfer credits to its destination."""
    if tx.original_amount is not None and tx.original_amount > 0:
        return abs(tx.original_amount)
    return abs(tx.amount)


def has_destination(tx: Transaction) -> bool:
    """Return True when a transfer names a destination account."""
    category = (tx.category or "").strip()
    return tx.is_transfer and bool(category) and category != UNCATEGORIZED


def replay(
    registry: AccountRegistry,
    transactions: Iterable[Transaction],
    home_currency: str = HOME_CURRENCY,
    logger: Logger | None = None,
) -> list[AccountStatus]:
    """Walk transactions once in canonical order, updating balances.

    Args:
        registry: Fresh registry for this replay; grown and mutated.
        transactions: Transactions in any order.
        home_currency: Currency of the net-worth aggregation.
        logger: Optional logger for diagnostics.

    Returns:
        list[AccountStatus]: The registry's statuses after the walk.
    """
    policy = registry.policy
    ordered = canonical_order(transactions)
    applied = 0

    for tx in ordered:
        if parse_iso_date(tx.date) is None and logger is not None:
            logger.warning(
                f"Transaction {tx.id} has unparseable date '{tx.date}'; "
                "it sorts last and is not applied"
            )

        source_idx = registry.get_or_create(tx.account, tx.original_currency)
        if source_idx is not None:
            source = registry[source_idx]
            if should_apply(source, tx, policy):
                source.current += effective_amount(source, tx, home_currency)
                applied += 1

        if not has_destination(tx):
            continue
        dest_idx = registry.get_or_create(tx.category, tx.original_currency)
        if dest_idx is None:
            continue
        if dest_idx == source_idx:
            if logger is not None:
                logger.debug(
                    f"Transfer {tx.id} targets its own source account; "
                    "destination credit skipped"
                )
            continue
        destination = registry[dest_idx]
        if should_apply(destination, tx, policy):
            destination.current += destination_credit(tx)
            applied += 1

    if logger is not None:
        logger.info(
            f"Replayed {len(ordered)} transactions into "
            f"{len(registry)} accounts ({applied} effects applied)"
        )
    return registry.statuses


def reconcile_balances(
    accounts: Iterable[Account],
    transactions: Iterable[Transaction],
    policy: AccountResolutionPolicy | None = None,
    home_currency: str = HOME_CURRENCY,
    logger: Logger | None = None,
) -> list[AccountStatus]:
    """Seed a fresh registry from ``accounts`` and replay ``transactions``.

    Every call starts from new statuses, so repeated calls with the same
    input give the same balances.
    """
    registry = AccountRegistry.seed(accounts, policy=policy, logger=logger)
    return replay(
        registry,
        transactions,
        home_currency=home_currency,
        logger=logger,
    )


__all__ = [
    "canonical_sort_key",
    "canonical_order",
    "effective_amount",
    "destination_credit",
    "has_destination",
    "replay",
    "reconcile_balances",
]

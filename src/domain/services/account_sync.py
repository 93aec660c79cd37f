"""Planning of account store updates from imported transactions."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.constants import LOCAL_CURRENCY
from src.domain.models.accounts import Account
from src.domain.models.finance import AccountSyncPlan, CurrencyUpdate
from src.domain.models.transactions import Transaction
from src.domain.services.currency_inference import infer_account_details
from src.domain.services.normalization import normalize_account_name


def collect_account_currencies(
    transactions: Iterable[Transaction],
) -> dict[str, str | None]:
    """Map each account name to the first original currency seen for it.

    Names are kept exactly as written in the transactions, in first-seen
    order.
    """
    currencies: dict[str, str | None] = {}
    for tx in transactions:
        name = tx.account
        if not name or not name.strip():
            continue
        if not currencies.get(name) and tx.original_currency:
            currencies[name] = tx.original_currency
        else:
            currencies.setdefault(name, None)
    return currencies


def plan_account_sync(
    transactions: Iterable[Transaction],
    existing: Iterable[Account],
    local_currency: str = LOCAL_CURRENCY,
) -> AccountSyncPlan:
    """Decide which accounts to create and which currencies to correct.

    Args:
        transactions: Imported transactions.
        existing: Accounts already in the store.
        local_currency: Default currency; never written over a stored one.

    Returns:
        AccountSyncPlan: Accounts to insert and currency updates.
    """
    stored = {account.name: account for account in existing}
    to_create: list[Account] = []
    to_update: list[CurrencyUpdate] = []

    for name, detected in collect_account_currencies(transactions).items():
        details = infer_account_details(name, detected, local_currency)
        account = stored.get(name)
        if account is None:
            to_create.append(
                Account(
                    id=normalize_account_name(name),
                    name=name,
                    currency=details.currency,
                    type=details.type,
                    balance=Decimal("0"),
                )
            )
            continue
        if (
            details.currency != local_currency
            and account.currency != details.currency
        ):
            to_update.append(
                CurrencyUpdate(
                    account_id=account.id,
                    name=name,
                    previous_currency=account.currency,
                    currency=details.currency,
                )
            )

    return AccountSyncPlan(to_create=to_create, to_update=to_update)


__all__ = ["collect_account_currencies", "plan_account_sync"]

"""Best-guess account type and currency for synthesized accounts."""

from dataclasses import dataclass

from src.domain.constants import (
    BANK_NAME_KEYWORDS,
    CRYPTO_CODES,
    CRYPTO_NAME_KEYWORDS,
    FIAT_CODES,
    LOCAL_CURRENCY,
)
from src.domain.models.accounts import AccountType

# Checked in order; the first hint contained in the name wins.
_NAME_HINTS: tuple[tuple[tuple[str, ...], str, AccountType | None], ...] = (
    (("usd",), "USD", None),
    (("eur",), "EUR", None),
    (("hkd",), "HKD", None),
    (("myr",), "MYR", None),
    (("rub", "main"), "RUB", AccountType.BANK),
    (("btc",), "BTC", AccountType.CRYPTO),
    (("usdt",), "USDT", AccountType.CRYPTO),
)


@dataclass(frozen=True)
class AccountDetails:
    """Inferred type and currency of an account."""

    type: AccountType
    currency: str


def infer_account_details(
    name: str,
    detected_currency: str | None = None,
    local_currency: str = LOCAL_CURRENCY,
) -> AccountDetails:
    """Infer an account's type and currency from its name.

    A three-letter detected currency takes precedence over hints embedded
    in the name. Crypto keywords in the name always force the crypto type.

    Args:
        name: Free-text account or category name.
        detected_currency: Currency seen on the transaction, if any.
        local_currency: Currency used when nothing else matches.

    Returns:
        AccountDetails: Deterministic best guess.
    """
    lower_name = (name or "").lower()
    account_type = AccountType.CASH
    currency = local_currency

    detected = (detected_currency or "").strip()
    if len(detected) == 3:
        currency = detected.upper()
        if currency in CRYPTO_CODES:
            account_type = AccountType.CRYPTO
        elif currency in FIAT_CODES and any(
            keyword in lower_name for keyword in BANK_NAME_KEYWORDS
        ):
            account_type = AccountType.BANK
    else:
        for keywords, hinted_currency, hinted_type in _NAME_HINTS:
            if any(keyword in lower_name for keyword in keywords):
                currency = hinted_currency
                account_type = hinted_type or account_type
                break

    if any(keyword in lower_name for keyword in CRYPTO_NAME_KEYWORDS):
        account_type = AccountType.CRYPTO

    return AccountDetails(type=account_type, currency=currency)


__all__ = ["AccountDetails", "infer_account_details"]

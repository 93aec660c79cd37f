"""Tests for the account registry."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.domain.models.accounts import Account, AccountType
from src.domain.services.registry import (
    AccountRegistry,
    AccountResolutionPolicy,
)


def test_seed_starts_from_stored_balance() -> None:
    """Seeded statuses start at the account balance."""
    registry = AccountRegistry.seed(
        [Account(id="c", name="Cash", currency="RUB", balance=Decimal("12"))]
    )

    assert len(registry) == 1
    assert registry[0].current == Decimal("12")
    assert registry[0].rub_equivalent == Decimal("0")
    assert registry[0].has_passed_checkpoint is False


def test_find_matches_normalized_names() -> None:
    """Names match case-insensitively and ignoring whitespace."""
    registry = AccountRegistry.seed(
        [Account(id="t", name="Tinkoff Black", currency="RUB")]
    )

    assert registry.find(" tinkoff  BLACK ") == 0
    assert registry.find("Tinkoff") is None


def test_find_prefers_checkpointed_duplicate() -> None:
    """Among equal names the account with a checkpoint date wins."""
    registry = AccountRegistry.seed(
        [
            Account(id="a", name="Cash", currency="THB"),
            Account(
                id="b",
                name="cash",
                currency="THB",
                balance_date="2024-01-01",
            ),
        ]
    )

    assert registry.find("CASH") == 1


def test_find_ignores_unparseable_checkpoint_dates() -> None:
    """Only a parseable checkpoint date wins the tie-break."""
    registry = AccountRegistry.seed(
        [
            Account(
                id="a",
                name="Cash",
                currency="THB",
                balance_date="not-a-date",
            ),
            Account(
                id="b",
                name="cash",
                currency="THB",
                balance_date="2024-01-01",
            ),
        ]
    )

    assert registry.find("cash") == 1


def test_find_without_checkpoint_keeps_first_match() -> None:
    """Known limitation: plain duplicates resolve to the first account."""
    registry = AccountRegistry.seed(
        [
            Account(id="a", name="Cash", currency="THB"),
            Account(id="b", name="cash", currency="RUB"),
        ]
    )

    assert registry.find("cash") == 0


def test_get_or_create_is_deterministic() -> None:
    """Repeated lookups of a synthesized name return the same index."""
    logger = MagicMock()
    registry = AccountRegistry.seed([], logger=logger)

    first = registry.get_or_create("Bybit USDT", "USDT")
    second = registry.get_or_create("Bybit USDT", "USDT")

    assert first == second == 0
    assert len(registry) == 1
    status = registry[0]
    assert status.id == "bybitusdt"
    assert status.current == Decimal("0")
    assert status.account.type is AccountType.CRYPTO
    logger.debug.assert_called_once()


def test_get_or_create_uses_policy_local_currency() -> None:
    """Uninformative names fall back to the configured local currency."""
    registry = AccountRegistry.seed(
        [],
        policy=AccountResolutionPolicy.hybrid(local_currency="MYR"),
    )

    idx = registry.get_or_create("Pocket")

    assert registry[idx].currency == "MYR"
    assert registry[idx].account.type is AccountType.CASH


def test_get_or_create_respects_legacy_policy_and_blank_names() -> None:
    """No accounts are synthesized in legacy mode or for blank names."""
    legacy = AccountRegistry.seed([], policy=AccountResolutionPolicy.legacy())
    hybrid = AccountRegistry.seed([])

    assert legacy.get_or_create("Wallet") is None
    assert hybrid.get_or_create("   ") is None
    assert len(legacy) == 0
    assert len(hybrid) == 0


def test_seed_warns_on_unparseable_checkpoint_date() -> None:
    """Broken checkpoint dates are reported."""
    logger = MagicMock()

    AccountRegistry.seed(
        [
            Account(
                id="c",
                name="Cash",
                currency="RUB",
                balance_date="10.01.2024",
            )
        ],
        logger=logger,
    )

    logger.warning.assert_called_once()

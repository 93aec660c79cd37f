"""Tests for the SQLAlchemy account sync destination."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.domain.models.accounts import Account, AccountType
from src.domain.models.finance import CurrencyUpdate
from src.infrastructure import accounts_sync as accounts_sync_module
from src.infrastructure.accounts_sync import SqlAlchemyAccountsDestination


def _build_db_port() -> tuple[MagicMock, MagicMock]:
    engine = MagicMock()
    conn = MagicMock()
    context = MagicMock()
    context.__enter__.return_value = conn
    engine.begin.return_value = context
    db_port = MagicMock()
    db_port.get_finance_engine.return_value = engine
    return db_port, conn


def test_create_accounts_inserts_payload() -> None:
    """Accounts are inserted for the user in one statement."""
    db_port, conn = _build_db_port()
    destination = SqlAlchemyAccountsDestination(db_port)

    count = destination.create_accounts(
        [
            Account(
                id="bybitbtc",
                name="Bybit BTC",
                currency="BTC",
                type=AccountType.CRYPTO,
            )
        ],
        "user-1",
    )

    assert count == 1
    conn.execute.assert_called_once_with(
        accounts_sync_module.INSERT_ACCOUNTS_SQL,
        [
            {
                "user_id": "user-1",
                "name": "Bybit BTC",
                "type": "crypto",
                "currency": "BTC",
                "balance": Decimal("0"),
            }
        ],
    )


def test_update_currencies_updates_by_id() -> None:
    """Currency corrections are keyed by account id."""
    db_port, conn = _build_db_port()
    destination = SqlAlchemyAccountsDestination(db_port)

    count = destination.update_currencies(
        [CurrencyUpdate("id-1", "Revolut", "THB", "EUR")]
    )

    assert count == 1
    conn.execute.assert_called_once_with(
        accounts_sync_module.UPDATE_CURRENCY_SQL,
        [{"id": "id-1", "currency": "EUR"}],
    )


def test_empty_inputs_do_not_touch_database() -> None:
    """Nothing is written for empty batches."""
    db_port, _ = _build_db_port()
    destination = SqlAlchemyAccountsDestination(db_port)

    assert destination.create_accounts([], "user-1") == 0
    assert destination.update_currencies([]) == 0
    db_port.get_finance_engine.assert_not_called()

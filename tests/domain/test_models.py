"""Tests for domain model construction and serialization."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.domain.models.accounts import Account, AccountStatus, AccountType
from src.domain.models.finance import ValuationResult
from src.domain.models.transactions import Transaction, TransactionType


def test_transaction_from_importer_record() -> None:
    """camelCase importer keys and float amounts are normalized."""
    tx = Transaction.from_mapping(
        {
            "id": 17,
            "date": "2024-04-02",
            "type": "Transfer",
            "account": "Main",
            "category": "Bybit",
            "amount": -9800.1,
            "originalAmount": 100,
            "originalCurrency": "USD",
            "note": None,
        }
    )

    assert tx.id == "17"
    assert tx.type is TransactionType.TRANSFER
    assert tx.amount == Decimal("-9800.1")
    assert tx.original_amount == Decimal("100")
    assert tx.original_currency == "USD"
    assert tx.note == ""
    assert tx.index == 0
    assert tx.is_transfer


def test_transaction_from_store_row() -> None:
    """snake_case store columns are accepted."""
    tx = Transaction.from_mapping(
        {
            "id": "a",
            "date": "2024-04-02",
            "type": "expense",
            "account": "Cash",
            "amount": Decimal("-5"),
            "original_amount": None,
            "original_currency": "",
            "index": 3,
        }
    )

    assert tx.original_amount is None
    assert tx.original_currency is None
    assert tx.index == 3


def test_transaction_unknown_type_is_read_as_expense() -> None:
    """Unknown kinds keep their amount but never fan out."""
    logger = MagicMock()

    tx = Transaction.from_mapping(
        {"id": "x", "type": "refund", "category": "Cash", "amount": "7"},
        logger=logger,
    )

    assert tx.type is TransactionType.EXPENSE
    assert tx.amount == Decimal("7")
    assert not tx.is_transfer
    logger.warning.assert_called_once()


def test_transaction_tolerates_fractional_and_bad_index() -> None:
    """Index strings are truncated; garbage becomes zero."""
    assert Transaction.from_mapping({"id": "a", "index": "2.0"}).index == 2
    assert Transaction.from_mapping({"id": "b", "index": "n/a"}).index == 0
    assert Transaction.from_mapping({"id": "c", "index": "NaN"}).index == 0


def test_non_finite_amounts_become_zero() -> None:
    """NaN and Infinity never reach the replay arithmetic."""
    tx = Transaction.from_mapping(
        {"id": "n", "amount": "NaN", "originalAmount": "Infinity"}
    )

    assert tx.amount == Decimal("0")
    assert tx.original_amount == Decimal("0")


def test_account_unknown_type_is_read_as_cash() -> None:
    """Unknown account kinds degrade to cash with a warning."""
    logger = MagicMock()

    account = Account.from_mapping(
        {"id": "p", "name": "Piggy", "type": "savings", "currency": "THB"},
        logger=logger,
    )

    assert account.type is AccountType.CASH
    logger.warning.assert_called_once()


def test_account_from_mapping_and_status_report() -> None:
    """Store rows become accounts and statuses serialize to strings."""
    account = Account.from_mapping(
        {
            "id": "uuid-1",
            "name": "Tinkoff",
            "type": "bank",
            "currency": "RUB",
            "balance": 1500.5,
            "balance_date": "2024-01-10T12:00:00.000Z",
            "balance_checkpoint_tx_id": None,
        }
    )
    status = AccountStatus.seed(account)
    status.rub_equivalent = status.current

    assert account.type is AccountType.BANK
    assert account.balance_checkpoint_tx_id is None
    report = ValuationResult(
        accounts=[status],
        total_net_worth=status.rub_equivalent,
        currency_code="RUB",
    ).to_dict()
    assert report["total_net_worth"] == "1500.5"
    assert report["is_live_rates"] is False
    assert report["accounts"][0]["current"] == "1500.5"
    assert report["accounts"][0]["type"] == "bank"

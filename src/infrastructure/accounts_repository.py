"""SQLAlchemy-backed repositories for accounts and transactions."""

from sqlalchemy import text

from src.application.ports.accounts_repository import (
    AccountsRepositoryPort,
    TransactionsRepositoryPort,
)
from src.application.ports.database import DatabaseEnginePort
from src.domain.models.accounts import Account
from src.domain.models.transactions import Transaction
from src.infrastructure.logging.logger import get_app_logger

SELECT_ACCOUNTS_SQL = """
SELECT id, name, type, currency, balance,
       balance_date, balance_checkpoint_tx_id
FROM accounts
"""

SELECT_TRANSACTIONS_SQL = """
SELECT id, date, type, account, category, amount,
       original_amount, original_currency, note, "index"
FROM transactions
"""


def _scope_clause(user_id: str | None) -> tuple[str, dict[str, str]]:
    """Return the WHERE clause selecting a user or the anonymous scope."""
    if user_id:
        return " WHERE user_id = :user_id", {"user_id": user_id}
    return " WHERE user_id IS NULL", {}


class SqlAlchemyAccountsRepository(AccountsRepositoryPort):
    """Repository backed by SQLAlchemy for persisted accounts."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
            logger: Optional logger warned about malformed rows.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def fetch_accounts(self, user_id: str | None) -> list[Account]:
        """Return the accounts of a user ordered by creation time."""
        where, params = _scope_clause(user_id)
        query = text(SELECT_ACCOUNTS_SQL + where + " ORDER BY created_at")
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, params).all()
        return [
            Account.from_mapping(row._mapping, logger=self._logger)
            for row in rows
        ]


class SqlAlchemyTransactionsRepository(TransactionsRepositoryPort):
    """Repository backed by SQLAlchemy for stored transactions."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
            logger: Optional logger warned about malformed rows.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def fetch_transactions(self, user_id: str | None) -> list[Transaction]:
        """Return the transactions of a user."""
        where, params = _scope_clause(user_id)
        query = text(SELECT_TRANSACTIONS_SQL + where)
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, params).all()
        return [
            Transaction.from_mapping(row._mapping, logger=self._logger)
            for row in rows
        ]


__all__ = [
    "SqlAlchemyAccountsRepository",
    "SqlAlchemyTransactionsRepository",
    "SELECT_ACCOUNTS_SQL",
    "SELECT_TRANSACTIONS_SQL",
]

"""Infrastructure adapter writing account sync results via SQLAlchemy."""

from sqlalchemy import text

from src.application.ports.accounts_sync import AccountsDestinationPort
from src.application.ports.database import DatabaseEnginePort
from src.domain.models.accounts import Account
from src.domain.models.finance import CurrencyUpdate


INSERT_ACCOUNTS_SQL = text(
    """
    INSERT INTO accounts (
        user_id,
        name,
        type,
        currency,
        balance,
        is_hidden
    )
    VALUES (
        :user_id,
        :name,
        :type,
        :currency,
        :balance,
        false
    )
    """
)

UPDATE_CURRENCY_SQL = text(
    """
    UPDATE accounts
    SET currency = :currency
    WHERE id = :id
    """
)


class SqlAlchemyAccountsDestination(AccountsDestinationPort):
    """Account store destination backed by SQLAlchemy."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the destination adapter.

        Args:
            db_port: Port providing access to the finance engine.
        """
        self._db_port = db_port

    def create_accounts(
        self,
        accounts: list[Account],
        user_id: str | None,
    ) -> int:
        """Insert accounts for a user.

        Args:
            accounts: Accounts to insert; their ids are assigned by the store.
            user_id: Owner of the new accounts.

        Returns:
            int: Number of account records inserted.
        """
        payload = [
            {
                "user_id": user_id,
                "name": account.name,
                "type": account.type.value,
                "currency": account.currency,
                "balance": account.balance,
            }
            for account in accounts
        ]
        if not payload:
            return 0
        engine = self._db_port.get_finance_engine()
        with engine.begin() as conn:
            conn.execute(INSERT_ACCOUNTS_SQL, payload)
        return len(payload)

    def update_currencies(self, updates: list[CurrencyUpdate]) -> int:
        """Apply currency corrections to stored accounts.

        Args:
            updates: Corrections keyed by account id.

        Returns:
            int: Number of updates applied.
        """
        payload = [
            {"id": update.account_id, "currency": update.currency}
            for update in updates
        ]
        if not payload:
            return 0
        engine = self._db_port.get_finance_engine()
        with engine.begin() as conn:
            conn.execute(UPDATE_CURRENCY_SQL, payload)
        return len(payload)


__all__ = [
    "SqlAlchemyAccountsDestination",
    "INSERT_ACCOUNTS_SQL",
    "UPDATE_CURRENCY_SQL",
]

"""Domain models for tracked accounts."""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from logging import Logger
from typing import Any, Mapping

from src.utils.decimal_utils import coerce_decimal


class AccountType(str, Enum):
    """Kind of place money is held in."""

    WALLET = "wallet"
    CRYPTO = "crypto"
    BANK = "bank"
    CASH = "cash"
    CARD = "card"


class CheckpointState(str, Enum):
    """Progress of a replay walk through an account's checkpoint day.

    ``BEFORE_CHECKPOINT`` until a transaction dated on the checkpoint day is
    seen, ``AT_CHECKPOINT_PENDING`` while walking that day before the
    checkpoint transaction, and ``PAST_CHECKPOINT`` once it was reached.
    """

    BEFORE_CHECKPOINT = "before_checkpoint"
    AT_CHECKPOINT_PENDING = "at_checkpoint_pending"
    PAST_CHECKPOINT = "past_checkpoint"


@dataclass(frozen=True)
class Account:
    """Persisted or synthesized account definition.

    Attributes:
        id: Stable identifier.
        name: Display name; matched to transactions after normalization.
        currency: Currency code of the account.
        type: Account kind.
        balance: Balance as of the checkpoint, or the opening balance.
        balance_date: Optional checkpoint date (ISO date or datetime).
        balance_checkpoint_tx_id: Optional id of the last transaction
            already included in ``balance``.
    """

    id: str
    name: str
    currency: str
    type: AccountType = AccountType.CASH
    balance: Decimal = Decimal("0")
    balance_date: str | None = None
    balance_checkpoint_tx_id: str | None = None

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, Any],
        logger: Logger | None = None,
    ) -> "Account":
        """Build an account from a store row mapping.

        Types outside ``AccountType`` fall back to cash with a warning.
        """
        raw_type = str(data.get("type") or AccountType.CASH.value)
        try:
            account_type = AccountType(raw_type.strip().lower())
        except ValueError:
            account_type = AccountType.CASH
            if logger is not None:
                logger.warning(
                    f"Account '{data.get('name')}' has unknown type "
                    f"'{raw_type}'; treating it as cash"
                )
        return cls(
            id=str(data.get("id") or ""),
            name=str(data["name"]),
            currency=str(data.get("currency") or ""),
            type=account_type,
            balance=coerce_decimal(data.get("balance")),
            balance_date=data.get("balance_date") or None,
            balance_checkpoint_tx_id=(
                data.get("balance_checkpoint_tx_id") or None
            ),
        )


@dataclass
class AccountStatus:
    """Account plus the values derived during one replay."""

    account: Account
    current: Decimal
    rub_equivalent: Decimal = Decimal("0")
    checkpoint_state: CheckpointState = field(
        default=CheckpointState.BEFORE_CHECKPOINT
    )

    @classmethod
    def seed(cls, account: Account) -> "AccountStatus":
        """Start a replay from the account's stored balance."""
        return cls(account=account, current=account.balance)

    @property
    def id(self) -> str:
        return self.account.id

    @property
    def name(self) -> str:
        return self.account.name

    @property
    def currency(self) -> str:
        return self.account.currency

    @property
    def has_passed_checkpoint(self) -> bool:
        return self.checkpoint_state is CheckpointState.PAST_CHECKPOINT

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation."""
        return {
            "id": self.account.id,
            "name": self.account.name,
            "type": self.account.type.value,
            "currency": self.account.currency,
            "initial": str(self.account.balance),
            "balance_date": self.account.balance_date,
            "balance_checkpoint_tx_id": self.account.balance_checkpoint_tx_id,
            "current": str(self.current),
            "rub_equivalent": str(self.rub_equivalent),
        }


__all__ = ["Account", "AccountType", "AccountStatus", "CheckpointState"]

"""Domain models for imported transactions."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from logging import Logger
from typing import Any, Mapping

from src.utils.decimal_utils import (
    coerce_decimal,
    coerce_int,
    coerce_optional_decimal,
)


class TransactionType(str, Enum):
    """Kind of economic event a transaction records."""

    INCOME = "income"
    EXPENSE = "expense"
    TRANSFER = "transfer"


@dataclass(frozen=True)
class Transaction:
    """Immutable transaction produced by the import pipeline.

    Attributes:
        id: Identifier unique within a transaction set.
        date: Calendar date as a ``YYYY-MM-DD`` string.
        type: Income, expense, or transfer.
        account: Name of the source account.
        category: Category name; the destination account for transfers.
        amount: Signed amount in the primary currency.
        original_amount: Optional amount in a secondary currency.
        original_currency: Optional code of the secondary currency.
        note: Free text.
        index: Tie-break ordinal for transactions sharing a date.
    """

    id: str
    date: str
    type: TransactionType
    account: str
    category: str = ""
    amount: Decimal = Decimal("0")
    original_amount: Decimal | None = None
    original_currency: str | None = None
    note: str = ""
    index: int = 0

    @property
    def is_transfer(self) -> bool:
        return self.type is TransactionType.TRANSFER

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, Any],
        logger: Logger | None = None,
    ) -> "Transaction":
        """Build a transaction from a store row or importer record.

        Both snake_case and the importer's camelCase keys are accepted. An
        unknown type is read as an expense: its amount still moves the
        source account, but it never fans out to a destination.

        Args:
            data: Raw transaction mapping.
            logger: Optional logger warned about unknown types.

        Returns:
            Transaction: Normalized transaction.
        """
        original_amount = data.get("original_amount", data.get("originalAmount"))
        original_currency = data.get(
            "original_currency",
            data.get("originalCurrency"),
        )
        raw_type = str(data.get("type") or TransactionType.EXPENSE.value)
        tx_type = _parse_type(raw_type)
        if tx_type is None:
            tx_type = TransactionType.EXPENSE
            if logger is not None:
                logger.warning(
                    f"Transaction {data['id']} has unknown type "
                    f"'{raw_type}'; treating it as an expense"
                )
        return cls(
            id=str(data["id"]),
            date=str(data.get("date") or ""),
            type=tx_type,
            account=str(data.get("account") or ""),
            category=str(data.get("category") or ""),
            amount=coerce_decimal(data.get("amount")),
            original_amount=coerce_optional_decimal(original_amount),
            original_currency=original_currency or None,
            note=str(data.get("note") or ""),
            index=coerce_int(data.get("index")),
        )


def _parse_type(raw_type: str) -> TransactionType | None:
    try:
        return TransactionType(raw_type.strip().lower())
    except ValueError:
        return None


__all__ = ["Transaction", "TransactionType"]

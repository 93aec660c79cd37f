"""Account registry used during a single balance replay."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from logging import Logger

from src.domain.constants import ANCHOR_DATE, LOCAL_CURRENCY
from src.domain.models.accounts import Account, AccountStatus
from src.domain.services.currency_inference import infer_account_details
from src.domain.services.normalization import (
    normalize_account_name,
    parse_iso_date,
)


@dataclass(frozen=True)
class AccountResolutionPolicy:
    """How a replay treats names and accounts without a checkpoint.

    Attributes:
        dynamic_accounts: Synthesize accounts for unmatched names. When
            False, unmatched names are ignored and opening-balance marker
            transactions are not double counted.
        anchor_date: In dynamic mode, un-checkpointed accounts ignore
            transactions dated on or before this day. None disables it.
        local_currency: Currency of synthesized accounts when inference
            finds nothing better.
    """

    dynamic_accounts: bool = True
    anchor_date: date | None = ANCHOR_DATE
    local_currency: str = LOCAL_CURRENCY

    @classmethod
    def hybrid(
        cls,
        anchor_date: date | None = ANCHOR_DATE,
        local_currency: str = LOCAL_CURRENCY,
    ) -> "AccountResolutionPolicy":
        """Stored accounts plus accounts discovered from transactions."""
        return cls(
            dynamic_accounts=True,
            anchor_date=anchor_date,
            local_currency=local_currency,
        )

    @classmethod
    def legacy(
        cls,
        local_currency: str = LOCAL_CURRENCY,
    ) -> "AccountResolutionPolicy":
        """Stored accounts only."""
        return cls(
            dynamic_accounts=False,
            anchor_date=None,
            local_currency=local_currency,
        )


class AccountRegistry:
    """Known accounts of one replay, grown lazily from transaction names.

    Each replay must use its own registry: statuses carry per-walk
    checkpoint state.
    """

    def __init__(
        self,
        statuses: list[AccountStatus],
        policy: AccountResolutionPolicy,
        logger: Logger | None = None,
    ) -> None:
        self._statuses = statuses
        self._policy = policy
        self._logger = logger
        self._by_name: dict[str, list[int]] = {}
        for idx, status in enumerate(statuses):
            self._index(status.name, idx)

    @classmethod
    def seed(
        cls,
        accounts: Iterable[Account],
        policy: AccountResolutionPolicy | None = None,
        logger: Logger | None = None,
    ) -> "AccountRegistry":
        """Create a registry with fresh statuses for persisted accounts.

        Args:
            accounts: Persisted accounts, in store order.
            policy: Resolution policy; hybrid mode by default.
            logger: Optional logger for diagnostics.

        Returns:
            AccountRegistry: Registry whose statuses start at ``balance``.
        """
        statuses = []
        for account in accounts:
            broken_checkpoint = (
                account.balance_date is not None
                and parse_iso_date(account.balance_date) is None
            )
            if broken_checkpoint and logger is not None:
                logger.warning(
                    f"Account '{account.name}' has unparseable "
                    f"balance_date '{account.balance_date}'; "
                    "ignoring its checkpoint"
                )
            statuses.append(AccountStatus.seed(account))
        return cls(statuses, policy or AccountResolutionPolicy(), logger)

    @property
    def policy(self) -> AccountResolutionPolicy:
        return self._policy

    @property
    def statuses(self) -> list[AccountStatus]:
        return self._statuses

    def __len__(self) -> int:
        return len(self._statuses)

    def __getitem__(self, idx: int) -> AccountStatus:
        return self._statuses[idx]

    def find(self, name: str | None) -> int | None:
        """Return the index of the account matching ``name``.

        When several accounts share a normalized name, the first one with
        a parseable checkpoint date wins, otherwise the first one registered.
        """
        candidates = self._by_name.get(normalize_account_name(name))
        if not candidates:
            return None
        if len(candidates) == 1:
            return candidates[0]
        for idx in candidates:
            if parse_iso_date(self._statuses[idx].account.balance_date):
                self._debug(
                    f"Resolved ambiguous name '{name}' to checkpointed "
                    f"account {self._statuses[idx].id}"
                )
                return idx
        return candidates[0]

    def get_or_create(
        self,
        name: str | None,
        detected_currency: str | None = None,
    ) -> int | None:
        """Return the account index for ``name``, synthesizing it if needed.

        Args:
            name: Free-text account or category name.
            detected_currency: Currency hint from the transaction.

        Returns:
            int | None: Account index, or None when the name is blank or
            the policy does not allow dynamic accounts.
        """
        idx = self.find(name)
        if idx is not None:
            return idx
        key = normalize_account_name(name)
        if not key or not self._policy.dynamic_accounts:
            return None

        details = infer_account_details(
            name,
            detected_currency,
            local_currency=self._policy.local_currency,
        )
        account = Account(
            id=key,
            name=name,
            currency=details.currency or self._policy.local_currency,
            type=details.type,
        )
        idx = len(self._statuses)
        self._statuses.append(AccountStatus.seed(account))
        self._index(name, idx)
        self._debug(
            f"Created dynamic account '{name}' "
            f"({details.type.value}, {account.currency})"
        )
        return idx

    def _index(self, name: str, idx: int) -> None:
        self._by_name.setdefault(normalize_account_name(name), []).append(idx)

    def _debug(self, message: str) -> None:
        if self._logger is not None:
            self._logger.debug(message)


__all__ = ["AccountRegistry", "AccountResolutionPolicy"]

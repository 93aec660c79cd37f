"""Use case to compute current account balances and net worth."""

from collections.abc import Iterable

from src.application.ports.accounts_repository import (
    AccountsRepositoryPort,
    TransactionsRepositoryPort,
)
from src.application.use_cases.load_rates import LoadRatesUseCase
from src.domain.constants import DEFAULT_RATES, HOME_CURRENCY
from src.domain.models.finance import ValuationResult
from src.domain.models.transactions import Transaction
from src.domain.services.registry import AccountResolutionPolicy
from src.domain.services.replay import reconcile_balances
from src.domain.services.valuation import valuate
from src.infrastructure.logging.logger import get_app_logger


class GetAccountBalancesUseCase:
    """Replay stored transactions into balances valued in the home currency."""

    def __init__(
        self,
        accounts_repository: AccountsRepositoryPort,
        transactions_repository: TransactionsRepositoryPort,
        rates_use_case: LoadRatesUseCase,
        policy: AccountResolutionPolicy | None = None,
        home_currency: str = HOME_CURRENCY,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            accounts_repository: Port providing persisted accounts.
            transactions_repository: Port providing stored transactions.
            rates_use_case: Use case loading the rate table.
            policy: Account resolution policy; hybrid mode by default.
            home_currency: Currency of the net-worth aggregation.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._accounts_repository = accounts_repository
        self._transactions_repository = transactions_repository
        self._rates_use_case = rates_use_case
        self._policy = policy or AccountResolutionPolicy.hybrid()
        self._home_currency = home_currency
        self._logger = logger or get_app_logger()

    def execute(
        self,
        user_id: str | None = None,
        transactions: Iterable[Transaction] | None = None,
    ) -> ValuationResult:
        """Return every account's balance and the total net worth.

        Args:
            user_id: Store scope; None selects the anonymous/local scope.
            transactions: Optional transactions overriding the store, e.g.
                from the local offline cache.

        Returns:
            ValuationResult: Accounts sorted by name, with net worth.
        """
        accounts = self._accounts_repository.fetch_accounts(user_id)
        if transactions is None:
            transactions = self._transactions_repository.fetch_transactions(
                user_id
            )
        transactions = list(transactions)
        snapshot = self._rates_use_case.execute()

        statuses = reconcile_balances(
            accounts,
            transactions,
            policy=self._policy,
            home_currency=self._home_currency,
            logger=self._logger,
        )
        statuses = sorted(
            statuses,
            key=lambda status: (status.name.lower(), status.id),
        )
        result = valuate(
            statuses,
            snapshot.rates,
            DEFAULT_RATES,
            home_currency=self._home_currency,
            is_live_rates=snapshot.is_live,
            logger=self._logger,
        )
        self._logger.info(
            f"Computed {len(result.accounts)} account balances, net worth "
            f"{result.total_net_worth} {self._home_currency}"
        )
        return result


__all__ = ["GetAccountBalancesUseCase", "ValuationResult"]

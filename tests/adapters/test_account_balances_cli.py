"""Tests for the account balances CLI adapter."""

import json
from decimal import Decimal
from unittest.mock import MagicMock

from src.adapters import account_balances_cli as cli_module
from src.domain.models.accounts import Account, AccountStatus
from src.domain.models.finance import ValuationResult
from src.infrastructure.settings import TrackerSettings


def _setup(monkeypatch, result=None, error=None) -> tuple[MagicMock, MagicMock]:
    logger = MagicMock()
    monkeypatch.setattr(cli_module, "get_app_logger", lambda: logger)
    monkeypatch.setattr(cli_module, "get_usage_logger", MagicMock)
    monkeypatch.setattr(
        cli_module.TrackerSettings,
        "from_env",
        classmethod(lambda cls: TrackerSettings(user_id="user-1")),
    )
    use_case = MagicMock()
    if error is not None:
        use_case.execute.side_effect = error
    use_case.execute.return_value = result
    monkeypatch.setattr(
        cli_module,
        "build_account_balances_use_case",
        lambda settings: use_case,
    )
    return logger, use_case


def _result(is_live: bool) -> ValuationResult:
    status = AccountStatus.seed(
        Account(id="a1", name="Tinkoff", currency="RUB", balance=Decimal("5"))
    )
    status.rub_equivalent = Decimal("5")
    return ValuationResult(
        accounts=[status],
        total_net_worth=Decimal("5"),
        currency_code="RUB",
        is_live_rates=is_live,
    )


def test_main_prints_json_report(monkeypatch, capsys) -> None:
    """The valuation is printed as JSON for the configured user."""
    logger, use_case = _setup(monkeypatch, result=_result(is_live=True))

    cli_module.main()

    use_case.execute.assert_called_once_with(user_id="user-1")
    report = json.loads(capsys.readouterr().out)
    assert report["currency_code"] == "RUB"
    assert report["accounts"][0]["name"] == "Tinkoff"
    logger.warning.assert_not_called()


def test_main_warns_on_fallback_rates(monkeypatch, capsys) -> None:
    """Built-in rates are flagged in the log."""
    logger, _ = _setup(monkeypatch, result=_result(is_live=False))

    cli_module.main()

    logger.warning.assert_called_once()
    assert capsys.readouterr().out


def test_main_logs_runtime_errors(monkeypatch, capsys) -> None:
    """Configuration errors are logged and nothing is printed."""
    logger, _ = _setup(
        monkeypatch,
        error=RuntimeError("Missing environment variable: FINANCE_DB_URL"),
    )

    cli_module.main()

    logger.error.assert_called_once()
    assert capsys.readouterr().out == ""

"""Tests for the sync accounts CLI adapter."""

from unittest.mock import MagicMock

from src.adapters import sync_accounts_cli as cli_module
from src.application.use_cases.sync_accounts import SyncAccountsResult
from src.infrastructure.settings import TrackerSettings


def _patch_loggers(monkeypatch) -> MagicMock:
    logger = MagicMock()
    monkeypatch.setattr(cli_module, "get_app_logger", lambda: logger)
    monkeypatch.setattr(cli_module, "get_usage_logger", MagicMock)
    return logger


def _patch_settings(monkeypatch, settings: TrackerSettings) -> None:
    monkeypatch.setattr(
        cli_module.TrackerSettings,
        "from_env",
        classmethod(lambda cls: settings),
    )


def test_main_requires_user(monkeypatch, capsys) -> None:
    """Without TRACKER_USER_ID nothing is synced."""
    logger = _patch_loggers(monkeypatch)
    _patch_settings(monkeypatch, TrackerSettings(user_id=None))
    build_db = MagicMock()
    monkeypatch.setattr(cli_module, "build_database_adapter", build_db)

    cli_module.main()

    logger.warning.assert_called_once()
    build_db.assert_not_called()
    assert capsys.readouterr().out == ""


def test_main_runs_sync_and_reports(monkeypatch, capsys) -> None:
    """Stored transactions are synced and counts are printed."""
    _patch_loggers(monkeypatch)
    settings = TrackerSettings(user_id="user-1")
    _patch_settings(monkeypatch, settings)
    db_adapter = object()
    transactions = [MagicMock()]
    repository = MagicMock()
    repository.fetch_transactions.return_value = transactions
    use_case = MagicMock()
    use_case.run.return_value = SyncAccountsResult(
        source_count=1,
        created_count=2,
        updated_count=1,
    )
    build_use_case = MagicMock(return_value=use_case)
    monkeypatch.setattr(cli_module, "build_database_adapter", lambda: db_adapter)
    monkeypatch.setattr(
        cli_module,
        "build_transactions_repository",
        lambda db: repository,
    )
    monkeypatch.setattr(
        cli_module,
        "build_sync_accounts_use_case",
        build_use_case,
    )

    cli_module.main()

    repository.fetch_transactions.assert_called_once_with("user-1")
    build_use_case.assert_called_once_with(settings, db_adapter)
    use_case.run.assert_called_once_with(transactions, "user-1")
    out = capsys.readouterr().out
    assert "Created 2 accounts and updated 1 currencies." in out


def test_main_logs_configuration_errors(monkeypatch, capsys) -> None:
    """Missing database configuration is logged, not raised."""
    logger = _patch_loggers(monkeypatch)
    _patch_settings(monkeypatch, TrackerSettings(user_id="user-1"))

    def _raise():
        raise RuntimeError("Missing environment variable: FINANCE_DB_URL")

    monkeypatch.setattr(cli_module, "build_database_adapter", _raise)

    cli_module.main()

    logger.error.assert_called_once_with(
        "Missing environment variable: FINANCE_DB_URL"
    )
    assert capsys.readouterr().out == ""

"""
Tests for settings, engine construction and the CLI.
"""

from unittest.mock import patch

from sqlalchemy import inspect

from trades_api import cli
from trades_api.core.config import Settings
from trades_api.infrastructure.database import build_engine


class TestSettings:
    """Tests for Settings.get_database_url."""

    def test_explicit_url_wins(self) -> None:
        settings = Settings(_env_file=None, database_url="sqlite:///trades.db")
        assert settings.get_database_url() == "sqlite:///trades.db"

    def test_postgres_fallback(self) -> None:
        settings = Settings(
            _env_file=None,
            database_url=None,
            postgres_user="svc",
            postgres_password="pw",
            postgres_host="db",
            postgres_port=6543,
            postgres_db="ledger",
        )
        assert settings.get_database_url() == "postgresql+psycopg2://svc:pw@db:6543/ledger"

    def test_read_from_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("EVENT_GRID_TOPIC_ENDPOINT", "https://topic.example/api/events")
        monkeypatch.setenv("EVENT_GRID_TIMEOUT_SECONDS", "2.5")
        settings = Settings(_env_file=None)
        assert settings.event_grid_topic_endpoint == "https://topic.example/api/events"
        assert settings.event_grid_timeout_seconds == 2.5


class TestBuildEngine:
    """Tests for build_engine."""

    def test_sqlite_engine(self, sqlite_settings) -> None:
        engine = build_engine(sqlite_settings)
        try:
            assert engine.dialect.name == "sqlite"
        finally:
            engine.dispose()


class TestCli:
    """Tests for the command-line entry point."""

    def test_init_db_creates_table(self, sqlite_settings) -> None:
        with patch.object(cli, "settings", sqlite_settings):
            cli.main(["init-db"])

        engine = build_engine(sqlite_settings)
        try:
            assert inspect(engine).has_table("trade")
        finally:
            engine.dispose()

    def test_init_db_is_repeatable(self, sqlite_settings) -> None:
        with patch.object(cli, "settings", sqlite_settings):
            cli.main(["init-db"])
            cli.main(["init-db"])

    def test_serve_runs_uvicorn(self) -> None:
        with patch("uvicorn.run") as mock_run:
            cli.main(["serve", "--port", "9001"])

        mock_run.assert_called_once_with(
            "trades_api.main:app", host="0.0.0.0", port=9001, reload=False
        )

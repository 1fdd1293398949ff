"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        database_url: SQLAlchemy URL of the trade database.
        oracle_wallet_dir: Wallet/config directory for Oracle connections.
        event_grid_topic_endpoint: Event Grid topic URL for trade events.
        event_grid_topic_key: Access key for the Event Grid topic.
        event_grid_timeout_seconds: HTTP timeout when publishing events.

    When ``database_url`` is unset, a Postgres DSN is built from the
    postgres_* values (useful for Docker Compose or local setups).
    Without an Event Grid endpoint and key, trades are still created but
    every publish attempt fails and is logged as a warning.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Trades API"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    database_url: Optional[str] = None
    oracle_wallet_dir: Optional[str] = None
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "trades"

    event_grid_topic_endpoint: Optional[str] = None
    event_grid_topic_key: Optional[str] = None
    event_grid_timeout_seconds: float = 10.0

    def get_database_url(self) -> str:
        """Return the effective database URL.

        Priority:
        1. Explicit `DATABASE_URL`
        2. Build DSN from postgres_* values
        """
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+psycopg2://{self.postgres_user}:{self.postgres_password}@"
            f"{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


settings = Settings()

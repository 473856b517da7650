"""Configuration settings for the procurement platform."""

from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    LOG_LEVEL: str = "INFO"

    # Optional JSON Lines mirror of the audit event log.
    # Unset keeps the log purely in memory.
    EVENT_LOG_FILE: Optional[str] = None

    # Identities used by the CLI demo scenario
    DEMO_ISSUER: str = "issuer-principal"
    DEMO_BIDDERS: List[str] = ["bidder-a", "bidder-b", "bidder-c"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()

"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # MongoDB (MONGO_DB_URI is required, checked at connect time)
    mongo_db_uri: Optional[str] = None
    mongodb_db: str = "test"  # used when the URI names no database
    mongo_timeout_ms: int = 5000

    # Request bodies (JSON / urlencoded)
    max_body_size: int = 10 * 1024 * 1024

    @property
    def api_url(self) -> str:
        """Local URL printed at startup"""
        return f"http://localhost:{self.port}"

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()

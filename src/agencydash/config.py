"""Application settings loaded from the environment and ``.env``."""
from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Remote data store
    STORE_BACKEND: Literal["postgrest", "sql"] = "postgrest"
    STORE_URL: str = ""
    STORE_API_KEY: SecretStr | None = None

    # Local SQL mirror used by the "sql" backend and `agencydash db init`
    DATABASE_URL: str = "sqlite:///data/agencydash.db"

    # Dashboard API the Streamlit UI talks to
    API_BASE_URL: str = "http://127.0.0.1:8000"

    COUNTER_DURATION_MS: int = 2000
    COUNTER_FRAME_INTERVAL_MS: int = 16

    LOG_LEVEL: str = "INFO"

    @property
    def sqlite_path(self) -> Path | None:
        """Filesystem path of a SQLite DATABASE_URL, else None."""
        if not self.DATABASE_URL.startswith("sqlite:///"):
            return None
        return Path(self.DATABASE_URL.removeprefix("sqlite:///"))

    @property
    def store_api_key(self) -> str:
        return self.STORE_API_KEY.get_secret_value() if self.STORE_API_KEY else ""


settings = Settings()

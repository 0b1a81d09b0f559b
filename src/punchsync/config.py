"""Application settings, loaded from the environment and an optional ``.env`` file."""
from __future__ import annotations

from pathlib import Path

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from punchsync.timesheet.aggregate import EndSelection, EndTimeFallback
from punchsync.timesheet.hours import RoundingPolicy


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    DATA_DIR: Path = Path("data")
    DATABASE_URL: str | None = None
    LOG_LEVEL: str = "INFO"

    # Report engine policies; one choice per deployment.
    ROUNDING_POLICY: RoundingPolicy = RoundingPolicy.HUNDREDTH
    END_SELECTION: EndSelection = EndSelection.FIRST
    END_TIME_FALLBACK: EndTimeFallback = EndTimeFallback.NEXT_START
    DATE_DAY_FIRST: bool = False

    # Used until the user saves their own preferences.
    DEFAULT_EMPLOYEE_NAME: str = ""
    DEFAULT_HOURLY_RATE: float = 196.0

    FETCH_TIMEOUT_SECONDS: float = 30.0
    API_BASE_URL: str = "http://127.0.0.1:8000"

    OPENAI_API_KEY: SecretStr | None = None
    OPENAI_MODEL_INSIGHT: str = "gpt-4o-mini"

    @property
    def data_dir(self) -> Path:
        return self.DATA_DIR

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return f"sqlite:///{self.DATA_DIR / 'punchsync.db'}"


settings = Settings()

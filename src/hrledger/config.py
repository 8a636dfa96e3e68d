"""Application settings, read from the environment and an optional .env file."""
from __future__ import annotations
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    DATABASE_URL: str = "sqlite:///data/hrledger.db"
    DATA_DIR: str = "data"
    LOG_LEVEL: str = "INFO"

    DEFAULT_DISPLAY_CURRENCY: str = "USD"
    # Raise instead of returning the unconverted amount when no rate path exists.
    CURRENCY_STRICT: bool = False

    EXCHANGE_RATE_URL: str = "https://api.exchangerate-api.com/v4/latest/USD"
    EXCHANGE_RATE_TIMEOUT: float = 10.0

    VACATION_ALLOWANCE_DAYS: int = 14
    VAT_DUE_DAY: int = 12
    VAT_DUE_MONTHS_AFTER: int = 2
    CHART_MONTHS: int = 6

    @property
    def data_dir(self) -> Path:
        return Path(self.DATA_DIR)


settings = Settings()

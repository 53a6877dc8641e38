"""Configuration for the SQL reference catalog using pydantic-settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_PACKAGE_DIR = Path(__file__).resolve().parent

DEFAULT_CATALOG_PATH = _PACKAGE_DIR / "data" / "sql_reference.json"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Settings loaded from ``SQLREF_*`` environment variables and ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="SQLREF_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    catalog_path: Path = DEFAULT_CATALOG_PATH
    log_level: str = "WARNING"
    api_prefix: str = "/api/catalog"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(LOG_LEVELS)}")
        return level


@lru_cache
def get_settings() -> Settings:
    return Settings()

"""Centralized settings loaded from .env."""
from decimal import Decimal
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parents[2]
ENV_FILE = PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Variables shared by the extraction pipeline."""

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    supported_extension: str = Field(default="pdf", alias="SUPPORTED_EXTENSION")
    document_timezone: str = Field(default="Europe/Berlin", alias="DOCUMENT_TIMEZONE")
    amount_tolerance: Decimal = Field(default=Decimal("0.01"), alias="AMOUNT_TOLERANCE")
    statements_root: Path | None = Field(default=None, alias="STATEMENTS_ROOT")

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding="utf-8", extra="ignore", populate_by_name=True
    )

    @field_validator("supported_extension", mode="after")
    @classmethod
    def strip_extension_dot(cls, v: str) -> str:
        return v.lower().lstrip(".")

    @field_validator("statements_root", mode="after")
    @classmethod
    def resolve_statements_root(cls, v: Path | None) -> Path | None:
        if v is None:
            return None
        if v.is_absolute():
            return v
        # Resolve relative to PROJECT_ROOT
        return (PROJECT_ROOT / v).resolve()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Returns a single Settings instance for the whole application."""
    return Settings()

"""Runtime settings sourced from environment variables."""
from __future__ import annotations

from functools import lru_cache

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .catalog.locales import DEFAULT_LOCALE


class Settings(BaseSettings):
    """Defaults applied when rendering SKU snapshots."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    sku_default_locale: str = DEFAULT_LOCALE
    sku_default_label: str = ""
    log_level: str = "INFO"
    log_file: str | None = None

    @field_validator("sku_default_locale", "sku_default_label", "log_level", mode="before")
    @classmethod
    def _strip(cls, value: str | None) -> str:
        return (value or "").strip()


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings."""

    try:
        return Settings()
    except ValidationError as exc:
        invalid = {str(err["loc"][0]) for err in exc.errors() if err.get("loc")}
        raise RuntimeError(
            "Variables de entorno inválidas: " + ", ".join(sorted(invalid))
        ) from exc


__all__ = ["Settings", "get_settings"]

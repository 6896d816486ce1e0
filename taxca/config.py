from __future__ import annotations

import logging
import os
from functools import lru_cache

from pydantic import BaseModel, Field
from pydantic import ConfigDict, field_validator

from taxca.core.tax_years import DEFAULT_TAX_YEAR, SUPPORTED_YEARS

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def _env_optional(name: str) -> str | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value


class Settings(BaseModel):
    default_tax_year: int = Field(
        default_factory=lambda: int(os.getenv("DEFAULT_TAX_YEAR", str(DEFAULT_TAX_YEAR)))
    )
    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_dir: str | None = Field(default_factory=lambda: _env_optional("LOG_DIR"))
    build_version: str = Field(default_factory=lambda: os.getenv("BUILD_VERSION", "dev"))
    build_sha: str = Field(default_factory=lambda: os.getenv("BUILD_SHA", "local"))

    model_config = ConfigDict(frozen=True, validate_default=True)

    @field_validator("default_tax_year")
    @classmethod
    def _validate_year(cls, value: int) -> int:
        if value not in SUPPORTED_YEARS:
            raise ValueError(f"DEFAULT_TAX_YEAR must be one of {SUPPORTED_YEARS}, got {value}")
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        upper = (value or "INFO").upper()
        if upper not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}, got {upper}")
        return upper

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()

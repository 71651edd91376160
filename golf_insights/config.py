"""Configuration helpers for the analytics engine."""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

WINDOW_SIZES: tuple[int, ...] = (5, 10, 20)
DEFAULT_WINDOW = 10


class _Settings(BaseSettings):
    default_window: int = Field(default=DEFAULT_WINDOW, alias="INSIGHTS_DEFAULT_WINDOW")
    batch_workers: int = Field(default=0, alias="INSIGHTS_BATCH_WORKERS")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("default_window", mode="after")
    @classmethod
    def _known_window(cls, value: int) -> int:
        if value not in WINDOW_SIZES:
            logger.warning(
                "ignoring INSIGHTS_DEFAULT_WINDOW=%s; expected one of %s",
                value,
                WINDOW_SIZES,
            )
            return DEFAULT_WINDOW
        return value

    @field_validator("batch_workers", mode="after")
    @classmethod
    def _non_negative(cls, value: int) -> int:
        return max(0, value)


@lru_cache(maxsize=1)
def get_settings() -> _Settings:
    """Return cached engine settings."""

    return _Settings()  # type: ignore[call-arg]


def reset_settings_cache() -> None:
    """Clear cached settings (primarily for tests)."""

    get_settings.cache_clear()


__all__ = ["DEFAULT_WINDOW", "WINDOW_SIZES", "get_settings", "reset_settings_cache"]

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator

from core.settings.base import OrderBaseSettings


class OrderSettings(OrderBaseSettings):
    """
    Order lifecycle settings.
    Loaded from the environment / .env with exact variable name matching.
    """

    default_payment_method: str = Field("cash", alias="ORDER_DEFAULT_PAYMENT_METHOD")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache()
def get_order_settings() -> OrderSettings:
    """Return cached settings for the whole app."""
    return OrderSettings()

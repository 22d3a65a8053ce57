# core/settings/base.py
from pydantic_settings import BaseSettings, SettingsConfigDict


class OrderBaseSettings(BaseSettings):
    """Shared settings config: optional .env in the working directory."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

"""
Configuration settings for the Order Delivery tracker.

This module handles application configuration using Pydantic settings.
"""

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="ORDER_DELIVERY_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Order Delivery Tracker"
    debug: bool = False

    # Logging Configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    log_format: str = "%(asctime)s %(levelname)s %(name)s %(message)s"

    # Rendering
    unknown_state_text: str = "unknown"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


settings = Settings()

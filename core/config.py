"""
Centralized configuration management.
All environment variables and settings are defined here.
"""
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = Field(default="Banked Bums", alias="APP_NAME")
    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")

    # Input
    input_file: str = Field(default="BankTransactions.txt", alias="INPUT_FILE")
    stop_on_malformed: bool = Field(default=True, alias="STOP_ON_MALFORMED")

    # Business rules
    max_received: int = Field(default=10000, alias="MAX_RECEIVED")
    max_returned: int = Field(default=5000, alias="MAX_RETURNED")
    denominations: List[int] = Field(default=[50, 20, 10, 5, 1], alias="DENOMINATIONS")

    # Storage
    export_dir: str = Field(default="files", alias="EXPORT_DIR")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level is one of the standard levels."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v_upper

    @field_validator("max_received")
    @classmethod
    def validate_max_received(cls, v):
        """Validate the received limit leaves room for at least one valid amount."""
        if v < 1:
            raise ValueError("Max received must be at least 1")
        return v

    @field_validator("max_returned")
    @classmethod
    def validate_max_returned(cls, v):
        """Validate the cash back limit is not negative."""
        if v < 0:
            raise ValueError("Max returned must not be negative")
        return v

    @field_validator("denominations")
    @classmethod
    def validate_denominations(cls, v):
        """
        Validate the bill set.

        Values must be positive, strictly descending and end with 1 so that
        any amount breaks down with no remainder.
        """
        if not v:
            raise ValueError("At least one denomination is required")
        if any(d < 1 for d in v):
            raise ValueError("Denominations must be positive")
        if any(a <= b for a, b in zip(v, v[1:])):
            raise ValueError("Denominations must be strictly descending")
        if v[-1] != 1:
            raise ValueError("Smallest denomination must be 1")
        return v

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns:
        Settings instance
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings singleton (useful for testing)."""
    global _settings
    _settings = None

"""Configuration management for Expense Report."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="EXPENSE_REPORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Report file used when the CLI is called without a path
    default_report_path: Path | None = None

    # Output settings
    show_history: bool = True
    residual_warning_minor: int = 0  # Highlight residuals larger than this


def load_settings() -> Settings:
    """Load application settings from environment variables."""
    try:
        return Settings()
    except Exception as e:
        raise ConfigurationError(
            f"Failed to load settings. Check your EXPENSE_REPORT_* environment "
            f"variables and .env file.\n"
            f"Error: {e}"
        ) from e

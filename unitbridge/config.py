"""Configuration loading for unitbridge.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runner configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Discovery
    test_method_prefixes: list[str] = Field(
        default_factory=lambda: ["test_"],
        description="Method name prefixes that mark xUnit-style test methods",
    )
    anonymous_description: str = Field(
        default="<Anonymous TestCase>",
        description="Description given to TestCase subclasses created without a name",
    )

    # Reporting
    reporter: Literal["progress", "silent"] = Field(
        default="progress",
        description="Reporter used by the runner",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    # Development
    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose failure output",
    )

    @field_validator("test_method_prefixes")
    @classmethod
    def validate_prefixes(cls, v: list[str]) -> list[str]:
        """Ensure prefixes are present, non-empty and public."""
        if not v:
            raise ValueError("test_method_prefixes must not be empty")
        for prefix in v:
            if not prefix:
                raise ValueError("test_method_prefixes must not contain empty strings")
            if prefix.startswith("_"):
                raise ValueError(
                    f"test method prefix {prefix!r} must not start with an underscore"
                )
        return v

    @field_validator("anonymous_description")
    @classmethod
    def validate_anonymous_description(cls, v: str) -> str:
        """Ensure the anonymous placeholder is not blank."""
        if not v.strip():
            raise ValueError("anonymous_description must be a non-empty string")
        return v


def load_settings(env_file: str | None = None) -> Settings:
    """Load runner settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]

"""Configuration management using Pydantic Settings.

This module provides type-safe configuration management with automatic
environment variable loading and validation using Pydantic Settings.

The configuration is organized into logical groups:
- DatabaseConfig: Database connection settings for the reference store
- LoggingConfig: Logging levels, files, and debugging options
- MatchingConfig: Matching engine defaults (test match size, display grouping)
"""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseConfig(BaseModel):
    """Database connection configuration."""

    url: str = "sqlite+aiosqlite:///data/db/pitchmatch.db"
    echo: bool = False
    pool_timeout: int = 30


class LoggingConfig(BaseModel):
    """Logging configuration for console and file output."""

    console_level: str = "INFO"
    file_level: str = "DEBUG"
    log_file: Path = Path("data/logs/pitchmatch.log")
    real_time_debug: bool = True


class MatchingConfig(BaseModel):
    """Matching engine defaults."""

    test_match_limit: int = 5
    # Attributes at positions [0, n) are shown as "primary" in listings
    primary_attribute_count: int = 4


class Settings(BaseSettings):
    """Main application settings with environment variable support.

    Environment variables can be set using flat naming or nested naming:
    - Flat: DATABASE_URL, CONSOLE_LOG_LEVEL, TEST_MATCH_LIMIT
    - Nested: DATABASE__URL, LOGGING__CONSOLE_LEVEL, MATCHING__TEST_MATCH_LIMIT

    The .env file is automatically loaded for development convenience.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    database: DatabaseConfig = DatabaseConfig()
    logging: LoggingConfig = LoggingConfig()
    matching: MatchingConfig = MatchingConfig()

    data_dir: Path = Path("data")

    @model_validator(mode="before")
    @classmethod
    def transform_flat_env_vars(cls, data: Any) -> Any:
        """Transform flat environment variables to nested structure.

        Maps flat env vars (DATABASE_URL) to the nested structure
        expected by the models (database.url).
        """
        if not isinstance(data, dict):
            return data

        transformed = {}

        db_mapping = {
            "database_url": "url",
            "database_echo": "echo",
            "database_pool_timeout": "pool_timeout",
        }
        for env_key, field_key in db_mapping.items():
            if env_key in data:
                transformed.setdefault("database", {})[field_key] = data.pop(env_key)

        log_mapping = {
            "console_log_level": "console_level",
            "file_log_level": "file_level",
            "log_file": "log_file",
            "log_real_time_debug": "real_time_debug",
        }
        for env_key, field_key in log_mapping.items():
            if env_key in data:
                transformed.setdefault("logging", {})[field_key] = data.pop(env_key)

        matching_mapping = {
            "test_match_limit": "test_match_limit",
            "primary_attribute_count": "primary_attribute_count",
        }
        for env_key, field_key in matching_mapping.items():
            if env_key in data:
                transformed.setdefault("matching", {})[field_key] = data.pop(env_key)

        for group, values in transformed.items():
            existing = data.get(group)
            if isinstance(existing, dict):
                values = {**existing, **values}
            data[group] = values

        return data


# Singleton instance for application use
settings = Settings()


# =============================================================================
# FLAT KEY ACCESS
# =============================================================================

_LEGACY_KEY_MAP = {
    "DATABASE_URL": lambda: settings.database.url,
    "DATABASE_ECHO": lambda: settings.database.echo,
    "DATABASE_POOL_TIMEOUT": lambda: settings.database.pool_timeout,
    "CONSOLE_LOG_LEVEL": lambda: settings.logging.console_level,
    "FILE_LOG_LEVEL": lambda: settings.logging.file_level,
    "LOG_FILE": lambda: settings.logging.log_file,
    "LOG_REAL_TIME_DEBUG": lambda: settings.logging.real_time_debug,
    "TEST_MATCH_LIMIT": lambda: settings.matching.test_match_limit,
    "PRIMARY_ATTRIBUTE_COUNT": lambda: settings.matching.primary_attribute_count,
    "DATA_DIR": lambda: settings.data_dir,
}


def get_config(key: str, default=None):
    """Get configuration value by flat key with optional default.

    Args:
        key: Configuration key to retrieve
        default: Default value if key not found

    Returns:
        Configuration value or default

    Example:
        >>> limit = get_config("TEST_MATCH_LIMIT", 5)
        >>> db_url = get_config("DATABASE_URL")
    """
    if key in _LEGACY_KEY_MAP:
        return _LEGACY_KEY_MAP[key]()

    return default

"""Configuration module for Pitchmatch.

Type-safe configuration using Pydantic Settings plus Loguru logging helpers.

Public API:
----------
settings: Settings instance
    Pydantic settings object with nested configuration

get_config(key: str, default=None) -> Any
    Flat-key configuration access

get_logger(name: str) -> Logger
    Get a context-aware logger for your module

setup_loguru_logger(verbose: bool = False) -> None
    Configure Loguru logger for the application

resilient_operation(operation_name: str)
    Decorator for logging errors at async service boundaries

log_startup_info() -> None
    Log system configuration at startup

Usage:
------
```python
from src.config import settings
limit = settings.matching.test_match_limit

from src.config import get_logger
logger = get_logger(__name__)
logger.info("Starting ranking")
```
"""

from .logging import (
    get_logger,
    log_startup_info,
    resilient_operation,
    setup_loguru_logger,
)
from .settings import get_config, settings

__all__ = [
    "get_config",
    "get_logger",
    "log_startup_info",
    "resilient_operation",
    "settings",
    "setup_loguru_logger",
]

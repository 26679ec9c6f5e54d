"""Async helpers for CLI commands."""

import asyncio
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, TypeVar

from src.infrastructure.cli.ui import command_error_handler
from src.infrastructure.persistence.database.db_connection import dispose_engine

R = TypeVar("R")


async def _run_and_dispose(coro: Awaitable[R]) -> R:
    try:
        return await coro
    finally:
        await dispose_engine()


def run_async(coro: Awaitable[R]) -> R:
    """Run a coroutine to completion on a fresh event loop.

    The database engine is disposed before the loop closes.
    """
    return asyncio.run(_run_and_dispose(coro))


def async_command() -> Callable[[Callable[..., Awaitable[Any]]], Callable[..., Any]]:
    """Decorator turning an async function into a synchronous typer command.

    Errors are handled by `command_error_handler`.
    """

    def decorator(func: Callable[..., Awaitable[Any]]) -> Callable[..., Any]:
        @command_error_handler
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            return run_async(func(*args, **kwargs))

        return wrapper

    return decorator

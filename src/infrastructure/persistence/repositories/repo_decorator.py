"""Repository decorator for standardizing DB operations.

Wraps repository methods with:
- Structured trace logging with timing information
- Error logging classified by SQLAlchemy exception type

Errors are always re-raised; callers decide whether they are fatal.
"""

from collections.abc import Callable, Coroutine
import functools
import inspect
import time
from typing import Any, ParamSpec, TypeVar

from sqlalchemy.exc import (
    IntegrityError,
    MultipleResultsFound,
    NoResultFound,
    OperationalError,
    SQLAlchemyError,
)

from src.config import get_logger

P = ParamSpec("P")
T = TypeVar("T")

logger = get_logger(__name__)


def _build_log_context(kwargs: dict[str, Any]) -> dict[str, Any]:
    """Keep simple scalar kwargs as structured log context."""
    return {
        key: value
        for key, value in kwargs.items()
        if isinstance(value, str | int | float | bool)
    }


def db_operation(operation_name: str | None = None):
    """Decorate repository methods with consistent logging and error handling.

    Args:
        operation_name: Optional name for the operation (defaults to function name)

    Example:
        @db_operation("get_campaign")
        async def get_campaign_by_id(self, campaign_id: int) -> Campaign | None:
            ...
    """

    def decorator(
        func: Callable[P, Coroutine[Any, Any, T]],
    ) -> Callable[P, Coroutine[Any, Any, T]]:
        func_name = operation_name or func.__name__

        if not inspect.iscoroutinefunction(func):
            raise TypeError(
                f"db_operation can only be used with async functions, but {func_name} is not async",
            )

        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            start_time = time.perf_counter()
            repo_name = args[0].__class__.__name__ if args else "Repository"
            context = _build_log_context(kwargs)

            try:
                result = await func(*args, **kwargs)
            except (NoResultFound, MultipleResultsFound, IntegrityError) as e:
                logger.warning(
                    f"DB lookup/integrity error: {repo_name}.{func_name}",
                    operation=func_name,
                    error=str(e),
                    exec_time_ms=(time.perf_counter() - start_time) * 1000,
                    **context,
                )
                raise
            except OperationalError as e:
                logger.error(
                    f"DB operational error: {repo_name}.{func_name}",
                    operation=func_name,
                    error=str(e),
                    exec_time_ms=(time.perf_counter() - start_time) * 1000,
                    **context,
                )
                raise
            except SQLAlchemyError as e:
                logger.error(
                    f"SQLAlchemy error: {repo_name}.{func_name}",
                    operation=func_name,
                    error=str(e),
                    exec_time_ms=(time.perf_counter() - start_time) * 1000,
                    **context,
                )
                raise

            logger.trace(
                f"DB operation completed: {repo_name}.{func_name}",
                operation=func_name,
                exec_time_ms=(time.perf_counter() - start_time) * 1000,
                **context,
            )
            return result

        return wrapper

    return decorator

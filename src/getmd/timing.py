"""Timing helpers for logging how long pipeline stages take."""

import inspect
import logging
import time
from collections.abc import Awaitable, Callable, Iterator
from contextlib import contextmanager
from functools import wraps
from typing import ParamSpec, TypeVar, cast

from getmd.logger import logger

__all__ = ["timeit", "timer"]

P = ParamSpec("P")
R = TypeVar("R")


def _log_elapsed(name: str, log_level: int, start_time: float) -> None:
    elapsed_time = time.perf_counter() - start_time
    logger.log(log_level, "%s took %.4f seconds", name, elapsed_time)


@contextmanager
def timer(name: str = "Operation", log_level: int = logging.DEBUG) -> Iterator[None]:
    """Context manager for timing code blocks.

    Args:
        name: Name of the operation being timed
        log_level: Logging level to use (default: DEBUG)

    Example:
        >>> with timer("Table compaction"):
        ...     markdown = compact_markdown(markdown)

    """
    start_time = time.perf_counter()
    try:
        yield
    finally:
        _log_elapsed(name, log_level, start_time)


def timeit(
    name: str | None = None, log_level: int = logging.DEBUG
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Time function execution (supports both sync and async).

    Args:
        name: Custom name for the operation (default: uses function name)
        log_level: Logging level to use (default: DEBUG)

    Example:
        >>> @timeit("Page conversion")
        ... async def fetch_markdown(url, selectors):
        ...     ...

    """
    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        operation_name = name or f"{func.__module__}.{func.__name__}"

        if inspect.iscoroutinefunction(func):
            @wraps(func)
            async def async_wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
                start_time = time.perf_counter()
                try:
                    result = await cast("Callable[P, Awaitable[R]]", func)(*args, **kwargs)
                    return result
                finally:
                    _log_elapsed(operation_name, log_level, start_time)
            return async_wrapper  # type: ignore[return-value]

        @wraps(func)
        def sync_wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            start_time = time.perf_counter()
            try:
                return func(*args, **kwargs)
            finally:
                _log_elapsed(operation_name, log_level, start_time)
        return sync_wrapper
    return decorator

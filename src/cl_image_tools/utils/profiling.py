"""Timing helper for the asynchronous pipeline operations."""

import time
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import ParamSpec, TypeVar

from loguru import logger

P = ParamSpec("P")
R = TypeVar("R")


def timed(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
    """Log how long a pipeline coroutine took, whether it returned or raised.

    Usage:
        @timed
        async def resize_image(source, out_width, out_height):
            ...
    """

    @wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        start_time = time.perf_counter()
        try:
            return await func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start_time) * 1000
            logger.debug(f"[PROFILE] {func.__qualname__} took {elapsed_ms:.1f}ms")

    return wrapper

"""Timing helpers that log how long repository calls and use cases take."""
from __future__ import annotations

import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Awaitable, Callable, ParamSpec, TypeVar

import structlog

P = ParamSpec("P")
T = TypeVar("T")

log = structlog.stdlib.get_logger()


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)


@contextmanager
def timed_operation(operation: str, **context: Any):
    """Measure a block and log ``<operation>.completed`` at DEBUG.

    Yields a dict that receives ``elapsed_ms`` once the block exits, even
    when it raises.

    Example:
        with timed_operation("db.add", collection="contactMessages") as timing:
            await collection.add(payload)
    """
    timing: dict[str, Any] = {}
    start = time.perf_counter()
    try:
        yield timing
    finally:
        timing["elapsed_ms"] = _elapsed_ms(start)
        log.debug(f"{operation}.completed", elapsed_ms=timing["elapsed_ms"], **context)


def log_execution(operation: str, extract_context: Callable[..., dict[str, Any]] | None = None):
    """Decorator logging start, completion and failure of an async use case.

    Args:
        operation: Event prefix, e.g. "use_case.update_message".
        extract_context: Receives the call's (*args, **kwargs) and returns
            extra fields for every log entry of the call.

    Failures are logged with the exception type and message, then re-raised.
    """
    def decorator(func: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[T]]:
        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            context = extract_context(*args, **kwargs) if extract_context else {}
            log.info(f"{operation}.started", **context)
            start = time.perf_counter()
            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                log.error(
                    f"{operation}.failed",
                    elapsed_ms=_elapsed_ms(start),
                    error=str(e),
                    error_type=type(e).__name__,
                    **context,
                )
                raise
            log.info(f"{operation}.completed", elapsed_ms=_elapsed_ms(start), **context)
            return result

        return wrapper

    return decorator

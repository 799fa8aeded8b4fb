"""Adapters that run exception-raising code and return a Result instead.

Two catch policies:
- ``try_result`` / ``try_result_async`` capture anything raised, including
  ``KeyboardInterrupt`` and ``asyncio.CancelledError``.
- ``try_result_typed`` / ``try_result_async_typed`` capture only the general
  exception category. Faults (``AssertionError``, ``MemoryError``) and
  non-``Exception`` base exceptions propagate to the caller.

Errors raised by ``on_error`` itself always propagate, chained to the
original exception.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from kib_utils.config import current_config
from kib_utils.errors import FAULT_TYPES, ResultContractError
from kib_utils.result import Failure, Success

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from kib_utils.config import Config
    from kib_utils.result import Result

log = logging.getLogger(__name__)


def _capture[E: BaseException](
    adapter: str,
    exc: BaseException,
    on_error: Callable[[BaseException], E] | Callable[[Exception], E],
    config: Config,
) -> Failure[Any, E]:
    log.log(
        config.capture_log_level,
        "%s captured %s: %s",
        adapter,
        type(exc).__name__,
        exc,
    )
    error = on_error(exc)  # type: ignore[arg-type]
    if config.validate and not isinstance(error, BaseException):
        raise ResultContractError(
            f"{adapter}: on_error returned {type(error).__name__}, expected an exception",
            hint="Return an exception instance from on_error, e.g. `lambda e: e`.",
        )
    return Failure(error)


def try_result[S, E: BaseException](
    fn: Callable[[], S],
    on_error: Callable[[BaseException], E],
) -> Result[S, E]:
    """Call *fn* and wrap its outcome.

    Args:
        fn: Zero-argument callable to run once.
        on_error: Maps whatever *fn* raised to the error held by the Failure.

    Returns:
        ``Success(fn())``, or ``Failure(on_error(exc))`` if *fn* raised.

    Example:
        result = try_result(lambda: int("42"), lambda e: ValueError(f"bad input: {e}"))
        result.get_or_else(0)  # 42
    """
    config = current_config()
    try:
        value = fn()
    except BaseException as exc:  # noqa: BLE001
        return _capture("try_result", exc, on_error, config)
    return Success(value)


def try_result_typed[S](
    fn: Callable[[], S],
    on_error: Callable[[Exception], Exception],
) -> Result[S, Exception]:
    """Call *fn*, capturing only the general exception category.

    The error type of the returned Result is always ``Exception``, whatever
    narrower type the caller has in mind.

    Example:
        def validate_username(name: str) -> Result[str, Exception]:
            def check() -> str:
                if len(name) < 3:
                    raise ValueError("Username must be at least 3 characters")
                return name

            return try_result_typed(check, lambda e: e)
    """
    config = current_config()
    try:
        value = fn()
    except FAULT_TYPES:
        raise
    except Exception as exc:
        return _capture("try_result_typed", exc, on_error, config)
    return Success(value)


async def try_result_async[S, E: BaseException](
    fn: Callable[[], Awaitable[S]],
    on_error: Callable[[BaseException], E],
) -> Result[S, E]:
    """Await ``fn()`` once and wrap its outcome.

    Cancellation raised while awaiting *fn* is captured like any other error.

    Example:
        async def fetch_value() -> int:
            return 42

        result = await try_result_async(fetch_value, lambda e: RuntimeError(f"Fetching failed: {e}"))
    """
    config = current_config()
    try:
        value = await fn()
    except BaseException as exc:  # noqa: BLE001
        return _capture("try_result_async", exc, on_error, config)
    return Success(value)


async def try_result_async_typed[S](
    fn: Callable[[], Awaitable[S]],
    on_error: Callable[[Exception], Exception],
) -> Result[S, Exception]:
    """Async counterpart of ``try_result_typed``; cancellation propagates."""
    config = current_config()
    try:
        value = await fn()
    except FAULT_TYPES:
        raise
    except Exception as exc:
        return _capture("try_result_async_typed", exc, on_error, config)
    return Success(value)


__all__ = [
    "try_result",
    "try_result_async",
    "try_result_async_typed",
    "try_result_typed",
]

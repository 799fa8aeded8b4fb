"""Test helpers (small, reusable doubles).

Keep this file tiny: it exists so suites share one recording callable and one
caller-defined error type instead of growing lambdas with side effects.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any

from kib_utils import Result


class DomainError(Exception):
    """Caller-defined error type used as the Failure payload in tests."""

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


def wrap_as_domain_error(exc: BaseException) -> DomainError:
    """on_error callback that keeps the original exception as ``cause``."""
    return DomainError(f"wrapped: {exc}", cause=exc)


@dataclass
class CallRecorder:
    """Callable that records every argument and returns a fixed value.

    Use to assert exactly-once and never-called guarantees on callbacks.
    """

    returns: Any = None
    calls: list[Any] = field(default_factory=list)

    def __call__(self, arg: Any) -> Any:
        self.calls.append(arg)
        return self.returns

    @property
    def call_count(self) -> int:
        return len(self.calls)


@dataclass
class AsyncCallRecorder:
    """Async counterpart of CallRecorder that resolves to a fixed Result."""

    returns: Result[Any, Exception] | None = None
    calls: list[Any] = field(default_factory=list)

    async def __call__(self, arg: Any) -> Any:
        self.calls.append(arg)
        await asyncio.sleep(0)
        return self.returns

    @property
    def call_count(self) -> int:
        return len(self.calls)


@dataclass
class AwaitCounter:
    """Awaitable that counts how many times it is awaited."""

    result: Any
    awaited: int = 0

    def __await__(self):
        self.awaited += 1
        yield from asyncio.sleep(0).__await__()
        return self.result

"""Compose a Result that is still pending behind an awaitable.

Both helpers await their input exactly once and never schedule work of their
own, so they accept any awaitable: a coroutine, a ``Task`` or a ``Future``.

Example:
    async def fetch_number() -> Result[int, Exception]:
        return Success(10)

    async def fetch_string(n: int) -> Result[str, Exception]:
        return Success(f"Number: {n}")

    await map_async(fetch_number(), lambda n: n * 2)  # Success(20)
    await flat_map_async(fetch_number(), fetch_string)  # Success('Number: 10')
"""

from __future__ import annotations

import typing

from kib_utils.config import current_config
from kib_utils.errors import ResultContractError
from kib_utils.result import Failure, Success

if typing.TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from kib_utils.result import Result


def _ensure_result(obj: object, *, source: str) -> None:
    if not isinstance(obj, (Success, Failure)):
        raise ResultContractError(
            f"{source} resolved to {type(obj).__name__}, expected Success or Failure",
            hint="Make the awaitable return success(...) or failure(...).",
        )


async def map_async[S, T, E: BaseException](
    pending: Awaitable[Result[S, E]],
    mapper: Callable[[S], T],
) -> Result[T, E]:
    """Await *pending*, then ``map`` its Result with *mapper*."""
    result = await pending
    if current_config().validate:
        _ensure_result(result, source="map_async pending")
    return result.map(mapper)


async def flat_map_async[S, T, E: BaseException](
    pending: Awaitable[Result[S, E]],
    mapper: Callable[[S], Awaitable[Result[T, E]]],
) -> Result[T, E]:
    """Chain an async step that itself returns a Result.

    On ``Success(v)`` awaits ``mapper(v)`` and returns its Result as is. On
    ``Failure(e)`` returns ``Failure(e)`` without calling *mapper*.
    """
    result = await pending
    validate = current_config().validate
    if validate:
        _ensure_result(result, source="flat_map_async pending")

    match result:
        case Success(value):
            chained = await mapper(value)
            if validate:
                _ensure_result(chained, source="flat_map_async mapper")
            return chained
        case Failure(error):
            return Failure(error)
        case _:
            typing.assert_never(result)


__all__ = ["flat_map_async", "map_async"]

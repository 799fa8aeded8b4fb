"""Result type for operations that either succeed or fail.

A ``Result`` is exactly one of two frozen variants: ``Success`` holding a
value, or ``Failure`` holding an error. Failures travel as ordinary return
values; ``get_or_throw`` is the one place that turns a held error back into a
raised exception.

Example:
    ok = Success[float, Exception](3.14)
    ok.get_or_throw()  # 3.14

    bad = Failure[float, Exception](ZeroDivisionError("division by zero"))
    bad.get_or_else(0.0)  # 0.0

    ok.map(lambda v: f"Value is: {v}").get_or_throw()  # "Value is: 3.14"

    match bad:
        case Success(value):
            print(value)
        case Failure(error):
            print(f"Failure: {error}")
"""

from __future__ import annotations

import dataclasses
import typing

if typing.TYPE_CHECKING:
    from collections.abc import Callable

S = typing.TypeVar("S")
E = typing.TypeVar("E", bound=BaseException)


@dataclasses.dataclass(frozen=True, slots=True, repr=False)
class Success[S, E: BaseException]:
    """A completed operation and the value it produced."""

    value: S

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    @property
    def value_or_none(self) -> S | None:
        return self.value

    @property
    def error_or_none(self) -> E | None:
        return None

    def map[T](self, mapper: Callable[[S], T]) -> Result[T, E]:
        """Apply *mapper* to the value; anything it raises propagates."""
        return Success(mapper(self.value))

    def get_or_throw(self) -> S:
        return self.value

    def get_or_else(self, default: S) -> S:  # noqa: ARG002
        return self.value

    def fold[T](
        self,
        on_success: Callable[[S], T],
        on_failure: Callable[[E], T],  # noqa: ARG002
    ) -> T:
        """Reduce to a single value by calling ``on_success(value)`` only."""
        return on_success(self.value)

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@dataclasses.dataclass(frozen=True, slots=True, repr=False)
class Failure[S, E: BaseException]:
    """A failed operation and the error describing why.

    The success type ``S`` is unused by the variant itself; it keeps a
    ``Failure`` interchangeable with a ``Success`` of the same ``Result``.
    """

    error: E

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    @property
    def value_or_none(self) -> S | None:
        return None

    @property
    def error_or_none(self) -> E | None:
        return self.error

    def map[T](self, mapper: Callable[[S], T]) -> Result[T, E]:  # noqa: ARG002
        """Carry the error through untouched; *mapper* is never called."""
        return Failure(self.error)

    def get_or_throw(self) -> S:
        """Raise the held error in the caller's context.

        The traceback is reset first, so repeated calls each report only the
        current raise site instead of accumulating frames from earlier ones.
        """
        raise self.error.with_traceback(None)

    def get_or_else(self, default: S) -> S:
        return default

    def fold[T](
        self,
        on_success: Callable[[S], T],  # noqa: ARG002
        on_failure: Callable[[E], T],
    ) -> T:
        """Reduce to a single value by calling ``on_failure(error)`` only."""
        return on_failure(self.error)

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


Result = Success[S, E] | Failure[S, E]


def success[S, E: BaseException](value: S) -> Result[S, E]:
    """Wrap *value* in a ``Success``.

    Example:
        success(42).get_or_throw()  # 42
    """
    return Success(value)


def failure[S, E: BaseException](error: E) -> Result[S, E]:
    """Wrap *error* in a ``Failure``.

    Example:
        failure(ValueError("An error occurred")).is_failure  # True
    """
    return Failure(error)


__all__ = ["Failure", "Result", "Success", "failure", "success"]

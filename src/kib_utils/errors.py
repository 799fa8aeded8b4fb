"""Exception hierarchy and fault taxonomy for kib-utils."""

from __future__ import annotations

from typing import Final


class KibUtilsError(Exception):
    """Base exception for all kib-utils errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint

    def __str__(self) -> str:
        """Return the message followed by the hint, when one is attached."""
        msg = super().__str__()
        return f"{msg}. {self.hint}" if self.hint else msg


class ConfigurationError(KibUtilsError):
    """Environment configuration could not be resolved."""


class ResultContractError(KibUtilsError):
    """A callback handed to an adapter broke its contract.

    Only raised when runtime validation is enabled (``KIB_UTILS_VALIDATE=1``).
    """


# Exception subclasses that signal a broken program rather than an
# operational failure. The *_typed adapters never capture these.
FAULT_TYPES: Final[tuple[type[Exception], ...]] = (AssertionError, MemoryError)


__all__ = [
    "FAULT_TYPES",
    "ConfigurationError",
    "KibUtilsError",
    "ResultContractError",
]

"""Configuration: frozen Config resolved from the environment."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os

from dotenv import load_dotenv

from kib_utils.errors import ConfigurationError

load_dotenv()

log = logging.getLogger(__name__)

VALIDATE_ENV_VAR = "KIB_UTILS_VALIDATE"
CAPTURE_LOG_LEVEL_ENV_VAR = "KIB_UTILS_CAPTURE_LOG_LEVEL"

_LEVEL_NAMES: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class Config:
    """Immutable runtime settings for the adapters.

    Example:
        config = Config.from_env()
        # validate is True when KIB_UTILS_VALIDATE=1
    """

    #: Check callback contracts at runtime and raise ResultContractError.
    validate: bool = False
    #: Level used when an adapter logs an error it captured into a Failure.
    capture_log_level: int = logging.DEBUG

    def __post_init__(self) -> None:
        """Validate the log level so adapters never log at an unknown level."""
        if self.capture_log_level not in _LEVEL_NAMES.values():
            raise ConfigurationError(
                f"Unknown capture_log_level: {self.capture_log_level!r}",
                hint="Use one of the logging module levels, e.g. logging.DEBUG.",
            )

    @classmethod
    def from_env(cls) -> Config:
        """Build a Config from ``KIB_UTILS_*`` environment variables.

        Never raises: an unknown level name logs a warning and falls back to
        ``DEBUG``. Only a Config built in code with a bad level is rejected.
        """
        validate = os.getenv(VALIDATE_ENV_VAR) == "1"

        raw_level = os.getenv(CAPTURE_LOG_LEVEL_ENV_VAR)
        if raw_level is None or not raw_level.strip():
            return cls(validate=validate)

        level = _LEVEL_NAMES.get(raw_level.strip().upper())
        if level is None:
            # Adapters resolve this on every call; a typo must not fail them.
            log.warning(
                "Ignoring unknown %s=%r; supported levels: %s",
                CAPTURE_LOG_LEVEL_ENV_VAR,
                raw_level,
                ", ".join(_LEVEL_NAMES),
            )
            return cls(validate=validate)
        return cls(validate=validate, capture_log_level=level)


def current_config() -> Config:
    """Resolve the configuration in effect right now.

    Not cached: environment changes apply to the next adapter call.
    """
    return Config.from_env()


__all__ = [
    "CAPTURE_LOG_LEVEL_ENV_VAR",
    "VALIDATE_ENV_VAR",
    "Config",
    "current_config",
]

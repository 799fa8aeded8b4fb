"""kib-utils: a small Result type for success-or-failure outcomes.

Public API:
    - Success / Failure / Result: the two variants and their union
    - success() / failure(): constructors
    - try_result() / try_result_typed(): wrap raising sync code
    - try_result_async() / try_result_async_typed(): wrap raising async code
    - map_async() / flat_map_async(): compose a pending Result
"""

from __future__ import annotations

import logging

from kib_utils.adapters import (
    try_result,
    try_result_async,
    try_result_async_typed,
    try_result_typed,
)
from kib_utils.async_ops import flat_map_async, map_async
from kib_utils.config import Config
from kib_utils.errors import (
    FAULT_TYPES,
    ConfigurationError,
    KibUtilsError,
    ResultContractError,
)
from kib_utils.result import Failure, Result, Success, failure, success

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("kib-utils")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("kib_utils").addHandler(logging.NullHandler())

__all__ = [
    "FAULT_TYPES",
    "Config",
    "ConfigurationError",
    "Failure",
    "KibUtilsError",
    "Result",
    "ResultContractError",
    "Success",
    "failure",
    "flat_map_async",
    "map_async",
    "success",
    "try_result",
    "try_result_async",
    "try_result_async_typed",
    "try_result_typed",
]

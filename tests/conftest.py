"""Pytest configuration and fixtures.

Provides environment isolation for KIB_UTILS_* settings. Fixtures here are
autouse unless noted.
"""

from __future__ import annotations

import os

import pytest

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def isolate_kib_utils_env(request, monkeypatch):
    """Clear KIB_UTILS_* env vars so each test starts from the defaults.

    kib_utils.config runs load_dotenv() at import, before any fixture, so this
    also discards values a project .env file put into os.environ.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return
    for key in list(os.environ.keys()):
        if key.startswith("KIB_UTILS_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def validation_enabled(monkeypatch):
    """Turn on runtime contract validation for the duration of a test."""
    monkeypatch.setenv("KIB_UTILS_VALIDATE", "1")

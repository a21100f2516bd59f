"""Pytest configuration and fixtures for extsearch tests."""

from __future__ import annotations

import pytest

from extsearch.config import (
    ENV_DOWNLOAD_PREVIEW_IMAGES,
    ENV_GRAVATAR_BASE_URL,
    ENV_GRAVATAR_TIMEOUT_SECONDS,
    ENV_GRAVATAR_USER_AGENT,
    ENV_MAX_WORKERS,
)


@pytest.fixture(autouse=True)
def clear_extsearch_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test from default configuration.

    Tests that need a specific configuration set the variables themselves.
    """
    for env_var in (
        ENV_GRAVATAR_BASE_URL,
        ENV_GRAVATAR_TIMEOUT_SECONDS,
        ENV_GRAVATAR_USER_AGENT,
        ENV_MAX_WORKERS,
        ENV_DOWNLOAD_PREVIEW_IMAGES,
    ):
        monkeypatch.delenv(env_var, raising=False)

"""Tests for environment-driven external search configuration."""

from __future__ import annotations

import pytest

from extsearch.config import (
    DEFAULT_GRAVATAR_BASE_URL,
    ENV_DOWNLOAD_PREVIEW_IMAGES,
    ENV_GRAVATAR_BASE_URL,
    ENV_GRAVATAR_TIMEOUT_SECONDS,
    ENV_MAX_WORKERS,
    ExternalSearchConfig,
    ExternalSearchConfigError,
    load_config,
)


class TestLoadConfigDefaults:
    def test_defaults_when_unset(self) -> None:
        config = load_config()
        assert config == ExternalSearchConfig()
        assert config.gravatar_base_url == DEFAULT_GRAVATAR_BASE_URL
        assert config.max_workers == 1
        assert config.download_preview_images is True

    def test_blank_values_use_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(ENV_MAX_WORKERS, "  ")
        monkeypatch.setenv(ENV_GRAVATAR_BASE_URL, "")
        assert load_config() == ExternalSearchConfig()


class TestLoadConfigOverrides:
    def test_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(ENV_GRAVATAR_BASE_URL, "https://gravatar.internal/")
        monkeypatch.setenv(ENV_GRAVATAR_TIMEOUT_SECONDS, "2.5")
        monkeypatch.setenv(ENV_MAX_WORKERS, "4")
        monkeypatch.setenv(ENV_DOWNLOAD_PREVIEW_IMAGES, "0")
        config = load_config()
        assert config.gravatar_base_url == "https://gravatar.internal"
        assert config.gravatar_timeout_seconds == 2.5
        assert config.max_workers == 4
        assert config.download_preview_images is False

    @pytest.mark.parametrize(
        ("env_var", "value"),
        [
            (ENV_MAX_WORKERS, "zero"),
            (ENV_MAX_WORKERS, "0"),
            (ENV_GRAVATAR_TIMEOUT_SECONDS, "-1"),
            (ENV_GRAVATAR_TIMEOUT_SECONDS, "soon"),
            (ENV_GRAVATAR_BASE_URL, "ftp://gravatar.com"),
        ],
    )
    def test_invalid_values_raise(
        self, monkeypatch: pytest.MonkeyPatch, env_var: str, value: str
    ) -> None:
        monkeypatch.setenv(env_var, value)
        with pytest.raises(ExternalSearchConfigError) as exc_info:
            load_config()
        assert env_var in str(exc_info.value)

"""Tests for sl10n.core.config.Settings validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from sl10n.core.config import Settings, get_settings


def _make(**overrides: object) -> Settings:
    return Settings(_env_file=None, **overrides)  # type: ignore[call-arg]


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------
class TestDefaults:
    def test_log_level_default(self) -> None:
        assert _make().LOG_LEVEL == "INFO"

    def test_log_misses_default(self) -> None:
        assert _make().LOG_MISSES is False


# ---------------------------------------------------------------------------
# LOG_LEVEL validation
# ---------------------------------------------------------------------------
class TestLogLevel:
    @pytest.mark.parametrize("value", ["DEBUG", "info", " Warning ", "ERROR", "CRITICAL"])
    def test_valid_levels_normalized(self, value: str) -> None:
        assert _make(LOG_LEVEL=value).LOG_LEVEL == value.strip().upper()

    def test_unknown_level_rejected(self) -> None:
        with pytest.raises(ValidationError, match="must be a logging level name"):
            _make(LOG_LEVEL="LOUD")


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------
class TestEnvironment:
    def test_prefixed_env_vars(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SL10N_LOG_LEVEL", "debug")
        monkeypatch.setenv("SL10N_LOG_MISSES", "1")
        s = _make()
        assert s.LOG_LEVEL == "DEBUG"
        assert s.LOG_MISSES is True

    def test_unprefixed_env_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        assert _make().LOG_LEVEL == "INFO"

    def test_get_settings_cached(self) -> None:
        assert get_settings() is get_settings()

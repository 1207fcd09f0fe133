"""Tests for SelectorKitConfig."""
from __future__ import annotations

import pytest

from selector_kit.config import ConfigError, SelectorKitConfig


class TestDefaults:
    def test_defaults(self) -> None:
        config = SelectorKitConfig()
        assert config.log_level == "WARNING"
        assert config.strict_json is False
        assert config.json_indent is None

    def test_frozen(self) -> None:
        config = SelectorKitConfig()
        with pytest.raises(AttributeError):
            config.strict_json = True  # type: ignore[misc]


class TestFromEnv:
    def test_empty_env(self, monkeypatch) -> None:
        for name in (
            "SELECTOR_KIT_LOG_LEVEL",
            "SELECTOR_KIT_STRICT_JSON",
            "SELECTOR_KIT_JSON_INDENT",
        ):
            monkeypatch.delenv(name, raising=False)
        assert SelectorKitConfig.from_env() == SelectorKitConfig()

    def test_overrides(self, monkeypatch) -> None:
        monkeypatch.setenv("SELECTOR_KIT_LOG_LEVEL", "debug")
        monkeypatch.setenv("SELECTOR_KIT_STRICT_JSON", "yes")
        monkeypatch.setenv("SELECTOR_KIT_JSON_INDENT", "4")
        config = SelectorKitConfig.from_env()
        assert config.log_level == "DEBUG"
        assert config.strict_json is True
        assert config.json_indent == 4


class TestValidation:
    def test_non_integer_indent(self, monkeypatch) -> None:
        monkeypatch.setenv("SELECTOR_KIT_JSON_INDENT", "two")
        with pytest.raises(ConfigError) as exc_info:
            SelectorKitConfig.from_env()
        assert exc_info.value.variable == "SELECTOR_KIT_JSON_INDENT"
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_unknown_log_level(self, monkeypatch) -> None:
        monkeypatch.setenv("SELECTOR_KIT_LOG_LEVEL", "loud")
        with pytest.raises(ConfigError) as exc_info:
            SelectorKitConfig.from_env()
        assert exc_info.value.variable == "SELECTOR_KIT_LOG_LEVEL"
        assert "LOUD" in str(exc_info.value)

    def test_log_level_whitespace_trimmed(self, monkeypatch) -> None:
        monkeypatch.setenv("SELECTOR_KIT_LOG_LEVEL", " info ")
        assert SelectorKitConfig.from_env().log_level == "INFO"

    def test_constructor_rejects_unknown_level(self) -> None:
        with pytest.raises(ConfigError):
            SelectorKitConfig(log_level="verbose")

    def test_constructor_rejects_negative_indent(self) -> None:
        with pytest.raises(ConfigError):
            SelectorKitConfig(json_indent=-1)

    def test_config_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            SelectorKitConfig(log_level="nope")

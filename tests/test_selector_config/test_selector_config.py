"""Tests for BuilderConfig."""

import dataclasses

import pytest

from selector_builder import CSS_COMBINATORS, BuilderConfig


class TestDefaults:
    def test_defaults(self):
        config = BuilderConfig()
        assert config.combinators == frozenset({" ", ">", "+", "~"})
        assert config.combinators is CSS_COMBINATORS
        assert config.warn_unknown_combinators is True
        assert config.log_level == "WARNING"

    def test_frozen(self):
        config = BuilderConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.log_level = "DEBUG"  # type: ignore[misc]


class TestFromEnv:
    def test_empty_env_keeps_defaults(self):
        assert BuilderConfig.from_env({}) == BuilderConfig()

    def test_log_level(self):
        config = BuilderConfig.from_env({"SELECTOR_BUILDER_LOG_LEVEL": " debug "})
        assert config.log_level == "DEBUG"

    @pytest.mark.parametrize("raw", ["0", "false", "no", "off"])
    def test_disable_warnings(self, raw):
        config = BuilderConfig.from_env({"SELECTOR_BUILDER_WARN_UNKNOWN": raw})
        assert config.warn_unknown_combinators is False

    @pytest.mark.parametrize("raw", ["1", "true", "YES"])
    def test_enable_warnings(self, raw):
        config = BuilderConfig.from_env({"SELECTOR_BUILDER_WARN_UNKNOWN": raw})
        assert config.warn_unknown_combinators is True

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("SELECTOR_BUILDER_LOG_LEVEL", "info")
        assert BuilderConfig.from_env().log_level == "INFO"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValueError, match="Invalid SELECTOR_BUILDER_LOG_LEVEL"):
            BuilderConfig.from_env({"SELECTOR_BUILDER_LOG_LEVEL": "loud"})

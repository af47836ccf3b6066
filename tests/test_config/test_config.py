"""Tests for TailwindSmartConfig defaults, validation and env loading."""

import dataclasses
import logging

import pytest

from tailwindsmart.config import TailwindSmartConfig
from tailwindsmart.errors import ConfigError, TailwindSmartError


class TestDefaults:
    def test_default_values(self):
        config = TailwindSmartConfig()
        assert config.cache_capacity == 10_000
        assert config.cache_evict_batch == 1_000
        assert config.max_suggestions == 5
        assert config.max_class_distance == 3
        assert config.min_suggestion_length == 3
        assert config.log_level == "WARNING"
        assert config.logging_level == logging.WARNING

    def test_frozen(self):
        config = TailwindSmartConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.max_suggestions = 10  # type: ignore[misc]


class TestValidation:
    def test_capacity_must_be_positive(self):
        with pytest.raises(ConfigError) as excinfo:
            TailwindSmartConfig(cache_capacity=0)
        assert excinfo.value.field == "cache_capacity"

    def test_distance_must_not_be_negative(self):
        with pytest.raises(ConfigError, match="max_class_distance"):
            TailwindSmartConfig(max_class_distance=-1)

    def test_zero_distance_allowed(self):
        assert TailwindSmartConfig(max_class_distance=0).max_class_distance == 0

    def test_unknown_log_level(self):
        with pytest.raises(ConfigError, match="log_level"):
            TailwindSmartConfig(log_level="LOUD")

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            TailwindSmartConfig(max_suggestions=0)
        assert issubclass(ConfigError, TailwindSmartError)


class TestFromEnv:
    def test_empty_environment_gives_defaults(self):
        assert TailwindSmartConfig.from_env({}) == TailwindSmartConfig()

    def test_reads_prefixed_variables(self):
        config = TailwindSmartConfig.from_env(
            {
                "TAILWINDSMART_CACHE_CAPACITY": "50",
                "TAILWINDSMART_CACHE_EVICT_BATCH": "5",
                "TAILWINDSMART_LOG_LEVEL": "debug",
                "UNRELATED": "x",
            }
        )
        assert config.cache_capacity == 50
        assert config.cache_evict_batch == 5
        assert config.logging_level == logging.DEBUG

    def test_invalid_integer(self):
        with pytest.raises(ConfigError) as excinfo:
            TailwindSmartConfig.from_env({"TAILWINDSMART_MAX_SUGGESTIONS": "many"})
        assert excinfo.value.field == "max_suggestions"

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("TAILWINDSMART_MAX_SUGGESTIONS", "2")
        assert TailwindSmartConfig.from_env().max_suggestions == 2

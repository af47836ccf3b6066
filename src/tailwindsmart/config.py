from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields
from typing import Mapping

from tailwindsmart.errors import ConfigError

ENV_PREFIX = "TAILWINDSMART_"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class TailwindSmartConfig:
    cache_capacity: int = 10_000
    cache_evict_batch: int = 1_000
    max_suggestions: int = 5
    max_class_distance: int = 3  # edit distance for unknown-class suggestions
    min_suggestion_length: int = 3  # shorter bases get no suggestions
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        for name in ("cache_capacity", "cache_evict_batch", "max_suggestions"):
            if getattr(self, name) < 1:
                raise ConfigError(name, f"must be at least 1, got {getattr(self, name)}")
        for name in ("max_class_distance", "min_suggestion_length"):
            if getattr(self, name) < 0:
                raise ConfigError(name, f"must not be negative, got {getattr(self, name)}")
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ConfigError("log_level", f"unknown level {self.log_level!r}")

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level.upper())

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> TailwindSmartConfig:
        """Build a config from ``TAILWINDSMART_<FIELD>`` variables.

        Unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}
        for f in fields(cls):
            raw = env.get(ENV_PREFIX + f.name.upper())
            if raw is None:
                continue
            if f.type == "int":
                try:
                    values[f.name] = int(raw)
                except ValueError:
                    raise ConfigError(f.name, f"expected an integer, got {raw!r}") from None
            else:
                values[f.name] = raw
        return cls(**values)

"""Exception types.

Class-string analysis never raises on bad input; these cover misuse at the
edges (bad configuration, strict lint mode).
"""


class TailwindSmartError(Exception):
    """Base class for tailwindsmart exceptions."""


class ConfigError(TailwindSmartError, ValueError):
    """Raised when a configuration value is out of range or unparsable."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(f"{field}: {message}")

"""Exception types raised at the outer surfaces of plumet.

The compiler itself never raises for well-typed input; these cover loading the
entry module and coercing configuration values.
"""


class PlumetError(Exception):
    """Base class for plumet errors."""


class EntryLoadError(PlumetError):
    """Raised when the entry module cannot be loaded or declares no units."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class ConfigError(PlumetError, ValueError):
    """Raised when a configuration value cannot be interpreted."""

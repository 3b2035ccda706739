"""Unit and configuration model: what gets compiled, where, and how."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from plumet.errors import ConfigError


class Format(Enum):
    """Output format for compiled CSS."""

    DEFAULT = "default"
    MINIFY = "minify"
    PRETTY = "pretty"

    @classmethod
    def coerce(cls, value: Format | str | None) -> Format:
        """Return the member for *value*; ``None`` means the default format."""
        if value is None:
            return cls.DEFAULT
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            choices = ", ".join(f.value for f in cls)
            raise ConfigError(
                f"Unknown format {value!r} (expected one of: {choices})"
            ) from None


@dataclass(frozen=True)
class GlobalConfig:
    """Settings shared by every unit of a build."""

    format: Format = Format.DEFAULT

    def __post_init__(self) -> None:
        object.__setattr__(self, "format", Format.coerce(self.format))

    @classmethod
    def from_value(cls, value: GlobalConfig | Mapping[str, Any] | None) -> GlobalConfig | None:
        """Coerce a ``GlobalConfig``, a mapping, or ``None``."""
        if value is None or isinstance(value, GlobalConfig):
            return value
        if isinstance(value, Mapping):
            return cls(format=value.get("format"))
        raise ConfigError(f"Expected a mapping for global config, got {type(value).__name__}")


@dataclass(frozen=True)
class UnitConfig:
    """Per-unit configuration.

    Attributes:
        output: Destination of the compiled CSS, relative to the entry module.
        omit: Selector patterns (literal or ``*`` wildcard) whose rules are dropped.
    """

    output: str
    omit: tuple[str, ...] = ()


@dataclass(frozen=True)
class Unit:
    """A style tree paired with its configuration."""

    config: UnitConfig
    style: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_value(cls, value: Any) -> Unit | None:
        """Return a ``Unit`` for *value*, or ``None`` if it does not have a unit's shape.

        Accepts ``Unit`` instances and mappings of the form
        ``{"config": {"output": ..., "omit": [...]}, "style": {...}}``.
        """
        if isinstance(value, Unit):
            return value
        if not isinstance(value, Mapping):
            return None
        config = value.get("config")
        style = value.get("style")
        if isinstance(config, UnitConfig):
            unit_config = config
        elif isinstance(config, Mapping):
            output = config.get("output")
            if not isinstance(output, str) or not output:
                return None
            omit = config.get("omit") or ()
            if not isinstance(omit, (list, tuple)) or not all(isinstance(p, str) for p in omit):
                return None
            unit_config = UnitConfig(output=output, omit=tuple(omit))
        else:
            return None
        if not isinstance(style, Mapping):
            return None
        return cls(config=unit_config, style=style)

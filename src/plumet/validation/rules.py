"""Validation rules for unit collections.

Each rule is a function taking the mapping of unit name to declared value and
returning a list of Diagnostic objects describing any issues found. Values may
be ``Unit`` instances or plain mappings, so the rules inspect shapes rather
than trusting types.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from plumet.model.diagnostic import Diagnostic, Severity
from plumet.model.unit import Unit, UnitConfig


def _parts(value: Any) -> tuple[Any, Any] | None:
    """Return ``(config, style)`` for a unit-shaped value, else ``None``."""
    if isinstance(value, Unit):
        return value.config, value.style
    if isinstance(value, Mapping) and "config" in value and "style" in value:
        return value["config"], value["style"]
    return None


def _output(config: Any) -> Any:
    if isinstance(config, UnitConfig):
        return config.output
    if isinstance(config, Mapping):
        return config.get("output")
    return None


def _omit(config: Any) -> Any:
    if isinstance(config, UnitConfig):
        return config.omit
    if isinstance(config, Mapping):
        return config.get("omit")
    return None


# ---------------------------------------------------------------------------
# Structural rules (ERROR severity)
# ---------------------------------------------------------------------------


def check_unit_shape(units: Mapping[str, Any]) -> list[Diagnostic]:
    """Every entry must be a Unit or a mapping with 'config' and 'style'."""
    return [
        Diagnostic(
            rule="unit_shape",
            severity=Severity.ERROR,
            message="expected a unit with 'config' and 'style'",
            unit=name,
        )
        for name, value in units.items()
        if _parts(value) is None
    ]


def check_output_present(units: Mapping[str, Any]) -> list[Diagnostic]:
    """config.output must be a non-empty string."""
    diagnostics: list[Diagnostic] = []
    for name, value in units.items():
        parts = _parts(value)
        if parts is None:
            continue
        output = _output(parts[0])
        if not isinstance(output, str) or not output:
            diagnostics.append(
                Diagnostic(
                    rule="output_present",
                    severity=Severity.ERROR,
                    message="config.output must be a non-empty string",
                    unit=name,
                )
            )
    return diagnostics


def check_style_mapping(units: Mapping[str, Any]) -> list[Diagnostic]:
    """style must be a mapping of selectors."""
    diagnostics: list[Diagnostic] = []
    for name, value in units.items():
        parts = _parts(value)
        if parts is None or isinstance(parts[1], Mapping):
            continue
        diagnostics.append(
            Diagnostic(
                rule="style_mapping",
                severity=Severity.ERROR,
                message=f"style must be a mapping, got {type(parts[1]).__name__}",
                unit=name,
            )
        )
    return diagnostics


def check_omit_patterns(units: Mapping[str, Any]) -> list[Diagnostic]:
    """config.omit, when given, must be a list of strings."""
    diagnostics: list[Diagnostic] = []
    for name, value in units.items():
        parts = _parts(value)
        if parts is None:
            continue
        omit = _omit(parts[0])
        if omit is None:
            continue
        if isinstance(omit, (list, tuple)) and all(isinstance(p, str) for p in omit):
            continue
        diagnostics.append(
            Diagnostic(
                rule="omit_patterns",
                severity=Severity.ERROR,
                message="config.omit must be a list of selector patterns",
                unit=name,
            )
        )
    return diagnostics


def check_duplicate_output(units: Mapping[str, Any]) -> list[Diagnostic]:
    """Two units must not write the same output."""
    seen: dict[str, str] = {}
    diagnostics: list[Diagnostic] = []
    for name, value in units.items():
        parts = _parts(value)
        if parts is None:
            continue
        output = _output(parts[0])
        if not isinstance(output, str) or not output:
            continue
        if output in seen:
            diagnostics.append(
                Diagnostic(
                    rule="duplicate_output",
                    severity=Severity.ERROR,
                    message=f"output {output!r} is already written by unit {seen[output]!r}",
                    unit=name,
                )
            )
        else:
            seen[output] = name
    return diagnostics


# ---------------------------------------------------------------------------
# Advisory rules (WARNING severity)
# ---------------------------------------------------------------------------


def check_empty_style(units: Mapping[str, Any]) -> list[Diagnostic]:
    """A unit with an empty style tree compiles to an empty file."""
    diagnostics: list[Diagnostic] = []
    for name, value in units.items():
        parts = _parts(value)
        if parts is None:
            continue
        style = parts[1]
        if isinstance(style, Mapping) and not style:
            diagnostics.append(
                Diagnostic(
                    rule="empty_style",
                    severity=Severity.WARNING,
                    message="style is empty; the output file will be empty",
                    unit=name,
                )
            )
    return diagnostics


ALL_RULES = [
    check_unit_shape,
    check_output_present,
    check_style_mapping,
    check_omit_patterns,
    check_duplicate_output,
    check_empty_style,
]

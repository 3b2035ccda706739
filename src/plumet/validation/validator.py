"""Unit validator: checks a unit collection before anything is compiled."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Mapping
from typing import Any, Callable

from plumet.model.diagnostic import Diagnostic
from plumet.validation.rules import ALL_RULES

RuleFunc = Callable[[Mapping[str, Any]], list[Diagnostic]]


class UnitValidationError(Exception):
    """Raised by :func:`validate_or_raise` when any unit has ERROR diagnostics."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        units = sorted({d.unit or "?" for d in diagnostics})
        messages = "; ".join(str(d) for d in diagnostics)
        super().__init__(
            f"{len(diagnostics)} error(s) in unit(s) {', '.join(units)}: {messages}"
        )


def validate(
    units: Mapping[str, Any], extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Run the built-in rules, then *extra_rules*, over *units*."""
    diagnostics: list[Diagnostic] = []
    for rule in [*ALL_RULES, *(extra_rules or [])]:
        diagnostics.extend(rule(units))
    return diagnostics


def partition(
    diagnostics: list[Diagnostic],
) -> tuple[dict[str, list[Diagnostic]], list[Diagnostic]]:
    """Split *diagnostics* into errors keyed by unit name and everything else."""
    errors: dict[str, list[Diagnostic]] = defaultdict(list)
    others: list[Diagnostic] = []
    for diag in diagnostics:
        if diag.is_error:
            errors[diag.unit or ""].append(diag)
        else:
            others.append(diag)
    return dict(errors), others


def validate_or_raise(
    units: Mapping[str, Any], extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Validate *units*, raising :class:`UnitValidationError` on any error.

    Returns the warnings and info diagnostics otherwise.
    """
    errors, others = partition(validate(units, extra_rules=extra_rules))
    if errors:
        raise UnitValidationError([d for group in errors.values() for d in group])
    return others

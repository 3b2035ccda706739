"""Plumet model layer -- public type re-exports."""

from plumet.model.diagnostic import Diagnostic, Severity
from plumet.model.style import AtRuleNode, RuleNode, StyleNode, StyleTree, parse_style
from plumet.model.unit import Format, GlobalConfig, Unit, UnitConfig

__all__ = [
    # style
    "RuleNode",
    "AtRuleNode",
    "StyleNode",
    "StyleTree",
    "parse_style",
    # unit
    "Format",
    "GlobalConfig",
    "Unit",
    "UnitConfig",
    # diagnostic
    "Severity",
    "Diagnostic",
]

"""Unit compilation: one style tree, one unit, or a whole collection."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from plumet.compiler.declarations import HyphenCache
from plumet.compiler.exclusion import compile_exclusions
from plumet.compiler.render import Renderer
from plumet.compiler.walker import TreeWalker
from plumet.model.style import StyleTree, parse_style
from plumet.model.unit import Format, GlobalConfig, Unit


def compile_style(
    style: Mapping[str, Any] | StyleTree | None,
    omit: Iterable[str] | None = None,
    format: Format | str | None = None,
    *,
    cache: HyphenCache | None = None,
) -> str:
    """Compile a nested style mapping into CSS text."""
    tree = parse_style(style)
    if not tree:
        return ""
    walker = TreeWalker(
        renderer=Renderer(format),
        is_excluded=compile_exclusions(omit),
        cache=cache,
    )
    return walker.walk(tree)


def compile_unit(unit: Unit, global_config: GlobalConfig | None = None) -> str:
    """Compile one unit using its own ``omit`` list and the global format."""
    fmt = global_config.format if global_config is not None else None
    return compile_style(unit.style, omit=unit.config.omit, format=fmt)


def compile_units(
    units: Mapping[str, Any], global_config: GlobalConfig | None = None
) -> dict[str, str]:
    """Compile every valid unit in *units*; entries that are not units are skipped."""
    result: dict[str, str] = {}
    for name, value in units.items():
        unit = Unit.from_value(value)
        if unit is None:
            continue
        result[name] = compile_unit(unit, global_config)
    return result

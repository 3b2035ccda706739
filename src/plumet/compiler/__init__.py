from plumet.compiler.declarations import HyphenCache, collect_declarations
from plumet.compiler.exclusion import compile_exclusions
from plumet.compiler.render import Renderer
from plumet.compiler.selector import resolve_selector
from plumet.compiler.unit import compile_style, compile_unit, compile_units
from plumet.compiler.walker import TreeWalker

__all__ = [
    "HyphenCache",
    "Renderer",
    "TreeWalker",
    "collect_declarations",
    "compile_exclusions",
    "compile_style",
    "compile_unit",
    "compile_units",
    "resolve_selector",
]

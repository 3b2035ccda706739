"""Plumet: ahead-of-time compiler from nested style trees to plain CSS."""

__version__ = "0.1.0"

from plumet.compiler import compile_style, compile_unit, compile_units  # noqa: E402
from plumet.model import Format, GlobalConfig, Unit, UnitConfig  # noqa: E402

__all__ = [
    "__version__",
    "Format",
    "GlobalConfig",
    "Unit",
    "UnitConfig",
    "compile_style",
    "compile_unit",
    "compile_units",
]

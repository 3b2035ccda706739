"""Build pipeline: entry loading, dependency discovery, writing and watching."""

from plumet.build.builder import Builder, BuildFailure, BuildReport, BuiltUnit
from plumet.build.deps import collect_dependencies
from plumet.build.loader import Entry, load_entry
from plumet.build.watch import Watcher, watch_loop
from plumet.build.writer import write_css

__all__ = [
    "Builder",
    "BuildFailure",
    "BuildReport",
    "BuiltUnit",
    "Entry",
    "Watcher",
    "collect_dependencies",
    "load_entry",
    "watch_loop",
    "write_css",
]

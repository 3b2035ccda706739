"""Entry module loading.

An entry module is a plain Python file that declares its units::

    # plumet_styles.py
    from plumet import Unit, UnitConfig

    units = {
        "app": Unit(
            config=UnitConfig(output="dist/app.css"),
            style={"#app": {"$": {"color": "black"}}},
        ),
    }
    config = {"format": "pretty"}  # optional

The file is executed afresh on every load so that watch-mode rebuilds pick up
edits, including edits to local modules it imports.
"""

from __future__ import annotations

import importlib.util
import logging
import sys
import uuid
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from plumet.errors import ConfigError, EntryLoadError
from plumet.model.unit import GlobalConfig

logger = logging.getLogger("plumet.build.loader")


@dataclass(frozen=True)
class Entry:
    """Units and optional global configuration declared by an entry module."""

    path: Path
    units: Mapping[str, Any]
    config: GlobalConfig | None = None


def _is_local(module: Any, root: Path) -> bool:
    filename = getattr(module, "__file__", None)
    if not filename:
        return False
    try:
        return Path(filename).resolve().is_relative_to(root)
    except OSError:
        return False


def _execute(path: Path) -> Any:
    module_name = f"_plumet_entry_{uuid.uuid4().hex}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise EntryLoadError(f"cannot load entry: {path}", path=str(path))

    module = importlib.util.module_from_spec(spec)
    root = path.parent
    before = set(sys.modules)
    sys.path.insert(0, str(root))
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as exc:
        raise EntryLoadError(f"{type(exc).__name__}: {exc}", path=str(path)) from exc
    finally:
        sys.modules.pop(module_name, None)
        try:
            sys.path.remove(str(root))
        except ValueError:
            pass
        # Forget local modules imported by the entry so the next load re-reads them.
        for name in set(sys.modules) - before:
            if _is_local(sys.modules.get(name), root):
                del sys.modules[name]
    return module


def load_entry(entry_path: Path) -> Entry:
    """Execute the entry module at *entry_path* and return what it declares.

    Raises:
        EntryLoadError: the file is missing, raises on import, declares no
            ``units`` mapping, or has an unusable ``config``.
    """
    path = Path(entry_path).resolve()
    if not path.is_file():
        raise EntryLoadError(f"entry not found: {path}", path=str(path))

    logger.debug("Loading entry %s", path)
    module = _execute(path)

    units = getattr(module, "units", None)
    if not isinstance(units, Mapping):
        raise EntryLoadError("entry must define a 'units' mapping", path=str(path))

    try:
        config = GlobalConfig.from_value(getattr(module, "config", None))
    except ConfigError as exc:
        raise EntryLoadError(f"invalid config: {exc}", path=str(path)) from exc

    logger.debug("Entry %s declares %d unit(s)", path, len(units))
    return Entry(path=path, units=units, config=config)

"""Static dependency discovery for entry modules.

Follows ``import`` and ``from ... import`` statements without executing any
code, keeping only files that live next to the entry (relative imports, or
absolute imports that resolve inside the entry's directory). Third-party and
standard library modules are never part of the watched set.
"""

from __future__ import annotations

import ast
import logging
from collections.abc import Iterator
from pathlib import Path

logger = logging.getLogger("plumet.build.deps")


def _module_file(base: Path, dotted: str | None) -> Path | None:
    """Return the source file for *dotted* under *base*, if one exists."""
    parts = dotted.split(".") if dotted else []
    target = base.joinpath(*parts)
    candidates = [target / "__init__.py"]
    if parts:
        candidates.insert(0, target.with_name(parts[-1] + ".py"))
    for candidate in candidates:
        if candidate.is_file():
            return candidate.resolve()
    return None


def _import_targets(tree: ast.AST) -> Iterator[tuple[int, str | None, list[str]]]:
    """Yield ``(level, module, names)`` for each import statement in *tree*."""
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                yield 0, alias.name, []
        elif isinstance(node, ast.ImportFrom):
            yield node.level, node.module, [alias.name for alias in node.names]


def _resolve_imports(path: Path, tree: ast.AST, root: Path) -> set[Path]:
    found: set[Path] = set()
    for level, module, names in _import_targets(tree):
        if level:
            base = path.parent
            for _ in range(level - 1):
                base = base.parent
        else:
            base = root
            if not module:
                continue
        resolved = _module_file(base, module)
        if resolved:
            found.add(resolved)
        # ``from pkg import mod`` may name a submodule rather than an attribute.
        for name in names:
            if name == "*":
                continue
            dotted = f"{module}.{name}" if module else name
            submodule = _module_file(base, dotted)
            if submodule:
                found.add(submodule)
    return found


def collect_dependencies(entry_path: Path, seen: set[Path] | None = None) -> set[Path]:
    """Collect the entry file and every local file it imports, transitively.

    Files that cannot be read or parsed are kept in the result but not followed.
    """
    entry = Path(entry_path).resolve()
    root = entry.parent
    seen = set() if seen is None else seen
    queue = [entry]

    while queue:
        current = queue.pop()
        if current in seen:
            continue
        seen.add(current)

        try:
            tree = ast.parse(current.read_text(encoding="utf-8"), filename=str(current))
        except (OSError, SyntaxError, ValueError) as exc:
            logger.debug("Not following %s: %s", current, exc)
            continue

        for dep in _resolve_imports(current, tree, root):
            if dep not in seen:
                queue.append(dep)

    return seen

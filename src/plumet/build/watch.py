"""Watch mode: rebuild when any file of the entry's dependency graph changes."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from pathlib import Path
from typing import Any, Callable

from plumet.build.deps import collect_dependencies
from plumet.events.types import FileModified

logger = logging.getLogger("plumet.build.watch")


# Returns an object exposing the `deps` it read, such as a BuildReport.
BuildFunc = Callable[[], Any]
DependencyCollector = Callable[[Path], set[Path]]


def _mtime(path: Path) -> int | None:
    try:
        return path.stat().st_mtime_ns
    except OSError:
        return None


class Watcher:
    """Polls modification times for a set of files.

    A file that disappears or appears between polls also counts as changed.
    """

    def __init__(self, paths: Iterable[Path] = ()) -> None:
        self._mtimes: dict[Path, int | None] = {}
        self.reset(paths)

    @property
    def paths(self) -> set[Path]:
        return set(self._mtimes)

    def reset(self, paths: Iterable[Path]) -> None:
        """Watch exactly *paths* from now on, taking fresh snapshots."""
        self._mtimes = {Path(p): _mtime(Path(p)) for p in paths}

    def poll(self) -> list[Path]:
        """Return the files changed since the previous poll (or reset)."""
        changed: list[Path] = []
        for path, before in self._mtimes.items():
            now = _mtime(path)
            if now != before:
                changed.append(path)
                self._mtimes[path] = now
        return changed


def watch_loop(
    entry_path: Path,
    build: BuildFunc,
    *,
    collect_deps: DependencyCollector = collect_dependencies,
    on_event: Callable[[Any], Any] | None = None,
    interval: float = 0.1,
    debounce: float = 0.05,
    stop: threading.Event | None = None,
) -> None:
    """Build once, then rebuild whenever a watched file changes until *stop* is set.

    The watched set is the ``deps`` of the latest build result, falling back to
    *collect_deps* when the build reports none. Changes arriving within
    *debounce* seconds of the first one are folded into a single rebuild.
    """
    entry_path = Path(entry_path)
    stop = stop or threading.Event()
    watcher = Watcher()

    def rebuild() -> None:
        result = build()
        deps = getattr(result, "deps", None) or collect_deps(entry_path)
        watcher.reset(deps)
        logger.debug("Watching %d file(s)", len(deps))

    rebuild()
    while not stop.is_set():
        changed = watcher.poll()
        if not changed:
            stop.wait(interval)
            continue
        for path in changed:
            logger.info("Modified: %s", path)
            if on_event is not None:
                on_event(FileModified(path=str(path)))
        if stop.wait(debounce):
            break
        rebuild()

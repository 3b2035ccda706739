"""CSS file writer."""

from __future__ import annotations

from pathlib import Path


def write_css(path: Path, css: str) -> int:
    """Write *css* to *path*, creating parent directories; returns the size in bytes."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = css.encode("utf-8")
    path.write_bytes(data)
    return len(data)

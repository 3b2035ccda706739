"""Terminal presentation for build results and watch events."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable

import click

SYMBOLS = {
    "info": "◆ ⟦info⟧",
    "warn": "▲ ⟦warn⟧",
    "error": "✖ ⟦error⟧",
    "done": "✔ ⟦done⟧",
    "summary": "❖ SUMMARY",
}

PALETTE = {
    "info": "blue",
    "warn": "yellow",
    "error": "red",
    "done": "green",
    "summary": None,
}

WATCH_SYMBOL = "⥁ ⟦watch⟧"

WATCH_PALETTE = {
    "built": "bright_black",
    "modified": "blue",
    "invalid": "red",
    "failed": "red",
}


@dataclass(frozen=True)
class Line:
    label: str
    value: str
    color: str | None = None


@dataclass(frozen=True)
class WatchLine:
    kind: str  # "built", "modified", "invalid", "failed"
    label: str
    value: str
    time: float | None = None


def gray(text: str) -> str:
    return click.style(text, fg="bright_black")


def human_size(size: int) -> str:
    """Format a byte count as ``B``, ``KB`` or ``MB``."""
    if size < 1024:
        return f"{size} B"
    kb = size / 1024
    if kb < 1024:
        return f"{kb:.1f} KB"
    return f"{kb / 1024:.1f} MB"


def format_time(ts: float | None = None) -> str:
    """Format *ts* as ``[HH:MM:SS:cc]`` in local time (centiseconds last)."""
    d = datetime.fromtimestamp(ts) if ts is not None else datetime.now()
    return f"[{d:%H:%M:%S}:{d.microsecond // 10000:02d}]"


class Printer:
    """Renders info/warn/error/done blocks, a summary line and watch events."""

    def __init__(self, echo: Callable[..., None] = click.echo) -> None:
        self._echo = echo
        self._watch_header = False

    def heading(self, tool: str, verb_ing: str, domain: str) -> None:
        self._echo(gray(" ".join(["›", tool, verb_ing, domain])))
        self._echo("")

    def _label(self, kind: str) -> str:
        return click.style(SYMBOLS[kind], fg=PALETTE[kind], bold=True)

    def _block(self, kind: str, lines: list[Line]) -> None:
        self._echo(self._label(kind))
        for line in lines:
            value = click.style(line.value, fg=line.color) if line.color else line.value
            self._echo(f"  - {click.style(line.label, bold=True)}: {value}")
        self._echo("")

    def info(self, lines: list[Line]) -> None:
        self._block("info", lines)

    def warn(self, lines: list[Line]) -> None:
        self._block("warn", lines)

    def error(self, lines: list[Line]) -> None:
        self._block("error", lines)

    def done(self, lines: list[Line]) -> None:
        self._block("done", lines)

    def summary(
        self, files: int, errors: int, warnings: int, total_bytes: int | None = None
    ) -> None:
        file_part = f"{files} files"
        if total_bytes:
            file_part += f" ({human_size(total_bytes)})"
        parts = [file_part, f"{errors} error", f"{warnings} warning"]
        self._echo(f"{self._label('summary')} - {' ┄ '.join(parts)}")

    def watch(self, events: list[WatchLine]) -> None:
        if not events:
            return
        if not self._watch_header:
            self._echo(click.style(WATCH_SYMBOL, fg="magenta", bold=True))
            self._watch_header = True
        for event in events:
            tint = WATCH_PALETTE.get(event.kind, "bright_black")
            time_part = click.style(format_time(event.time), fg=tint)
            label_part = click.style(event.label, fg=tint, bold=True)
            value = event.value
            if event.kind in ("invalid", "failed"):
                value = click.style(value, fg=tint)
            self._echo(f"  - {time_part} {label_part}: {value}")

"""CLI command: plumet build -- compile the units of an entry module to CSS."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from plumet.build import Builder, BuildReport, watch_loop
from plumet.cli.tui import Line, Printer, WatchLine, gray
from plumet.events import types as events
from plumet.events.bus import EventBus
from plumet.model.unit import Format, GlobalConfig

DEFAULT_ENTRY = "plumet_styles.py"


def _shown(path: Path | str) -> str:
    """Path relative to the working directory when possible."""
    path = Path(path)
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


def _watch_line(event: object) -> WatchLine | None:
    if isinstance(event, events.UnitBuilt):
        value = f"{event.name} ⇒ {gray(_shown(event.output))}"
        return WatchLine(kind="built", label="built", value=value, time=event.time)
    if isinstance(event, events.UnitInvalid):
        return WatchLine(kind="invalid", label="invalid", value=event.message, time=event.time)
    if isinstance(event, events.EntryInvalid):
        return WatchLine(kind="invalid", label="invalid", value=event.error, time=event.time)
    if isinstance(event, events.UnitFailed):
        return WatchLine(kind="failed", label="failed", value=event.error, time=event.time)
    if isinstance(event, events.FileModified):
        return WatchLine(kind="modified", label="modified", value=_shown(event.path), time=event.time)
    return None


def _report(printer: Printer, report: BuildReport) -> None:
    if report.failures:
        printer.error([Line(label=f.label, value=f.message) for f in report.failures])
    if report.warnings:
        printer.warn([Line(label="warning", value=str(w)) for w in report.warnings])
    if report.built:
        printer.done([
            Line(label="built", value=f"{b.name} ⇒ {gray(_shown(b.output))}")
            for b in report.built
        ])
    printer.summary(
        files=len(report.built),
        errors=len(report.failures),
        warnings=len(report.warnings),
        total_bytes=report.total_bytes,
    )


@click.command()
@click.option(
    "--entry",
    "-e",
    default=DEFAULT_ENTRY,
    show_default=True,
    type=click.Path(dir_okay=False),
    help="Python module declaring the units to build",
)
@click.option("--watch", "-w", "watch_mode", is_flag=True, help="Rebuild on file changes")
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in Format]),
    default=None,
    help="Output format (overrides the entry's config)",
)
@click.option("--verbose", "-v", is_flag=True, help="Log build details to stderr")
def build(entry: str, watch_mode: bool, output_format: str | None, verbose: bool) -> None:
    """Compile every unit declared by the entry module into CSS files.

    Exits with code 1 if any unit is invalid or fails to build.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    entry_path = Path(entry).resolve()
    printer = Printer()
    printer.heading("plumet", "building", "css in watch mode" if watch_mode else "css")

    global_config = GlobalConfig(format=output_format) if output_format else None
    event_bus = EventBus()
    builder = Builder(entry_path, global_config=global_config, event_bus=event_bus)

    if not watch_mode:
        printer.info([Line(label="entry", value=_shown(entry_path), color="bright_black")])
        report = builder.build()
        _report(printer, report)
        if not report.ok:
            sys.exit(1)
        return

    def on_event(event: object) -> None:
        line = _watch_line(event)
        if line is not None:
            printer.watch([line])

    event_bus.on_all(on_event)
    try:
        watch_loop(entry_path, builder.build, on_event=event_bus.emit)
    except KeyboardInterrupt:
        click.echo()

"""Builder: load an entry module, compile its units, and write CSS files."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from plumet.build.deps import collect_dependencies
from plumet.build.loader import load_entry
from plumet.build.writer import write_css
from plumet.compiler import compile_unit
from plumet.errors import EntryLoadError
from plumet.events import types as events
from plumet.events.bus import EventBus
from plumet.model.diagnostic import Diagnostic
from plumet.model.unit import GlobalConfig, Unit
from plumet.validation import partition, validate

logger = logging.getLogger("plumet.build")

Writer = Callable[[Path, str], int]


@dataclass(frozen=True)
class BuiltUnit:
    """A unit whose CSS was written."""

    name: str
    output: Path
    size: int


@dataclass(frozen=True)
class BuildFailure:
    """A unit (or the entry itself) that produced no output.

    ``label`` is ``"invalid"`` for entries rejected before compiling and
    ``"failed"`` for errors raised while compiling or writing.
    """

    label: str
    message: str


@dataclass
class BuildReport:
    """Outcome of one build: what was written, what failed, and what to watch."""

    entry: Path
    built: list[BuiltUnit] = field(default_factory=list)
    failures: list[BuildFailure] = field(default_factory=list)
    warnings: list[Diagnostic] = field(default_factory=list)
    deps: set[Path] = field(default_factory=set)

    @property
    def ok(self) -> bool:
        return not self.failures

    @property
    def total_bytes(self) -> int:
        return sum(b.size for b in self.built)


class Builder:
    """Builds every unit declared by one entry module.

    A unit that fails validation or raises while compiling or writing is
    recorded as a failure; the remaining units are still built.
    """

    def __init__(
        self,
        entry_path: Path,
        *,
        global_config: GlobalConfig | None = None,
        event_bus: EventBus | None = None,
        writer: Writer = write_css,
    ) -> None:
        self.entry_path = Path(entry_path).resolve()
        self.global_config = global_config
        self.event_bus = event_bus or EventBus()
        self._write = writer

    def build(self) -> BuildReport:
        report = BuildReport(entry=self.entry_path)
        report.deps = collect_dependencies(self.entry_path)

        try:
            entry = load_entry(self.entry_path)
        except EntryLoadError as exc:
            logger.warning("Entry %s is invalid: %s", self.entry_path, exc)
            report.failures.append(BuildFailure(label="invalid", message=str(exc)))
            self.event_bus.emit(events.EntryInvalid(path=str(self.entry_path), error=str(exc)))
            return report

        # Explicit configuration (e.g. from the command line) wins over the entry's.
        config = self.global_config or entry.config
        base_dir = entry.path.parent

        errors, warnings = partition(validate(entry.units))
        report.warnings.extend(warnings)

        for name, value in entry.units.items():
            if errors.get(name):
                message = f"{name}: " + "; ".join(d.message for d in errors[name])
                logger.warning("Skipping unit %s: %s", name, message)
                report.failures.append(BuildFailure(label="invalid", message=message))
                self.event_bus.emit(events.UnitInvalid(name=name, message=message))
                continue

            unit = Unit.from_value(value)
            if unit is None:
                message = f"{name}: expected a unit with 'config' and 'style'"
                report.failures.append(BuildFailure(label="invalid", message=message))
                self.event_bus.emit(events.UnitInvalid(name=name, message=message))
                continue

            output = (base_dir / unit.config.output).resolve()
            try:
                css = compile_unit(unit, config)
                size = self._write(output, css)
            except Exception as exc:
                logger.exception("Unit %s failed", name)
                message = f"{name}: {exc}"
                report.failures.append(BuildFailure(label="failed", message=message))
                self.event_bus.emit(events.UnitFailed(name=name, error=message))
                continue

            logger.info("Built %s -> %s (%d bytes)", name, output, size)
            report.built.append(BuiltUnit(name=name, output=output, size=size))
            self.event_bus.emit(events.UnitBuilt(name=name, output=str(output), size=size))

        return report

"""Event types emitted while building and watching units."""

import time
from dataclasses import dataclass, field


def _now() -> float:
    return time.time()


@dataclass(frozen=True)
class UnitBuilt:
    name: str
    output: str
    size: int
    time: float = field(default_factory=_now)


@dataclass(frozen=True)
class UnitInvalid:
    name: str
    message: str
    time: float = field(default_factory=_now)


@dataclass(frozen=True)
class UnitFailed:
    name: str
    error: str
    time: float = field(default_factory=_now)


@dataclass(frozen=True)
class EntryInvalid:
    path: str
    error: str
    time: float = field(default_factory=_now)


@dataclass(frozen=True)
class FileModified:
    path: str
    time: float = field(default_factory=_now)

"""Event system: bus and event types for builds and watch mode."""

from plumet.events.bus import EventBus
from plumet.events.types import (
    EntryInvalid,
    FileModified,
    UnitBuilt,
    UnitFailed,
    UnitInvalid,
)

__all__ = [
    "EventBus",
    "EntryInvalid",
    "FileModified",
    "UnitBuilt",
    "UnitFailed",
    "UnitInvalid",
]

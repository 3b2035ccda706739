"""Selector composition for nested style keys."""

from __future__ import annotations

PARENT_REFERENCE = "&"
PSEUDO_MARKER = ":"


def resolve_selector(parent: str, key: str) -> str:
    """Return the selector for *key* nested under the *parent* selector.

    - ``&`` in *key* is replaced (every occurrence) by *parent*.
    - A leading ``:`` appends *key* directly (``:hover``, ``::before``).
    - Otherwise *key* is a descendant of *parent*, or top-level if there is none.
    """
    if PARENT_REFERENCE in key:
        return key.replace(PARENT_REFERENCE, parent)
    if key.startswith(PSEUDO_MARKER):
        return parent + key
    if parent:
        return f"{parent} {key}"
    return key

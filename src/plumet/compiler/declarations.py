"""Declaration collection: property names to hyphen-case, values to text."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


class HyphenCache:
    """Memoized camelCase to hyphen-case conversion for property names.

    Only ASCII ``A``-``Z`` are rewritten (``backgroundColor`` becomes
    ``background-color``); everything else passes through, so vendor names such
    as ``WebkitTransition`` become ``-webkit-transition``.
    """

    def __init__(self) -> None:
        self._names: dict[str, str] = {}

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def hyphenate(self, name: str) -> str:
        cached = self._names.get(name)
        if cached is not None:
            return cached
        result = "".join(
            f"-{ch.lower()}" if "A" <= ch <= "Z" else ch for ch in name
        )
        self._names[name] = result
        return result


# Shared by every compile call in the process; entries never go stale.
DEFAULT_CACHE = HyphenCache()


def format_value(value: Any) -> str:
    """Render a declaration value as CSS text.

    Lists and tuples are comma-joined, so ``["Inter", "sans-serif"]`` becomes
    ``Inter,sans-serif``.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join("" if v is None else format_value(v) for v in value)
    return str(value)


def collect_declarations(
    props: Mapping[str, Any] | None,
    cache: HyphenCache | None = None,
) -> list[tuple[str, str]]:
    """Return ``(property, value)`` pairs for *props* in source order.

    Properties whose value is ``None`` are omitted.
    """
    if not props:
        return []
    names = cache if cache is not None else DEFAULT_CACHE
    return [
        (names.hyphenate(name), format_value(value))
        for name, value in props.items()
        if value is not None
    ]

"""Style tree model: tagged nodes parsed from the author-facing mapping.

Authors write nested dictionaries::

    {
        ".btn": {
            "$": {"padding": "8px 12px"},
            ":hover": {"$": {"opacity": 0.5}},
            "&.primary": {"$": {"color": "blue"}},
            "@media (max-width: 600px)": {"$": {"padding": "4px"}},
        }
    }

``parse_style`` turns that into ``RuleNode`` / ``AtRuleNode`` instances so the
compiler never has to inspect key prefixes itself.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union

DECLARATIONS_KEY = "$"
AT_RULE_PREFIX = "@"

Declarations = Mapping[str, Any]


@dataclass(frozen=True)
class RuleNode:
    """A selector scope: ``key`` is resolved against the enclosing selector."""

    key: str
    declarations: Declarations | None = None
    children: tuple[StyleNode, ...] = ()


@dataclass(frozen=True)
class AtRuleNode:
    """A grouping scope such as ``@media``; it never changes the selector."""

    name: str
    declarations: Declarations | None = None
    children: tuple[StyleNode, ...] = ()


StyleNode = Union[RuleNode, AtRuleNode]


@dataclass(frozen=True)
class StyleTree:
    """Root of a parsed style tree. Holds top-level children only."""

    children: tuple[StyleNode, ...] = field(default_factory=tuple)

    def __bool__(self) -> bool:
        return bool(self.children)


def is_at_rule(key: str) -> bool:
    return key.startswith(AT_RULE_PREFIX)


def _parse_children(raw: Mapping[str, Any]) -> tuple[StyleNode, ...]:
    children: list[StyleNode] = []
    for key, value in raw.items():
        if not key or key == DECLARATIONS_KEY:
            continue
        # Anything that is not a nested mapping carries no rules.
        if not isinstance(value, Mapping):
            continue
        children.append(_parse_node(key, value))
    return tuple(children)


def _parse_node(key: str, raw: Mapping[str, Any]) -> StyleNode:
    declarations = raw.get(DECLARATIONS_KEY)
    if not isinstance(declarations, Mapping):
        declarations = None
    children = _parse_children(raw)
    if is_at_rule(key):
        return AtRuleNode(name=key, declarations=declarations, children=children)
    return RuleNode(key=key, declarations=declarations, children=children)


def parse_style(raw: Mapping[str, Any] | StyleTree | None) -> StyleTree:
    """Parse an author-facing style mapping into a ``StyleTree``.

    Already-parsed trees are returned unchanged; ``None`` yields an empty tree.
    The root's own ``$`` block is dropped since it has no selector to attach to.
    """
    if raw is None:
        return StyleTree()
    if isinstance(raw, StyleTree):
        return raw
    return StyleTree(children=_parse_children(raw))

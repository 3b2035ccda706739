"""Exclusion patterns: literal or ``*`` wildcard matches on resolved selectors."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Callable

WILDCARD = "*"

SelectorPredicate = Callable[[str], bool]


def pattern_to_regex(pattern: str) -> re.Pattern[str]:
    """Translate a glob-style selector pattern into a regex.

    Everything except ``*`` matches literally; ``*`` matches any run of
    characters, including none. Use with ``fullmatch``.
    """
    return re.compile(
        "".join(".*" if ch == WILDCARD else re.escape(ch) for ch in pattern),
        re.DOTALL,
    )


def _never(selector: str) -> bool:
    return False


def compile_exclusions(patterns: Iterable[str] | None) -> SelectorPredicate:
    """Compile *patterns* into a predicate telling whether a selector is excluded."""
    regexes = [pattern_to_regex(p) for p in patterns or ()]
    if not regexes:
        return _never

    def is_excluded(selector: str) -> bool:
        return any(rx.fullmatch(selector) for rx in regexes)

    return is_excluded

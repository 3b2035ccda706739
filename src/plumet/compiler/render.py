"""Format rendering: turns collected declarations into CSS text."""

from __future__ import annotations

from plumet.model.unit import Format

INDENT = "  "

Declaration = tuple[str, str]


class Renderer:
    """Writes rules, bare declarations and at-rule wrappers for one format.

    Output fragments are appended to a caller-owned list and joined once at the
    end of a compile; at-rule bodies are built in their own list so an empty
    body can be dropped before it is wrapped.
    """

    def __init__(self, format: Format | str | None = None) -> None:
        self.format = Format.coerce(format)

    @property
    def pretty(self) -> bool:
        return self.format is Format.PRETTY

    @property
    def newline(self) -> str:
        return "" if self.format is Format.MINIFY else "\n"

    def indent(self, depth: int) -> str:
        return INDENT * depth if self.pretty else ""

    def rule(
        self, out: list[str], selector: str, declarations: list[Declaration], depth: int
    ) -> None:
        """Append a ``selector{...}`` block; nothing for an empty declaration list."""
        if not declarations:
            return
        if self.pretty:
            base = self.indent(depth)
            out.append(f"{base}{selector} {{\n")
            self.declarations(out, declarations, depth + 1)
            out.append(f"{base}}}\n")
            return
        out.append(f"{selector}{{")
        self.declarations(out, declarations, depth)
        out.append("}" + self.newline)

    def declarations(self, out: list[str], declarations: list[Declaration], depth: int) -> None:
        """Append declarations without a selector wrapper."""
        if self.pretty:
            pad = self.indent(depth)
            out.extend(f"{pad}{prop}: {value};\n" for prop, value in declarations)
            return
        out.extend(f"{prop}:{value};" for prop, value in declarations)

    def at_rule(self, name: str, body: str, depth: int) -> str:
        """Wrap an already rendered *body* in ``name{...}``; empty bodies vanish."""
        if not body:
            return ""
        if self.pretty:
            base = self.indent(depth)
            return f"{base}{name} {{\n{body}{base}}}\n"
        return f"{name}{{{body}}}{self.newline}"

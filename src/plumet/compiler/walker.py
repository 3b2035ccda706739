"""Tree walker: resolves selectors and emits rules for a parsed style tree."""

from __future__ import annotations

from plumet.compiler.declarations import HyphenCache, collect_declarations
from plumet.compiler.exclusion import SelectorPredicate, compile_exclusions
from plumet.compiler.render import Renderer
from plumet.compiler.selector import resolve_selector
from plumet.model.style import AtRuleNode, RuleNode, StyleNode, StyleTree


class TreeWalker:
    """Depth-first compiler for one ``StyleTree``.

    A rule's own declarations are emitted before any of its children. At-rules
    collect their declarations and nested rules into a separate body, which is
    wrapped only when non-empty. Nested rules inside an at-rule resolve against
    the selector *outside* the at-rule. An excluded selector drops its whole
    subtree.

    ``depth`` only grows through at-rules; rules reached by selector nesting
    are flat in the output and stay at the depth of their enclosing scope.
    """

    def __init__(
        self,
        renderer: Renderer | None = None,
        is_excluded: SelectorPredicate | None = None,
        cache: HyphenCache | None = None,
    ) -> None:
        self.renderer = renderer or Renderer()
        self.is_excluded = is_excluded or compile_exclusions(None)
        self.cache = cache

    def walk(self, tree: StyleTree) -> str:
        out: list[str] = []
        self._children(tree.children, "", 0, out)
        return "".join(out)

    def _children(
        self, children: tuple[StyleNode, ...], selector: str, depth: int, out: list[str]
    ) -> None:
        for child in children:
            if isinstance(child, AtRuleNode):
                out.append(self._at_rule(child, selector, depth))
                continue
            nested = resolve_selector(selector, child.key)
            if self.is_excluded(nested):
                continue
            self._rule(child, nested, depth, out)

    def _rule(self, node: RuleNode, selector: str, depth: int, out: list[str]) -> None:
        declarations = collect_declarations(node.declarations, self.cache)
        self.renderer.rule(out, selector, declarations, depth)
        self._children(node.children, selector, depth, out)

    def _at_rule(self, node: AtRuleNode, selector: str, depth: int) -> str:
        body: list[str] = []
        declarations = collect_declarations(node.declarations, self.cache)
        if declarations:
            self.renderer.declarations(body, declarations, depth + 1)
        self._children(node.children, selector, depth + 1, body)
        return self.renderer.at_rule(node.name, "".join(body), depth)

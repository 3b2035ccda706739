"""Tests for parsing author-facing style mappings into tagged nodes."""

import pytest

from plumet.model.style import AtRuleNode, RuleNode, StyleTree, parse_style


class TestParseStyle:
    def test_rule_node(self):
        tree = parse_style({"#app": {"$": {"color": "red"}}})
        assert tree.children == (RuleNode(key="#app", declarations={"color": "red"}),)

    def test_at_rule_node(self):
        tree = parse_style({"@media print": {"a": {"$": {"color": "red"}}}})
        (node,) = tree.children
        assert isinstance(node, AtRuleNode)
        assert node.name == "@media print"
        assert node.declarations is None
        assert node.children == (RuleNode(key="a", declarations={"color": "red"}),)

    def test_children_in_source_order(self):
        tree = parse_style({"#app": {"b": {}, ":hover": {}, "&.x": {}, "@media print": {}}})
        keys = [getattr(c, "key", None) or c.name for c in tree.children[0].children]
        assert keys == ["b", ":hover", "&.x", "@media print"]

    def test_declarations_key_not_a_child(self):
        tree = parse_style({"a": {"$": {"color": "red"}}})
        assert tree.children[0].children == ()

    def test_non_mapping_declarations_dropped(self):
        tree = parse_style({"a": {"$": "color: red"}})
        assert tree.children[0].declarations is None

    def test_empty_keys_and_scalars_ignored(self):
        tree = parse_style({"": {"$": {"color": "red"}}, "a": 3, "b": None, "$": {"x": 1}})
        assert tree.children == ()

    def test_empty_and_none(self):
        assert parse_style({}) == StyleTree()
        assert parse_style(None) == StyleTree()
        assert not parse_style({})

    def test_parsed_tree_returned_unchanged(self):
        tree = parse_style({"a": {}})
        assert parse_style(tree) is tree

    def test_nodes_are_frozen(self):
        node = RuleNode(key="a")
        with pytest.raises(AttributeError):
            node.key = "b"  # type: ignore[misc]

"""Tests for declaration collection and property-name hyphenation."""

from plumet.compiler.declarations import (
    DEFAULT_CACHE,
    HyphenCache,
    collect_declarations,
    format_value,
)


# ---------------------------------------------------------------------------
# HyphenCache
# ---------------------------------------------------------------------------


class TestHyphenCache:
    def test_camel_case(self):
        assert HyphenCache().hyphenate("backgroundColor") == "background-color"

    def test_multiple_humps(self):
        assert HyphenCache().hyphenate("borderTopLeftRadius") == "border-top-left-radius"

    def test_leading_capital_becomes_vendor_prefix(self):
        assert HyphenCache().hyphenate("WebkitTransition") == "-webkit-transition"

    def test_non_ascii_and_digits_pass_through(self):
        assert HyphenCache().hyphenate("gridArea2") == "grid-area2"
        assert HyphenCache().hyphenate("--custom-prop") == "--custom-prop"

    def test_caches_result(self):
        cache = HyphenCache()
        assert "fontSize" not in cache
        first = cache.hyphenate("fontSize")
        assert "fontSize" in cache
        assert len(cache) == 1
        assert cache.hyphenate("fontSize") == first
        assert len(cache) == 1


# ---------------------------------------------------------------------------
# Value formatting
# ---------------------------------------------------------------------------


class TestFormatValue:
    def test_string_verbatim(self):
        assert format_value("8px 12px") == "8px 12px"

    def test_int(self):
        assert format_value(0) == "0"
        assert format_value(400) == "400"

    def test_float(self):
        assert format_value(0.5) == "0.5"

    def test_integral_float_drops_fraction(self):
        assert format_value(1.0) == "1"

    def test_bool(self):
        assert format_value(True) == "true"
        assert format_value(False) == "false"

    def test_sequence_is_comma_joined(self):
        assert format_value(["Inter", "sans-serif"]) == "Inter,sans-serif"
        assert format_value((0, 1.0, "auto")) == "0,1,auto"

    def test_none_in_sequence_is_empty(self):
        assert format_value(["a", None, "b"]) == "a,,b"

    def test_other_values_are_stringified(self):
        class Token:
            def __str__(self):
                return "var(--accent)"

        assert format_value(Token()) == "var(--accent)"


# ---------------------------------------------------------------------------
# collect_declarations
# ---------------------------------------------------------------------------


class TestCollectDeclarations:
    def test_list_value(self):
        decls = collect_declarations({"fontFamily": ["Inter", "sans-serif"]})
        assert decls == [("font-family", "Inter,sans-serif")]

    def test_source_order_preserved(self):
        decls = collect_declarations({"zIndex": 2, "color": "red", "alignItems": "center"})
        assert decls == [("z-index", "2"), ("color", "red"), ("align-items", "center")]

    def test_none_values_skipped(self):
        decls = collect_declarations({"color": "red", "border": None, "margin": 0})
        assert decls == [("color", "red"), ("margin", "0")]

    def test_all_none(self):
        assert collect_declarations({"color": None}) == []

    def test_empty_and_missing(self):
        assert collect_declarations({}) == []
        assert collect_declarations(None) == []

    def test_injected_cache_is_used(self):
        cache = HyphenCache()
        collect_declarations({"lineHeight": 1.5}, cache)
        assert "lineHeight" in cache

    def test_fresh_injected_cache_is_not_bypassed(self):
        cache = HyphenCache()
        collect_declarations({"scrollPaddingInlineEnd": 1}, cache)
        assert len(cache) == 1
        assert "scrollPaddingInlineEnd" not in DEFAULT_CACHE

    def test_default_cache_shared(self):
        collect_declarations({"letterSpacing": "1px"})
        assert "letterSpacing" in DEFAULT_CACHE

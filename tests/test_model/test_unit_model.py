"""Tests for unit and configuration models."""

import pytest

from plumet.errors import ConfigError
from plumet.model.unit import Format, GlobalConfig, Unit, UnitConfig


# ---------------------------------------------------------------------------
# Format / GlobalConfig
# ---------------------------------------------------------------------------


class TestFormat:
    def test_values(self):
        assert [f.value for f in Format] == ["default", "minify", "pretty"]

    def test_coerce(self):
        assert Format.coerce(None) is Format.DEFAULT
        assert Format.coerce("pretty") is Format.PRETTY
        assert Format.coerce(Format.MINIFY) is Format.MINIFY

    def test_coerce_unknown(self):
        with pytest.raises(ConfigError, match="Unknown format"):
            Format.coerce("compact")

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            Format.coerce("compact")


class TestGlobalConfig:
    def test_default(self):
        assert GlobalConfig().format is Format.DEFAULT

    def test_string_format_coerced(self):
        assert GlobalConfig(format="minify").format is Format.MINIFY

    def test_from_mapping(self):
        assert GlobalConfig.from_value({"format": "pretty"}) == GlobalConfig(format=Format.PRETTY)

    def test_from_mapping_without_format(self):
        assert GlobalConfig.from_value({}) == GlobalConfig()

    def test_from_none_and_instance(self):
        config = GlobalConfig()
        assert GlobalConfig.from_value(None) is None
        assert GlobalConfig.from_value(config) is config

    def test_from_bad_value(self):
        with pytest.raises(ConfigError):
            GlobalConfig.from_value("pretty")

    def test_frozen(self):
        with pytest.raises(AttributeError):
            GlobalConfig().format = Format.PRETTY  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Unit.from_value
# ---------------------------------------------------------------------------


class TestUnitFromValue:
    def test_instance_returned(self):
        unit = Unit(config=UnitConfig(output="a.css"), style={})
        assert Unit.from_value(unit) is unit

    def test_from_mapping(self):
        unit = Unit.from_value(
            {"config": {"output": "a.css", "omit": ["#x*"]}, "style": {"a": {}}}
        )
        assert unit == Unit(config=UnitConfig(output="a.css", omit=("#x*",)), style={"a": {}})

    def test_mapping_with_config_instance(self):
        config = UnitConfig(output="a.css")
        assert Unit.from_value({"config": config, "style": {}}).config is config

    @pytest.mark.parametrize(
        "value",
        [
            None,
            "unit",
            {"style": {}},
            {"config": {"output": "a.css"}},
            {"config": {}, "style": {}},
            {"config": {"output": ""}, "style": {}},
            {"config": {"output": 3}, "style": {}},
            {"config": {"output": "a.css", "omit": "#x"}, "style": {}},
            {"config": {"output": "a.css", "omit": [1]}, "style": {}},
            {"config": {"output": "a.css"}, "style": "a{}"},
        ],
    )
    def test_invalid_shapes(self, value):
        assert Unit.from_value(value) is None

    def test_default_omit_empty(self):
        assert UnitConfig(output="a.css").omit == ()

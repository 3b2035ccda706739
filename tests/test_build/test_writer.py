"""Tests for the CSS writer."""

from pathlib import Path

from plumet.build.writer import write_css


class TestWriteCss:
    def test_creates_parent_directories(self, tmp_path: Path):
        target = tmp_path / "dist" / "nested" / "app.css"
        size = write_css(target, "#app{color:red;}\n")
        assert target.read_text(encoding="utf-8") == "#app{color:red;}\n"
        assert size == len("#app{color:red;}\n")

    def test_size_counts_utf8_bytes(self, tmp_path: Path):
        size = write_css(tmp_path / "a.css", 'a::before{content:"→";}')
        assert size == len('a::before{content:"→";}'.encode("utf-8"))

    def test_overwrites(self, tmp_path: Path):
        target = tmp_path / "a.css"
        write_css(target, "a{color:red;}")
        write_css(target, "")
        assert target.read_text(encoding="utf-8") == ""

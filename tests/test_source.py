"""
YAML document source tests

Tests building documents from YAML sources and the errors raised for
invalid ones.
"""

import pytest
from pathlib import Path
import tempfile

from semdoc.lib.document import Document, literal, metavar
from semdoc.lib.source import SourceError, SourceLoader, source_loadFile


class TestLoading:
    """Test valid sources"""

    def test_full_source(self):
        """Man metadata and a definition list"""
        source = """
man:
  title: DEMO
  section: "8"
  extra: "2024-01-01"
body:
  - section: Options
  - dlist:
      - definition:
          term: [{literal: "-o"}, " ", {metavar: FILE}]
          body: Output file
"""
        loaded = SourceLoader(source).load()
        expected = Document().section("Options").dlist(
            Document().definition([literal("-o"), " ", metavar("FILE")], "Output file")
        )
        assert loaded.document == expected
        assert loaded.man.title == "DEMO"
        assert loaded.man.section == "8"
        assert loaded.man.extra == ["2024-01-01"]

    def test_markdown_from_source(self):
        """A loaded document renders like a built one"""
        source = """
body:
  - section: Usage
  - paragraph: ["Run with ", {literal: "--help"}]
"""
        loaded = SourceLoader(source).load()
        assert loaded.man is None
        assert loaded.document.render_to_markdown() == (
            "# Usage\n\n<p>Run with <tt><b>--help</b></tt></p>"
        )

    def test_lists(self):
        """Unnumbered and numbered lists"""
        source = """
body:
  - ulist:
      - item: first
      - item: [{important: second}]
  - nlist: [{item: one}]
"""
        doc = SourceLoader(source).load().document
        assert doc.render_to_markdown() == (
            "<ul>\n<li>first</li>\n<li><b>second</b></li></ul>\n\n<ol>\n<li>one</li></ol>"
        )

    def test_definition_pair(self):
        """A definition may be given as a two-item list"""
        source = "body: [{dlist: [{definition: [{literal: -v}, Verbose]}]}]"
        doc = SourceLoader(source).load().document
        assert doc == Document().dlist(Document().definition(literal("-v"), "Verbose"))

    def test_pre_and_numbers(self):
        """Escaped newlines and numeric scalars"""
        source = 'body: [{pre: "a\\nb"}, {paragraph: 42}]'
        doc = SourceLoader(source).load().document
        assert doc.render_to_markdown() == "<pre>a\nb</pre>\n\n<p>42</p>"

    def test_empty_source(self):
        """An empty file is an empty document"""
        loaded = SourceLoader("").load()
        assert loaded.document.is_empty()
        assert loaded.man is None

    def test_man_defaults(self):
        """Section defaults to 1 and extras to none"""
        loaded = SourceLoader("man: {title: T}").load()
        assert loaded.man.section == "1"
        assert loaded.man.extra == []


class TestErrors:
    """Test invalid sources"""

    def test_invalid_yaml(self):
        """YAML syntax errors are reported"""
        with pytest.raises(SourceError, match="failed to parse YAML"):
            SourceLoader("body: [").load()

    def test_top_level_list(self):
        """The top level must be a mapping"""
        with pytest.raises(SourceError, match="top level"):
            SourceLoader("- a\n- b").load()

    def test_body_not_list(self):
        """The body must be a list"""
        with pytest.raises(SourceError, match="'body' must be a list"):
            SourceLoader("body: text").load()

    def test_unknown_element(self):
        """Unknown keys are reported with their location"""
        with pytest.raises(SourceError, match=r"body\[0\]\.bogus: unknown element 'bogus'"):
            SourceLoader("body: [{bogus: x}]").load()

    def test_style_needs_string(self):
        """Style values must be scalars"""
        with pytest.raises(SourceError, match="style 'literal' takes a string"):
            SourceLoader("body: [{literal: [a]}]").load()

    def test_multi_key_mapping(self):
        """Elements are single-key mappings"""
        with pytest.raises(SourceError, match="single-key mapping"):
            SourceLoader("body: [{paragraph: a, pre: b}]").load()

    def test_bad_definition(self):
        """Definitions need a term and a body"""
        with pytest.raises(SourceError, match="definition needs"):
            SourceLoader("body: [{definition: [a]}]").load()

    def test_man_without_title(self):
        """Man metadata needs a title"""
        with pytest.raises(SourceError, match="'man' must be a mapping"):
            SourceLoader("man: {section: 1}").load()

    def test_origin_in_message(self):
        """Messages start with the source name"""
        with pytest.raises(SourceError, match="^tool.yaml:"):
            SourceLoader("body: text", origin="tool.yaml").load()


class TestFiles:
    """Test loading from disk"""

    def test_load_file(self):
        """Files are read as UTF-8 sources"""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "tool.yaml"
            path.write_text("body: [{section: Name}]", encoding="utf-8")
            loaded = source_loadFile(path)
            assert loaded.document == Document().section("Name")

    def test_missing_file(self):
        """Unreadable files raise SourceError"""
        with tempfile.TemporaryDirectory() as tmpdir:
            with pytest.raises(SourceError, match="Failed to read"):
                source_loadFile(Path(tmpdir) / "missing.yaml")

"""
Markdown rendering tests

Tests block markup, inline style transitions, newline hygiene and lists.
"""

import pytest

from semdoc.lib.document import Document, Scoped, important, literal, metavar, mono, text, write_with
from semdoc.lib.render_markdown import MarkdownRenderer
from semdoc.models.document import LogicalBlock


def options_document():
    """Description section plus an options definition list"""
    doc = Document()
    doc.section("Description")
    doc.paragraph([text("Pass "), literal("--help"), text(" for info.")])
    doc.section("Options")
    doc.dlist(write_with(lambda d: d
                         .definition(literal("-v"), text("Use verbose output"))
                         .definition(literal("--help"), text("Print usage"))
                         .definition(literal("--version"), text("Print version"))))
    return doc


class TestEndToEnd:
    """Test complete documents"""

    def test_options_document(self):
        """Sections, a paragraph with a literal and a definition list"""
        expected = (
            "# Description\n"
            "\n"
            "<p>Pass <tt><b>--help</b></tt> for info.</p>\n"
            "\n"
            "# Options\n"
            "\n"
            "<dl>\n"
            "<dt><tt><b>-v</b></tt></dt>\n"
            "<dd>Use verbose output</dd>\n"
            "<dt><tt><b>--help</b></tt></dt>\n"
            "<dd>Print usage</dd>\n"
            "<dt><tt><b>--version</b></tt></dt>\n"
            "<dd>Print version</dd></dl>"
        )
        assert options_document().render_to_markdown() == expected

    def test_definition_pairs_not_separated(self):
        """No blank line appears between consecutive terms and definitions"""
        rendered = options_document().render_to_markdown()
        dl = rendered[rendered.index("<dl>"):]
        assert "\n\n" not in dl
        assert dl.count("<dt>") == 3
        assert dl.count("<dd>") == 3

    def test_empty_document(self):
        """Nothing in, nothing out"""
        assert Document().render_to_markdown() == ""

    def test_renderer_reusable(self):
        """Rendering twice gives the same result"""
        doc = options_document()
        renderer = MarkdownRenderer(doc.buffer)
        assert renderer.render() == renderer.render()


class TestBlocks:
    """Test block markup"""

    def test_subsection(self):
        """Subsections are second-level headings"""
        assert Document().subsection("Details").render_to_markdown() == "## Details"

    def test_pre_keeps_newlines(self):
        """Preformatted text is copied with its newlines"""
        doc = Document().pre("line one\n  line two\n")
        assert doc.render_to_markdown() == "<pre>line one\n  line two\n</pre>"

    def test_no_escaping(self):
        """Markdown output copies text as is"""
        doc = Document().paragraph("a <b> & -- c")
        assert doc.render_to_markdown() == "<p>a <b> & -- c</p>"

    def test_unnumbered_list(self):
        """Unnumbered lists use <ul> and <li>"""
        doc = Document().ulist([Scoped(LogicalBlock.LIST_ITEM, "a"), Scoped(LogicalBlock.LIST_ITEM, "b")])
        assert doc.render_to_markdown() == "<ul>\n<li>a</li>\n<li>b</li></ul>"

    def test_numbered_list(self):
        """Numbered lists use <ol> and <li>"""
        doc = Document().nlist(write_with(lambda d: d.item("a").item("b")))
        assert doc.render_to_markdown() == "<ol>\n<li>a</li>\n<li>b</li></ol>"


class TestBlankLines:
    """Test newline hygiene between blocks"""

    def test_no_blank_line_at_start(self):
        """Documents never start with a blank line"""
        assert Document().paragraph("a").render_to_markdown() == "<p>a</p>"

    def test_one_blank_line_between_blocks(self):
        """Separated blocks get exactly one blank line"""
        doc = Document().paragraph("a").paragraph("b").pre("c")
        assert doc.render_to_markdown() == "<p>a</p>\n\n<p>b</p>\n\n<pre>c</pre>"

    def test_text_ending_in_newline(self):
        """Existing newlines count toward the blank line"""
        doc = Document().text("a\n").paragraph("b")
        assert doc.render_to_markdown() == "a\n\n<p>b</p>"
        doc = Document().text("a\n\n").paragraph("b")
        assert doc.render_to_markdown() == "a\n\n<p>b</p>"

    def test_paragraph_after_list(self):
        """Lists are separated from what follows"""
        doc = Document().ulist(Scoped(LogicalBlock.LIST_ITEM, "a")).paragraph("b")
        assert doc.render_to_markdown() == "<ul>\n<li>a</li></ul>\n\n<p>b</p>"


class TestStyles:
    """Test inline style markup and transitions"""

    def test_each_style(self):
        """Every style has its own inline markup"""
        doc = Document().text([
            literal("l"), text(" "), metavar("m"), text(" "), mono("o"), text(" "), important("i"),
        ])
        assert doc.render_to_markdown() == (
            "<tt><b>l</b></tt> <tt><i>m</i></tt> <tt>o</tt> <b>i</b>"
        )

    def test_shared_prefix_stays_open(self):
        """A literal followed by a metavar keeps the <tt> open"""
        doc = Document().paragraph([literal("-o"), metavar("FILE")])
        assert doc.render_to_markdown() == "<p><tt><b>-o</b><i>FILE</i></tt></p>"

    def test_mono_then_literal(self):
        """Only the differing inner tag opens and closes"""
        doc = Document().text([mono("a"), literal("b"), mono("c")])
        assert doc.render_to_markdown() == "<tt>a<b>b</b>c</tt>"

    def test_same_style_merged(self):
        """Neighbouring spans of one style share their tags"""
        doc = Document().text([literal("a"), literal("b")])
        assert doc.render_to_markdown() == "<tt><b>ab</b></tt>"

    def test_block_closes_styles(self):
        """Block markers close open styles"""
        doc = Document().text(important("x")).paragraph("y")
        assert doc.render_to_markdown() == "<b>x</b>\n\n<p>y</p>"

    def test_document_end_closes_styles(self):
        """Open tags are closed at the end"""
        assert Document().text(literal("x")).render_to_markdown() == "<tt><b>x</b></tt>"


class TestNestedLists:
    """Test lists inside list items"""

    def test_list_inside_definition(self):
        """The outer definition list closes its items as <dd> again"""
        doc = Document().dlist([
            Scoped(LogicalBlock.LIST_KEY, "k"),
            Scoped(LogicalBlock.LIST_ITEM, [
                "intro",
                Scoped(LogicalBlock.UNNUMBERED_LIST, Scoped(LogicalBlock.LIST_ITEM, "inner")),
            ]),
            Scoped(LogicalBlock.LIST_KEY, "k2"),
            Scoped(LogicalBlock.LIST_ITEM, "v2"),
        ])
        assert doc.render_to_markdown() == (
            "<dl>\n"
            "<dt>k</dt>\n"
            "<dd>intro\n"
            "\n"
            "<ul>\n"
            "<li>inner</li></ul></dd>\n"
            "<dt>k2</dt>\n"
            "<dd>v2</dd></dl>"
        )

    def test_definition_inside_list(self):
        """A definition list nests inside a list item"""
        doc = Document().ulist(Scoped(LogicalBlock.LIST_ITEM, [
            Scoped(LogicalBlock.DEFINITION_LIST, Document().definition("k", "v")),
        ]))
        assert doc.render_to_markdown() == (
            "<ul>\n<li>\n\n<dl>\n<dt>k</dt>\n<dd>v</dd></dl></li></ul>"
        )

#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the Jira renderer.

Tests cover:
- Basic rendering and document assembly
- Headings, paragraphs, quotes, rules
- Lists (ordered, unordered, nested, definition)
- Tables
- Inline formatting, links, images
- Footnotes
- Code filters
- Unsupported nodes
- File output
- Idempotence

"""

import logging
from dataclasses import dataclass, field
from io import BytesIO, StringIO
from pathlib import Path
from typing import Any

import pytest

from jiramark.ast import (
    BlockQuote,
    CaptionedImage,
    Citation,
    Code,
    CodeBlock,
    DefinitionList,
    Div,
    Document,
    Emphasis,
    Heading,
    Image,
    LineBlock,
    LineBreak,
    Link,
    List,
    ListItem,
    MathInline,
    Node,
    Note,
    Paragraph,
    Plain,
    RawBlock,
    RawInline,
    SmallCaps,
    Space,
    Span,
    Strikethrough,
    Strong,
    Subscript,
    Superscript,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
)
from jiramark.exceptions import ExternalFilterError, InvalidOptionsError
from jiramark.options.base import BaseRendererOptions
from jiramark.options.jira import JiraRendererOptions
from jiramark.renderers.jira import JiraRenderer, assemble_document


def _render(*blocks: Node, **options: Any) -> str:
    renderer = JiraRenderer(JiraRendererOptions(**options))
    return renderer.render_to_string(Document(children=list(blocks)))


def _para(text: str) -> Paragraph:
    return Paragraph(content=[Text(content=text)])


@pytest.mark.unit
class TestJiraBasicRendering:
    """Tests for basic rendering functionality."""

    def test_render_empty_document(self) -> None:
        assert _render() == "\n"

    def test_render_simple_paragraph(self) -> None:
        assert _render(_para("Hello, world!")) == "\nHello, world!\n\n"

    def test_blocks_joined_with_separator(self) -> None:
        result = _render(Heading(level=1, content=[Text(content="Title")]), ThematicBreak())
        assert result == "h1. Title\n\n----\n"

    def test_custom_block_separator(self) -> None:
        result = _render(Plain(content=[Text(content="a")]), Plain(content=[Text(content="b")]), block_separator="\n")
        assert result == "a\nb\n"

    def test_invalid_options_type(self) -> None:
        with pytest.raises(InvalidOptionsError):
            JiraRenderer(BaseRendererOptions())  # type: ignore[arg-type]


@pytest.mark.unit
class TestJiraBlocks:
    """Tests for block element rendering."""

    def test_heading_levels(self) -> None:
        assert _render(Heading(level=3, content=[Text(content="Sub")])) == "h3. Sub\n"

    def test_heading_attributes_not_emitted(self) -> None:
        heading = Heading(level=2, content=[Text(content="Intro")], attributes={"id": "intro"})
        assert _render(heading) == "h2. Intro\n"

    def test_block_quote(self) -> None:
        assert _render(BlockQuote(children=[_para("Quoted")])) == "bq. Quoted\n"

    def test_line_block(self) -> None:
        block = LineBlock(lines=[[Text(content="roses")], [Text(content="violets")]])
        assert _render(block) == "roses\nviolets\n"

    def test_code_block(self) -> None:
        block = CodeBlock(content="x = 1\ny = 2", language="python")
        assert _render(block) == "{code}\nx = 1\ny = 2\n{code}\n"

    def test_raw_block(self) -> None:
        assert _render(RawBlock(format="html", content="<p>x</p>")) == "{noformat}\n<p>x</p>\n{noformat}\n"

    def test_div_is_paragraph(self) -> None:
        div = Div(children=[Plain(content=[Text(content="boxed")])], attributes={"class": "warning"})
        assert _render(div, Plain(content=[Text(content="after")])) == "\nboxed\n\n\nafter\n"

    def test_captioned_image(self) -> None:
        figure = CaptionedImage(url="chart.png", caption=[Text(content="Sales")], title="fig:")
        assert _render(figure) == "!Sales|chart.png!\n"


@pytest.mark.unit
class TestJiraLists:
    """Tests for list rendering."""

    def test_bullet_list(self) -> None:
        lst = List(ordered=False, items=[ListItem(children=[_para("one")]), ListItem(children=[_para("two")])])
        assert _render(lst) == "* one\n* two\n"

    def test_ordered_list(self) -> None:
        lst = List(ordered=True, items=[ListItem(children=[_para("one")]), ListItem(children=[_para("two")])])
        assert _render(lst) == "# one\n# two\n"

    def test_nested_list(self) -> None:
        inner = List(ordered=True, items=[ListItem(children=[Plain(content=[Text(content="x")])])])
        outer = List(items=[ListItem(children=[_para("a"), inner]), ListItem(children=[_para("b")])])

        assert _render(outer) == "* a\n*# x\n* b\n"

    def test_deeply_nested_list(self) -> None:
        innermost = List(items=[ListItem(children=[Plain(content=[Text(content="deep")])])])
        middle = List(ordered=True, items=[ListItem(children=[Plain(content=[Text(content="mid")]), innermost])])
        outer = List(items=[ListItem(children=[Plain(content=[Text(content="top")]), middle])])

        assert _render(outer) == "* top\n*# mid\n*#* deep\n"

    def test_soft_break_before_strong_in_item(self) -> None:
        item = ListItem(
            children=[Plain(content=[Text(content="one"), LineBreak(soft=True), Strong(content=[Text(content="two")])])]
        )
        assert _render(List(items=[item])) == "* one\n*two*\n"

    def test_item_line_starting_with_hash(self) -> None:
        item = ListItem(children=[Plain(content=[Text(content="see"), LineBreak(soft=True), Text(content="#tag")])])
        assert _render(List(ordered=True, items=[item])) == "# see\n#tag\n"

    def test_nested_item_continuation_not_prefixed(self) -> None:
        inner_item = ListItem(
            children=[Plain(content=[Text(content="x"), LineBreak(soft=True), Strong(content=[Text(content="y")])])]
        )
        outer = List(items=[ListItem(children=[_para("a"), List(items=[inner_item])])])

        assert _render(outer) == "* a\n** x\n*y*\n"

    def test_list_after_nested_list_starts_at_top_level(self) -> None:
        nested = List(items=[ListItem(children=[_para("inner")])])
        first = List(items=[ListItem(children=[_para("a"), nested])])
        second = List(ordered=True, items=[ListItem(children=[_para("b")])])

        assert _render(first, second) == "* a\n** inner\n\n# b\n"

    def test_definition_list_flattened(self) -> None:
        dl = DefinitionList(
            items=[
                ([Text(content="Term")], [[_para("Meaning")]]),
                ([Text(content="Other")], [[_para("First")], [_para("Second")]]),
            ]
        )
        assert _render(dl) == "* Term Meaning\n* Other First Second\n"


@pytest.mark.unit
class TestJiraTables:
    """Tests for table rendering."""

    @staticmethod
    def _row(*cells: str) -> TableRow:
        return TableRow(cells=[TableCell(content=[Text(content=c)]) for c in cells])

    def test_table_with_header(self) -> None:
        table = Table(header=self._row("X", "Y"), rows=[self._row("a", "b"), self._row("c", "d")])
        assert _render(table) == "||X||Y||\n|a|b|\n|c|d|\n"

    def test_table_with_empty_header(self) -> None:
        table = Table(header=self._row("", ""), rows=[self._row("a", "b"), self._row("c", "d")])
        assert _render(table) == "|a|b|\n|c|d|\n"

    def test_table_without_header(self) -> None:
        table = Table(rows=[self._row("a", "b")], alignments=["left", "right"], widths=[0.3, 0.7])
        assert _render(table) == "|a|b|\n"

    def test_formatted_cells(self) -> None:
        row = TableRow(cells=[TableCell(content=[Strong(content=[Text(content="bold")])])])
        assert _render(Table(rows=[row])) == "|*bold*|\n"

    def test_caption_notes_not_collected(self) -> None:
        caption = [Text(content="Totals"), Note(content=[Plain(content=[Text(content="hidden")])])]
        table = Table(rows=[self._row("a")], caption=caption)
        body = Plain(content=[Text(content="x"), Note(content=[Plain(content=[Text(content="kept")])])])
        result = _render(table, body)

        assert result == '|a|\n\nxkept\n<ol class="footnotes">\nkept\n</ol>\n'
        assert "hidden" not in result


@pytest.mark.unit
class TestJiraInline:
    """Tests for inline rendering."""

    def test_inline_formatting(self) -> None:
        para = Plain(
            content=[
                Emphasis(content=[Text(content="em")]),
                Space(),
                Strong(content=[Text(content="strong")]),
                Space(),
                Strikethrough(content=[Text(content="gone")]),
                Space(),
                Subscript(content=[Text(content="sub")]),
                Superscript(content=[Text(content="sup")]),
                SmallCaps(content=[Text(content="Caps")]),
            ]
        )
        assert _render(para) == "_em_ *strong* -gone- ~sub~^sup^Caps\n"

    def test_line_breaks(self) -> None:
        para = Plain(
            content=[Text(content="a"), LineBreak(soft=True), Text(content="b"), LineBreak(), Text(content="c")]
        )
        assert _render(para) == "a\nb\n\nc\n"

    def test_code_math_raw_citation(self) -> None:
        para = Plain(
            content=[
                Code(content="f()"),
                MathInline(content="x^2"),
                MathInline(content="y", display=True),
                RawInline(format="html", content="<br>"),
                Citation(content=[Text(content="Doe")], citations=["doe"]),
            ]
        )
        assert _render(para) == "{{f()}}x^2y{{<br>}}??Doe??\n"

    def test_link(self) -> None:
        link = Link(url="http://x", content=[Text(content="click")], title="Go")
        assert _render(Plain(content=[link])) == "[click|http://x]\n"

    def test_link_with_formatted_text(self) -> None:
        link = Link(url="http://x", content=[Strong(content=[Text(content="here")])])
        assert _render(Plain(content=[link])) == "[*here*|http://x]\n"

    def test_image(self) -> None:
        image = Image(url="logo.png", alt_text="Logo", title="Company")
        assert _render(Plain(content=[image])) == "!Logo|logo.png!\n"

    def test_span_passthrough(self) -> None:
        span = Span(content=[Text(content="inside")], attributes={"class": "x"})
        assert _render(Plain(content=[span])) == "inside\n"

    def test_text_escaping_option(self) -> None:
        para = Plain(content=[Text(content="2*3 [x]")])
        assert _render(para) == "2*3 [x]\n"
        assert _render(para, escape_text=True) == "2\\*3 \\[x\\]\n"


@pytest.mark.unit
class TestJiraFootnotes:
    """Tests for footnote collection and document assembly."""

    def test_footnotes_collected_in_order(self) -> None:
        para = Plain(
            content=[
                Text(content="One"),
                Note(content=[Plain(content=[Text(content="first note")])]),
                Text(content=" two"),
                Note(content=[Plain(content=[Text(content="second note")])]),
            ]
        )
        result = _render(para)

        assert result == (
            "Onefirst note twosecond note\n"
            '<ol class="footnotes">\n'
            "first note\n"
            "second note\n"
            "</ol>\n"
        )
        assert result.count('<ol class="footnotes">') == 1

    def test_no_footnotes_no_container(self) -> None:
        result = _render(_para("plain"))
        assert "<ol" not in result
        assert "</ol>" not in result

    def test_footnotes_do_not_leak_between_renders(self) -> None:
        renderer = JiraRenderer()
        with_note = Document(children=[Plain(content=[Note(content=[Plain(content=[Text(content="n")])])])])
        without_note = Document(children=[_para("clean")])

        renderer.render_to_string(with_note)
        assert "footnotes" not in renderer.render_to_string(without_note)

    def test_rendering_twice_is_identical(self) -> None:
        doc = Document(
            children=[
                Heading(level=1, content=[Text(content="T")]),
                Paragraph(content=[Text(content="x"), Note(content=[_para("note")])]),
                Table(header=TableRow(cells=[TableCell(content=[Text(content="H")])])),
            ]
        )
        renderer = JiraRenderer()
        assert renderer.render_to_string(doc) == renderer.render_to_string(doc)


@pytest.mark.unit
class TestAssembleDocument:
    """Tests for final document assembly."""

    def test_body_only(self) -> None:
        assert assemble_document("body", []) == "body\n"

    def test_body_trailing_newlines_kept(self) -> None:
        assert assemble_document("body\n\n", []) == "body\n\n\n"

    def test_with_footnotes(self) -> None:
        result = assemble_document("body", ["a", "b"], {"title": "ignored"})
        assert result == 'body\n<ol class="footnotes">\na\nb\n</ol>\n'


@dataclass
class Blink(Node):
    """Node type the renderer does not know about."""

    content: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)


@pytest.mark.unit
class TestJiraUnsupportedNodes:
    """Tests for node types outside the supported set."""

    def test_unknown_node_renders_empty(self, caplog: pytest.LogCaptureFixture) -> None:
        para = Plain(content=[Text(content="a"), Blink(content="x"), Text(content="b")])
        with caplog.at_level(logging.WARNING):
            result = _render(para)

        assert result == "ab\n"
        assert "Blink" in caplog.text


@pytest.mark.unit
class TestJiraCodeFilters:
    """Tests for code blocks piped through external commands."""

    def test_filter_output_replaces_block(self, python_filter_command) -> None:
        command = python_filter_command("import sys; print(open(sys.argv[1]).read().upper())")
        result = _render(CodeBlock(content="digraph", language="dot"), code_filters={"dot": command})

        assert result == "DIGRAPH\n"

    def test_filter_matched_by_class_attribute(self, python_filter_command) -> None:
        command = python_filter_command("print('!graph.png!')")
        block = CodeBlock(content="a -> b", attributes={"class": "graph dot"})
        assert _render(block, code_filters={"dot": command}) == "!graph.png!\n"

    def test_unmatched_language_renders_code(self, python_filter_command) -> None:
        command = python_filter_command("print('filtered')")
        block = CodeBlock(content="x", language="python")
        assert _render(block, code_filters={"dot": command}) == "{code}\nx\n{code}\n"

    def test_filter_failure_falls_back(self, python_filter_command, caplog: pytest.LogCaptureFixture) -> None:
        command = python_filter_command("import sys; sys.exit(3)")
        with caplog.at_level(logging.WARNING):
            result = _render(CodeBlock(content="x", language="dot"), code_filters={"dot": command})

        assert result == "{code}\nx\n{code}\n"
        assert "Code filter failed" in caplog.text

    def test_filter_failure_raises_when_strict(self, python_filter_command) -> None:
        command = python_filter_command("import sys; sys.exit(3)")
        with pytest.raises(ExternalFilterError) as exc_info:
            _render(
                CodeBlock(content="x", language="dot"),
                code_filters={"dot": command},
                fail_on_resource_errors=True,
            )

        assert exc_info.value.returncode == 3


@pytest.mark.unit
class TestJiraFileOutput:
    """Tests for writing rendered output."""

    def test_render_to_path(self, tmp_path: Path) -> None:
        target = tmp_path / "out.jira"
        JiraRenderer().render(Document(children=[_para("saved")]), target)

        assert target.read_text(encoding="utf-8") == "\nsaved\n\n"

    def test_render_to_string_io(self) -> None:
        buffer = StringIO()
        JiraRenderer().render(Document(children=[Plain(content=[Text(content="ü")])]), buffer)

        assert buffer.getvalue() == "ü\n"

    def test_render_to_bytes_io(self) -> None:
        buffer = BytesIO()
        JiraRenderer().render(Document(children=[Plain(content=[Text(content="ü")])]), buffer)

        assert buffer.getvalue() == "ü\n".encode("utf-8")

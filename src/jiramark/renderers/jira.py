#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/jiramark/renderers/jira.py
"""Jira wiki rendering from AST.

This module provides the JiraRenderer class, which walks a document tree
depth-first, renders each node's children before the node itself, and hands
the resulting strings to the handlers in :mod:`jiramark.renderers.handlers`.
Footnotes met along the way are collected in the render context and appended
to the body by :func:`assemble_document`.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Any, Mapping, Optional, Sequence, Union

from jiramark.ast.nodes import (
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
from jiramark.ast.visitors import NodeVisitor
from jiramark.constants import FOOTNOTES_CLOSE, FOOTNOTES_OPEN, JIRA_BULLET_MARKER, JIRA_ORDERED_MARKER
from jiramark.exceptions import ExternalFilterError
from jiramark.options.jira import JiraRendererOptions
from jiramark.renderers.base import BaseRenderer
from jiramark.renderers.context import RenderContext
from jiramark.renderers.handlers import dispatch
from jiramark.utils.shell import run_external_filter

logger = logging.getLogger(__name__)


def assemble_document(
    body: str,
    footnotes: Sequence[str],
    metadata: Optional[Mapping[str, Any]] = None,
) -> str:
    """Assemble the final output from the rendered body and footnotes.

    Parameters
    ----------
    body : str
        Rendered document body
    footnotes : sequence of str
        Rendered footnote bodies in document order
    metadata : Mapping or None, default None
        Document metadata. Accepted for callers that pass it but not used:
        the output carries no front matter.

    Returns
    -------
    str
        The body, followed by the footnote list when there are footnotes,
        joined by newlines, with one newline appended

    """
    parts = [body]
    if footnotes:
        parts.append(FOOTNOTES_OPEN)
        parts.extend(footnotes)
        parts.append(FOOTNOTES_CLOSE)
    return "\n".join(parts) + "\n"


class JiraRenderer(NodeVisitor, BaseRenderer):
    """Render AST nodes to Jira wiki markup.

    Every ``visit_*`` method returns the markup for its node. Rendering
    state (the footnote registry) lives in a fresh
    :class:`~jiramark.renderers.context.RenderContext` per document, so
    repeated renders of the same tree give identical output.

    Parameters
    ----------
    options : JiraRendererOptions or None, default = None
        Jira rendering options

    Examples
    --------
        >>> from jiramark.ast import Document, Heading, Text
        >>> doc = Document(children=[Heading(level=1, content=[Text(content="Title")])])
        >>> JiraRenderer().render_to_string(doc)
        'h1. Title\\n'

    """

    def __init__(self, options: JiraRendererOptions | None = None):
        """Initialize the Jira renderer with options."""
        BaseRenderer._validate_options_type(options, JiraRendererOptions, "jira")
        options = options or JiraRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: JiraRendererOptions = options
        self._context = RenderContext(options=options)
        self._list_markers: list[str] = []

    def render_to_string(self, document: Document) -> str:
        """Render a document AST to a Jira wiki string.

        Parameters
        ----------
        document : Document
            The document node to render

        Returns
        -------
        str
            Jira wiki markup

        """
        self._context = RenderContext(options=self.options)
        self._list_markers = []
        body = document.accept(self)
        return assemble_document(body, self._context.footnotes.flush(), document.metadata)

    def render(self, doc: Document, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render AST to Jira wiki markup and write to output.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : str, Path, IO[bytes] or IO[str]
            Output destination (file path or file-like object)

        """
        self.write_text_output(self.render_to_string(doc), output)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _emit(self, tag: str, *args: Any, **kwargs: Any) -> str:
        return dispatch(tag, self._context, *args, **kwargs)

    def _render_inline_content(self, content: Sequence[Node]) -> str:
        return "".join(node.accept(self) for node in content)

    def _render_blocks(self, blocks: Sequence[Node]) -> str:
        return self.options.block_separator.join(block.accept(self) for block in blocks)

    def _render_detached(self, content: Sequence[Node]) -> str:
        """Render inline content whose output is not emitted.

        Notes inside it are collected in a scratch context and never reach
        the document footnote list.
        """
        context = self._context
        self._context = RenderContext(options=self.options)
        try:
            return self._render_inline_content(content)
        finally:
            self._context = context

    def _render_item_blocks(self, blocks: Sequence[Node]) -> str:
        """Render the blocks of a list or definition item.

        Paragraphs are rendered as plain content and blocks are separated by
        single newlines so that the item stays on consecutive lines.
        """
        rendered = []
        for block in blocks:
            if isinstance(block, Paragraph):
                rendered.append(self._emit("plain", self._render_inline_content(block.content)))
            else:
                rendered.append(block.accept(self))
        return "\n".join(rendered)

    def _code_filter_for(self, node: CodeBlock) -> str | None:
        if not self.options.code_filters:
            return None
        candidates = [node.language] if node.language else []
        candidates.extend(node.attributes.get("class", "").split())
        for name in candidates:
            command = self.options.code_filters.get(name)
            if command:
                return command
        return None

    # ------------------------------------------------------------------
    # Block nodes
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> str:
        return self._render_blocks(node.children)

    def visit_plain(self, node: Plain) -> str:
        return self._emit("plain", self._render_inline_content(node.content))

    def visit_paragraph(self, node: Paragraph) -> str:
        return self._emit("paragraph", self._render_inline_content(node.content))

    def visit_heading(self, node: Heading) -> str:
        return self._emit("heading", node.level, self._render_inline_content(node.content), node.attributes)

    def visit_block_quote(self, node: BlockQuote) -> str:
        return self._emit("block_quote", self._render_blocks(node.children))

    def visit_thematic_break(self, node: ThematicBreak) -> str:
        return self._emit("horizontal_rule")

    def visit_line_block(self, node: LineBlock) -> str:
        return self._emit("line_block", [self._render_inline_content(line) for line in node.lines])

    def visit_code_block(self, node: CodeBlock) -> str:
        """Render a code block, piping it through a configured filter if one matches.

        When the filter fails, the error is raised if
        ``fail_on_resource_errors`` is set; otherwise it is logged and the
        block is rendered as ordinary code.
        """
        command = self._code_filter_for(node)
        if command:
            try:
                output = run_external_filter(command, node.content, timeout=self.options.filter_timeout)
            except ExternalFilterError as e:
                if self.options.fail_on_resource_errors:
                    raise
                logger.warning(f"Code filter failed, rendering block as code: {e}")
            else:
                return output.rstrip("\n")
        return self._emit("code_block", node.content, node.attributes)

    def visit_list(self, node: List) -> str:
        """Render a list; nested lists repeat the markers of their enclosing lists."""
        prefix = "".join(self._list_markers)
        self._list_markers.append(JIRA_ORDERED_MARKER if node.ordered else JIRA_BULLET_MARKER)
        items = [item.accept(self) for item in node.items]
        self._list_markers.pop()
        return self._emit("ordered_list" if node.ordered else "bullet_list", items, prefix=prefix)

    def visit_list_item(self, node: ListItem) -> str:
        return self._render_item_blocks(node.children)

    def visit_definition_list(self, node: DefinitionList) -> str:
        prefix = "".join(self._list_markers)
        self._list_markers.append(JIRA_BULLET_MARKER)
        items = []
        for term, definitions in node.items:
            parts = [self._render_inline_content(term)]
            parts.extend(self._render_item_blocks(definition) for definition in definitions)
            items.append(" ".join(part for part in parts if part))
        self._list_markers.pop()
        return self._emit("definition_list", items, prefix=prefix)

    def visit_captioned_image(self, node: CaptionedImage) -> str:
        caption = self._render_inline_content(node.caption)
        return self._emit("captioned_image", node.url, node.title, caption, node.attributes)

    def visit_table(self, node: Table) -> str:
        headers = [cell.accept(self) for cell in node.header.cells] if node.header else []
        rows = [[cell.accept(self) for cell in row.cells] for row in node.rows]
        caption = self._render_detached(node.caption)
        return self._emit("table", caption, node.alignments, node.widths, headers, rows)

    def visit_table_row(self, node: TableRow) -> str:
        """Render a lone row as a one-row table."""
        return self._emit("table", "", [], [], [], [[cell.accept(self) for cell in node.cells]])

    def visit_table_cell(self, node: TableCell) -> str:
        return self._render_inline_content(node.content)

    def visit_raw_block(self, node: RawBlock) -> str:
        return self._emit("raw_block", node.format, node.content)

    def visit_div(self, node: Div) -> str:
        return self._emit("div", self._render_blocks(node.children), node.attributes)

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def visit_text(self, node: Text) -> str:
        return self._emit("text", node.content)

    def visit_space(self, node: Space) -> str:
        return self._emit("space")

    def visit_line_break(self, node: LineBreak) -> str:
        return self._emit("soft_break" if node.soft else "line_break")

    def visit_emphasis(self, node: Emphasis) -> str:
        return self._emit("emphasis", self._render_inline_content(node.content))

    def visit_strong(self, node: Strong) -> str:
        return self._emit("strong", self._render_inline_content(node.content))

    def visit_subscript(self, node: Subscript) -> str:
        return self._emit("subscript", self._render_inline_content(node.content))

    def visit_superscript(self, node: Superscript) -> str:
        return self._emit("superscript", self._render_inline_content(node.content))

    def visit_small_caps(self, node: SmallCaps) -> str:
        return self._emit("small_caps", self._render_inline_content(node.content))

    def visit_strikethrough(self, node: Strikethrough) -> str:
        return self._emit("strikethrough", self._render_inline_content(node.content))

    def visit_code(self, node: Code) -> str:
        return self._emit("code", node.content, node.attributes)

    def visit_math_inline(self, node: MathInline) -> str:
        return self._emit("display_math" if node.display else "inline_math", node.content)

    def visit_link(self, node: Link) -> str:
        content = self._render_inline_content(node.content)
        return self._emit("link", content, node.url, node.title, node.attributes)

    def visit_image(self, node: Image) -> str:
        return self._emit("image", node.alt_text, node.url, node.title, node.attributes)

    def visit_note(self, node: Note) -> str:
        return self._emit("note", self._render_blocks(node.content))

    def visit_span(self, node: Span) -> str:
        return self._emit("span", self._render_inline_content(node.content), node.attributes)

    def visit_raw_inline(self, node: RawInline) -> str:
        return self._emit("raw_inline", node.format, node.content)

    def visit_citation(self, node: Citation) -> str:
        return self._emit("citation", self._render_inline_content(node.content), node.citations)

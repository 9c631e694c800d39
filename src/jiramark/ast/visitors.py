#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/jiramark/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

This module provides the visitor base class used to walk the document tree.
Renderers subclass :class:`NodeVisitor` and implement one ``visit_*`` method
per node type; node types outside that closed set are routed to
:meth:`NodeVisitor.generic_visit`.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

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

logger = logging.getLogger(__name__)


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Subclasses must implement a visit_* method for each node type defined in
    :mod:`jiramark.ast.nodes`. Nodes of any other type are passed to
    :meth:`generic_visit`.

    """

    def generic_visit(self, node: Node) -> Any:
        """Handle a node that has no dedicated visit method.

        Logs a warning naming the node type and returns an empty string so
        that a single unsupported node never aborts a whole render.

        Parameters
        ----------
        node : Node
            The unsupported node

        Returns
        -------
        str
            Always an empty string

        """
        logger.warning("No visitor method for node type '%s'", type(node).__name__)
        return ""

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node."""
        pass

    @abstractmethod
    def visit_plain(self, node: Plain) -> Any:
        """Visit a Plain node."""
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""
        pass

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote) -> Any:
        """Visit a BlockQuote node."""
        pass

    @abstractmethod
    def visit_thematic_break(self, node: ThematicBreak) -> Any:
        """Visit a ThematicBreak node."""
        pass

    @abstractmethod
    def visit_line_block(self, node: LineBlock) -> Any:
        """Visit a LineBlock node."""
        pass

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node."""
        pass

    @abstractmethod
    def visit_list(self, node: List) -> Any:
        """Visit a List node."""
        pass

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""
        pass

    @abstractmethod
    def visit_definition_list(self, node: DefinitionList) -> Any:
        """Visit a DefinitionList node."""
        pass

    @abstractmethod
    def visit_captioned_image(self, node: CaptionedImage) -> Any:
        """Visit a CaptionedImage node."""
        pass

    @abstractmethod
    def visit_table(self, node: Table) -> Any:
        """Visit a Table node."""
        pass

    @abstractmethod
    def visit_table_row(self, node: TableRow) -> Any:
        """Visit a TableRow node."""
        pass

    @abstractmethod
    def visit_table_cell(self, node: TableCell) -> Any:
        """Visit a TableCell node."""
        pass

    @abstractmethod
    def visit_raw_block(self, node: RawBlock) -> Any:
        """Visit a RawBlock node."""
        pass

    @abstractmethod
    def visit_div(self, node: Div) -> Any:
        """Visit a Div node."""
        pass

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""
        pass

    @abstractmethod
    def visit_space(self, node: Space) -> Any:
        """Visit a Space node."""
        pass

    @abstractmethod
    def visit_line_break(self, node: LineBreak) -> Any:
        """Visit a LineBreak node."""
        pass

    @abstractmethod
    def visit_emphasis(self, node: Emphasis) -> Any:
        """Visit a Emphasis node."""
        pass

    @abstractmethod
    def visit_strong(self, node: Strong) -> Any:
        """Visit a Strong node."""
        pass

    @abstractmethod
    def visit_subscript(self, node: Subscript) -> Any:
        """Visit a Subscript node."""
        pass

    @abstractmethod
    def visit_superscript(self, node: Superscript) -> Any:
        """Visit a Superscript node."""
        pass

    @abstractmethod
    def visit_small_caps(self, node: SmallCaps) -> Any:
        """Visit a SmallCaps node."""
        pass

    @abstractmethod
    def visit_strikethrough(self, node: Strikethrough) -> Any:
        """Visit a Strikethrough node."""
        pass

    @abstractmethod
    def visit_code(self, node: Code) -> Any:
        """Visit a Code node."""
        pass

    @abstractmethod
    def visit_math_inline(self, node: MathInline) -> Any:
        """Visit a MathInline node."""
        pass

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node."""
        pass

    @abstractmethod
    def visit_image(self, node: Image) -> Any:
        """Visit a Image node."""
        pass

    @abstractmethod
    def visit_note(self, node: Note) -> Any:
        """Visit a Note node."""
        pass

    @abstractmethod
    def visit_span(self, node: Span) -> Any:
        """Visit a Span node."""
        pass

    @abstractmethod
    def visit_raw_inline(self, node: RawInline) -> Any:
        """Visit a RawInline node."""
        pass

    @abstractmethod
    def visit_citation(self, node: Citation) -> Any:
        """Visit a Citation node."""
        pass

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/jiramark/ast/nodes.py
"""AST node classes for document representation.

This module defines the node hierarchy consumed by the Jira renderer. Each
node represents a structural or inline element of an already-parsed document.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

Block-level nodes represent structural document elements:
    - Document, Plain, Paragraph, Heading, BlockQuote, ThematicBreak
    - LineBlock, CodeBlock, List, ListItem, DefinitionList
    - CaptionedImage, Table, TableRow, TableCell, RawBlock, Div

Inline nodes represent text formatting:
    - Text, Space, LineBreak
    - Emphasis, Strong, Subscript, Superscript, SmallCaps, Strikethrough
    - Code, MathInline, Link, Image, Note, Span, RawInline, Citation

Nodes that carry attributes keep them in an insertion-ordered ``attributes``
dict; renderers that serialize attributes do so in that order.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Literal, Optional

Alignment = Literal["left", "center", "right"]


class Node:
    """Base class for all AST nodes.

    Parameters
    ----------
    metadata : dict, default = empty dict
        Arbitrary metadata associated with this node

    """

    tag: ClassVar[str] = "node"
    metadata: dict[str, Any]

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Node types without a dedicated ``visit_*`` method fall through to
        ``visitor.generic_visit``.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        return visitor.generic_visit(self)


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root document node containing all other nodes.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the document
    metadata : dict, default = empty dict
        Document-level metadata (title, author, etc.)

    """

    tag: ClassVar[str] = "document"

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this document."""
        return visitor.visit_document(self)


@dataclass
class Plain(Node):
    """Inline content not wrapped in a paragraph (e.g. tight list items).

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline nodes
    metadata : dict, default = empty dict
        Node metadata

    """

    tag: ClassVar[str] = "plain"

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this plain block."""
        return visitor.visit_plain(self)


@dataclass
class Paragraph(Node):
    """Paragraph node containing inline content.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline nodes representing paragraph content
    metadata : dict, default = empty dict
        Paragraph metadata

    """

    tag: ClassVar[str] = "paragraph"

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this paragraph."""
        return visitor.visit_paragraph(self)


@dataclass
class Heading(Node):
    """Heading node.

    Parameters
    ----------
    level : int
        Heading level (1-based, where 1 is most important)
    content : list of Node, default = empty list
        Inline nodes representing heading text
    attributes : dict, default = empty dict
        Heading attributes (identifier, classes, key/value pairs)
    metadata : dict, default = empty dict
        Heading metadata

    """

    tag: ClassVar[str] = "heading"

    level: int
    content: list[Node] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate heading level is a positive integer."""
        if self.level < 1:
            raise ValueError(f"Heading level must be a positive integer, got {self.level}")

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this heading."""
        return visitor.visit_heading(self)


@dataclass
class BlockQuote(Node):
    """Block quote node containing other block elements.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes within the quote
    metadata : dict, default = empty dict
        Quote metadata

    """

    tag: ClassVar[str] = "block_quote"

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this block quote."""
        return visitor.visit_block_quote(self)


@dataclass
class ThematicBreak(Node):
    """Thematic break node (horizontal rule)."""

    tag: ClassVar[str] = "thematic_break"

    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this thematic break."""
        return visitor.visit_thematic_break(self)


@dataclass
class LineBlock(Node):
    """Line block node: a sequence of lines whose breaks are significant.

    Parameters
    ----------
    lines : list of list of Node, default = empty list
        Each entry holds the inline nodes of one line
    metadata : dict, default = empty dict
        Line block metadata

    """

    tag: ClassVar[str] = "line_block"

    lines: list[list[Node]] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this line block."""
        return visitor.visit_line_block(self)


@dataclass
class CodeBlock(Node):
    """Code block node with optional language specification.

    Parameters
    ----------
    content : str
        Code content (not parsed as markup)
    language : str or None, default = None
        Programming language of the block
    attributes : dict, default = empty dict
        Block attributes (identifier, classes, key/value pairs)
    metadata : dict, default = empty dict
        Code block metadata

    """

    tag: ClassVar[str] = "code_block"

    content: str
    language: Optional[str] = None
    attributes: dict[str, str] = field(default_factory=dict)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this code block."""
        return visitor.visit_code_block(self)


@dataclass
class List(Node):
    """List node (ordered or unordered).

    Parameters
    ----------
    ordered : bool, default = False
        Whether this is an ordered (numbered) list
    items : list of ListItem, default = empty list
        List items
    start : int, default = 1
        Starting number for ordered lists
    metadata : dict, default = empty dict
        List metadata

    """

    tag: ClassVar[str] = "list"

    ordered: bool = False
    items: list[ListItem] = field(default_factory=list)
    start: int = 1
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list."""
        return visitor.visit_list(self)


@dataclass
class ListItem(Node):
    """List item node containing block content.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level content of the list item
    metadata : dict, default = empty dict
        List item metadata

    """

    tag: ClassVar[str] = "list_item"

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list item."""
        return visitor.visit_list_item(self)


@dataclass
class DefinitionList(Node):
    """Definition list node.

    Parameters
    ----------
    items : list of (list of Node, list of list of Node), default = empty list
        Entries as ``(term, definitions)`` pairs; the term holds inline nodes
        and each definition holds block nodes
    metadata : dict, default = empty dict
        Definition list metadata

    """

    tag: ClassVar[str] = "definition_list"

    items: list[tuple[list[Node], list[list[Node]]]] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this definition list."""
        return visitor.visit_definition_list(self)


@dataclass
class CaptionedImage(Node):
    """Standalone image with a caption (a figure).

    Parameters
    ----------
    url : str
        Image source URL
    caption : list of Node, default = empty list
        Inline nodes of the caption
    title : str or None, default = None
        Image title
    attributes : dict, default = empty dict
        Image attributes
    metadata : dict, default = empty dict
        Figure metadata

    """

    tag: ClassVar[str] = "captioned_image"

    url: str
    caption: list[Node] = field(default_factory=list)
    title: Optional[str] = None
    attributes: dict[str, str] = field(default_factory=dict)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this captioned image."""
        return visitor.visit_captioned_image(self)


@dataclass
class Table(Node):
    """Table node with optional header, alignments and relative widths.

    Parameters
    ----------
    rows : list of TableRow, default = empty list
        Table rows (excluding header)
    header : TableRow or None, default = None
        Optional header row
    alignments : list, default = empty list
        Column alignments ('left', 'center', 'right', or None)
    widths : list of float, default = empty list
        Relative column widths (0 means unspecified)
    caption : list of Node, default = empty list
        Inline nodes of the table caption
    metadata : dict, default = empty dict
        Table metadata

    """

    tag: ClassVar[str] = "table"

    rows: list[TableRow] = field(default_factory=list)
    header: Optional[TableRow] = None
    alignments: list[Alignment | None] = field(default_factory=list)
    widths: list[float] = field(default_factory=list)
    caption: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table."""
        return visitor.visit_table(self)


@dataclass
class TableRow(Node):
    """Table row node containing cells."""

    tag: ClassVar[str] = "table_row"

    cells: list[TableCell] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table row."""
        return visitor.visit_table_row(self)


@dataclass
class TableCell(Node):
    """Table cell node.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline content of the cell
    metadata : dict, default = empty dict
        Cell metadata

    """

    tag: ClassVar[str] = "table_cell"

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table cell."""
        return visitor.visit_table_cell(self)


@dataclass
class RawBlock(Node):
    """Verbatim block tagged with its source format.

    Parameters
    ----------
    format : str
        Format identifier of the raw content (e.g. "html", "latex")
    content : str
        Raw content
    metadata : dict, default = empty dict
        Block metadata

    """

    tag: ClassVar[str] = "raw_block"

    format: str
    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this raw block."""
        return visitor.visit_raw_block(self)


@dataclass
class Div(Node):
    """Generic block container with attributes."""

    tag: ClassVar[str] = "div"

    children: list[Node] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this div."""
        return visitor.visit_div(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text run."""

    tag: ClassVar[str] = "text"

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this text."""
        return visitor.visit_text(self)


@dataclass
class Space(Node):
    """Inter-word space."""

    tag: ClassVar[str] = "space"

    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this space."""
        return visitor.visit_space(self)


@dataclass
class LineBreak(Node):
    """Line break node.

    Parameters
    ----------
    soft : bool, default = False
        Whether this is a soft break (source line wrap) rather than a hard break

    """

    tag: ClassVar[str] = "line_break"

    soft: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this line break."""
        return visitor.visit_line_break(self)


@dataclass
class Emphasis(Node):
    """Emphasis (italic) inline node."""

    tag: ClassVar[str] = "emphasis"

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this emphasis."""
        return visitor.visit_emphasis(self)


@dataclass
class Strong(Node):
    """Strong (bold) inline node."""

    tag: ClassVar[str] = "strong"

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this strong."""
        return visitor.visit_strong(self)


@dataclass
class Subscript(Node):
    """Subscript inline node."""

    tag: ClassVar[str] = "subscript"

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this subscript."""
        return visitor.visit_subscript(self)


@dataclass
class Superscript(Node):
    """Superscript inline node."""

    tag: ClassVar[str] = "superscript"

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this superscript."""
        return visitor.visit_superscript(self)


@dataclass
class SmallCaps(Node):
    """Small caps inline node."""

    tag: ClassVar[str] = "small_caps"

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this small caps span."""
        return visitor.visit_small_caps(self)


@dataclass
class Strikethrough(Node):
    """Strikethrough inline node."""

    tag: ClassVar[str] = "strikethrough"

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this strikethrough."""
        return visitor.visit_strikethrough(self)


@dataclass
class Code(Node):
    """Inline code span.

    Parameters
    ----------
    content : str
        Code text
    attributes : dict, default = empty dict
        Code span attributes

    """

    tag: ClassVar[str] = "code"

    content: str
    attributes: dict[str, str] = field(default_factory=dict)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this code span."""
        return visitor.visit_code(self)


@dataclass
class MathInline(Node):
    """Math expression.

    Parameters
    ----------
    content : str
        Math source (usually LaTeX)
    display : bool, default = False
        Whether this is display math rather than inline math

    """

    tag: ClassVar[str] = "math"

    content: str
    display: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this math expression."""
        return visitor.visit_math_inline(self)


@dataclass
class Link(Node):
    """Hyperlink inline node.

    Parameters
    ----------
    url : str
        Link target
    content : list of Node, default = empty list
        Inline nodes of the link text
    title : str or None, default = None
        Link title
    attributes : dict, default = empty dict
        Link attributes

    """

    tag: ClassVar[str] = "link"

    url: str
    content: list[Node] = field(default_factory=list)
    title: Optional[str] = None
    attributes: dict[str, str] = field(default_factory=dict)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this link."""
        return visitor.visit_link(self)


@dataclass
class Image(Node):
    """Inline image node.

    Parameters
    ----------
    url : str
        Image source
    alt_text : str, default = ""
        Alternative text
    title : str or None, default = None
        Image title
    attributes : dict, default = empty dict
        Image attributes

    """

    tag: ClassVar[str] = "image"

    url: str
    alt_text: str = ""
    title: Optional[str] = None
    attributes: dict[str, str] = field(default_factory=dict)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this image."""
        return visitor.visit_image(self)


@dataclass
class Note(Node):
    """Footnote: an inline reference carrying its block content.

    Parameters
    ----------
    content : list of Node, default = empty list
        Block-level nodes of the footnote body

    """

    tag: ClassVar[str] = "note"

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this note."""
        return visitor.visit_note(self)


@dataclass
class Span(Node):
    """Generic inline container with attributes."""

    tag: ClassVar[str] = "span"

    content: list[Node] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this span."""
        return visitor.visit_span(self)


@dataclass
class RawInline(Node):
    """Verbatim inline content tagged with its source format."""

    tag: ClassVar[str] = "raw_inline"

    format: str
    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this raw inline."""
        return visitor.visit_raw_inline(self)


@dataclass
class Citation(Node):
    """Citation inline node.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline nodes of the rendered citation text
    citations : list of str, default = empty list
        Citation keys

    """

    tag: ClassVar[str] = "citation"

    content: list[Node] = field(default_factory=list)
    citations: list[str] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this citation."""
        return visitor.visit_citation(self)

#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Document tree consumed by the jiramark renderers."""

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

__all__ = [
    "BlockQuote",
    "CaptionedImage",
    "Citation",
    "Code",
    "CodeBlock",
    "DefinitionList",
    "Div",
    "Document",
    "Emphasis",
    "Heading",
    "Image",
    "LineBlock",
    "LineBreak",
    "Link",
    "List",
    "ListItem",
    "MathInline",
    "Node",
    "Note",
    "Paragraph",
    "Plain",
    "RawBlock",
    "RawInline",
    "SmallCaps",
    "Space",
    "Span",
    "Strikethrough",
    "Strong",
    "Subscript",
    "Superscript",
    "Table",
    "TableCell",
    "TableRow",
    "Text",
    "ThematicBreak",
    "NodeVisitor",
]

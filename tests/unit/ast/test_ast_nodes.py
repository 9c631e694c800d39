#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for AST node classes."""

from typing import Any

import pytest

from jiramark.ast import (
    Code,
    CodeBlock,
    Document,
    Heading,
    Link,
    List,
    Node,
    Note,
    Paragraph,
    Table,
    Text,
)


class RecordingVisitor:
    """Visitor that records which visit method was called."""

    def __getattr__(self, name: str) -> Any:
        if name.startswith("visit_") or name == "generic_visit":
            return lambda node: name
        raise AttributeError(name)


@pytest.mark.unit
class TestNodes:
    """Tests for node construction and visitor dispatch."""

    def test_heading_level_must_be_positive(self) -> None:
        with pytest.raises(ValueError, match="positive"):
            Heading(level=0)

    def test_heading_levels_beyond_six_allowed(self) -> None:
        assert Heading(level=7).level == 7

    def test_defaults_are_independent(self) -> None:
        first, second = Paragraph(), Paragraph()
        first.content.append(Text(content="x"))

        assert second.content == []

    def test_attributes_keep_insertion_order(self) -> None:
        block = CodeBlock(content="", attributes={"z": "1", "a": "2"})
        assert list(block.attributes) == ["z", "a"]

    @pytest.mark.parametrize(
        "node, method",
        [
            (Document(), "visit_document"),
            (Paragraph(), "visit_paragraph"),
            (Heading(level=1), "visit_heading"),
            (Text(content=""), "visit_text"),
            (Code(content=""), "visit_code"),
            (Link(url="u"), "visit_link"),
            (List(), "visit_list"),
            (Note(), "visit_note"),
            (Table(), "visit_table"),
        ],
    )
    def test_accept_dispatches(self, node: Node, method: str) -> None:
        assert node.accept(RecordingVisitor()) == method

    def test_base_node_uses_generic_visit(self) -> None:
        assert Node().accept(RecordingVisitor()) == "generic_visit"

    def test_tags_are_unique(self) -> None:
        from jiramark.ast import nodes

        classes = [
            obj
            for obj in vars(nodes).values()
            if isinstance(obj, type) and issubclass(obj, Node) and obj is not Node
        ]
        tags = [cls.tag for cls in classes]
        assert len(tags) == len(set(tags))

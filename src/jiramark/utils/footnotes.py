#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Collection of rendered footnote bodies for a single document render."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class FootnoteRegistry:
    """Store rendered footnote bodies in the order they were encountered.

    A registry belongs to exactly one document render: it starts empty,
    receives one entry per note rendered in the body, and is read once when
    the document is assembled.
    """

    _notes: list[str] = field(default_factory=list, init=False, repr=False)

    def record(self, rendered_body: str) -> None:
        """Append a rendered footnote body."""
        self._notes.append(rendered_body)

    def flush(self) -> list[str]:
        """Return all recorded bodies in recording order and empty the registry."""
        notes, self._notes = self._notes, []
        return notes

    def __len__(self) -> int:
        return len(self._notes)

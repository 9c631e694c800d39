#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/jiramark/renderers/context.py
"""Per-render state shared by the Jira handlers."""

from __future__ import annotations

from dataclasses import dataclass, field

from jiramark.options.jira import JiraRendererOptions
from jiramark.utils.escape import EscapeFunc, escape_jira, escape_passthrough
from jiramark.utils.footnotes import FootnoteRegistry


@dataclass
class RenderContext:
    """State owned by one document render and passed to every handler.

    Parameters
    ----------
    options : JiraRendererOptions
        Rendering options in effect
    footnotes : FootnoteRegistry
        Footnote bodies recorded so far in this render

    """

    options: JiraRendererOptions = field(default_factory=JiraRendererOptions)
    footnotes: FootnoteRegistry = field(default_factory=FootnoteRegistry)

    @property
    def escaper(self) -> EscapeFunc:
        """Escape function selected by ``options.escape_text``."""
        return escape_jira if self.options.escape_text else escape_passthrough

    def escape(self, text: str, in_attribute: bool = False) -> str:
        """Escape text with the configured escaper."""
        return self.escaper(text, in_attribute)

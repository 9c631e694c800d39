#  Copyright (c) 2025 Tom Villani, Ph.D.

# jiramark/options/jira.py
"""Configuration options for Jira wiki rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from jiramark.constants import DEFAULT_BLOCK_SEPARATOR, DEFAULT_FILTER_TIMEOUT
from jiramark.options.base import BaseRendererOptions


@dataclass(frozen=True)
class JiraRendererOptions(BaseRendererOptions):
    """Configuration options for AST-to-Jira rendering.

    Parameters
    ----------
    escape_text : bool, default False
        Whether to backslash-escape Jira metacharacters in text runs and in
        link and image labels. When False, text is emitted verbatim.
    block_separator : str, default "\\n\\n"
        String placed between sibling block elements.
    code_filters : dict of str to str, default empty
        Maps a code block language (or class attribute) to an external
        command. Matching code blocks are written to a temporary file, the
        command is run with that file as its last argument, and its standard
        output replaces the block.
    filter_timeout : float or None, default None
        Seconds to wait for a filter command before failing. None waits
        indefinitely.

    Examples
    --------
    Pipe ``dot`` code blocks through a script that prints Jira markup:
        >>> options = JiraRendererOptions(code_filters={"dot": "render-dot --jira"})
        >>> renderer = JiraRenderer(options)

    """

    escape_text: bool = field(
        default=False,
        metadata={"help": "Escape Jira metacharacters in text content", "importance": "core"},
    )
    block_separator: str = field(
        default=DEFAULT_BLOCK_SEPARATOR,
        metadata={"help": "Separator inserted between block elements", "importance": "advanced"},
    )
    code_filters: dict[str, str] = field(
        default_factory=dict,
        metadata={
            "help": "Map of code block language to external command whose output replaces the block",
            "importance": "advanced",
        },
    )
    filter_timeout: float | None = field(
        default=DEFAULT_FILTER_TIMEOUT,
        metadata={"help": "Timeout in seconds for code filter commands (None = no timeout)", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If the block separator is empty or the filter timeout is not positive.

        """
        if not self.block_separator:
            raise ValueError("block_separator must be a non-empty string")
        if self.filter_timeout is not None and self.filter_timeout <= 0:
            raise ValueError(f"filter_timeout must be positive, got {self.filter_timeout}")

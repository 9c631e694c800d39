#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/jiramark/constants.py
"""Constants and markup tokens used by the Jira wiki renderer."""

from __future__ import annotations

# =============================================================================
# Block markup
# =============================================================================

DEFAULT_BLOCK_SEPARATOR = "\n\n"

JIRA_HEADING_TEMPLATE = "h{level}. "
JIRA_BLOCKQUOTE_PREFIX = "bq. "
JIRA_HORIZONTAL_RULE = "----"
JIRA_CODE_FENCE = "{code}"
JIRA_NOFORMAT_FENCE = "{noformat}"
JIRA_BULLET_MARKER = "*"
JIRA_ORDERED_MARKER = "#"
JIRA_TABLE_HEADER_DELIMITER = "||"
JIRA_TABLE_CELL_DELIMITER = "|"

# Footnotes are collected and emitted once, after the body
FOOTNOTES_OPEN = '<ol class="footnotes">'
FOOTNOTES_CLOSE = "</ol>"

# =============================================================================
# Inline markup
# =============================================================================

JIRA_EMPHASIS = "_"
JIRA_STRONG = "*"
JIRA_SUBSCRIPT = "~"
JIRA_SUPERSCRIPT = "^"
JIRA_STRIKEOUT = "-"
JIRA_MONOSPACE_OPEN = "{{"
JIRA_MONOSPACE_CLOSE = "}}"
JIRA_CITATION = "??"

# Characters with syntactic meaning in Jira wiki text
JIRA_SPECIAL_CHARS = "\\{}[]|*_+-^~!?#"

# Characters that break out of a quoted attribute value
JIRA_ATTRIBUTE_SPECIAL_CHARS = "\\{}|"

# =============================================================================
# External filters
# =============================================================================

FILTER_TEMP_PREFIX = "jiramark-filter-"
FILTER_TEMP_SUFFIX = ".txt"
DEFAULT_FILTER_TIMEOUT: float | None = None

#  Copyright (c) 2025 Tom Villani, Ph.D.
"""jiramark - render document trees as Jira wiki markup.

jiramark converts an already-parsed document tree (paragraphs, headings,
lists, tables, inline formatting, code blocks, footnotes) into the wiki
syntax used by Jira issue descriptions and comments. Each node type is
rendered by a small handler in :mod:`jiramark.renderers.handlers`; the
:class:`~jiramark.renderers.jira.JiraRenderer` walks the tree and assembles
the final document, appending collected footnotes.

Examples
--------
    >>> from jiramark import to_jira
    >>> from jiramark.ast import Document, Heading, Strong, Text
    >>> doc = Document(children=[Heading(level=2, content=[Strong(content=[Text(content="Hi")])])])
    >>> to_jira(doc)
    'h2. *Hi*\\n'

"""

from jiramark.api import to_jira
from jiramark.exceptions import (
    ExternalFilterError,
    InvalidOptionsError,
    JiraMarkError,
    OutputWriteError,
    RenderingError,
    ValidationError,
)
from jiramark.options import JiraRendererOptions
from jiramark.renderers import JiraRenderer, RenderContext, assemble_document

__version__ = "1.0.0"

__all__ = [
    "ExternalFilterError",
    "InvalidOptionsError",
    "JiraMarkError",
    "JiraRenderer",
    "JiraRendererOptions",
    "OutputWriteError",
    "RenderContext",
    "RenderingError",
    "ValidationError",
    "assemble_document",
    "to_jira",
    "__version__",
]

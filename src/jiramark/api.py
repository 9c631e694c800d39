#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/jiramark/api.py
"""Convenience entry point for rendering documents to Jira wiki markup."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Any, Optional, Union

from jiramark.ast import Document
from jiramark.exceptions import InvalidOptionsError
from jiramark.options.jira import JiraRendererOptions
from jiramark.renderers.jira import JiraRenderer

logger = logging.getLogger(__name__)


def to_jira(
    document: Document,
    output: Union[str, Path, IO[bytes], IO[str], None] = None,
    *,
    renderer_options: Optional[JiraRendererOptions] = None,
    **kwargs: Any,
) -> Optional[str]:
    """Render a document tree to Jira wiki markup.

    Parameters
    ----------
    document : Document
        AST Document node to render
    output : str, Path, IO[bytes], IO[str], or None, optional
        Output destination. If None, the rendered markup is returned.
    renderer_options : JiraRendererOptions, optional
        Base rendering options
    kwargs : Any
        Option fields that override ``renderer_options``

    Returns
    -------
    str or None
        The rendered markup if ``output`` is None, otherwise None

    Raises
    ------
    InvalidOptionsError
        If ``renderer_options`` has the wrong type
    TypeError
        If a keyword argument is not a JiraRendererOptions field

    Examples
    --------
        >>> from jiramark.ast import Document, Paragraph, Text
        >>> doc = Document(children=[Paragraph(content=[Text(content="Hi")])])
        >>> to_jira(doc, escape_text=True)
        '\\nHi\\n\\n'

    """
    if renderer_options is not None and not isinstance(renderer_options, JiraRendererOptions):
        raise InvalidOptionsError(
            converter_name="jira",
            expected_type=JiraRendererOptions,
            received_type=type(renderer_options),
        )
    options = renderer_options or JiraRendererOptions()
    if kwargs:
        logger.debug(f"Overriding renderer options: {sorted(kwargs)}")
        options = options.create_updated(**kwargs)

    renderer = JiraRenderer(options)
    if output is None:
        return renderer.render_to_string(document)

    renderer.render(document, output)
    return None

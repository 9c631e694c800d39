#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/jiramark/renderers/handlers.py
"""Jira wiki markup handlers.

Each handler turns one node variant into a markup fragment. Handlers receive
the :class:`~jiramark.renderers.context.RenderContext` of the current render
followed by the already-rendered content of the node's children and any
variant-specific fields. They are registered by tag in :data:`HANDLERS` and
invoked through :func:`dispatch`, which renders an empty string (and logs a
warning) for tags that have no handler.

"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Sequence

from jiramark.constants import (
    JIRA_BLOCKQUOTE_PREFIX,
    JIRA_BULLET_MARKER,
    JIRA_CITATION,
    JIRA_CODE_FENCE,
    JIRA_EMPHASIS,
    JIRA_HEADING_TEMPLATE,
    JIRA_HORIZONTAL_RULE,
    JIRA_MONOSPACE_CLOSE,
    JIRA_MONOSPACE_OPEN,
    JIRA_NOFORMAT_FENCE,
    JIRA_ORDERED_MARKER,
    JIRA_STRIKEOUT,
    JIRA_STRONG,
    JIRA_SUBSCRIPT,
    JIRA_SUPERSCRIPT,
    JIRA_TABLE_CELL_DELIMITER,
    JIRA_TABLE_HEADER_DELIMITER,
)
from jiramark.renderers.context import RenderContext
from jiramark.utils.escape import serialize_attributes

logger = logging.getLogger(__name__)

Handler = Callable[..., str]

HANDLERS: dict[str, Handler] = {}


def handler(tag: str) -> Callable[[Handler], Handler]:
    """Register the decorated function as the handler for ``tag``.

    Parameters
    ----------
    tag : str
        Node variant tag (e.g. "emphasis", "code_block")

    Raises
    ------
    ValueError
        If a handler is already registered for the tag

    """

    def decorator(func: Handler) -> Handler:
        if tag in HANDLERS:
            raise ValueError(f"Handler already registered for '{tag}'")
        HANDLERS[tag] = func
        return func

    return decorator


def dispatch(tag: str, ctx: RenderContext, *args: Any, **kwargs: Any) -> str:
    """Invoke the handler registered for ``tag``.

    Parameters
    ----------
    tag : str
        Node variant tag
    ctx : RenderContext
        Context of the current render
    *args, **kwargs
        Handler arguments

    Returns
    -------
    str
        Rendered markup, or an empty string when no handler is registered

    """
    func = HANDLERS.get(tag)
    if func is None:
        logger.warning("Undefined handler '%s'", tag)
        return ""
    return func(ctx, *args, **kwargs)


def _log_dropped_attributes(tag: str, attributes: Mapping[str, Any] | None) -> None:
    if attributes and logger.isEnabledFor(logging.DEBUG):
        logger.debug("Jira %s has no attribute syntax; dropping%s", tag, serialize_attributes(attributes))


# ============================================================================
# Inline handlers
# ============================================================================


@handler("text")
def text(ctx: RenderContext, s: str) -> str:
    return ctx.escape(s)


@handler("space")
def space(ctx: RenderContext) -> str:
    return " "


@handler("soft_break")
def soft_break(ctx: RenderContext) -> str:
    return "\n"


@handler("line_break")
def line_break(ctx: RenderContext) -> str:
    return "\n\n"


@handler("emphasis")
def emphasis(ctx: RenderContext, s: str) -> str:
    return f"{JIRA_EMPHASIS}{s}{JIRA_EMPHASIS}"


@handler("strong")
def strong(ctx: RenderContext, s: str) -> str:
    return f"{JIRA_STRONG}{s}{JIRA_STRONG}"


@handler("subscript")
def subscript(ctx: RenderContext, s: str) -> str:
    return f"{JIRA_SUBSCRIPT}{s}{JIRA_SUBSCRIPT}"


@handler("superscript")
def superscript(ctx: RenderContext, s: str) -> str:
    return f"{JIRA_SUPERSCRIPT}{s}{JIRA_SUPERSCRIPT}"


@handler("small_caps")
def small_caps(ctx: RenderContext, s: str) -> str:
    """Jira has no small caps; the content passes through."""
    return s


@handler("strikethrough")
def strikethrough(ctx: RenderContext, s: str) -> str:
    return f"{JIRA_STRIKEOUT}{s}{JIRA_STRIKEOUT}"


@handler("link")
def link(
    ctx: RenderContext, s: str, url: str, title: str | None = None, attributes: Mapping[str, Any] | None = None
) -> str:
    """Render ``[text|url]``. Title and attributes have no Jira equivalent.

    The display text is rendered inline content whose text runs were already
    escaped, so it is embedded as is.
    """
    return f"[{s}|{url}]"


@handler("image")
def image(
    ctx: RenderContext, s: str, url: str, title: str | None = None, attributes: Mapping[str, Any] | None = None
) -> str:
    """Render ``!alt|url!`` from raw alt text. Title and attributes have no Jira equivalent."""
    return _image_markup(ctx.escape(s), url)


def _image_markup(label: str, url: str) -> str:
    return f"!{label}|{url}!"


@handler("code")
def code(ctx: RenderContext, s: str, attributes: Mapping[str, Any] | None = None) -> str:
    _log_dropped_attributes("code span", attributes)
    return f"{JIRA_MONOSPACE_OPEN}{s}{JIRA_MONOSPACE_CLOSE}"


@handler("inline_math")
def inline_math(ctx: RenderContext, s: str) -> str:
    return s


@handler("display_math")
def display_math(ctx: RenderContext, s: str) -> str:
    return s


@handler("note")
def note(ctx: RenderContext, s: str) -> str:
    """Record the rendered note body for the footnote list and return it unchanged."""
    ctx.footnotes.record(s)
    return s


@handler("span")
def span(ctx: RenderContext, s: str, attributes: Mapping[str, Any] | None = None) -> str:
    _log_dropped_attributes("span", attributes)
    return s


@handler("raw_inline")
def raw_inline(ctx: RenderContext, format: str, s: str) -> str:
    """Wrap raw content in monospace, whatever its declared format."""
    return f"{JIRA_MONOSPACE_OPEN}{s}{JIRA_MONOSPACE_CLOSE}"


@handler("citation")
def citation(ctx: RenderContext, s: str, citations: Sequence[str] = ()) -> str:
    return f"{JIRA_CITATION}{s}{JIRA_CITATION}"


# ============================================================================
# Block handlers
# ============================================================================


@handler("plain")
def plain(ctx: RenderContext, s: str) -> str:
    return s


@handler("paragraph")
def paragraph(ctx: RenderContext, s: str) -> str:
    return f"\n{s}\n"


@handler("heading")
def heading(ctx: RenderContext, level: int, s: str, attributes: Mapping[str, Any] | None = None) -> str:
    return JIRA_HEADING_TEMPLATE.format(level=level) + s


@handler("block_quote")
def block_quote(ctx: RenderContext, s: str) -> str:
    return JIRA_BLOCKQUOTE_PREFIX + s.strip()


@handler("horizontal_rule")
def horizontal_rule(ctx: RenderContext) -> str:
    return JIRA_HORIZONTAL_RULE


@handler("line_block")
def line_block(ctx: RenderContext, lines: Sequence[str]) -> str:
    return "\n".join(lines)


@handler("code_block")
def code_block(ctx: RenderContext, s: str, attributes: Mapping[str, Any] | None = None) -> str:
    _log_dropped_attributes("code block", attributes)
    return f"{JIRA_CODE_FENCE}\n{s}\n{JIRA_CODE_FENCE}"


def _list(marker: str, items: Sequence[str]) -> str:
    """Prefix the first line of each item with ``marker`` and join the items.

    Lines after the first belong to the item and are left as they are.
    """
    return "\n".join(f"{marker} {item}" for item in items)


@handler("bullet_list")
def bullet_list(ctx: RenderContext, items: Sequence[str], prefix: str = "") -> str:
    """Render a bullet list; ``prefix`` holds the markers of enclosing lists."""
    return _list(prefix + JIRA_BULLET_MARKER, items)


@handler("ordered_list")
def ordered_list(ctx: RenderContext, items: Sequence[str], prefix: str = "") -> str:
    return _list(prefix + JIRA_ORDERED_MARKER, items)


@handler("definition_list")
def definition_list(ctx: RenderContext, items: Sequence[str], prefix: str = "") -> str:
    """Render definition entries as a bullet list; terms are not distinguished."""
    return bullet_list(ctx, items, prefix)


@handler("captioned_image")
def captioned_image(
    ctx: RenderContext,
    url: str,
    title: str | None,
    caption: str,
    attributes: Mapping[str, Any] | None = None,
) -> str:
    """Render a figure as an image whose label is the rendered caption."""
    return _image_markup(caption, url)


@handler("table")
def table(
    ctx: RenderContext,
    caption: str,
    alignments: Sequence[str | None],
    widths: Sequence[float],
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
) -> str:
    """Render a table.

    The header line is omitted when every header cell is blank. Caption,
    alignments and widths have no Jira syntax and do not affect the output.
    Rows are emitted as given, even if their cell counts differ.
    """
    lines = []
    if any(h.strip() for h in headers):
        delimiter = JIRA_TABLE_HEADER_DELIMITER
        lines.append(delimiter + delimiter.join(headers) + delimiter)
    for row in rows:
        delimiter = JIRA_TABLE_CELL_DELIMITER
        lines.append(delimiter + delimiter.join(row) + delimiter)
    return "\n".join(lines)


@handler("raw_block")
def raw_block(ctx: RenderContext, format: str, s: str) -> str:
    return f"{JIRA_NOFORMAT_FENCE}\n{s}\n{JIRA_NOFORMAT_FENCE}"


@handler("div")
def div(ctx: RenderContext, s: str, attributes: Mapping[str, Any] | None = None) -> str:
    _log_dropped_attributes("div", attributes)
    return paragraph(ctx, s)

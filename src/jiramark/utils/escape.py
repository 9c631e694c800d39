#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/jiramark/utils/escape.py
"""Jira wiki text escaping and attribute serialization.

Escaping is applied to text runs and attribute values before they are
embedded in Jira markup. Renderers choose between :func:`escape_jira` and
:func:`escape_passthrough` based on their options.

"""

from __future__ import annotations

import html
import re
from typing import Any, Callable, Mapping

from jiramark.constants import JIRA_ATTRIBUTE_SPECIAL_CHARS, JIRA_SPECIAL_CHARS

_TEXT_SPECIAL_PATTERN = re.compile("([" + re.escape(JIRA_SPECIAL_CHARS) + "])")
_ATTRIBUTE_SPECIAL_PATTERN = re.compile("([" + re.escape(JIRA_ATTRIBUTE_SPECIAL_CHARS) + "])")

EscapeFunc = Callable[[str, bool], str]


def escape_jira(text: str, in_attribute: bool = False) -> str:
    r"""Escape text for safe embedding in Jira wiki markup.

    Parameters
    ----------
    text : str
        Text to escape
    in_attribute : bool, default False
        Whether the text will be placed inside a quoted attribute value.
        Attribute values are HTML-escaped (quotes included) and the
        characters ``\ { } |`` are backslash-escaped. Body text has every
        Jira metacharacter backslash-escaped.

    Returns
    -------
    str
        Escaped text

    Examples
    --------
        >>> escape_jira("a*b*c")
        'a\\*b\\*c'
        >>> escape_jira('say "hi" {x}', in_attribute=True)
        'say &quot;hi&quot; \\{x\\}'

    """
    if not text:
        return text

    if in_attribute:
        return _ATTRIBUTE_SPECIAL_PATTERN.sub(r"\\\1", html.escape(text, quote=True))

    return _TEXT_SPECIAL_PATTERN.sub(r"\\\1", text)


def escape_passthrough(text: str, in_attribute: bool = False) -> str:
    """Return text unchanged."""
    return text


def serialize_attributes(attributes: Mapping[str, Any], escape: EscapeFunc = escape_jira) -> str:
    """Serialize an attribute mapping as ``key="value"`` pairs.

    Entries whose value is empty, None or False are omitted. The remaining
    entries are emitted in the mapping's iteration order, each preceded by
    a single space, with values escaped for attribute context.

    Parameters
    ----------
    attributes : Mapping[str, Any]
        Attribute names and values
    escape : callable, default escape_jira
        Escape function applied to each value with ``in_attribute=True``

    Returns
    -------
    str
        Serialized attributes, or an empty string when nothing is emitted

    Examples
    --------
        >>> serialize_attributes({"class": "", "id": "x"})
        ' id="x"'

    """
    parts = []
    for key, value in attributes.items():
        if value is None or value is False or value == "":
            continue
        parts.append(f' {key}="{escape(str(value), True)}"')
    return "".join(parts)

#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers converting the document tree to Jira wiki markup."""

from jiramark.renderers.base import BaseRenderer
from jiramark.renderers.context import RenderContext
from jiramark.renderers.handlers import HANDLERS, dispatch
from jiramark.renderers.jira import JiraRenderer, assemble_document

__all__ = ["BaseRenderer", "HANDLERS", "JiraRenderer", "RenderContext", "assemble_document", "dispatch"]

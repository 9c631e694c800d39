#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderer configuration options."""

from jiramark.options.base import BaseRendererOptions, CloneFrozenMixin
from jiramark.options.jira import JiraRendererOptions

__all__ = ["BaseRendererOptions", "CloneFrozenMixin", "JiraRendererOptions"]

#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Utility helpers for escaping, footnote collection, I/O and external commands."""

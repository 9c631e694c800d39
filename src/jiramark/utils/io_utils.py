#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/jiramark/utils/io_utils.py
"""I/O utilities for handling output destinations."""

from __future__ import annotations

import io
from pathlib import Path
from typing import IO, Union, cast

from jiramark.exceptions import OutputWriteError


def write_content(content: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
    """Write text content to a file path or file-like object.

    Parameters
    ----------
    content : str
        Text to write
    output : str, Path, IO[bytes], or IO[str]
        Output destination. Paths are written as UTF-8; binary streams
        receive UTF-8 encoded bytes; text streams receive the string.

    Raises
    ------
    OutputWriteError
        If the destination cannot be written or is not a supported type

    """
    if isinstance(output, (str, Path)):
        path = Path(output)
        try:
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(
                f"Failed to write output to {path}: {e}", output_path=str(path), original_error=e
            ) from e
        return

    if not hasattr(output, "write"):
        raise OutputWriteError(f"Unsupported output type: {type(output).__name__}")

    if isinstance(output, io.TextIOBase):
        cast(IO[str], output).write(content)
    elif isinstance(output, (io.RawIOBase, io.BufferedIOBase)) or "b" in getattr(output, "mode", ""):
        cast(IO[bytes], output).write(content.encode("utf-8"))
    else:
        # Unknown stream: try text first, then fall back to bytes
        try:
            cast(IO[str], output).write(content)
        except TypeError:
            cast(IO[bytes], output).write(content.encode("utf-8"))

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/jiramark/utils/shell.py
"""Run external commands over temporary input files.

This module provides :func:`run_external_filter`, a synchronous helper that
writes content to a uniquely named temporary file, runs a command with that
file's path appended as the last argument, and returns the command's
standard output. It is format-agnostic: the Jira renderer uses it to pipe
code blocks (e.g. graph descriptions) through external tools.

"""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
import tempfile
from pathlib import Path

from jiramark.constants import FILTER_TEMP_PREFIX, FILTER_TEMP_SUFFIX
from jiramark.exceptions import ExternalFilterError

logger = logging.getLogger(__name__)


def run_external_filter(command: str, content: str, timeout: float | None = None) -> str:
    """Pipe content through an external command via a temporary file.

    Parameters
    ----------
    command : str
        Command line to run. It is split with :func:`shlex.split` and the
        temporary file path is appended as the final argument.
    content : str
        Text written (UTF-8) to the temporary file
    timeout : float or None, default None
        Seconds to wait for the command. None waits until it exits.

    Returns
    -------
    str
        Everything the command wrote to standard output (empty string if it
        wrote nothing)

    Raises
    ------
    ExternalFilterError
        If the command is empty or malformed, cannot be started, exits with
        a non-zero status, or times out

    Notes
    -----
    The temporary file is removed whether or not the command succeeds.

    Examples
    --------
        >>> run_external_filter("cat", "hello")
        'hello'

    """
    try:
        args = shlex.split(command)
    except ValueError as e:
        raise ExternalFilterError(f"Malformed filter command: {command!r}", command=command, original_error=e) from e
    if not args:
        raise ExternalFilterError("Filter command is empty", command=command)

    fd, temp_path = tempfile.mkstemp(suffix=FILTER_TEMP_SUFFIX, prefix=FILTER_TEMP_PREFIX)
    try:
        try:
            os.write(fd, content.encode("utf-8"))
        finally:
            os.close(fd)

        logger.debug("Running filter %s on %s", args[0], temp_path)
        try:
            result = subprocess.run(
                [*args, temp_path],
                capture_output=True,
                text=True,
                encoding="utf-8",
                timeout=timeout,
                check=False,
            )
        except FileNotFoundError as e:
            raise ExternalFilterError(
                f"Filter command not found: {args[0]}", command=command, original_error=e
            ) from e
        except subprocess.TimeoutExpired as e:
            raise ExternalFilterError(
                f"Filter command timed out after {timeout} seconds: {command}", command=command, original_error=e
            ) from e
        except OSError as e:
            raise ExternalFilterError(
                f"Could not run filter command {command}: {e}", command=command, original_error=e
            ) from e

        if result.returncode != 0:
            raise ExternalFilterError(
                f"Filter command exited with status {result.returncode}: {command}",
                command=command,
                returncode=result.returncode,
                stderr=result.stderr,
            )

        return result.stdout
    finally:
        Path(temp_path).unlink(missing_ok=True)

"""Run external OS utilities and capture their text output."""

from __future__ import annotations

import logging
import subprocess
from typing import Callable, Sequence

logger = logging.getLogger(__name__)

CommandRunner = Callable[[Sequence[str]], subprocess.CompletedProcess]


def run_command(args: Sequence[str]) -> subprocess.CompletedProcess:
    """
    Run *args* without a shell and wait for it to finish.

    Undecodable bytes in the output (localized netstat, non-UTF-8 process
    names) are replaced rather than raising.

    No timeout is applied; a hung utility blocks the caller.

    Raises:
        OSError: If the executable cannot be started (FileNotFoundError when it is not installed)
    """
    logger.debug("Running %s", " ".join(args))
    completed = subprocess.run(
        list(args),
        capture_output=True,
        text=True,
        errors="replace",
        check=False,
    )
    logger.debug("%s exited with status %s", args[0], completed.returncode)
    return completed


def describe_failure(completed: subprocess.CompletedProcess) -> str:
    """Return a one-line reason for a non-zero exit."""
    stderr = (completed.stderr or "").strip()
    if stderr:
        return stderr.splitlines()[0]
    return f"exit status {completed.returncode}"


__all__ = ["CommandRunner", "describe_failure", "run_command"]

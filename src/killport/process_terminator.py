"""Force-terminate discovered processes one at a time."""

from __future__ import annotations

import logging
import sys
from typing import Callable, Iterable, Optional

from .platform_strategy import PlatformStrategy
from .port_inspector_helpers import CommandRunner, TerminationReport, describe_failure, run_command

logger = logging.getLogger(__name__)


def _console(message: str) -> None:
    print(message)


def _warn(message: str) -> None:
    print(message, file=sys.stderr)


def terminate_processes(
    pids: Iterable[str],
    port: int,
    strategy: PlatformStrategy,
    runner: CommandRunner = run_command,
    *,
    console_output_func: Callable[[str], None] = _console,
    warning_output_func: Callable[[str], None] = _warn,
) -> TerminationReport:
    """
    Kill each PID with the platform's force-kill command, in order.

    A PID that cannot be killed produces a warning and does not stop the
    remaining PIDs from being processed.

    Returns:
        TerminationReport listing killed PIDs and failure reasons
    """
    report = TerminationReport(port=port)
    for pid in pids:
        reason = _kill_single_process(pid, strategy, runner)
        if reason is None:
            report.killed.append(pid)
            console_output_func(f"Killed process {pid} on port {port}")
            continue
        report.failed[pid] = reason
        warning_output_func(f"Warning: Failed to kill process {pid}: {reason}")

    if report.failed:
        logger.debug("Failed to kill %d of %d process(es) on port %d", len(report.failed), len(report.failed) + len(report.killed), port)
    return report


def _kill_single_process(pid: str, strategy: PlatformStrategy, runner: CommandRunner) -> Optional[str]:
    """Return None on success, otherwise a one-line failure reason."""
    try:
        completed = runner(strategy.kill_command(pid))
    except OSError as exc:
        return str(exc)
    if completed.returncode != 0:
        return describe_failure(completed)
    return None


__all__ = ["terminate_processes"]

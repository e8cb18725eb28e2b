"""Discover the processes that hold a socket on a port."""

from __future__ import annotations

import logging
from typing import List, Optional

from .platform_strategy import PlatformKind, PlatformStrategy
from .port_inspector_helpers import (
    CommandRunner,
    PortInspection,
    ProcessEntry,
    describe_failure,
    parse_lsof_output,
    parse_netstat_output,
    parse_tasklist_name,
    run_command,
    unique_entries,
)
from .port_inspector_helpers.windows_parser import UNKNOWN_PROCESS_NAME

logger = logging.getLogger(__name__)


def inspect_port(port: int, strategy: PlatformStrategy, runner: CommandRunner = run_command) -> PortInspection:
    """
    List the processes bound to *port*.

    A utility that is missing, exits non-zero, or prints nothing is reported
    as an empty inspection rather than an error.

    Args:
        port: Validated port number
        strategy: Platform commands to use
        runner: Callable that runs a command and returns a CompletedProcess

    Returns:
        PortInspection with one entry per PID, in the order the utility listed them
    """
    output = _read_socket_table(port, strategy, runner)
    if not output:
        return PortInspection(port=port)

    if strategy.kind is PlatformKind.WINDOWS:
        entries = _windows_entries(output, port, strategy, runner)
    else:
        entries = parse_lsof_output(output)

    inspection = PortInspection(port=port, entries=unique_entries(entries))
    logger.debug("Found %d process(es) on port %d: %s", len(inspection.entries), port, inspection.pids)
    return inspection


def _read_socket_table(port: int, strategy: PlatformStrategy, runner: CommandRunner) -> str:
    command = strategy.inspect_command(port)
    try:
        completed = runner(command)
    except FileNotFoundError:
        logger.warning("Warning: %s is not installed; cannot inspect port %d", command[0], port)
        return ""
    except OSError as exc:
        logger.warning("Warning: could not run %s: %s", command[0], exc)
        return ""
    except UnicodeDecodeError as exc:
        logger.warning("Warning: could not decode %s output: %s", command[0], exc)
        return ""

    if completed.returncode != 0:
        # lsof exits 1 when nothing matches
        logger.debug("%s reported no sockets on port %d (%s)", command[0], port, describe_failure(completed))
        return ""
    return (completed.stdout or "").strip()


def _windows_entries(output: str, port: int, strategy: PlatformStrategy, runner: CommandRunner) -> List[ProcessEntry]:
    entries: List[ProcessEntry] = []
    seen: set[str] = set()
    for row in parse_netstat_output(output, port):
        if row.pid in seen:
            continue
        seen.add(row.pid)
        name = _lookup_process_name(row.pid, strategy, runner)
        entries.append(ProcessEntry(pid=row.pid, name=name, detail_label="State", detail=row.state))
    return entries


def _lookup_process_name(pid: str, strategy: PlatformStrategy, runner: CommandRunner) -> str:
    try:
        completed = runner(strategy.name_lookup_command(pid))
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Process name lookup for PID %s failed: %s", pid, exc)
        return UNKNOWN_PROCESS_NAME
    name: Optional[str] = parse_tasklist_name(completed.stdout or "")
    if name is None:
        return UNKNOWN_PROCESS_NAME
    return name


__all__ = ["inspect_port"]

"""Helpers for inspecting which processes hold a port."""

from .command_runner import CommandRunner, describe_failure, run_command
from .process_models import PortInspection, ProcessEntry, TerminationReport, unique_entries
from .unix_parser import parse_lsof_output
from .windows_parser import parse_netstat_output, parse_tasklist_name

__all__ = [
    "CommandRunner",
    "PortInspection",
    "ProcessEntry",
    "TerminationReport",
    "describe_failure",
    "parse_lsof_output",
    "parse_netstat_output",
    "parse_tasklist_name",
    "run_command",
    "unique_entries",
]

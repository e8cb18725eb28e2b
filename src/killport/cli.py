"""
killport command entry point.

Runs a single pass: parse arguments, inspect the port, ask for confirmation
unless auto-confirmed, then kill each discovered process.

Usage:
    killport [options] <port>
    python -m killport -y 8080
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, Optional, Sequence

from .cli_helpers import CliArguments, build_parser, confirm_termination, parse_arguments
from .config import load_settings
from .errors import KillportError, UsageError
from .logging_config import setup_logging
from .platform_strategy import PlatformStrategy, detect_platform
from .port_inspector import inspect_port
from .port_inspector_helpers import CommandRunner, run_command
from .process_terminator import terminate_processes

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def _error(message: str) -> None:
    print(message, file=sys.stderr)


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    runner: CommandRunner = run_command,
    strategy: Optional[PlatformStrategy] = None,
    input_func: Callable[[str], str] = input,
) -> int:
    """Run killport and return the process exit status, including for -h and -v."""
    parser = build_parser()
    try:
        arguments = parse_arguments(argv, parser=parser)
    except SystemExit as exc:
        # argparse exits after printing help or version
        return exc.code if isinstance(exc.code, int) else EXIT_FAILURE
    except UsageError as exc:
        _error(f"Error: {exc}")
        _error(parser.format_usage().rstrip())
        return EXIT_FAILURE

    try:
        return _run(arguments, runner=runner, strategy=strategy, input_func=input_func)
    except KillportError as exc:
        _error(f"Error: {exc}")
        return EXIT_FAILURE


def _run(
    arguments: CliArguments,
    *,
    runner: CommandRunner,
    strategy: Optional[PlatformStrategy],
    input_func: Callable[[str], str],
) -> int:
    settings = load_settings()
    setup_logging(settings.log_level)

    auto_confirm = arguments.auto_confirm or settings.auto_confirm
    port = arguments.port

    active_strategy = strategy if strategy is not None else detect_platform()
    logger.debug("Using %s strategy for port %d", active_strategy.kind.value, port)

    inspection = inspect_port(port, active_strategy, runner)
    if inspection.is_empty:
        print(f"No process found running on port {port}")
        return EXIT_OK

    print(f"Found process(es) on port {port}:")
    print(inspection.summary)

    if not auto_confirm and not confirm_termination(input_func):
        print("Aborted.")
        return EXIT_OK

    # Partial kill failures are reported as warnings only
    terminate_processes(inspection.pids, port, active_strategy, runner)
    return EXIT_OK


__all__ = ["EXIT_FAILURE", "EXIT_OK", "main"]

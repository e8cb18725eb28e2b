"""Command-line parsing for killport."""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass
from typing import List, NoReturn, Optional, Sequence

from .. import __version__
from ..errors import PORT_MAX, PORT_MIN, UsageError

PROG = "killport"
_PORT_TOKEN = re.compile(r"-?[0-9]+")

DESCRIPTION = "killport - Kill processes running on a specific port"

EPILOG = """Examples:
  killport 3000       Kill the process on port 3000 (with confirmation)
  killport -y 3000    Kill the process on port 3000 (no confirmation)
  killport 8080       Kill the process on port 8080 (with confirmation)"""


@dataclass(frozen=True)
class CliArguments:
    port: int
    auto_confirm: bool


class _RaisingArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _RaisingArgumentParser(
        prog=PROG,
        allow_abbrev=False,
        usage="%(prog)s [options] <port>",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-y",
        "--yes",
        dest="auto_confirm",
        action="store_true",
        help="Skip confirmation prompt and kill immediately",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"{PROG} v{__version__}",
        help="Show version information",
    )
    parser.add_argument("ports", nargs="*", metavar="port", help=f"Port number ({PORT_MIN}-{PORT_MAX})")
    return parser


def parse_port(token: str) -> int:
    """
    Convert a command-line token to a port number.

    Raises:
        UsageError: If the token is not a base-10 integer in the valid range
    """
    # int() would also accept "+80", "8_0" and non-ASCII digits
    if not _PORT_TOKEN.fullmatch(token):
        raise UsageError.invalid_port(token)
    port = int(token)
    if not PORT_MIN <= port <= PORT_MAX:
        raise UsageError.invalid_port(token)
    return port


def parse_arguments(argv: Optional[Sequence[str]] = None, *, parser: Optional[argparse.ArgumentParser] = None) -> CliArguments:
    """
    Parse the full argument list.

    ``-h`` and ``-v`` print their output and raise SystemExit(0) through argparse.

    Raises:
        UsageError: For unknown options, invalid port tokens, a missing port, or more than one port
    """
    active_parser = parser if parser is not None else build_parser()
    namespace = active_parser.parse_intermixed_args(argv)
    tokens: List[str] = list(namespace.ports)

    ports = [parse_port(token) for token in tokens]
    if not ports:
        raise UsageError.missing_port()
    if len(ports) > 1:
        raise UsageError.multiple_ports(tokens)
    return CliArguments(port=ports[0], auto_confirm=bool(namespace.auto_confirm))


__all__ = ["CliArguments", "PROG", "build_parser", "parse_arguments", "parse_port"]

"""Argument parsing and operator prompts."""

from .argument_parser import CliArguments, build_parser, parse_arguments, parse_port
from .confirmation import confirm_termination, is_affirmative

__all__ = [
    "CliArguments",
    "build_parser",
    "confirm_termination",
    "is_affirmative",
    "parse_arguments",
    "parse_port",
]

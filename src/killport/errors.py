"""Error types raised by the killport command."""

from __future__ import annotations

from typing import Sequence

PORT_MIN = 1
PORT_MAX = 65535


class KillportError(RuntimeError):
    """Base class for errors that end the run with a non-zero exit status."""


class UsageError(KillportError):
    """Raised when the command line is missing or malformed."""

    @classmethod
    def invalid_port(cls, token: str) -> "UsageError":
        """Create error for a token that is not a valid port."""
        return cls(f"Invalid port number '{token}'. Port must be between {PORT_MIN} and {PORT_MAX}.")

    @classmethod
    def missing_port(cls) -> "UsageError":
        """Create error for an invocation without a port."""
        return cls("No port specified.")

    @classmethod
    def multiple_ports(cls, tokens: Sequence[str]) -> "UsageError":
        """Create error for an invocation naming more than one port."""
        return cls(f"Expected exactly one port, got {len(tokens)}: {', '.join(tokens)}")


class UnsupportedPlatformError(KillportError):
    """Raised when the host OS has no inspection/termination strategy."""

    def __init__(self, system_name: str) -> None:
        super().__init__(f"unsupported operating system: {system_name}")
        self.system_name = system_name


class InputReadError(KillportError):
    """Raised when the confirmation answer cannot be read."""


__all__ = [
    "InputReadError",
    "KillportError",
    "PORT_MAX",
    "PORT_MIN",
    "UnsupportedPlatformError",
    "UsageError",
]

"""Select how ports are inspected and processes killed on the current host."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass
from typing import List

import psutil

from .errors import UnsupportedPlatformError


class PlatformKind(enum.Enum):
    UNIX = "unix"
    WINDOWS = "windows"


@dataclass(frozen=True)
class PlatformStrategy:
    """Commands used for one platform family."""

    kind: PlatformKind

    def inspect_command(self, port: int) -> List[str]:
        if self.kind is PlatformKind.WINDOWS:
            return ["netstat", "-ano"]
        return ["lsof", "-i", f":{port}"]

    def kill_command(self, pid: str) -> List[str]:
        if self.kind is PlatformKind.WINDOWS:
            return ["taskkill", "/F", "/PID", pid]
        return ["kill", "-9", pid]

    @staticmethod
    def name_lookup_command(pid: str) -> List[str]:
        return ["tasklist", "/FI", f"PID eq {pid}", "/FO", "CSV", "/NH"]


UNIX_STRATEGY = PlatformStrategy(PlatformKind.UNIX)
WINDOWS_STRATEGY = PlatformStrategy(PlatformKind.WINDOWS)


def detect_platform() -> PlatformStrategy:
    """
    Return the strategy for the running host.

    Linux and macOS use lsof/kill, Windows uses netstat/tasklist/taskkill.

    Raises:
        UnsupportedPlatformError: For any other operating system
    """
    if psutil.WINDOWS:
        return WINDOWS_STRATEGY
    if psutil.LINUX or psutil.MACOS:
        return UNIX_STRATEGY
    raise UnsupportedPlatformError(sys.platform)


__all__ = [
    "PlatformKind",
    "PlatformStrategy",
    "UNIX_STRATEGY",
    "WINDOWS_STRATEGY",
    "detect_platform",
]

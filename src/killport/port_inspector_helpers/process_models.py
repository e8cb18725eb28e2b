from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple


@dataclass(frozen=True)
class ProcessEntry:
    """One process found holding a socket on the inspected port."""

    pid: str
    name: str
    detail_label: str
    detail: str

    def summary_line(self) -> str:
        return f"  PID: {self.pid}  Name: {self.name}  {self.detail_label}: {self.detail}"


@dataclass(frozen=True)
class PortInspection:
    """Processes discovered on a port, one entry per distinct PID in discovery order."""

    port: int
    entries: Tuple[ProcessEntry, ...] = ()

    @property
    def pids(self) -> List[str]:
        return [entry.pid for entry in self.entries]

    @property
    def summary(self) -> str:
        return "\n".join(entry.summary_line() for entry in self.entries)

    @property
    def is_empty(self) -> bool:
        return not self.entries


@dataclass
class TerminationReport:
    """Outcome of terminating the discovered processes."""

    port: int
    killed: List[str] = field(default_factory=list)
    failed: Dict[str, str] = field(default_factory=dict)

    @property
    def all_killed(self) -> bool:
        return not self.failed


def unique_entries(entries: Sequence[ProcessEntry]) -> Tuple[ProcessEntry, ...]:
    """Keep the first entry for each PID, preserving discovery order."""
    seen: set[str] = set()
    unique: List[ProcessEntry] = []
    for entry in entries:
        if entry.pid in seen:
            continue
        seen.add(entry.pid)
        unique.append(entry)
    return tuple(unique)


__all__ = ["PortInspection", "ProcessEntry", "TerminationReport", "unique_entries"]

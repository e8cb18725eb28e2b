"""Parse ``netstat -ano`` and ``tasklist`` output."""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass
from typing import List, Optional

logger = logging.getLogger(__name__)

NO_OWNER_PID = "0"
UNKNOWN_PROCESS_NAME = "Unknown"

# Proto, Local Address, Foreign Address, State, PID
_MIN_FIELDS = 5
_LOCAL_ADDRESS_INDEX = 1
_STATE_INDEX = 3


@dataclass(frozen=True)
class NetstatRow:
    pid: str
    local_address: str
    state: str


def parse_netstat_output(output: str, port: int) -> List[NetstatRow]:
    """
    Return TCP rows whose local address is bound to exactly *port*.

    Rows that only mention the port as a substring (``:80`` inside ``:8080``
    or in the foreign address) are dropped, as are rows owned by PID 0 and
    rows without the full five columns (UDP rows have no state column).
    """
    port_marker = f":{port}"
    rows: List[NetstatRow] = []
    for line in output.splitlines():
        if port_marker not in line:
            continue
        fields = line.split()
        if len(fields) < _MIN_FIELDS:
            logger.debug("Skipping short netstat row: %r", line)
            continue
        local_address = fields[_LOCAL_ADDRESS_INDEX]
        if not local_address.endswith(port_marker):
            continue
        pid = fields[-1]
        if pid == NO_OWNER_PID:
            continue
        rows.append(NetstatRow(pid=pid, local_address=local_address, state=fields[_STATE_INDEX]))
    return rows


def parse_tasklist_name(output: str) -> Optional[str]:
    """Return the image name from ``tasklist /FO CSV /NH`` output, or None when no task matched."""
    for line in output.splitlines():
        stripped = line.strip()
        # "INFO: No tasks are running which match the specified criteria."
        if not stripped.startswith('"'):
            continue
        row = next(csv.reader([stripped]), [])
        if row and row[0]:
            return row[0]
    return None


__all__ = [
    "NO_OWNER_PID",
    "NetstatRow",
    "UNKNOWN_PROCESS_NAME",
    "parse_netstat_output",
    "parse_tasklist_name",
]

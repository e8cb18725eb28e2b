"""Parse ``lsof -i :<port>`` output."""

from __future__ import annotations

import logging
from typing import List

from .process_models import ProcessEntry

logger = logging.getLogger(__name__)

_MIN_FIELDS = 2


def parse_lsof_output(output: str) -> List[ProcessEntry]:
    """
    Convert lsof rows into process entries.

    The first line is the column header and is skipped. Rows with too few
    columns are skipped rather than rejected since the layout varies across
    lsof versions. Duplicates are kept; callers deduplicate by PID.

    Example row::

        node    1234 alice   23u  IPv6 0x1  0t0  TCP *:8080 (LISTEN)
    """
    entries: List[ProcessEntry] = []
    for line in output.splitlines()[1:]:
        fields = line.split()
        if len(fields) < _MIN_FIELDS:
            if fields:
                logger.debug("Skipping malformed lsof row: %r", line)
            continue
        user = fields[2] if len(fields) > 2 else ""
        entries.append(ProcessEntry(pid=fields[1], name=fields[0], detail_label="User", detail=user))
    return entries


__all__ = ["parse_lsof_output"]

"""Ranking of live processes by resident memory."""

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from sysmon.models import ProcessSnapshot
from sysmon.procfs import extract, token_at, parse_float

logger = logging.getLogger(__name__)

TOP_N = 10


def read_process(proc_root: Path, pid: str) -> ProcessSnapshot | None:
    """
    Read one process from its status file.

    Returns None when the process has no resident memory, which covers
    processes that exited mid-scan and ones whose status is not readable.
    """
    status_path = proc_root / pid / "status"
    name = extract(status_path, "Name")
    rss_kb = parse_float(token_at(extract(status_path, "VmRSS")))
    if not rss_kb > 0:
        return None
    return ProcessSnapshot(name=name, pid=pid, resident_memory_mb=rss_kb / 1024.0)


def list_pids(proc_root: Path) -> list[str]:
    """Names of the purely numeric entries under the process table root."""
    try:
        with os.scandir(proc_root) as entries:
            return [entry.name for entry in entries if entry.name.isdigit()]
    except OSError as exc:
        logger.debug("Cannot enumerate %s: %s", proc_root, exc)
        return []


def scan_processes(proc_root: Path) -> list[ProcessSnapshot]:
    """Snapshot every readable process with resident memory, in encounter order."""
    processes: list[ProcessSnapshot] = []
    for pid in list_pids(proc_root):
        snapshot = read_process(proc_root, pid)
        if snapshot is None:
            continue
        processes.append(snapshot)
    return processes


def rank_processes(processes: Iterable[ProcessSnapshot], n: int = TOP_N) -> list[ProcessSnapshot]:
    """
    Top ``n`` processes by resident memory, largest first.

    Entries without a positive resident memory reading (including NaN) are
    dropped. The sort is stable, so ties keep their encounter order.
    """
    candidates = [proc for proc in processes if proc.resident_memory_mb > 0]
    ranked = sorted(candidates, key=lambda proc: proc.resident_memory_mb, reverse=True)
    return ranked[: max(0, n)]


class ProcessRanker:
    """Enumerates the process table and keeps the biggest memory consumers."""

    def __init__(self, proc_root: str | Path = "/proc") -> None:
        self._proc_root = Path(proc_root)

    def rank_top(self, n: int = TOP_N) -> list[ProcessSnapshot]:
        """Rescan all processes and return the ``n`` largest by resident memory."""
        return rank_processes(scan_processes(self._proc_root), n)

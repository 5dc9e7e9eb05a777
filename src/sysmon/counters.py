"""Conversion of cumulative kernel counters into rates."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from sysmon.procfs import parse_float

logger = logging.getLogger(__name__)


def delta_or_zero(current: int, previous: int) -> int:
    """Difference of two cumulative readings, 0 if the counter went backwards."""
    if current < previous:
        logger.debug("Counter regressed from %d to %d", previous, current)
        return 0
    return current - previous


@dataclass(slots=True, frozen=True)
class CpuCounters:
    """Aggregate CPU tick counters from one reading."""

    total: int = 0
    idle: int = 0


def parse_cpu_counters(stat_text: str | None, idle_field: int = 3) -> CpuCounters | None:
    """
    Parse the first (aggregate) line of the kernel CPU statistics.

    Fields that are not unsigned decimal integers are skipped. Returns None
    when the text is missing or carries too few fields to locate the idle
    counter.
    """
    if not stat_text:
        return None
    fields = [int(token) for token in stat_text.splitlines()[0].split()[1:] if token.isdecimal()]
    if len(fields) <= idle_field:
        logger.debug("CPU statistics line has %d fields, need %d", len(fields), idle_field + 1)
        return None
    return CpuCounters(total=sum(fields), idle=fields[idle_field])


def cpu_percent(previous: CpuCounters, current: CpuCounters) -> float:
    """Busy percentage between two readings, within [0, 100]."""
    delta_total = delta_or_zero(current.total, previous.total)
    delta_idle = delta_or_zero(current.idle, previous.idle)
    if delta_total <= 0:
        return 0.0
    busy = 100.0 * (1.0 - delta_idle / delta_total)
    return min(100.0, max(0.0, busy))


def parse_rx_bytes(net_text: str | None, hints: Sequence[str]) -> int:
    """
    Received-byte counter of the active interface.

    Every line containing one of ``hints`` is a candidate and the last one
    wins. Returns 0 when no line matches or the counter is malformed.
    """
    if not net_text:
        return 0
    rx_bytes = 0
    for line in net_text.splitlines():
        if not any(hint in line for hint in hints):
            continue
        _, _, counters = line.partition(":")
        tokens = counters.split()
        try:
            rx_bytes = int(tokens[0]) if tokens else 0
        except ValueError:
            logger.debug("Malformed network counter line %r", line)
            rx_bytes = 0
    return rx_bytes


def net_rate(previous: int, current: int) -> float:
    """Kilobytes received between two readings; 0 on the first reading or a reset."""
    if previous <= 0 or current < previous:
        return 0.0
    return (current - previous) / 1024.0


@dataclass(slots=True, frozen=True)
class MemoryReading:
    """Memory totals in gigabytes plus percent used."""

    percent: float = 0.0
    used_gb: float = 0.0
    total_gb: float = 0.0


def parse_memory(meminfo_text: str | None) -> MemoryReading:
    """Derive used memory from the MemTotal and MemAvailable lines."""
    if meminfo_text is None:
        return MemoryReading()
    total_kb = 1.0
    available_kb = 0.0
    for line in meminfo_text.splitlines():
        tokens = line.split()
        if len(tokens) < 2:
            continue
        if line.startswith("MemTotal:"):
            total_kb = parse_float(tokens[1])
        elif line.startswith("MemAvailable:"):
            available_kb = parse_float(tokens[1])
    if total_kb <= 0:
        return MemoryReading()
    used_kb = max(0.0, total_kb - available_kb)
    return MemoryReading(
        percent=min(100.0, used_kb / total_kb * 100.0),
        used_gb=used_kb / 1024.0 / 1024.0,
        total_gb=total_kb / 1024.0 / 1024.0,
    )

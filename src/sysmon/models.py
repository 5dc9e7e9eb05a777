"""Data models for sysmon."""

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class ProcessSnapshot:
    """Immutable snapshot of one live process."""

    name: str
    pid: str
    resident_memory_mb: float  # Always > 0 once ranked


@dataclass(slots=True, frozen=True)
class HostInfo:
    """Static identity of the sampled host."""

    hostname: str
    os_name: str
    cpu_model: str


@dataclass(slots=True, frozen=True)
class MetricsSnapshot:
    """Everything one sampling tick produced, oldest history sample first."""

    cpu_percent: float
    ram_percent: float
    ram_used_gb: float
    ram_total_gb: float
    net_kb: float  # Kilobytes received since the previous tick
    cpu_history: tuple[float, ...]
    ram_history: tuple[float, ...]
    net_history: tuple[float, ...]
    top_processes: tuple[ProcessSnapshot, ...]
    temperature: str
    uptime_seconds: float
    threads: str
    host: HostInfo

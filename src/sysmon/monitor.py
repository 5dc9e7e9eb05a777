"""Sampling engine for sysmon."""

import logging
from enum import Enum

from sysmon.config import SamplerConfig
from sysmon.counters import (
    CpuCounters,
    MemoryReading,
    cpu_percent,
    net_rate,
    parse_cpu_counters,
    parse_memory,
    parse_rx_bytes,
)
from sysmon.history import RollingWindow
from sysmon.models import HostInfo, MetricsSnapshot
from sysmon.processes import ProcessRanker
from sysmon.procfs import (
    read_host_info,
    read_temperature,
    read_text,
    read_thread_count,
    read_uptime,
)

logger = logging.getLogger(__name__)


class CycleState(Enum):
    """Lifecycle of the sampling cycle."""

    UNINITIALIZED = "uninitialized"
    STEADY = "steady"


class SamplingCycle:
    """
    One telemetry pass per tick over the kernel's pseudo-files.

    Owns the previous counter readings and the rolling windows. It is not
    thread-safe and is meant to be driven by a single fixed-interval trigger
    (see ``SysmonApp``), so ticks never overlap.

    The first tick compares against zeroed counters, so its CPU value is the
    average since boot and its network rate is 0.
    """

    def __init__(
        self,
        config: SamplerConfig | None = None,
        host: HostInfo | None = None,
    ) -> None:
        """
        Initialize the SamplingCycle.

        Args:
            config: Paths and constants. Defaults to the live system.
            host: Static host identity. Read from the system when omitted.
        """
        self._config = config or SamplerConfig()
        self._host = host if host is not None else read_host_info(self._config)
        self._state = CycleState.UNINITIALIZED
        self._last_cpu = CpuCounters()
        self._last_net_bytes = 0
        size = self._config.history_size
        self._cpu_history = RollingWindow(size)
        self._ram_history = RollingWindow(size)
        self._net_history = RollingWindow(size)
        self._ranker = ProcessRanker(self._config.proc_root)

    @property
    def config(self) -> SamplerConfig:
        return self._config

    @property
    def state(self) -> CycleState:
        return self._state

    @property
    def host(self) -> HostInfo:
        return self._host

    def tick(self) -> MetricsSnapshot:
        """Sample every source once and return the resulting snapshot."""
        if self._state is CycleState.UNINITIALIZED:
            logger.debug("First tick, previous counters default to zero")
            self._state = CycleState.STEADY

        cpu = self._sample_cpu()
        self._cpu_history.push(cpu)

        memory = self._sample_memory()
        self._ram_history.push(memory.percent)

        net = self._sample_network()
        self._net_history.push(net)

        top_processes = self._ranker.rank_top(self._config.top_n)

        return MetricsSnapshot(
            cpu_percent=cpu,
            ram_percent=memory.percent,
            ram_used_gb=memory.used_gb,
            ram_total_gb=memory.total_gb,
            net_kb=net,
            cpu_history=self._cpu_history.snapshot(),
            ram_history=self._ram_history.snapshot(),
            net_history=self._net_history.snapshot(),
            top_processes=tuple(top_processes),
            temperature=read_temperature(self._config),
            uptime_seconds=read_uptime(self._config),
            threads=read_thread_count(self._config),
            host=self._host,
        )

    def _sample_cpu(self) -> float:
        """CPU busy percentage since the previous tick; 0 if unreadable."""
        current = parse_cpu_counters(read_text(self._config.stat_path), self._config.idle_field)
        if current is None:
            return 0.0
        value = cpu_percent(self._last_cpu, current)
        self._last_cpu = current
        return value

    def _sample_memory(self) -> MemoryReading:
        return parse_memory(read_text(self._config.meminfo_path))

    def _sample_network(self) -> float:
        """Kilobytes received since the previous tick."""
        text = read_text(self._config.net_dev_path)
        if text is None:
            return 0.0
        current = parse_rx_bytes(text, self._config.interface_hints)
        value = net_rate(self._last_net_bytes, current)
        self._last_net_bytes = current
        return value

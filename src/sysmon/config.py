"""Sampler configuration for sysmon."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class SamplerConfig:
    """Paths and constants consumed by the sampling engine.

    Every source file is derived from the three roots, so the whole engine can
    be pointed at a synthetic tree.
    """

    proc_root: Path = Path("/proc")
    sys_root: Path = Path("/sys")
    etc_root: Path = Path("/etc")
    history_size: int = 200
    top_n: int = 10
    interval: float = 0.1  # Seconds between ticks
    interface_hints: tuple[str, ...] = field(default=("eth0", "enp", "wlan"))
    thermal_zones: int = 5
    idle_field: int = 3  # 0-based, after the "cpu" label

    def __post_init__(self) -> None:
        """Fix invalid values."""
        self.proc_root = Path(self.proc_root)
        self.sys_root = Path(self.sys_root)
        self.etc_root = Path(self.etc_root)
        if self.history_size < 1:
            self.history_size = 200
        if self.top_n < 0:
            self.top_n = 10
        if self.interval <= 0:
            self.interval = 0.1
        if self.thermal_zones < 0:
            self.thermal_zones = 5
        if self.idle_field < 0:
            self.idle_field = 3

    @property
    def stat_path(self) -> Path:
        return self.proc_root / "stat"

    @property
    def meminfo_path(self) -> Path:
        return self.proc_root / "meminfo"

    @property
    def net_dev_path(self) -> Path:
        return self.proc_root / "net" / "dev"

    @property
    def uptime_path(self) -> Path:
        return self.proc_root / "uptime"

    @property
    def loadavg_path(self) -> Path:
        return self.proc_root / "loadavg"

    @property
    def cpuinfo_path(self) -> Path:
        return self.proc_root / "cpuinfo"

    @property
    def os_release_path(self) -> Path:
        return self.etc_root / "os-release"

    def thermal_path(self, index: int) -> Path:
        """Path of the temperature file of thermal zone ``index``."""
        return self.sys_root / "class" / "thermal" / f"thermal_zone{index}" / "temp"

    @property
    def ticks_per_second(self) -> float:
        return 1.0 / self.interval

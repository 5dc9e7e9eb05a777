"""Shared fixtures: a synthetic procfs/sysfs tree."""

from pathlib import Path

import pytest

from sysmon.config import SamplerConfig
from sysmon.models import HostInfo

STAT = (
    "cpu  100 0 50 800 50 0 0 0 0 0\n"
    "cpu0 50 0 25 400 25 0 0 0 0 0\n"
    "intr 12345\n"
)

MEMINFO = (
    "MemTotal:       16384000 kB\n"
    "MemFree:         2048000 kB\n"
    "MemAvailable:    8192000 kB\n"
    "Buffers:          512000 kB\n"
)

NET_DEV = (
    "Inter-|   Receive                                                |  Transmit\n"
    " face |bytes    packets errs drop fifo frame compressed multicast|bytes    packets\n"
    "    lo:  900000    1000    0    0    0     0          0         0   900000    1000\n"
    "  eth0: 2048000    2000    0    0    0     0          0         0   100000     500\n"
)

STATUS = "Name:\t{name}\nUmask:\t0022\nState:\tS (sleeping)\nPid:\t{pid}\n{rss}Threads:\t1\n"


def write_status(proc_root: Path, pid: int, name: str, rss_kb: int | None) -> None:
    """Create ``<proc_root>/<pid>/status``; no VmRSS line when ``rss_kb`` is None."""
    rss = f"VmRSS:\t{rss_kb} kB\n" if rss_kb is not None else ""
    process_dir = proc_root / str(pid)
    process_dir.mkdir(parents=True, exist_ok=True)
    (process_dir / "status").write_text(STATUS.format(name=name, pid=pid, rss=rss))


def write_thermal(sys_root: Path, index: int, value: str) -> None:
    zone = sys_root / "class" / "thermal" / f"thermal_zone{index}"
    zone.mkdir(parents=True, exist_ok=True)
    (zone / "temp").write_text(value)


@pytest.fixture
def fake_root(tmp_path: Path) -> Path:
    """A root holding proc/, sys/ and etc/ with every source present."""
    proc_root = tmp_path / "proc"
    (proc_root / "net").mkdir(parents=True)
    (proc_root / "stat").write_text(STAT)
    (proc_root / "meminfo").write_text(MEMINFO)
    (proc_root / "net" / "dev").write_text(NET_DEV)
    (proc_root / "uptime").write_text("3600.52 7000.10\n")
    (proc_root / "loadavg").write_text("0.52 0.48 0.40 2/345 12345\n")
    (proc_root / "cpuinfo").write_text("processor\t: 0\nmodel name\t: Test CPU @ 3.00GHz\n")
    (proc_root / "self").mkdir()

    for pid, name, rss_kb in [
        (1, "init", 5 * 1024),
        (2, "kthreadd", None),
        (10, "database", 12 * 1024),
        (11, "shell", 3 * 1024),
        (12, "browser", 12 * 1024),
    ]:
        write_status(proc_root, pid, name, rss_kb)

    sys_root = tmp_path / "sys"
    write_thermal(sys_root, 0, "0\n")
    write_thermal(sys_root, 1, "36500\n")

    etc_root = tmp_path / "etc"
    etc_root.mkdir()
    (etc_root / "os-release").write_text('NAME="Test Linux"\nPRETTY_NAME="Test Linux 1.0"\nID=test\n')
    return tmp_path


@pytest.fixture
def config(fake_root: Path) -> SamplerConfig:
    return SamplerConfig(
        proc_root=fake_root / "proc",
        sys_root=fake_root / "sys",
        etc_root=fake_root / "etc",
    )


@pytest.fixture
def host() -> HostInfo:
    return HostInfo(hostname="testhost", os_name="Test Linux 1.0", cpu_model="Test CPU @ 3.00GHz")

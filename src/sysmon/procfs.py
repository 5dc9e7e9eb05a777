"""Readers for line-oriented kernel and system files."""

import logging
import math
import socket
from pathlib import Path

from sysmon.config import SamplerConfig
from sysmon.models import HostInfo

logger = logging.getLogger(__name__)

NOT_AVAILABLE = "N/A"


def read_text(path: str | Path) -> str | None:
    """Read the whole file, or return None if it cannot be read."""
    try:
        return Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        logger.debug("Cannot read %s: %s", path, exc)
        return None


def extract(path: str | Path, key: str) -> str:
    """
    Look up ``key`` in a "key: value" or "key=value" file.

    Matching is a case-insensitive substring test, so a key that is part of a
    longer key (``Name`` inside ``ThreadsName``) matches that line too. The
    first matching line with a delimiter wins; the value is trimmed and
    stripped of double quotes.

    Returns:
        The value, or NOT_AVAILABLE if the file is unreadable or no line matches.
    """
    content = read_text(path)
    if content is None:
        return NOT_AVAILABLE

    needle = key.lower()
    for line in content.splitlines():
        if needle not in line.lower():
            continue
        delimiter = ":" if ":" in line else "="
        parts = line.split(delimiter)
        if len(parts) > 1:
            return parts[1].strip().replace('"', "")

    return NOT_AVAILABLE


def token_at(text: str | None, index: int = 0) -> str | None:
    """Return the whitespace-delimited token at ``index``, if present."""
    if text is None:
        return None
    tokens = text.split()
    if index < len(tokens):
        return tokens[index]
    return None


def parse_float(token: str | None) -> float:
    """Parse a number, treating absent, malformed or non-finite input as 0."""
    if token is None:
        return 0.0
    try:
        value = float(token)
    except ValueError:
        logger.debug("Malformed number %r", token)
        return 0.0
    if not math.isfinite(value):
        logger.debug("Non-finite number %r", token)
        return 0.0
    return value


def read_temperature(config: SamplerConfig) -> str:
    """Return the first plausible thermal zone reading, e.g. ``"36.5°C"``."""
    for index in range(config.thermal_zones):
        raw = read_text(config.thermal_path(index))
        if raw is None:
            continue
        celsius = parse_float(raw.strip()) / 1000.0
        if celsius > 0.0:
            return f"{celsius:.1f}°C"
    return NOT_AVAILABLE


def read_uptime(config: SamplerConfig) -> float:
    """Seconds since boot, 0 if unavailable."""
    return parse_float(token_at(read_text(config.uptime_path)))


def read_thread_count(config: SamplerConfig) -> str:
    """Runnable/total scheduling entities from loadavg, e.g. ``"2/345"``."""
    token = token_at(read_text(config.loadavg_path), 3)
    return token if token is not None else NOT_AVAILABLE


def read_hostname() -> str:
    try:
        name = socket.gethostname()
    except OSError as exc:
        logger.debug("Cannot resolve host name: %s", exc)
        return NOT_AVAILABLE
    return name or NOT_AVAILABLE


def read_host_info(config: SamplerConfig) -> HostInfo:
    """Collect the static host identity shown alongside every snapshot."""
    return HostInfo(
        hostname=read_hostname(),
        os_name=extract(config.os_release_path, "PRETTY_NAME"),
        cpu_model=extract(config.cpuinfo_path, "model name"),
    )

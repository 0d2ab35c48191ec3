"""System-wide figures: CPU count, memory and uptime."""

from __future__ import annotations

import os
import sys
import time
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

_MEMINFO = Path("/proc/meminfo")
_UPTIME = Path("/proc/uptime")


@dataclass
class SystemInfo:
    """A snapshot of system-wide resource figures."""

    num_cpus: int = 0
    total_memory: int = 0
    free_memory: int = 0
    uptime: int = 0
    boot_time: datetime = field(default_factory=lambda: datetime.fromtimestamp(0))


def _read_meminfo(path: Path = _MEMINFO) -> tuple[int, int]:
    """Return (total, free) memory in KB from a meminfo file."""
    values: dict[str, int] = {}
    with open(path, encoding="ascii", errors="replace") as meminfo:
        for line in meminfo:
            name, _, rest = line.partition(":")
            parts = rest.split()
            if parts and parts[0].isdigit():
                values[name.strip()] = int(parts[0])
    try:
        return values["MemTotal"], values["MemFree"]
    except KeyError as exc:
        raise ValueError(f"{path} lacks {exc.args[0]}") from None


def _read_uptime(path: Path = _UPTIME) -> int:
    """Return whole seconds of uptime from an uptime file."""
    with open(path, encoding="ascii") as uptime_file:
        return int(float(uptime_file.read().split()[0]))


def get_num_cpus() -> int:
    """Return the number of online CPUs."""
    try:
        count = os.sysconf("SC_NPROCESSORS_ONLN")
    except (AttributeError, ValueError, OSError):
        count = -1
    if count > 0:
        return count
    return os.cpu_count() or 1


def get_uptime() -> int:
    """Return system uptime in seconds, or -1 if it cannot be determined."""
    if sys.platform.startswith("linux"):
        try:
            return _read_uptime()
        except (OSError, ValueError, IndexError):
            pass
    print("Failed to get uptime information.", file=sys.stderr)
    return -1


def get_system_info() -> SystemInfo:
    """Collect CPU count, memory totals, uptime and boot time."""
    info = SystemInfo(num_cpus=get_num_cpus())
    if sys.platform.startswith("linux"):
        try:
            info.total_memory, info.free_memory = _read_meminfo()
            info.uptime = _read_uptime()
        except (OSError, ValueError, IndexError):
            print("Failed to get system information.", file=sys.stderr)
            return info
        info.boot_time = datetime.fromtimestamp(int(time.time()) - info.uptime)
        return info

    try:
        page_size = os.sysconf("SC_PAGE_SIZE")
        info.total_memory = page_size * os.sysconf("SC_PHYS_PAGES") // 1024
    except (AttributeError, ValueError, OSError):
        print("Failed to get memory information.", file=sys.stderr)
    return info
"""Read process information from a procfs-style directory tree."""

from __future__ import annotations

import mmap
import sys
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

_DEFAULT_PROC = Path("/proc")


@dataclass
class ProcessInfo:
    """A snapshot of one process as read from ``/proc/<pid>``."""

    pid: int
    ppid: int = 0
    command: str = ""
    full_command: str = ""
    cpu_usage: float = 0.0
    memory_usage: int = 0
    state: str = ""
    priority: int = 0
    nice: int = 0
    start_time: int = 0
    utime: int = 0
    stime: int = 0
    last_update: float = field(default_factory=time.monotonic)


def _proc_root(proc_root: str | Path | None) -> Path | None:
    """Resolve the proc directory, or None when no procfs is available."""
    if proc_root is not None:
        return Path(proc_root)
    if sys.platform.startswith("linux"):
        return _DEFAULT_PROC
    return None


def _split_stat(line: str) -> tuple[list[str], str]:
    """Split a stat line into fields, keeping a command with spaces intact."""
    start = line.find("(")
    end = line.rfind(")")
    if start != -1 and end != -1 and end > start:
        command = line[start + 1 : end]
        tokens = line[:start].split() + [command] + line[end + 1 :].split()
        return tokens, command
    tokens = line.split()
    command = tokens[1] if len(tokens) > 1 else ""
    if command.startswith("("):
        command = command[1:]
    if command.endswith(")"):
        command = command[:-1]
    return tokens, command


def _apply_stat(info: ProcessInfo, line: str) -> None:
    tokens, command = _split_stat(line)
    if len(tokens) <= 23:
        return
    info.ppid = int(tokens[3])
    info.command = command
    info.state = tokens[2]
    info.priority = int(tokens[17])
    info.nice = int(tokens[18])
    info.utime = int(tokens[13])
    info.stime = int(tokens[14])
    # Cumulative ticks scaled down; a true percentage would need two samples.
    info.cpu_usage = (info.utime + info.stime) / 100.0
    info.memory_usage = int(tokens[23]) * mmap.PAGESIZE // 1024
    info.start_time = int(tokens[21])


def read_process_info(pid: int, proc_root: str | Path | None = None) -> ProcessInfo:
    """Read what ``<proc_root>/<pid>/stat`` and ``cmdline`` say about a process.

    Missing files leave the corresponding fields at their defaults; a stat
    file with non-numeric fields raises ValueError.
    """
    info = ProcessInfo(pid=pid)
    root = _proc_root(proc_root)
    if root is None:
        info.command = "unknown"
        info.full_command = "unknown"
        info.state = "unknown"
        print(
            "Process information reading is only supported on Linux systems.",
            file=sys.stderr,
        )
        return info

    proc_dir = root / str(pid)
    try:
        with open(proc_dir / "stat", encoding="utf-8", errors="replace") as stat_file:
            line = stat_file.readline().rstrip("\n")
    except OSError:
        pass
    else:
        _apply_stat(info, line)

    try:
        raw = (proc_dir / "cmdline").read_bytes()
    except OSError:
        pass
    else:
        cmdline = raw.decode("utf-8", errors="replace").replace("\0", " ")
        if cmdline.endswith(" "):
            cmdline = cmdline[:-1]
        info.full_command = cmdline

    if not info.full_command:
        info.full_command = info.command
    return info


def get_process_list(proc_root: str | Path | None = None) -> list[int]:
    """Return the PIDs of all processes found under the proc directory."""
    root = _proc_root(proc_root)
    if root is None:
        print("Process listing is only supported on Linux systems.", file=sys.stderr)
        return []
    try:
        names = [entry.name for entry in root.iterdir()]
    except OSError:
        print(f"Failed to open {root} directory.", file=sys.stderr)
        return []
    return sorted(int(name) for name in names if name.isdigit() and int(name) > 0)


def filter_by_command(
    pids: Iterable[int], command: str, proc_root: str | Path | None = None
) -> list[int]:
    """Keep the PIDs whose command name or command line contains ``command``."""
    matches = []
    for pid in pids:
        try:
            info = read_process_info(pid, proc_root)
        except (OSError, ValueError):
            continue
        if command in info.command or command in info.full_command:
            matches.append(pid)
    return matches
"""A small ``ps``/``top`` look-alike built on the process and system readers."""

from __future__ import annotations

import getopt
import re
import sys
import time
from pathlib import Path
from typing import TextIO

from sysplay.process_reader import (
    ProcessInfo,
    filter_by_command,
    get_process_list,
    read_process_info,
)
from sysplay.system_info import SystemInfo, get_system_info

_CLEAR_SCREEN = "\033[2J\033[1;1H"
_TOP_LIMIT = 20
_SHORT_OPTIONS = "afp:c:tn:h"
_LONG_OPTIONS = ["all", "full", "pid=", "command=", "top", "interval=", "help"]
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1


def _out(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def _help_text(prog: str) -> str:
    return (
        f"Usage: {prog} [OPTIONS]\n"
        "Display information about running processes.\n"
        "\n"
        "Options:\n"
        "  -a, --all              Show all processes\n"
        "  -f, --full             Show full format listing\n"
        "  -p, --pid PID          Show only the process with the specified PID\n"
        "  -c, --command CMD      Show only processes with the specified command name\n"
        "  -t, --top              Continuously monitor processes (top-like view)\n"
        "  -n, --interval SEC     Set the refresh interval for top mode "
        "(default: 1.0 seconds)\n"
        "  -h, --help             Show this help message"
    )


def format_header(full_format: bool) -> str:
    """Return the column header line for a process listing."""
    if full_format:
        return (
            f"{'PID':<8}{'PPID':<8}{'CPU%':<10}{'MEM(KB)':<10}"
            f"{'PRI':<8}{'NI':<8}{'STATE':<10}COMMAND"
        )
    return f"{'PID':<8}{'CPU%':<10}{'MEM(KB)':<10}COMMAND"


def format_process(info: ProcessInfo, full_format: bool) -> str:
    """Return one listing line for ``info``, aligned with :func:`format_header`."""
    cpu = f"{info.cpu_usage:.2f}"
    if full_format:
        return (
            f"{info.pid:<8}{info.ppid:<8}{cpu:<10}{info.memory_usage:<10}"
            f"{info.priority:<8}{info.nice:<8}{info.state:<10}{info.full_command}"
        )
    return f"{info.pid:<8}{cpu:<10}{info.memory_usage:<10}{info.command}"


def format_system_info(sys_info: SystemInfo) -> str:
    """Return the system summary block shown above the top-like view."""
    lines = [
        "System Info:",
        f"  CPUs: {sys_info.num_cpus}",
        f"  Total Memory: {sys_info.total_memory} KB",
        f"  Free Memory: {sys_info.free_memory} KB",
        f"  Uptime: {sys_info.uptime} seconds",
        f"  Boot Time: {sys_info.boot_time.strftime('%Y-%m-%d %H:%M:%S')}",
    ]
    return "\n".join(lines) + "\n"


def get_pids(
    show_all: bool, specific_pid: int | None, command_filter: str | None
) -> list[int]:
    """Choose the PIDs to show: one PID, those matching a command, or all.

    ``show_all`` is accepted for interface compatibility; every process is
    listed either way, as there is no per-user filtering.
    """
    if specific_pid is not None and specific_pid > 0:
        return [specific_pid]
    if command_filter:
        return filter_by_command(get_process_list(), command_filter)
    return get_process_list()


def _read_all(pids: list[int]) -> list[ProcessInfo]:
    infos = []
    for pid in pids:
        try:
            infos.append(read_process_info(pid))
        except (OSError, ValueError):
            continue
    return infos


def display_processes(
    show_all: bool,
    full_format: bool,
    specific_pid: int | None,
    command_filter: str | None,
    stream: TextIO | None = None,
) -> None:
    """Print one snapshot of the selected processes, ordered by PID."""
    out = _out(stream)
    pids = sorted(get_pids(show_all, specific_pid, command_filter))
    print(format_header(full_format), file=out)
    for info in _read_all(pids):
        print(format_process(info, full_format), file=out)


def monitor_processes(
    show_all: bool, full_format: bool, interval: float, stream: TextIO | None = None
) -> None:
    """Redraw the busiest processes every ``interval`` seconds, forever."""
    out = _out(stream)
    while True:
        out.write(_CLEAR_SCREEN)
        print(format_system_info(get_system_info()), file=out)
        processes = _read_all(sorted(get_pids(show_all, None, None)))
        processes.sort(key=lambda info: info.cpu_usage, reverse=True)
        print(format_header(full_format), file=out)
        for info in processes[:_TOP_LIMIT]:
            print(format_process(info, full_format), file=out)
        out.flush()
        time.sleep(interval)


def _parse_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(text)
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(text)
    return value


def _parse_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(text)
    return float(match.group(1))


def main(argv: list[str] | None = None) -> int:
    """Run the process viewer; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    prog = Path(sys.argv[0]).name or "ps"

    show_all = False
    full_format = False
    top_mode = False
    interval = 1.0
    specific_pid: int | None = None
    command_filter = ""

    try:
        options, _ = getopt.gnu_getopt(args, _SHORT_OPTIONS, _LONG_OPTIONS)
    except getopt.GetoptError:
        print("Unknown option. Use -h for help.", file=sys.stderr)
        return 1

    for option, value in options:
        if option in ("-a", "--all"):
            show_all = True
        elif option in ("-f", "--full"):
            full_format = True
        elif option in ("-p", "--pid"):
            try:
                specific_pid = _parse_int(value)
            except ValueError:
                print("Error: Invalid PID specified.", file=sys.stderr)
                return 1
            if specific_pid <= 0:
                print("Error: PID must be a positive integer.", file=sys.stderr)
                return 1
        elif option in ("-c", "--command"):
            command_filter = value
        elif option in ("-t", "--top"):
            top_mode = True
        elif option in ("-n", "--interval"):
            try:
                interval = _parse_float(value)
            except ValueError:
                print("Error: Invalid interval specified.", file=sys.stderr)
                return 1
            if interval <= 0:
                print("Error: Interval must be a positive number.", file=sys.stderr)
                return 1
        elif option in ("-h", "--help"):
            print(_help_text(prog))
            return 0

    if specific_pid is not None and command_filter:
        print("Error: Cannot specify both -p and -c options.", file=sys.stderr)
        return 1
    if top_mode and (specific_pid is not None or command_filter):
        print("Error: Cannot use -t option with -p or -c options.", file=sys.stderr)
        return 1

    try:
        if top_mode:
            monitor_processes(show_all, full_format, interval)
        else:
            display_processes(show_all, full_format, specific_pid, command_filter)
    except KeyboardInterrupt:
        return 130
    except Exception as exc:  # noqa: BLE001 - top-level report
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
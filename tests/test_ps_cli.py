import io
import os
from datetime import datetime
from unittest import mock

import pytest

from sysplay.process_reader import ProcessInfo
from sysplay.ps_cli import (
    display_processes,
    format_header,
    format_process,
    format_system_info,
    get_pids,
    main,
    monitor_processes,
)
from sysplay.system_info import SystemInfo


class _Stop(Exception):
    pass


def _info():
    return ProcessInfo(
        pid=42,
        ppid=1,
        command="bash",
        full_command="bash -l",
        cpu_usage=12.25,
        memory_usage=2048,
        state="S",
        priority=20,
        nice=0,
    )


def test_short_header_layout():
    assert format_header(False) == "PID     CPU%      MEM(KB)   COMMAND"


def test_full_header_column_order():
    names = format_header(True).split()
    assert names == ["PID", "PPID", "CPU%", "MEM(KB)", "PRI", "NI", "STATE", "COMMAND"]


def test_short_process_line_fields():
    assert format_process(_info(), False).split() == ["42", "12.25", "2048", "bash"]


def test_full_process_line_uses_full_command():
    line = format_process(_info(), True)
    assert line.split() == ["42", "1", "12.25", "2048", "20", "0", "S", "bash", "-l"]
    assert line.endswith("bash -l")


@pytest.mark.parametrize("full_format", [False, True])
def test_rows_align_with_header(full_format):
    header = format_header(full_format)
    row = format_process(_info(), full_format)
    assert header.index("CPU%") == row.index("12.25")
    assert header.index("MEM(KB)") == row.index("2048")
    assert header.index("COMMAND") == row.index("bash")


def test_wide_values_are_not_truncated():
    info = ProcessInfo(pid=123456789, command="x")
    assert format_process(info, False).startswith("123456789")


def test_system_info_block():
    sys_info = SystemInfo(
        num_cpus=4,
        total_memory=1000,
        free_memory=250,
        uptime=77,
        boot_time=datetime(2020, 1, 2, 3, 4, 5),
    )
    lines = format_system_info(sys_info).splitlines()
    assert lines[0] == "System Info:"
    assert "  CPUs: 4" in lines
    assert "  Total Memory: 1000 KB" in lines
    assert "  Free Memory: 250 KB" in lines
    assert "  Uptime: 77 seconds" in lines
    assert "  Boot Time: 2020-01-02 03:04:05" in lines


def test_get_pids_specific_pid():
    assert get_pids(False, 7, "") == [7]


def test_get_pids_unmatched_command_is_empty():
    assert get_pids(True, None, "zzq-no-such-command-8472") == []


def test_display_own_process():
    stream = io.StringIO()
    display_processes(True, False, os.getpid(), "", stream)
    lines = stream.getvalue().splitlines()
    assert lines[0] == format_header(False)
    assert lines[1].split()[0] == str(os.getpid())


def test_monitor_draws_one_frame_sorted_by_cpu():
    stream = io.StringIO()
    with mock.patch("time.sleep", side_effect=_Stop) as sleep:
        with pytest.raises(_Stop):
            monitor_processes(True, False, 0.5, stream)
    sleep.assert_called_once_with(0.5)
    text = stream.getvalue()
    assert text.startswith("\033[2J\033[1;1H")
    assert "System Info:" in text
    lines = text.splitlines()
    header_index = lines.index(format_header(False))
    rows = [line for line in lines[header_index + 1 :] if line]
    assert len(rows) <= 20
    cpus = [float(row.split()[1]) for row in rows]
    assert cpus == sorted(cpus, reverse=True)


def test_main_help(capsys):
    assert main(["-h"]) == 0
    out = capsys.readouterr().out
    assert "Usage:" in out
    assert "--interval SEC" in out


def test_main_rejects_non_positive_pid(capsys):
    assert main(["-p", "0"]) == 1
    assert "PID must be a positive integer" in capsys.readouterr().err


def test_main_rejects_invalid_pid(capsys):
    assert main(["--pid", "abc"]) == 1
    assert "Invalid PID specified" in capsys.readouterr().err


def test_main_rejects_non_positive_interval(capsys):
    assert main(["-n", "-1"]) == 1
    assert "Interval must be a positive number" in capsys.readouterr().err


def test_main_rejects_invalid_interval(capsys):
    assert main(["-n", "soon"]) == 1
    assert "Invalid interval specified" in capsys.readouterr().err


def test_main_rejects_pid_with_command(capsys):
    assert main(["-p", "5", "-c", "bash"]) == 1
    assert "Cannot specify both -p and -c" in capsys.readouterr().err


def test_main_rejects_top_with_pid(capsys):
    assert main(["-t", "-p", "5"]) == 1
    assert "Cannot use -t option with -p or -c" in capsys.readouterr().err


def test_main_unknown_option(capsys):
    assert main(["--bogus"]) == 1
    assert "Unknown option" in capsys.readouterr().err


def test_main_lists_own_process(capsys):
    assert main(["-f", "-p", str(os.getpid())]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == format_header(True)
    assert lines[1].split()[0] == str(os.getpid())


def test_main_top_mode_stops_on_interrupt(capsys):
    with mock.patch("time.sleep", side_effect=KeyboardInterrupt) as sleep:
        assert main(["-t", "-n", "2.5"]) == 130
    sleep.assert_called_once_with(2.5)
    assert "System Info:" in capsys.readouterr().out
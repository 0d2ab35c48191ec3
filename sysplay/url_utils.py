"""Helpers for turning URLs into local file paths."""

from __future__ import annotations

import sys
from pathlib import Path

DEFAULT_FILE_NAME = "index.html"


def file_name_from_url(url: str) -> str:
    """Return the last path component of ``url``, or ``index.html`` if there is none."""
    last_slash = url.rfind("/")
    if last_slash == -1:
        return DEFAULT_FILE_NAME
    filename = url[last_slash + 1 :]
    if not filename or url.endswith("/"):
        return DEFAULT_FILE_NAME

    protocol_end = url.find("://")
    if protocol_end != -1:
        host_start = protocol_end + 3
        host_end = url.find("/", host_start)
        if host_end == -1:
            host_end = len(url)
        if filename == url[host_start:host_end]:
            return DEFAULT_FILE_NAME
    return filename


def create_directories(filepath: str | Path) -> bool:
    """Make sure every parent directory of ``filepath`` exists.

    Returns False, after reporting the problem, if they cannot be created.
    """
    try:
        Path(filepath).parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        print(f"Filesystem error: {exc}", file=sys.stderr)
        return False
    return True
"""Command-line front end for downloading several URLs concurrently."""

from __future__ import annotations

import getopt
import re
import sys
from pathlib import Path

from sysplay.download_manager import DownloadManager
from sysplay.url_utils import file_name_from_url

_SHORT_OPTIONS = "j:o:rl:h"
_LONG_OPTIONS = ["jobs=", "output=", "resume", "limit-rate=", "help"]
_UNSIGNED_PREFIX = re.compile(r"\s*\+?(\d+)")
_SIGNED_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _help_text(prog: str) -> str:
    return (
        f"Usage: {prog} [OPTIONS] <URL1> <URL2> ...\n"
        "Download files from URLs concurrently.\n"
        "\n"
        "Options:\n"
        "  -j, --jobs N       Number of concurrent downloads (default: 4)\n"
        "  -o, --output DIR   Output directory for downloaded files "
        "(default: current directory)\n"
        "  -r, --resume       Resume partial downloads (default: false)\n"
        "  -l, --limit-rate   Limit download speed in bytes per second "
        "(default: no limit)\n"
        "  -h, --help         Show this help message\n"
    )


def _parse_prefix(pattern: re.Pattern[str], text: str) -> int:
    match = pattern.match(text)
    if match is None:
        raise ValueError(text)
    return int(match.group(1))


def main(argv: list[str] | None = None) -> int:
    """Download every URL given on the command line; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    prog = Path(sys.argv[0]).name or "downloader"

    jobs = 4
    output_dir = Path(".")
    resume = False
    speed_limit = 0

    try:
        options, urls = getopt.gnu_getopt(args, _SHORT_OPTIONS, _LONG_OPTIONS)
    except getopt.GetoptError:
        print("Unknown option. Use -h for help.", file=sys.stderr)
        return 1

    for option, value in options:
        if option in ("-j", "--jobs"):
            try:
                jobs = _parse_prefix(_UNSIGNED_PREFIX, value)
            except ValueError:
                print("Error: Invalid number of jobs specified.", file=sys.stderr)
                return 1
            if jobs == 0:
                print("Error: Number of jobs must be greater than 0.", file=sys.stderr)
                return 1
        elif option in ("-o", "--output"):
            output_dir = Path(value)
            if not output_dir.exists():
                print(
                    f"Error: Output directory '{output_dir}' does not exist.",
                    file=sys.stderr,
                )
                return 1
            if not output_dir.is_dir():
                print(f"Error: '{output_dir}' is not a directory.", file=sys.stderr)
                return 1
        elif option in ("-r", "--resume"):
            resume = True
        elif option in ("-l", "--limit-rate"):
            try:
                speed_limit = _parse_prefix(_SIGNED_PREFIX, value)
            except ValueError:
                print("Error: Invalid speed limit specified.", file=sys.stderr)
                return 1
            if speed_limit < 0:
                print("Error: Speed limit must be non-negative.", file=sys.stderr)
                return 1
        elif option in ("-h", "--help"):
            print(_help_text(prog), end="")
            return 0

    if not urls:
        print("Error: No URLs provided.", file=sys.stderr)
        print(_help_text(prog), end="")
        return 1

    manager = DownloadManager(jobs, resume, speed_limit)
    for url in urls:
        filepath = output_dir / file_name_from_url(url)
        if not manager.add_download(url, filepath):
            print(f"Failed to add download for URL: {url}", file=sys.stderr)
    manager.wait()

    print("All downloads completed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
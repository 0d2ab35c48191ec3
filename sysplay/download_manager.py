"""Run several downloads concurrently with a bounded number in flight."""

from __future__ import annotations

import os
import sys
from collections import deque
from concurrent.futures import Future, ThreadPoolExecutor

from sysplay.downloader import Downloader, DownloadError
from sysplay.url_utils import create_directories


def _print_progress(url: str, received: int, total: int) -> None:
    if total > 0:
        percent = int((100.0 * received) / total)
        message = f"Downloading {url}: {percent}% ({received}/{total} bytes)\r"
    else:
        message = f"Downloading {url}: {received} bytes\r"
    sys.stdout.write(message)
    sys.stdout.flush()


def run_download(
    url: str,
    filepath: str | os.PathLike[str],
    resume: bool = False,
    speed_limit: int = 0,
) -> bool:
    """Download one URL to ``filepath`` with progress output; return success."""
    downloader = Downloader(url, filepath, _print_progress, resume, speed_limit)
    try:
        downloader.download()
    except DownloadError as exc:
        print()
        print(str(exc), file=sys.stderr)
        print(f"Download failed for '{url}'", file=sys.stderr)
        return False
    print()
    return True


class DownloadManager:
    """Queues downloads and keeps at most ``max_concurrent_downloads`` running.

    Adding a download blocks until the oldest outstanding one has finished
    whenever the limit is reached. Once :meth:`wait` has been called no more
    downloads are accepted.
    """

    def __init__(
        self,
        max_concurrent_downloads: int = 4,
        resume: bool = False,
        speed_limit: int = 0,
    ) -> None:
        if max_concurrent_downloads <= 0:
            raise ValueError("max_concurrent_downloads must be greater than 0")
        self.max_concurrent_downloads = max_concurrent_downloads
        self.resume = resume
        self.speed_limit = speed_limit
        self._executor = ThreadPoolExecutor(
            max_workers=max_concurrent_downloads, thread_name_prefix="download"
        )
        self._pending: deque[Future[bool]] = deque()
        self._results: list[bool] = []
        self._closed = False

    def __enter__(self) -> DownloadManager:
        return self

    def __exit__(self, *args: object) -> None:
        self.wait()

    def add_download(self, url: str, filepath: str | os.PathLike[str]) -> bool:
        """Schedule a download; return False if it could not be scheduled."""
        if self._closed:
            print(
                "DownloadManager is shutting down, cannot add new downloads.",
                file=sys.stderr,
            )
            return False
        if not create_directories(filepath):
            print(f"Failed to create directories for '{filepath}'", file=sys.stderr)
            return False

        self._pending.append(
            self._executor.submit(
                run_download, url, filepath, self.resume, self.speed_limit
            )
        )
        if len(self._pending) >= self.max_concurrent_downloads:
            self._results.append(self._pending.popleft().result())
        return True

    def wait(self) -> list[bool]:
        """Block until every scheduled download has finished.

        Returns the success of each scheduled download, in the order they
        were added.
        """
        self._closed = True
        while self._pending:
            self._results.append(self._pending.popleft().result())
        self._executor.shutdown(wait=True)
        return list(self._results)
"""Download a single URL to a local file over HTTP."""

from __future__ import annotations

import os
import sys
import time
from pathlib import Path
from typing import BinaryIO, Callable, Optional

import requests

ProgressCallback = Callable[[str, int, int], None]

_CHUNK_SIZE = 16384


class DownloadError(Exception):
    """Raised when a file cannot be downloaded."""


class Downloader:
    """Fetches one URL into one file, optionally resuming and rate-limited.

    The progress callback receives the URL, the bytes received so far in this
    transfer and the size of the transfer, or -1 when the size is unknown.
    """

    def __init__(
        self,
        url: str,
        filepath: str | os.PathLike[str],
        progress_callback: Optional[ProgressCallback] = None,
        resume: bool = False,
        speed_limit: int = 0,
    ) -> None:
        self.url = url
        self.filepath = Path(filepath)
        self.progress_callback = progress_callback
        self.resume = resume
        self.speed_limit = speed_limit

    def download(self) -> Path:
        """Perform the transfer and return the path written.

        Raises DownloadError on any failure. Unless resuming, a partially
        written file is removed.
        """
        append = self.resume and self.filepath.exists()
        try:
            file = open(self.filepath, "ab" if append else "wb")
        except OSError as exc:
            raise DownloadError(
                f"Failed to open file '{self.filepath}' for writing: {exc.strerror}"
            ) from exc

        try:
            with file:
                resume_from = file.seek(0, os.SEEK_END) if self.resume else 0
                self._transfer(file, resume_from)
        except DownloadError:
            self._discard_partial()
            raise

        print(f"Downloaded '{self.url}' to '{self.filepath}'")
        return self.filepath

    def _chunk_size(self) -> int:
        if self.speed_limit > 0:
            return max(1, min(_CHUNK_SIZE, self.speed_limit))
        return _CHUNK_SIZE

    def _report(self, received: int, total: int) -> None:
        if self.progress_callback is not None:
            self.progress_callback(self.url, received, total)

    def _throttle(self, received: int, started: float) -> None:
        if self.speed_limit <= 0:
            return
        ahead = received / self.speed_limit - (time.monotonic() - started)
        if ahead > 0:
            time.sleep(ahead)

    def _transfer(self, file: BinaryIO, resume_from: int) -> None:
        headers = {"Range": f"bytes={resume_from}-"} if resume_from > 0 else {}
        try:
            with requests.get(
                self.url, headers=headers, stream=True, allow_redirects=True
            ) as response:
                if response.status_code >= 400:
                    raise DownloadError(
                        f"HTTP Error {response.status_code} for '{self.url}'"
                    )
                if resume_from > 0 and response.status_code != 206:
                    raise DownloadError(
                        f"Server does not support byte ranges, cannot resume '{self.url}'"
                    )
                length = response.headers.get("Content-Length", "")
                total = int(length) if length.isdigit() else -1
                self._report(0, total)

                received = 0
                started = time.monotonic()
                for chunk in response.iter_content(chunk_size=self._chunk_size()):
                    if not chunk:
                        continue
                    try:
                        file.write(chunk)
                    except OSError as exc:
                        raise DownloadError(f"Error writing to file: {exc}") from exc
                    received += len(chunk)
                    self._report(received, total)
                    self._throttle(received, started)
        except requests.RequestException as exc:
            raise DownloadError(f"Download failed for '{self.url}': {exc}") from exc

    def _discard_partial(self) -> None:
        if self.resume:
            return
        try:
            self.filepath.unlink()
        except OSError as exc:
            print(
                f"Warning: Failed to remove incomplete file '{self.filepath}': "
                f"{exc.strerror}",
                file=sys.stderr,
            )
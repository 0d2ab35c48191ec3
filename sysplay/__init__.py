"""Block allocators, a /proc process viewer, a concurrent downloader, HTTP message helpers and a thread pool."""

__version__ = "1.0.0"
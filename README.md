# sysplay

A set of small systems tools in one package:

- **Memory pools** – `FixedBlockAllocator` (`sysplay.fixed_block`) hands out fixed-size blocks from a free list, and `MemoryPool` (`sysplay.memory_pool`) is a variable-size pool that splits free regions on allocation and merges adjacent free regions on release.
- **Process listing** – a `ps`/`top`-like viewer that reads `/proc` (Linux), built on `sysplay.process_reader` and `sysplay.system_info`.
- **Concurrent downloader** – downloads several URLs at once over HTTP, with resume and speed limiting (`sysplay.downloader`, `sysplay.download_manager`).
- **HTTP helpers** – `HttpRequest` parses raw request text, `HttpResponse` builds and serialises responses, and `ThreadPool` runs callables on a fixed set of worker threads.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Commands

### Memory pool demonstration

```
sysplay-pool-demo
```

Exercises the fixed-block allocator and the general pool, printing block offsets and usage figures, then times creating plain `bytearray` buffers against the fixed-block allocator.

### Process viewer

```
sysplay-ps [OPTIONS]
```

| Option | Meaning |
| --- | --- |
| `-a`, `--all` | Show all processes (every process is listed in any case) |
| `-f`, `--full` | Full format listing (PPID, priority, nice, state, full command line) |
| `-p`, `--pid PID` | Show only the given process |
| `-c`, `--command CMD` | Show processes whose command name or command line contains `CMD` |
| `-t`, `--top` | Redraw continuously, showing the 20 processes with the highest CPU figure |
| `-n`, `--interval SEC` | Refresh interval for top mode (default 1.0) |
| `-h`, `--help` | Show help |

`-p` and `-c` cannot be combined, and neither can be used with `-t`. The CPU figure is the process's cumulative user and system ticks divided by 100, not a sampled percentage. Stop top mode with Ctrl-C.

### Downloader

```
sysplay-download [OPTIONS] URL [URL ...]
```

| Option | Meaning |
| --- | --- |
| `-j`, `--jobs N` | Concurrent downloads (default 4) |
| `-o`, `--output DIR` | Existing output directory (default: current directory) |
| `-r`, `--resume` | Continue partial downloads; the server must answer byte-range requests |
| `-l`, `--limit-rate BYTES` | Limit speed in bytes per second (0 means no limit) |
| `-h`, `--help` | Show help |

Each file is named after the last path component of its URL, or `index.html` when the URL has none. Without `--resume`, a file whose download fails is removed.

## Library use

```python
from sysplay.fixed_block import FixedBlockAllocator
from sysplay.memory_pool import MemoryPool

blocks = FixedBlockAllocator(64, 10)
address = blocks.allocate()
blocks.block(address)[:5] = b"hello"
blocks.deallocate(address)

pool = MemoryPool(1024)
first = pool.allocate(100)
pool.deallocate(first, 100)
print(pool.used_size, pool.free_size)
```

```python
from sysplay.http_request import HttpRequest
from sysplay.http_response import HttpResponse
from sysplay.thread_pool import ThreadPool

request = HttpRequest.parse("GET /index.html HTTP/1.1\r\nHost: localhost\r\n\r\n")
print(request.method, request.uri, request.header("host"))

response = HttpResponse(404)
response.set_header("Content-Type", "text/plain")
response.body = "File not found"
print(response.to_bytes())

with ThreadPool(4) as workers:
    future = workers.submit(sum, [1, 2, 3])
    print(future.result())
```

```python
from sysplay.download_manager import DownloadManager

with DownloadManager(max_concurrent_downloads=2) as manager:
    manager.add_download("http://localhost/file.bin", "downloads/file.bin")
```

## What the package does not do

There is no HTTP server in this package: it does not open a listening socket, accept connections, map request paths to files or serve a web root. The HTTP modules only parse requests, build responses and provide a thread pool; wiring them to sockets is left to the caller.
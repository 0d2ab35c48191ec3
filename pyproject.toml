[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sysplay"
version = "1.0.0"
description = "Small systems tools: block allocators, a process lister, a concurrent downloader, HTTP message helpers and a thread pool"
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = ["memory-pool", "allocator", "ps", "procfs", "downloader", "http", "thread-pool"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
sysplay-pool-demo = "sysplay.pool_demo:main"
sysplay-ps = "sysplay.ps_cli:main"
sysplay-download = "sysplay.download_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sysplay"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

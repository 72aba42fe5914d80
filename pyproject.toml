[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dmrgateway"
version = "0.1.0"
description = "Building blocks for a DMR network gateway: frame constants, sync patterns, timers, ring buffers, SHA-256 and UDP sockets"
requires-python = ">=3.10"
dependencies = []
keywords = ["dmr", "ham radio", "amateur radio", "gateway", "digital mobile radio"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Ham Radio",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dmrgateway"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

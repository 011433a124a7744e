[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "basekit"
version = "0.1.0"
description = "Everyday building blocks: a ring-buffer deque, a worker pool, a pacer, a levelled logger and small helpers for lists, conversion, time, WSGI responses and files."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "deque",
    "ring-buffer",
    "worker-pool",
    "concurrency",
    "rate-limit",
    "logging",
    "wsgi",
    "utilities",
]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
basekit-writefile = "basekit.writefile:main"

[tool.hatch.build.targets.wheel]
packages = ["basekit"]

[tool.pytest.ini_options]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "latencylab"
version = "0.1.0"
description = "Limit order book, bounded FIFO queues, a thread-safe linked list and small numeric helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["order book", "matching engine", "fifo", "spsc", "queue", "trading"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
latencylab-list = "latencylab.concurrent_list:main"

[tool.hatch.build.targets.wheel]
packages = ["latencylab"]

[tool.pytest.ini_options]
addopts = "-ra"

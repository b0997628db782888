[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ycq"
version = "0.1.0"
description = "Building blocks for CQRS and event-sourced applications: aggregates, messages, dispatchers, event buses and repositories."
requires-python = ">=3.10"
dependencies = []
keywords = ["cqrs", "event-sourcing", "ddd", "aggregate", "event-bus", "command-dispatcher"]
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ycq"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

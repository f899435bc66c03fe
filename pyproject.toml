[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "levelwriters"
version = "0.1.0"
description = "Log levels, samplers and level-aware writers for structured logging"
requires-python = ">=3.10"
dependencies = []
keywords = ["logging", "syslog", "sampling", "levels", "writer"]
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
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["levelwriters"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "habitrack"
version = "0.1.0"
description = "Habit tracking building blocks: daily streaks, day counting in UTC, a JSON file store and a small command-line tool."
requires-python = ">=3.10"
dependencies = []
keywords = ["habit", "tracker", "streak", "productivity", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
habit = "habitrack.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["habitrack"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

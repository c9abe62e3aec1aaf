[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sipetuk"
version = "0.1.0"
description = "An interactive command-line manager for course assignments, deadlines and priorities"
requires-python = ">=3.10"
keywords = ["tasks", "assignments", "deadlines", "todo", "students", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
    "Topic :: Education",
    "Typing :: Typed",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sipetuk = "sipetuk.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sipetuk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true

[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "osprac"
version = "0.1.0"
description = "Operating-systems exercises: CPU scheduling, memory allocation, processes, threads, file I/O and system information"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating systems",
    "scheduling",
    "fcfs",
    "sjf",
    "priority",
    "memory allocation",
    "fork",
    "threads",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
osprac-schedule = "osprac.scheduling:main"
osprac-memory = "osprac.memory:main"
osprac-process = "osprac.processes:main"
osprac-fileio = "osprac.fileio:main"
osprac-sysinfo = "osprac.sysinfo:main"

[tool.setuptools]
packages = ["osprac"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

"""Kernel, CPU and memory information gathered from system tools."""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
from pathlib import Path
from typing import Sequence

_KERNEL_HEADER = "-------------system kernel --------------"
_CPU_HEADER = "------------cpu information -------------"
_MEMORY_HEADER = "------------Memory information --------------"


def kernel_release() -> str:
    """Return the running kernel's release string."""
    return os.uname().release


def _head(command: Sequence[str], lines: int, cache_path: str | os.PathLike[str] | None) -> str:
    if lines < 0:
        raise ValueError("lines must not be negative")
    completed = subprocess.run(
        list(command), capture_output=True, text=True, check=True
    )
    text = "".join(completed.stdout.splitlines(keepends=True)[:lines])
    if cache_path is not None:
        Path(cache_path).write_text(text)
    return text


def cpu_info(lines: int = 8, cache_path: str | os.PathLike[str] | None = None) -> str:
    """Return the first ``lines`` lines of ``lscpu``, saving them to ``cache_path`` if given."""
    return _head(["lscpu"], lines, cache_path)


def memory_info(lines: int = 4, cache_path: str | os.PathLike[str] | None = None) -> str:
    """Return the first ``lines`` lines of ``free -h``, saving them to ``cache_path`` if given."""
    return _head(["free", "-h"], lines, cache_path)


def main(argv: Sequence[str] | None = None) -> int:
    """Print system (kernel and CPU) or memory information."""
    parser = argparse.ArgumentParser(description="Show system information.")
    parser.add_argument(
        "report", choices=["system", "memory"], nargs="?", default="system"
    )
    args = parser.parse_args(argv)

    try:
        if args.report == "system":
            print(_KERNEL_HEADER)
            print(kernel_release())
            print(_CPU_HEADER)
            print(cpu_info(cache_path="cpuinfo.txt"), end="")
        else:
            print(_MEMORY_HEADER)
            print(memory_info(cache_path="sysinfo.txt"), end="")
    except (OSError, subprocess.CalledProcessError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0
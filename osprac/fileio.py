"""Low-level file reading and copying of fixed-size prefixes."""

from __future__ import annotations

import argparse
import os
import sys
from typing import BinaryIO, Sequence


def echo_bytes(source: BinaryIO, dest: BinaryIO, count: int = 10) -> int:
    """Copy at most ``count`` bytes from ``source`` to ``dest``.

    Returns the number of bytes written.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    data = source.read(count)
    dest.write(data)
    dest.flush()
    return len(data)


def read_prefix(path: str | os.PathLike[str], count: int = 15) -> bytes:
    """Return at most the first ``count`` bytes of the file at ``path``."""
    if count < 0:
        raise ValueError("count must not be negative")
    with open(path, "rb") as handle:
        return handle.read(count)


def copy_prefix(
    src_path: str | os.PathLike[str],
    dst_path: str | os.PathLike[str],
    count: int = 15,
    mode: int = 0o642,
) -> int:
    """Write the first ``count`` bytes of ``src_path`` over the start of ``dst_path``.

    The destination is created with ``mode`` (subject to the umask) if it does
    not exist; an existing file is overwritten in place, not truncated.
    Returns the number of bytes written.
    """
    data = read_prefix(src_path, count)
    fd = os.open(dst_path, os.O_CREAT | os.O_WRONLY, mode)
    with os.fdopen(fd, "wb") as handle:
        handle.write(data)
    return len(data)


def _write_stdout(data: bytes) -> None:
    sys.stdout.flush()
    sys.stdout.buffer.write(data)
    sys.stdout.buffer.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Echo stdin, show a file's prefix or copy it to another file."""
    parser = argparse.ArgumentParser(description="File prefix utilities.")
    commands = parser.add_subparsers(dest="command", required=True)
    echo_parser = commands.add_parser("echo", help="copy bytes from stdin to stdout")
    echo_parser.add_argument("--count", type=int, default=10)
    show_parser = commands.add_parser("show", help="print a file's first bytes")
    show_parser.add_argument("path", nargs="?", default="filea.txt")
    show_parser.add_argument("--count", type=int, default=15)
    copy_parser = commands.add_parser("copy", help="copy a file's first bytes")
    copy_parser.add_argument("source", nargs="?", default="filea.txt")
    copy_parser.add_argument("dest", nargs="?", default="filea")
    copy_parser.add_argument("--count", type=int, default=15)
    args = parser.parse_args(argv)

    try:
        if args.command == "echo":
            sys.stdout.flush()
            echo_bytes(sys.stdin.buffer, sys.stdout.buffer, args.count)
        elif args.command == "show":
            _write_stdout(read_prefix(args.path, args.count))
        else:
            copy_prefix(args.source, args.dest, args.count)
    except (OSError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0
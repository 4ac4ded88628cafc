"""Process and thread demonstrations: fork, exec, copy-on-fork and worker threads."""

from __future__ import annotations

import argparse
import os
import sys
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, Iterator, Sequence, TextIO


def _write_all(fd: int, text: str) -> None:
    data = text.encode()
    while data:
        written = os.write(fd, data)
        data = data[written:]


def _fork(child_main: Callable[[int], None]) -> tuple[int, str, int]:
    """Fork; the child runs ``child_main`` with the write end of a pipe.

    Returns the child's pid, everything it wrote to the pipe and its exit code.
    """
    sys.stdout.flush()
    sys.stderr.flush()
    read_fd, write_fd = os.pipe()
    pid = os.fork()
    if pid == 0:
        os.close(read_fd)
        status = 1
        try:
            child_main(write_fd)
            status = 0
        finally:
            os._exit(status)
    os.close(write_fd)
    with os.fdopen(read_fd, "rb") as reader:
        data = reader.read()
    _, wait_status = os.waitpid(pid, 0)
    return pid, data.decode(errors="replace"), os.waitstatus_to_exitcode(wait_status)


def _run_child(task: Callable[[], list[str]]) -> tuple[int, list[str]]:
    """Run ``task`` in a forked child and return its pid and the lines it produced."""

    def child_main(fd: int) -> None:
        _write_all(fd, "".join(f"{line}\n" for line in task()))
        os.close(fd)

    pid, text, code = _fork(child_main)
    if code != 0:
        raise ChildProcessError(f"child {pid} exited with status {code}")
    return pid, text.splitlines()


def fork_example() -> list[str]:
    """Fork once; the parent waits for the child and both report their pids."""
    child_pid, child_lines = _run_child(
        lambda: [
            "Hello from child!",
            f"I am the child process having PID {os.getpid()}",
            f"My parent PID is {os.getppid()}",
        ]
    )
    return child_lines + [
        "Hello from parent!",
        f"I am the parent process having PID {os.getpid()}",
        f"My child PID is {child_pid}",
    ]


def fork_exec_example(program: str | Sequence[str]) -> list[str]:
    """Fork a child that greets and then replaces itself with ``program``.

    ``program`` is a command name or a full argument list. The child's output,
    including that of the program, is returned before the parent's greeting.
    A program that cannot be started simply produces no output.
    """
    argv = [program] if isinstance(program, str) else list(program)
    if not argv or not argv[0]:
        raise ValueError("no program given")

    def child_main(fd: int) -> None:
        os.dup2(fd, 1)
        if fd != 1:
            os.close(fd)
        _write_all(1, "hello from child!\n")
        try:
            os.execvp(argv[0], argv)
        except OSError:
            return

    _, text, _ = _fork(child_main)
    return text.splitlines() + ["Hello from parent!"]


def fork_tree(levels: int = 3) -> list[str]:
    """Fork ``levels`` times in a row in every process; each process says hello."""
    if levels < 0:
        raise ValueError("levels must not be negative")

    def grow(remaining: int) -> list[str]:
        if remaining == 0:
            return ["hello"]
        _, child_lines = _run_child(lambda: grow(remaining - 1))
        return grow(remaining - 1) + child_lines

    return grow(levels)


def fork_copy_example() -> list[str]:
    """Show that parent and child change separate copies of a variable."""
    x = 1

    def child() -> list[str]:
        value = x + 1
        return [f"child has x={value}"]

    _, child_lines = _run_child(child)
    x -= 1
    return child_lines + [f"parent has x={x}"]


def fork_report() -> list[str]:
    """Fork once; child and parent each greet with their own pid."""
    _, child_lines = _run_child(lambda: [f"hello from child!{os.getpid()}"])
    return child_lines + [f"hello from parent!{os.getpid()}"]


def fork_sleep(seconds: float = 10) -> list[str]:
    """Fork a child that announces itself and sleeps; the parent waits for it."""
    if seconds < 0:
        raise ValueError("seconds must not be negative")

    def child_main(fd: int) -> None:
        _write_all(fd, "child process!!!!\n")
        os.close(fd)
        time.sleep(seconds)

    pid, text, code = _fork(child_main)
    if code != 0:
        raise ChildProcessError(f"child {pid} exited with status {code}")
    return text.splitlines() + ["parent process!!!"]


def fibonacci(limit: int) -> Iterator[int]:
    """Yield the Fibonacci numbers that do not exceed ``limit``."""
    a, b = 0, 1
    while a <= limit:
        yield a
        a, b = b, a + b


def fibonacci_threaded(limit: int) -> list[int]:
    """Compute the Fibonacci series up to ``limit`` in a worker thread."""
    with ThreadPoolExecutor(max_workers=1) as pool:
        return pool.submit(lambda: list(fibonacci(limit))).result()


def threaded_sum(numbers: Iterable[int]) -> int:
    """Sum ``numbers`` in a worker thread."""
    values = list(numbers)
    with ThreadPoolExecutor(max_workers=1) as pool:
        return pool.submit(sum, values).result()


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str]) -> int:
    token = next(tokens, None)
    if token is None:
        raise EOFError("unexpected end of input")
    return int(token)


def _print_lines(lines: Iterable[str]) -> None:
    for line in lines:
        print(line)


def main(argv: Sequence[str] | None = None) -> int:
    """Run one of the process or thread demonstrations."""
    parser = argparse.ArgumentParser(description="Process and thread demonstrations.")
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("fork", help="fork and report pids")
    exec_parser = commands.add_parser("exec", help="fork and exec a program")
    exec_parser.add_argument("program", nargs="+")
    tree_parser = commands.add_parser("tree", help="fork repeatedly")
    tree_parser.add_argument("levels", type=int, nargs="?", default=3)
    commands.add_parser("copy", help="show separate variable copies")
    commands.add_parser("report", help="greet from parent and child")
    sleep_parser = commands.add_parser("sleep", help="child sleeps, parent waits")
    sleep_parser.add_argument("seconds", type=float, nargs="?", default=10)
    commands.add_parser("fibonacci", help="Fibonacci series in a thread (stdin)")
    commands.add_parser("sum", help="sum numbers in a thread (stdin)")
    args = parser.parse_args(argv)

    tokens = _tokens(sys.stdin)
    try:
        if args.command == "fork":
            _print_lines(fork_example())
        elif args.command == "exec":
            _print_lines(fork_exec_example(args.program))
        elif args.command == "tree":
            _print_lines(fork_tree(args.levels))
        elif args.command == "copy":
            _print_lines(fork_copy_example())
        elif args.command == "report":
            _print_lines(fork_report())
        elif args.command == "sleep":
            _print_lines(fork_sleep(args.seconds))
        elif args.command == "fibonacci":
            print("Enter the limit of fibonacci series: ", end="", flush=True)
            series = fibonacci_threaded(_read_int(tokens))
            print("fibonacci series:" + "".join(f"{n} " for n in series))
        else:
            print("Enter the number of elements: ", end="", flush=True)
            count = _read_int(tokens)
            print(f"Enter {count} numbers:")
            numbers = [_read_int(tokens) for _ in range(count)]
            print(f"The sum of the numbers is: {threaded_sum(numbers)}")
    except (OSError, ChildProcessError):
        print("child not created!")
        return 1
    except (EOFError, ValueError) as error:
        print(f"\nerror: {error}", file=sys.stderr)
        return 1
    return 0
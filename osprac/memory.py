"""Contiguous memory allocation with first, best and worst fit."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Iterator, Sequence, TextIO

_MENU = (
    "\nMemory Allocation Strategies:\n"
    "1. First Fit\n2. Best Fit\n3. Worst Fit\n4. Exit\n"
    "Enter choice: "
)
_EXIT_CHOICE = 4


class Strategy(Enum):
    """Allocation strategies, numbered as in the menu."""

    FIRST_FIT = 1
    BEST_FIT = 2
    WORST_FIT = 3


@dataclass
class MemoryBlock:
    """A memory partition and the job placed in it, if any."""

    size: int
    job_id: int | None = None
    job_size: int = 0

    @property
    def occupied(self) -> bool:
        return self.job_id is not None

    @property
    def fragmentation(self) -> int:
        """Unused space inside the block."""
        return self.size - self.job_size

    def _free(self) -> None:
        self.job_id = None
        self.job_size = 0


class MemoryManager:
    """Places processes into fixed memory blocks; job numbers start at 1."""

    def __init__(
        self, block_sizes: Iterable[int] = (), process_sizes: Iterable[int] = ()
    ) -> None:
        self.blocks = [MemoryBlock(size) for size in block_sizes]
        self.processes = list(process_sizes)

    @property
    def total_memory(self) -> int:
        return sum(block.size for block in self.blocks)

    @property
    def total_used(self) -> int:
        return sum(block.job_size for block in self.blocks if block.occupied)

    def reset(self) -> None:
        """Mark every block as free."""
        for block in self.blocks:
            block._free()

    def _place(
        self, choose: Callable[[list[MemoryBlock]], MemoryBlock]
    ) -> None:
        self.reset()
        for job_id, job_size in enumerate(self.processes, 1):
            candidates = [
                block
                for block in self.blocks
                if not block.occupied and block.size >= job_size
            ]
            if candidates:
                block = choose(candidates)
                block.job_id = job_id
                block.job_size = job_size

    def first_fit(self) -> None:
        """Give each process the first free block large enough."""
        self._place(lambda candidates: candidates[0])

    def best_fit(self) -> None:
        """Give each process the smallest free block large enough."""
        self._place(lambda candidates: min(candidates, key=lambda b: b.size))

    def worst_fit(self) -> None:
        """Give each process the largest free block large enough."""
        self._place(lambda candidates: max(candidates, key=lambda b: b.size))

    def allocate(self, strategy: Strategy) -> None:
        """Run the allocation for the given strategy."""
        {
            Strategy.FIRST_FIT: self.first_fit,
            Strategy.BEST_FIT: self.best_fit,
            Strategy.WORST_FIT: self.worst_fit,
        }[Strategy(strategy)]()

    def format_report(self) -> str:
        """Render the block table and memory totals."""
        parts = [
            "\nMemory Block Size\tJob Number\tJob Size\tStatus\t\t"
            "Internal Fragmentation\n"
        ]
        for block in self.blocks:
            if block.occupied:
                parts.append(
                    f"{block.size}\t\t\t{block.job_id}\t\t{block.job_size}\t\t"
                    f"Busy\t\t{block.fragmentation}\n"
                )
            else:
                parts.append(f"{block.size}\t\t\t-\t\t-\t\tFree\t\t{block.size}\n")
        total, used = self.total_memory, self.total_used
        parts.append(f"\nTotal Memory : {total}\n")
        parts.append(f"Total used memory : {used}\n")
        parts.append(f"Tatal Internal fragementation :{total - used}\n")
        return "".join(parts)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str]) -> int:
    token = next(tokens, None)
    if token is None:
        raise EOFError("unexpected end of input")
    return int(token)


def _read_sizes(tokens: Iterator[str], count_prompt: str, sizes_prompt: str) -> list[int]:
    print(count_prompt, end="", flush=True)
    count = _read_int(tokens)
    print(sizes_prompt)
    return [_read_int(tokens) for _ in range(count)]


def _read_manager(tokens: Iterator[str]) -> MemoryManager:
    blocks = _read_sizes(tokens, "Enter number of memory blocks: ", "Enter block sizes:")
    processes = _read_sizes(
        tokens, "Enter number of processes: ", "Enter process sizes:"
    )
    return MemoryManager(blocks, processes)


def main(argv: Sequence[str] | None = None) -> int:
    """Interactive menu reading blocks and processes from stdin."""
    argparse.ArgumentParser(
        description="Memory allocation strategies (interactive, reads stdin)."
    ).parse_args(argv)
    tokens = _tokens(sys.stdin)
    try:
        while True:
            print(_MENU, end="", flush=True)
            choice = next(tokens, None)
            if choice is None:
                return 0
            choice = int(choice)
            if choice == _EXIT_CHOICE:
                return 0
            manager = _read_manager(tokens)
            try:
                manager.allocate(Strategy(choice))
            except ValueError:
                print("Invalid choice!")
            print(manager.format_report(), end="")
    except EOFError:
        return 0
    except ValueError as error:
        print(f"\nerror: {error}", file=sys.stderr)
        return 1
"""CPU scheduling algorithms: FCFS, SJF, priority and preemptive SJF."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, replace
from typing import Callable, Iterable, Iterator, Sequence, TextIO

_TABLE_HEADER = (
    "PID\tArrival Time\tBurst Time\tCompletion Time\tTurnaround Time\tWaiting Time"
)
_PRIORITY_TABLE_HEADER = (
    "PID\tArrival Time\tBurst Time\tPriority\tCompletion Time\t"
    "Turnaround Time\tWaiting Time"
)


@dataclass
class Process:
    """A process with its scheduling inputs and computed timings."""

    pid: int
    arrival_time: int
    burst_time: int
    priority: int = 0
    completion_time: int = 0
    turnaround_time: int = 0
    waiting_time: int = 0


@dataclass(frozen=True)
class GanttSlot:
    """One unit of time on the Gantt chart; ``program`` is None when idle."""

    start: int
    program: int | None
    end: int


@dataclass
class PreemptiveResult:
    """Outcome of preemptive shortest-job-first scheduling."""

    slots: list[GanttSlot]
    turnaround: list[int]
    waiting: list[int]

    @property
    def average_turnaround(self) -> float:
        return sum(self.turnaround) / len(self.turnaround)

    @property
    def average_waiting(self) -> float:
        return sum(self.waiting) / len(self.waiting)


def _completed(process: Process, completion: int) -> Process:
    turnaround = completion - process.arrival_time
    return replace(
        process,
        completion_time=completion,
        turnaround_time=turnaround,
        waiting_time=turnaround - process.burst_time,
    )


def fcfs(processes: Iterable[Process]) -> list[Process]:
    """First come, first served. Returns the processes ordered by arrival."""
    result = []
    now = 0
    for process in sorted(processes, key=lambda p: p.arrival_time):
        now = max(now, process.arrival_time) + process.burst_time
        result.append(_completed(process, now))
    return result


def _non_preemptive(
    processes: Sequence[Process], key: Callable[[Process], int]
) -> list[Process]:
    finished: dict[int, Process] = {}
    now = 0
    while len(finished) < len(processes):
        pending = [
            (index, process)
            for index, process in enumerate(processes)
            if index not in finished
        ]
        ready = [(i, p) for i, p in pending if p.arrival_time <= now]
        if not ready:
            now = min(p.arrival_time for _, p in pending)
            continue
        index, chosen = min(ready, key=lambda item: key(item[1]))
        now += chosen.burst_time
        finished[index] = _completed(chosen, now)
    return [finished[index] for index in range(len(processes))]


def sjf(processes: Iterable[Process]) -> list[Process]:
    """Non-preemptive shortest job first, keeping the input order."""
    return _non_preemptive(list(processes), key=lambda p: p.burst_time)


def priority_schedule(processes: Iterable[Process]) -> list[Process]:
    """Non-preemptive priority scheduling; a lower number runs first.

    The result is ordered by arrival time.
    """
    ordered = sorted(processes, key=lambda p: p.arrival_time)
    return _non_preemptive(ordered, key=lambda p: p.priority)


def average_times(processes: Sequence[Process]) -> tuple[float, float]:
    """Return (average waiting time, average turnaround time)."""
    if not processes:
        raise ValueError("no processes to average")
    count = len(processes)
    waiting = sum(p.waiting_time for p in processes)
    turnaround = sum(p.turnaround_time for p in processes)
    return waiting / count, turnaround / count


def format_table(processes: Iterable[Process], show_priority: bool = False) -> str:
    """Render the per-process timing table."""
    lines = [_PRIORITY_TABLE_HEADER if show_priority else _TABLE_HEADER]
    for p in processes:
        columns = [p.arrival_time, p.burst_time]
        if show_priority:
            columns.append(p.priority)
        columns += [p.completion_time, p.turnaround_time, p.waiting_time]
        lines.append(f"{p.pid}\t" + "\t\t".join(str(c) for c in columns))
    return "\n".join(lines) + "\n"


def format_averages(processes: Sequence[Process]) -> str:
    """Render average waiting and turnaround times with two decimals."""
    waiting, turnaround = average_times(processes)
    return (
        f"Average Waiting Time: {waiting:.2f}\n"
        f"Average Turnaround Time: {turnaround:.2f}\n"
    )


def preemptive_sjf(bursts: Sequence[int], arrivals: Sequence[int]) -> PreemptiveResult:
    """Shortest remaining time first, decided at every time unit.

    Programs are numbered from 1 in the order given.
    """
    bursts = list(bursts)
    arrivals = list(arrivals)
    if len(bursts) != len(arrivals):
        raise ValueError("bursts and arrivals must have the same length")
    if not bursts:
        raise ValueError("no processes to schedule")
    if any(burst <= 0 for burst in bursts):
        raise ValueError("burst times must be positive")

    remaining = list(bursts)
    finish = [0] * len(bursts)
    slots: list[GanttSlot] = []
    left = len(bursts)
    now = min(arrivals)
    while left:
        ready = [
            index
            for index, (arrival, rest) in enumerate(zip(arrivals, remaining))
            if arrival <= now and rest
        ]
        if ready:
            current = min(ready, key=remaining.__getitem__)
            remaining[current] -= 1
            if remaining[current] == 0:
                finish[current] = now + 1
                left -= 1
            slots.append(GanttSlot(now, current + 1, now + 1))
        else:
            slots.append(GanttSlot(now, None, now + 1))
        now += 1

    turnaround = [end - arrival for end, arrival in zip(finish, arrivals)]
    waiting = [turn - burst for turn, burst in zip(turnaround, bursts)]
    return PreemptiveResult(slots, turnaround, waiting)


def format_preemptive(result: PreemptiveResult) -> str:
    """Render the Gantt chart, the final chart and the averages."""
    parts = [
        "****************Gantt chart********************\n",
        "start\tprogram NO. \tEnd\n",
    ]
    for slot in result.slots:
        program = "-" if slot.program is None else slot.program
        parts.append(f"{slot.start}\t {program}\t\t{slot.end}\n")
    parts.append("*************Final chart**************\n")
    parts.append("program NO.\tTurnaround\tWaiting\n")
    for number, (turn, wait) in enumerate(zip(result.turnaround, result.waiting), 1):
        parts.append(f"{number}\t\t{turn}\t\t{wait}\n")
    parts.append(f"\n\nAverage waiting time :{result.average_waiting:g}\n")
    parts.append(f"Average Turnaround time :{result.average_turnaround:g}\n")
    return "".join(parts)


_FCFS_EXAMPLE = [Process(1, 0, 5), Process(2, 1, 3), Process(3, 2, 8), Process(4, 3, 6)]
_SJF_EXAMPLE = [Process(1, 0, 8), Process(2, 1, 4), Process(3, 2, 9), Process(4, 3, 5)]
_PRIORITY_EXAMPLE = [
    Process(1, 0, 5, 2),
    Process(2, 1, 3, 1),
    Process(3, 2, 8, 3),
    Process(4, 3, 6, 2),
]


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _ask_int(tokens: Iterator[str], prompt: str) -> int:
    print(prompt, end="", flush=True)
    token = next(tokens, None)
    if token is None:
        raise EOFError("unexpected end of input")
    return int(token)


def _run_preemptive() -> int:
    tokens = _tokens(sys.stdin)
    try:
        count = _ask_int(tokens, "Enter the Number of process:")
        print("Enter Detail of each program...")
        bursts, arrivals = [], []
        for number in range(1, count + 1):
            bursts.append(_ask_int(tokens, f"Burst time of program{number}:"))
            arrivals.append(_ask_int(tokens, f"Arrival time of program{number}:"))
        result = preemptive_sjf(bursts, arrivals)
    except (EOFError, ValueError) as error:
        print(f"\nerror: {error}", file=sys.stderr)
        return 1
    print(format_preemptive(result), end="")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run one of the schedulers and print its report."""
    parser = argparse.ArgumentParser(description="CPU scheduling demonstrations.")
    parser.add_argument(
        "algorithm",
        choices=["fcfs", "sjf", "priority", "preemptive"],
        help="scheduling algorithm; 'preemptive' reads its processes from stdin",
    )
    args = parser.parse_args(argv)

    if args.algorithm == "fcfs":
        print(format_table(fcfs(_FCFS_EXAMPLE)), end="")
    elif args.algorithm == "sjf":
        scheduled = sjf(_SJF_EXAMPLE)
        print(format_table(scheduled) + format_averages(scheduled), end="")
    elif args.algorithm == "priority":
        scheduled = priority_schedule(_PRIORITY_EXAMPLE)
        print(
            format_table(scheduled, show_priority=True) + format_averages(scheduled),
            end="",
        )
    else:
        return _run_preemptive()
    return 0
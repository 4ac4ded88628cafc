# osprac

Classic operating-systems exercises as a small Python package with
command-line tools:

- **CPU scheduling** (`osprac.scheduling`) – first come first served,
  non-preemptive shortest job first, non-preemptive priority scheduling, and a
  preemptive shortest-remaining-time simulation with a per-tick Gantt chart.
- **Memory allocation** (`osprac.memory`) – first fit, best fit and worst fit
  placement of processes into fixed memory blocks, with an
  internal-fragmentation report.
- **Processes and threads** (`osprac.processes`) – `fork` demonstrations
  (parent and child pids, fork then exec, a fork tree, separate variable
  copies, a sleeping child), a Fibonacci series computed in a worker thread,
  and a sum computed in a worker thread.
- **File I/O** (`osprac.fileio`) – copying a fixed number of bytes from a
  stream or from the start of a file.
- **System information** (`osprac.sysinfo`) – kernel release, the head of
  `lscpu` and the head of `free -h`.

The process demonstrations use `os.fork` and the system information relies on
`os.uname`, `lscpu` and `free`, so these parts need a POSIX system (the last
two tools are usually found on Linux).

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Commands

```
osprac-schedule {fcfs,sjf,priority,preemptive}
osprac-memory
osprac-process {fork,exec,tree,copy,report,sleep,fibonacci,sum} ...
osprac-fileio {echo,show,copy} ...
osprac-sysinfo [{system,memory}]
```

- `osprac-schedule fcfs|sjf|priority` schedules a fixed set of four example
  processes and prints the timing table (plus averages for `sjf` and
  `priority`). `osprac-schedule preemptive` reads the number of processes and
  each one's burst and arrival time from standard input and prints the Gantt
  chart, the per-program turnaround and waiting times, and their averages.
- `osprac-memory` is an interactive menu: choose 1 (first fit), 2 (best fit),
  3 (worst fit) or 4 (exit), then enter the block sizes and process sizes.
- `osprac-process` runs one demonstration: `exec PROGRAM [ARGS...]`,
  `tree [LEVELS]` (default 3), `sleep [SECONDS]` (default 10); `fibonacci`
  and `sum` read their input from standard input.
- `osprac-fileio echo [--count N]` copies up to N bytes (default 10) from
  standard input to standard output; `show [PATH] [--count N]` prints the
  first N bytes (default 15) of PATH (default `filea.txt`);
  `copy [SOURCE] [DEST] [--count N]` writes the first N bytes of SOURCE
  (default `filea.txt`) over the start of DEST (default `filea`), creating it
  with mode `0o642` if needed.
- `osprac-sysinfo system` (the default) prints the kernel release and the
  first 8 lines of `lscpu`, saving them to `cpuinfo.txt`;
  `osprac-sysinfo memory` prints the first 4 lines of `free -h`, saving them
  to `sysinfo.txt`.

Run any command with `--help` to see its options.

## Library use

```python
from osprac.scheduling import Process, fcfs, format_table, format_averages

jobs = [Process(1, 0, 5), Process(2, 1, 3), Process(3, 2, 8), Process(4, 3, 6)]
done = fcfs(jobs)
print(format_table(done, show_priority=False), end="")
print(format_averages(done), end="")
```

`sjf` and `priority_schedule` return new `Process` objects with their
completion, turnaround and waiting times filled in; `average_times` returns
the pair (average waiting, average turnaround). For the preemptive
simulation:

```python
from osprac.scheduling import preemptive_sjf, format_preemptive

result = preemptive_sjf(bursts=[6, 8, 7, 3], arrivals=[0, 0, 0, 0])
print(result.turnaround, result.waiting, result.average_waiting)
print(format_preemptive(result), end="")
```

Memory allocation:

```python
from osprac.memory import MemoryManager, Strategy

manager = MemoryManager([100, 500, 200, 300, 600], [212, 417, 112, 426])
manager.allocate(Strategy.BEST_FIT)
print(manager.format_report(), end="")
```

Threads:

```python
from osprac.processes import fibonacci, fibonacci_threaded, threaded_sum

list(fibonacci(10))        # [0, 1, 1, 2, 3, 5, 8]
fibonacci_threaded(10)     # [0, 1, 1, 2, 3, 5, 8]
threaded_sum([1, 2, 3])    # 6
```

The fork demonstrations (`fork_example`, `fork_exec_example`, `fork_tree`,
`fork_copy_example`, `fork_report`, `fork_sleep`) return the lines printed by
the child and the parent, in that order, as a list of strings.
import io
from collections import Counter

import pytest

from osprac.scheduling import (
    GanttSlot,
    Process,
    average_times,
    fcfs,
    format_averages,
    format_preemptive,
    format_table,
    main,
    preemptive_sjf,
    priority_schedule,
    sjf,
)

HEADER = "PID\tArrival Time\tBurst Time\tCompletion Time\tTurnaround Time\tWaiting Time"
PRIORITY_AVERAGES = "Average Waiting Time: 5.25\nAverage Turnaround Time: 10.75\n"


def fcfs_example():
    return [Process(1, 0, 5), Process(2, 1, 3), Process(3, 2, 8), Process(4, 3, 6)]


def sjf_example():
    return [Process(1, 0, 8), Process(2, 1, 4), Process(3, 2, 9), Process(4, 3, 5)]


def priority_example():
    return [
        Process(1, 0, 5, 2),
        Process(2, 1, 3, 1),
        Process(3, 2, 8, 3),
        Process(4, 3, 6, 2),
    ]


def test_fcfs_worked_example():
    result = fcfs(fcfs_example())
    assert [p.completion_time for p in result] == [5, 8, 16, 22]


def test_fcfs_orders_by_arrival():
    procs = [Process(1, 5, 2), Process(2, 0, 3), Process(3, 2, 1)]
    result = fcfs(procs)
    arrivals = [p.arrival_time for p in result]
    assert arrivals == sorted(arrivals)
    assert sorted(p.pid for p in result) == [p.pid for p in procs]


def test_fcfs_waits_for_late_arrival():
    proc = Process(7, 4, 2)
    (result,) = fcfs([proc])
    assert result.completion_time == proc.arrival_time + proc.burst_time
    assert result.waiting_time == 0


def test_sjf_worked_example():
    result = sjf(sjf_example())
    assert [p.completion_time for p in result] == [8, 12, 26, 17]


def test_sjf_keeps_input_order():
    procs = sjf_example()[::-1]
    assert [p.pid for p in sjf(procs)] == [p.pid for p in procs]


def test_sjf_picks_shortest_among_ready():
    procs = [Process(1, 0, 6), Process(2, 0, 2)]
    first, second = sjf(procs)
    assert second.completion_time < first.completion_time


@pytest.mark.parametrize("schedule", [fcfs, sjf, priority_schedule])
@pytest.mark.parametrize("factory", [fcfs_example, sjf_example, priority_example])
def test_timing_invariants(schedule, factory):
    result = schedule(factory())
    for p in result:
        assert p.turnaround_time == p.completion_time - p.arrival_time
        assert p.waiting_time == p.turnaround_time - p.burst_time
        assert p.waiting_time >= 0
    runs = sorted((p.completion_time - p.burst_time, p.completion_time) for p in result)
    for (_, end), (start, _) in zip(runs, runs[1:]):
        assert start >= end


@pytest.mark.parametrize("schedule", [fcfs, sjf, priority_schedule])
def test_input_not_mutated(schedule):
    procs = sjf_example()
    schedule(procs)
    assert procs == sjf_example()


def test_priority_averages():
    assert format_averages(priority_schedule(priority_example())) == PRIORITY_AVERAGES


def test_priority_lower_number_first():
    procs = [Process(1, 0, 4, 5), Process(2, 0, 4, 1)]
    low, high = priority_schedule(procs)
    assert high.completion_time < low.completion_time


def test_priority_tie_prefers_earlier():
    procs = [Process(1, 0, 3, 2), Process(2, 0, 3, 2)]
    first, second = priority_schedule(procs)
    assert first.completion_time < second.completion_time


def test_average_times_matches_sums():
    result = sjf(sjf_example())
    waiting, turnaround = average_times(result)
    assert waiting == sum(p.waiting_time for p in result) / len(result)
    assert turnaround == sum(p.turnaround_time for p in result) / len(result)


def test_average_times_empty():
    with pytest.raises(ValueError):
        average_times([])


def test_format_table_layout():
    result = fcfs(fcfs_example())
    lines = format_table(result).splitlines()
    assert lines[0] == HEADER
    assert len(lines) == len(result) + 1
    first = result[0]
    assert lines[1] == (
        f"{first.pid}\t{first.arrival_time}\t\t{first.burst_time}\t\t"
        f"{first.completion_time}\t\t{first.turnaround_time}\t\t{first.waiting_time}"
    )


def test_format_table_priority_column():
    lines = format_table(priority_example(), show_priority=True).splitlines()
    assert "\tPriority\t" in lines[0]
    assert lines[1].split("\t\t")[2] == "2"


def test_preemptive_slots_cover_bursts():
    bursts, arrivals = [8, 4, 9, 5], [0, 1, 2, 3]
    result = preemptive_sjf(bursts, arrivals)
    assert len(result.slots) == sum(bursts)
    counts = Counter(slot.program for slot in result.slots)
    assert [counts[n] for n in range(1, len(bursts) + 1)] == bursts
    assert result.slots[-1].end == min(arrivals) + sum(bursts)
    for turn, wait, burst in zip(result.turnaround, result.waiting, bursts):
        assert wait == turn - burst


def test_preemptive_preempts_long_job():
    bursts, arrivals = [5, 1], [0, 1]
    result = preemptive_sjf(bursts, arrivals)
    assert result.slots[1] == GanttSlot(1, 2, 2)
    assert result.turnaround[1] == bursts[1]
    assert result.waiting[0] == bursts[1]


def test_preemptive_idle_gap():
    bursts, arrivals = [2, 1], [0, 10]
    result = preemptive_sjf(bursts, arrivals)
    idle = [slot for slot in result.slots if slot.program is None]
    assert len(idle) == arrivals[1] - bursts[0]
    assert result.turnaround == bursts


@pytest.mark.parametrize(
    "bursts, arrivals",
    [([], []), ([1, 2], [0]), ([0, 3], [0, 1]), ([-1], [0])],
)
def test_preemptive_rejects_bad_input(bursts, arrivals):
    with pytest.raises(ValueError):
        preemptive_sjf(bursts, arrivals)


def test_format_preemptive():
    result = preemptive_sjf([2, 1], [0, 0])
    text = format_preemptive(result)
    lines = text.splitlines()
    assert lines[0] == "****************Gantt chart********************"
    assert lines[1] == "start\tprogram NO. \tEnd"
    assert lines[2] == "0\t 2\t\t1"
    assert f"Average waiting time :{result.average_waiting:g}" in lines
    assert f"Average Turnaround time :{result.average_turnaround:g}" in lines


def test_main_fcfs(capsys):
    assert main(["fcfs"]) == 0
    out = capsys.readouterr().out
    assert out == format_table(fcfs(fcfs_example()))


def test_main_priority(capsys):
    assert main(["priority"]) == 0
    assert capsys.readouterr().out.endswith(PRIORITY_AVERAGES)


def test_main_sjf(capsys):
    assert main(["sjf"]) == 0
    out = capsys.readouterr().out
    assert out.startswith(HEADER)
    assert "Average Waiting Time:" in out


def test_main_preemptive(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n3 0\n1 1\n"))
    assert main(["preemptive"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Enter the Number of process:")
    assert format_preemptive(preemptive_sjf([3, 1], [0, 1])) in out


def test_main_preemptive_truncated_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n1 0\n"))
    assert main(["preemptive"]) == 1
import math

from schedsim.algorithms import schedule_fcfs, schedule_srtf
from schedsim.metrics import compute_metrics
from schedsim.models import Metrics, ProcessSpec, ScheduledSlice


def test_fcfs_metrics():
    procs = [
        ProcessSpec(1, arrival_time=0, burst_time=5),
        ProcessSpec(2, arrival_time=1, burst_time=3),
        ProcessSpec(3, arrival_time=2, burst_time=8),
    ]
    m = compute_metrics(schedule_fcfs(procs))
    # waits 0, 4, 6; turnarounds 5, 7, 14; finishes at 16
    assert m.average_waiting_time == 10 / 3
    assert m.average_turnaround_time == 26 / 3
    assert m.cpu_utilization_percent == 100.0
    assert m.throughput == 3 / 16


def test_idle_time_lowers_utilization():
    timeline = [ScheduledSlice(pid=1, arrival_time=4, start_time=4, duration=4)]
    m = compute_metrics(timeline)
    assert m.average_waiting_time == 0.0
    assert m.average_turnaround_time == 4.0
    assert m.cpu_utilization_percent == 50.0
    assert m.throughput == 1 / 8


def test_srtf_metrics_accumulate_per_slice():
    procs = [
        ProcessSpec(1, arrival_time=0, burst_time=8),
        ProcessSpec(2, arrival_time=1, burst_time=4),
    ]
    m = compute_metrics(schedule_srtf(procs))
    # pid 1 slices start at 0, 5..11; pid 2 at 1..4. Every slice counts.
    assert m.average_waiting_time == (56 + 6) / 2
    assert m.average_turnaround_time == (64 + 10) / 2
    assert m.cpu_utilization_percent == 100.0
    assert m.throughput == 2 / 12


def test_empty_schedule_gives_zero_metrics():
    m = compute_metrics([])
    assert m == Metrics.empty()
    assert all(
        math.isfinite(v)
        for v in (m.average_waiting_time, m.average_turnaround_time, m.cpu_utilization_percent, m.throughput)
    )

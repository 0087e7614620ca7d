import pytest

from schedsim.errors import UnknownAlgorithmError
from schedsim.generator import generate_processes
from schedsim.models import ProcessSpec
from schedsim.simulation import Algorithm, compare_algorithms, compute_schedule, run_simulation


def _workloads():
    yield [
        ProcessSpec(1, arrival_time=0, burst_time=5),
        ProcessSpec(2, arrival_time=1, burst_time=3),
        ProcessSpec(3, arrival_time=2, burst_time=8),
    ]
    yield [
        ProcessSpec(1, arrival_time=5, burst_time=3),
        ProcessSpec(2, arrival_time=6, burst_time=2),
    ]
    for seed in range(5):
        yield generate_processes(count=25, seed=seed)


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_schedule_properties(algorithm):
    for procs in _workloads():
        timeline = compute_schedule(procs, algorithm)
        by_pid = {p.pid: p for p in procs}

        # every process is serviced, and for exactly its burst
        assert {s.pid for s in timeline} == set(by_pid)
        for pid, p in by_pid.items():
            assert sum(s.duration for s in timeline if s.pid == pid) == p.burst_time

        # ordered, non-overlapping, never before arrival
        for prev, cur in zip(timeline, timeline[1:]):
            assert prev.start_time <= cur.start_time
            assert prev.end_time <= cur.start_time
        for s in timeline:
            assert s.duration >= 1
            assert s.start_time >= by_pid[s.pid].arrival_time
            assert s.arrival_time == by_pid[s.pid].arrival_time


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_schedule_is_deterministic(algorithm):
    procs = generate_processes(count=25, seed=42)
    assert compute_schedule(procs, algorithm) == compute_schedule(procs, algorithm)


def test_non_preemptive_policies_emit_one_slice_per_process():
    procs = generate_processes(count=10, seed=3)
    for algorithm in (Algorithm.FCFS, Algorithm.SJF, Algorithm.HRRN):
        assert len(compute_schedule(procs, algorithm)) == len(procs)
    assert len(compute_schedule(procs, Algorithm.SRTF)) == sum(p.burst_time for p in procs)


def test_algorithm_names_are_case_insensitive():
    procs = [ProcessSpec(1, arrival_time=0, burst_time=2)]
    assert compute_schedule(procs, "SRTF") == compute_schedule(procs, Algorithm.SRTF)
    assert Algorithm.parse(" hrrn ") is Algorithm.HRRN


def test_unknown_algorithm():
    with pytest.raises(UnknownAlgorithmError, match="rr"):
        compute_schedule([], "rr")


def test_run_simulation_bundles_metrics():
    procs = [
        ProcessSpec(1, arrival_time=0, burst_time=5),
        ProcessSpec(2, arrival_time=1, burst_time=3),
    ]
    result = run_simulation(procs, "fcfs")
    assert result.algorithm is Algorithm.FCFS
    assert len(result.timeline) == 2
    assert result.metrics.throughput == 2 / 8


def test_compare_defaults_to_all_algorithms():
    procs = generate_processes(count=8, seed=1)
    results = compare_algorithms(procs)
    assert [r.algorithm for r in results] == list(Algorithm)
    assert all(r.metrics.cpu_utilization_percent > 0 for r in results)

    subset = compare_algorithms(procs, ["sjf", Algorithm.HRRN])
    assert [r.algorithm for r in subset] == [Algorithm.SJF, Algorithm.HRRN]


def test_empty_run_has_defined_metrics():
    result = run_simulation([], Algorithm.HRRN)
    assert result.timeline == []
    assert result.metrics.average_waiting_time == 0.0
    assert result.metrics.throughput == 0.0

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Sequence

from .errors import InvalidInputError, NonTerminatingInputError
from .models import ProcessSpec, Schedule, ScheduledSlice

logger = logging.getLogger(__name__)


def validate_processes(processes: Iterable[ProcessSpec]) -> List[ProcessSpec]:
    """
    Check a process set before any simulation starts and return it as a list.

    Pids must be unique positive integers, arrival a non-negative integer and
    burst a positive integer. Nothing is coerced: the first offending process
    raises InvalidInputError.
    """
    checked: List[ProcessSpec] = []
    seen: set[int] = set()

    for p in processes:
        if isinstance(p.pid, bool) or not isinstance(p.pid, int) or p.pid <= 0:
            raise InvalidInputError(f"Process id must be a positive integer, got {p.pid!r}")
        for name in ("arrival_time", "burst_time"):
            value = getattr(p, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidInputError(f"Process {p.pid!r}: {name} must be an integer, got {value!r}")
        if p.arrival_time < 0:
            raise InvalidInputError(f"Process {p.pid!r}: arrival_time must be >= 0, got {p.arrival_time}")
        if p.burst_time <= 0:
            raise InvalidInputError(f"Process {p.pid!r}: burst_time must be >= 1, got {p.burst_time}")
        if p.pid in seen:
            raise InvalidInputError(f"Duplicate process id {p.pid!r}")
        seen.add(p.pid)
        checked.append(p)

    return checked


def _horizon(processes: Sequence[ProcessSpec]) -> int:
    # Latest time at which the last process can possibly complete.
    if not processes:
        return 0
    return max(p.arrival_time for p in processes) + sum(p.burst_time for p in processes)


def _check_progress(time: int, horizon: int, algorithm: str) -> None:
    if time > horizon:
        raise NonTerminatingInputError(
            f"{algorithm}: clock reached {time}, past the last possible completion time {horizon}"
        )


def schedule_fcfs(processes: Iterable[ProcessSpec]) -> Schedule:
    """
    First-Come First-Serve (non-preemptive) scheduling.

    Processes run in arrival order; equal arrivals keep their input order.
    """
    processes = validate_processes(processes)
    processes_sorted = sorted(processes, key=lambda p: p.arrival_time)

    time = 0
    timeline: Schedule = []

    for p in processes_sorted:
        if time < p.arrival_time:
            logger.debug("FCFS: idle %d -> %d", time, p.arrival_time)
            time = p.arrival_time

        timeline.append(
            ScheduledSlice(pid=p.pid, arrival_time=p.arrival_time, start_time=time, duration=p.burst_time)
        )
        time += p.burst_time

    logger.info("FCFS scheduled %d processes, finishing at t=%d", len(processes), time)
    return timeline


def schedule_sjf(processes: Iterable[ProcessSpec]) -> Schedule:
    """
    Shortest Job First (non-preemptive).

    At each decision point every arrived process joins the ready list, and the
    one with the smallest burst time runs to completion. Ties go to whichever
    comes first in the ready list, i.e. the order processes joined it.
    """
    processes = validate_processes(processes)
    horizon = _horizon(processes)

    pending: List[ProcessSpec] = list(processes)
    ready: List[ProcessSpec] = []

    time = 0
    timeline: Schedule = []

    while pending or ready:
        arrived = [p for p in pending if p.arrival_time <= time]
        if arrived:
            ready.extend(arrived)
            pending = [p for p in pending if p.arrival_time > time]

        if not ready:
            time += 1
            _check_progress(time, horizon, "SJF")
            continue

        # min() keeps the first of several equal bursts.
        p = min(ready, key=lambda x: x.burst_time)
        ready.remove(p)

        logger.debug("SJF: t=%d run pid=%s burst=%d (%d ready)", time, p.pid, p.burst_time, len(ready) + 1)
        timeline.append(
            ScheduledSlice(pid=p.pid, arrival_time=p.arrival_time, start_time=time, duration=p.burst_time)
        )
        time += p.burst_time

    logger.info("SJF scheduled %d processes, finishing at t=%d", len(processes), time)
    return timeline


def schedule_srtf(processes: Iterable[ProcessSpec]) -> Schedule:
    """
    Shortest Remaining Time First (preemptive SJF).

    The clock advances one unit at a time and the choice is re-made every
    tick, so every slice lasts exactly one unit. Ties on remaining time go to
    the process listed first in the input.
    """
    processes = validate_processes(processes)
    horizon = _horizon(processes)

    remaining: Dict[int, int] = {p.pid: p.burst_time for p in processes}

    time = 0
    completed = 0
    timeline: Schedule = []

    while completed < len(processes):
        shortest = None
        for p in processes:
            if p.arrival_time <= time and remaining[p.pid] > 0:
                if shortest is None or remaining[p.pid] < remaining[shortest.pid]:
                    shortest = p

        if shortest is not None:
            timeline.append(
                ScheduledSlice(pid=shortest.pid, arrival_time=shortest.arrival_time, start_time=time, duration=1)
            )
            remaining[shortest.pid] -= 1
            if remaining[shortest.pid] == 0:
                completed += 1
                logger.debug("SRTF: pid=%s completed at t=%d", shortest.pid, time + 1)

        time += 1
        _check_progress(time, horizon, "SRTF")

    logger.info("SRTF scheduled %d processes in %d slices, finishing at t=%d", len(processes), len(timeline), time)
    return timeline


def response_ratio(process: ProcessSpec, time: int) -> float:
    """(waiting + burst) / burst for a process that arrived at or before ``time``."""
    waiting_time = time - process.arrival_time
    return (waiting_time + process.burst_time) / process.burst_time


def schedule_hrrn(processes: Iterable[ProcessSpec]) -> Schedule:
    """
    Highest Response Ratio Next (non-preemptive).

    Among arrived processes, run the one with the greatest response ratio.
    A later process must beat the best ratio strictly, so on an exact tie the
    one scanned earlier wins.
    """
    processes = validate_processes(processes)
    horizon = _horizon(processes)

    queue: List[ProcessSpec] = list(processes)

    time = 0
    timeline: Schedule = []

    while queue:
        ready = [p for p in queue if p.arrival_time <= time]

        if not ready:
            time += 1
            _check_progress(time, horizon, "HRRN")
            continue

        selected = ready[0]
        highest_ratio = -1.0
        for p in ready:
            ratio = response_ratio(p, time)
            if ratio > highest_ratio:
                highest_ratio = ratio
                selected = p

        queue.remove(selected)

        logger.debug("HRRN: t=%d run pid=%s ratio=%.3f", time, selected.pid, highest_ratio)
        timeline.append(
            ScheduledSlice(
                pid=selected.pid,
                arrival_time=selected.arrival_time,
                start_time=time,
                duration=selected.burst_time,
            )
        )
        time += selected.burst_time

    logger.info("HRRN scheduled %d processes, finishing at t=%d", len(processes), time)
    return timeline

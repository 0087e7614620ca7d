from __future__ import annotations

import logging
from typing import Iterable

from .models import Metrics, ScheduledSlice

logger = logging.getLogger(__name__)


def compute_metrics(schedule: Iterable[ScheduledSlice]) -> Metrics:
    """
    Reduce a timeline to average waiting/turnaround time, CPU utilization and
    throughput.

    Waiting and turnaround are accumulated per slice, not per process, and
    then divided by the number of distinct pids. For non-preemptive schedules
    (one slice per process) this is the usual per-process average. For SRTF
    each 1-unit slice contributes its own ``start - arrival``, so those
    averages grow with the number of interruptions.

    An empty schedule yields ``Metrics.empty()`` (all zeros).
    """
    slices = list(schedule)
    if not slices:
        logger.debug("Empty schedule, returning zero metrics")
        return Metrics.empty()

    total_waiting = 0
    total_turnaround = 0
    cpu_busy_time = 0
    last_time = 0
    pids: set[int] = set()

    for sl in slices:
        total_waiting += sl.start_time - sl.arrival_time
        total_turnaround += sl.end_time - sl.arrival_time
        cpu_busy_time += sl.duration
        last_time = max(last_time, sl.end_time)
        pids.add(sl.pid)

    count = len(pids)

    metrics = Metrics(
        average_waiting_time=total_waiting / count,
        average_turnaround_time=total_turnaround / count,
        cpu_utilization_percent=100.0 * cpu_busy_time / last_time,
        throughput=count / last_time,
    )
    logger.debug("Metrics over %d slices / %d processes: %s", len(slices), count, metrics)
    return metrics

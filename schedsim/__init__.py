"""
CPU scheduling simulator.

Computes single-CPU execution timelines under FCFS, SJF, SRTF and HRRN and
reduces them to waiting time, turnaround time, utilization and throughput.
"""

from .errors import InvalidInputError, SchedulerError, UnknownAlgorithmError
from .metrics import compute_metrics
from .models import Metrics, ProcessSpec, ScheduledSlice, SimulationResult
from .simulation import Algorithm, compare_algorithms, compute_schedule, run_simulation

__all__ = [
    "Algorithm",
    "InvalidInputError",
    "Metrics",
    "ProcessSpec",
    "ScheduledSlice",
    "SchedulerError",
    "SimulationResult",
    "UnknownAlgorithmError",
    "compare_algorithms",
    "compute_metrics",
    "compute_schedule",
    "run_simulation",
]

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Union

from .algorithms import schedule_fcfs, schedule_hrrn, schedule_sjf, schedule_srtf
from .errors import UnknownAlgorithmError
from .metrics import compute_metrics
from .models import ProcessSpec, Schedule, SimulationResult

logger = logging.getLogger(__name__)


class Algorithm(Enum):
    FCFS = "fcfs"
    SJF = "sjf"
    SRTF = "srtf"
    HRRN = "hrrn"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def parse(cls, name: Union["Algorithm", str]) -> "Algorithm":
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            choices = ", ".join(a.value for a in cls)
            raise UnknownAlgorithmError(f"Unknown algorithm '{name}' (choose from {choices})") from None


_LABELS = {
    Algorithm.FCFS: "FCFS",
    Algorithm.SJF: "SJF (non-preemptive)",
    Algorithm.SRTF: "SRTF (preemptive)",
    Algorithm.HRRN: "HRRN",
}

ALGORITHMS: Dict[Algorithm, Callable[[Iterable[ProcessSpec]], Schedule]] = {
    Algorithm.FCFS: schedule_fcfs,
    Algorithm.SJF: schedule_sjf,
    Algorithm.SRTF: schedule_srtf,
    Algorithm.HRRN: schedule_hrrn,
}


def compute_schedule(processes: Sequence[ProcessSpec], algorithm: Union[Algorithm, str]) -> Schedule:
    """
    Dispatch to the requested policy and return its timeline.
    """
    algo = Algorithm.parse(algorithm)
    logger.debug("Computing %s schedule for %d processes", algo.label, len(processes))
    return ALGORITHMS[algo](list(processes))


def run_simulation(processes: Sequence[ProcessSpec], algorithm: Union[Algorithm, str]) -> SimulationResult:
    algo = Algorithm.parse(algorithm)
    timeline = compute_schedule(processes, algo)
    return SimulationResult(algorithm=algo, timeline=timeline, metrics=compute_metrics(timeline))


def compare_algorithms(
    processes: Sequence[ProcessSpec],
    algorithms: Optional[Iterable[Union[Algorithm, str]]] = None,
) -> List[SimulationResult]:
    """
    Run several algorithms over the same workload, each on its own copy of
    the process list. Defaults to all four in declaration order.
    """
    selected = [Algorithm.parse(a) for a in algorithms] if algorithms is not None else list(Algorithm)
    return [run_simulation(list(processes), algo) for algo in selected]

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from .simulation import Algorithm


@dataclass(frozen=True)
class ProcessSpec:
    pid: int
    arrival_time: int
    burst_time: int
    priority: Optional[int] = None


@dataclass(frozen=True)
class ScheduledSlice:
    """
    One contiguous slice of execution for a process in the Gantt chart.
    """

    pid: int
    arrival_time: int
    start_time: int
    duration: int

    @property
    def end_time(self) -> int:
        return self.start_time + self.duration


Schedule = List[ScheduledSlice]


@dataclass(frozen=True)
class Metrics:
    average_waiting_time: float
    average_turnaround_time: float
    cpu_utilization_percent: float
    throughput: float

    @classmethod
    def empty(cls) -> "Metrics":
        return cls(
            average_waiting_time=0.0,
            average_turnaround_time=0.0,
            cpu_utilization_percent=0.0,
            throughput=0.0,
        )


@dataclass
class SimulationResult:
    algorithm: "Algorithm"
    timeline: Schedule = field(default_factory=list)
    metrics: Metrics = field(default_factory=Metrics.empty)

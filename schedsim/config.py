from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

# Random workload defaults: 25 processes, arrival 0-19, burst 1-10, priority 1-10.
DEFAULT_PROCESS_COUNT = 25
ARRIVAL_RANGE = (0, 19)
BURST_RANGE = (1, 10)
PRIORITY_RANGE = (1, 10)

DEFAULT_LOG_LEVEL = "WARNING"

ENV_PREFIX = "SCHEDSIM_"


@dataclass(frozen=True)
class GeneratorConfig:
    count: int = DEFAULT_PROCESS_COUNT
    arrival_range: Tuple[int, int] = ARRIVAL_RANGE
    burst_range: Tuple[int, int] = BURST_RANGE
    priority_range: Tuple[int, int] = PRIORITY_RANGE

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(f"count must be >= 0, got {self.count}")
        for name in ("arrival_range", "burst_range", "priority_range"):
            low, high = getattr(self, name)
            if low > high:
                raise ValueError(f"{name} is empty: {low} > {high}")
        if self.arrival_range[0] < 0:
            raise ValueError("arrival_range must not go below 0")
        if self.burst_range[0] < 1:
            raise ValueError("burst_range must start at 1 or above")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GeneratorConfig":
        """
        Build a config from SCHEDSIM_COUNT / SCHEDSIM_MAX_ARRIVAL /
        SCHEDSIM_MAX_BURST / SCHEDSIM_MAX_PRIORITY, falling back to the
        module defaults for anything unset.
        """
        env = os.environ if environ is None else environ

        def _int(key: str, default: int) -> int:
            raw = env.get(ENV_PREFIX + key)
            if raw in (None, ""):
                return default
            try:
                return int(raw)
            except ValueError as exc:
                raise ValueError(f"{ENV_PREFIX}{key} must be an integer, got {raw!r}") from exc

        return cls(
            count=_int("COUNT", DEFAULT_PROCESS_COUNT),
            arrival_range=(ARRIVAL_RANGE[0], _int("MAX_ARRIVAL", ARRIVAL_RANGE[1])),
            burst_range=(BURST_RANGE[0], _int("MAX_BURST", BURST_RANGE[1])),
            priority_range=(PRIORITY_RANGE[0], _int("MAX_PRIORITY", PRIORITY_RANGE[1])),
        )


def default_log_level(environ: Optional[Mapping[str, str]] = None) -> str:
    env = os.environ if environ is None else environ
    return env.get(ENV_PREFIX + "LOG_LEVEL") or DEFAULT_LOG_LEVEL

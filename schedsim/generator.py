from __future__ import annotations

import logging
import random
from typing import List, Optional

from .config import GeneratorConfig
from .models import ProcessSpec

logger = logging.getLogger(__name__)


def generate_processes(
    count: Optional[int] = None,
    config: Optional[GeneratorConfig] = None,
    seed: Optional[int] = None,
) -> List[ProcessSpec]:
    """
    Build a random workload with pids 1..count.

    Arrival, burst and priority are drawn uniformly (inclusive bounds) from
    the ranges in ``config``. Passing a seed makes the set reproducible.
    """
    config = config or GeneratorConfig()
    if count is None:
        count = config.count
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")

    rng = random.Random(seed)
    processes = [
        ProcessSpec(
            pid=pid,
            arrival_time=rng.randint(*config.arrival_range),
            burst_time=rng.randint(*config.burst_range),
            priority=rng.randint(*config.priority_range),
        )
        for pid in range(1, count + 1)
    ]

    logger.info("Generated %d processes (seed=%s)", count, seed)
    return processes

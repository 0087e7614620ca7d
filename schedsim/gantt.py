from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .models import ScheduledSlice


def merge_adjacent(slices: Sequence[ScheduledSlice]) -> List[ScheduledSlice]:
    """
    Join back-to-back slices of the same pid into one span for display.

    SRTF emits one slice per time unit; drawing them individually would give
    every unit its own label. The input schedule is left untouched.
    """
    merged: List[ScheduledSlice] = []
    for sl in sorted(slices, key=lambda s: s.start_time):
        prev = merged[-1] if merged else None
        if prev is not None and prev.pid == sl.pid and prev.end_time == sl.start_time:
            merged[-1] = ScheduledSlice(
                pid=prev.pid,
                arrival_time=prev.arrival_time,
                start_time=prev.start_time,
                duration=prev.duration + sl.duration,
            )
        else:
            merged.append(sl)
    return merged


def _label(pid: int, width: int) -> str:
    return f"P{pid}"[:width].ljust(width)


# (width, pid) per chart segment; pid is None for idle time.
Segment = Tuple[int, Optional[int]]

PALETTE = ["red", "green", "yellow", "blue", "magenta", "cyan"]


def layout_segments(slices: Sequence[ScheduledSlice]) -> Tuple[List[Segment], str]:
    """
    Turn a timeline into consecutive chart segments plus the time-mark row.

    Idle gaps become their own segments, and a mark is written at every
    segment boundary.
    """
    segments: List[Segment] = []
    time_marks = "0"
    last_time = 0

    for sl in merge_adjacent(slices):
        if sl.start_time > last_time:
            segments.append((sl.start_time - last_time, None))
            time_marks += f"{sl.start_time:>3}"

        segments.append((max(1, sl.duration), sl.pid))
        last_time = sl.end_time
        time_marks += f"{last_time:>3}"

    return segments, time_marks


def render_gantt(slices: Sequence[ScheduledSlice]) -> str:
    """
    Plain-text Gantt chart: ``=`` for CPU time, ``.`` for idle gaps.
    """
    if not slices:
        return "(no execution)"

    segments, time_marks = layout_segments(slices)
    line = "".join("." * width if pid is None else "=" * width for width, pid in segments)
    labels = "".join(" " * width if pid is None else _label(pid, width) for width, pid in segments)

    return "\n".join(["Gantt Chart:", f"|{line}|", f" {labels}", time_marks])


def build_rich_gantt(slices: Sequence[ScheduledSlice]) -> tuple[Panel, str]:
    """
    Build a Rich Panel containing a colored Gantt chart and a string with time marks.
    """
    if not slices:
        return Panel("No execution", title="Gantt Chart"), ""

    segments, time_marks = layout_segments(slices)
    pid_to_color: Dict[int, str] = {}

    timeline = Text()
    labels = Text()
    for width, pid in segments:
        if pid is None:
            timeline.append(" " * width)
            labels.append(" " * width)
            continue
        color = pid_to_color.setdefault(pid, PALETTE[len(pid_to_color) % len(PALETTE)])
        timeline.append(" " * width, style=f"on {color}")
        labels.append(_label(pid, width), style="bold")

    table = Table.grid(padding=(0, 0))
    table.add_row(timeline)
    table.add_row(labels)

    return Panel.fit(table, title="Gantt Chart"), time_marks

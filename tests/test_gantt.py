from rich.panel import Panel

from schedsim.gantt import build_rich_gantt, layout_segments, merge_adjacent, render_gantt
from schedsim.models import ProcessSpec, ScheduledSlice
from schedsim.simulation import compute_schedule


def test_render_gantt_shows_idle_gap():
    timeline = compute_schedule(
        [ProcessSpec(1, arrival_time=2, burst_time=3), ProcessSpec(2, arrival_time=2, burst_time=2)],
        "fcfs",
    )
    chart = render_gantt(timeline)
    lines = chart.splitlines()
    assert lines[0] == "Gantt Chart:"
    assert lines[1] == "|..=====|"
    assert lines[2] == "   P1 P2"
    assert lines[3] == "0  2  5  7"


def test_render_empty():
    assert render_gantt([]) == "(no execution)"


def test_merge_adjacent_joins_srtf_units():
    timeline = compute_schedule(
        [ProcessSpec(1, arrival_time=0, burst_time=8), ProcessSpec(2, arrival_time=1, burst_time=4)],
        "srtf",
    )
    merged = merge_adjacent(timeline)
    assert [(s.pid, s.start_time, s.duration) for s in merged] == [(1, 0, 1), (2, 1, 4), (1, 5, 7)]
    assert len(timeline) == 12


def test_merge_keeps_gaps():
    timeline = [
        ScheduledSlice(pid=1, arrival_time=0, start_time=0, duration=1),
        ScheduledSlice(pid=1, arrival_time=0, start_time=2, duration=1),
    ]
    assert len(merge_adjacent(timeline)) == 2


def test_build_rich_gantt():
    timeline = [ScheduledSlice(pid=3, arrival_time=0, start_time=1, duration=2)]
    panel, marks = build_rich_gantt(timeline)
    assert isinstance(panel, Panel)
    assert marks == "0  1  3"

    panel, marks = build_rich_gantt([])
    assert marks == ""


def test_layout_segments_marks_idle_and_busy_spans():
    timeline = compute_schedule(
        [ProcessSpec(1, arrival_time=0, burst_time=1), ProcessSpec(2, arrival_time=4, burst_time=2)],
        "srtf",
    )
    segments, marks = layout_segments(timeline)
    assert segments == [(1, 1), (3, None), (2, 2)]
    assert marks == "0  1  4  6"

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional, Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import GeneratorConfig, default_log_level
from .errors import SchedulerError
from .gantt import build_rich_gantt
from .generator import generate_processes
from .log import configure_logging
from .models import Metrics, ProcessSpec, SimulationResult
from .simulation import Algorithm, compare_algorithms, run_simulation
from .workload_io import load_workload, save_workload

logger = logging.getLogger(__name__)

ALGORITHM_CHOICES = [a.value for a in Algorithm]


def _add_workload_args(parser: argparse.ArgumentParser) -> None:
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--workload",
        "-w",
        default=None,
        help="Path to JSON or CSV workload file. If omitted, a random workload is generated.",
    )
    source.add_argument(
        "--count",
        "-n",
        type=int,
        default=None,
        help="Number of random processes to generate when no workload is given (default: 25).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random workload, for reproducible runs.",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="schedsim",
        description="CPU scheduling simulator (FCFS, SJF, SRTF, HRRN).",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="count",
        default=0,
        help="Log progress (-v for INFO, -vv for DEBUG).",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Explicit log level (overrides -v and SCHEDSIM_LOG_LEVEL).",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", help="Run one scheduling algorithm on a workload.")
    run_parser.add_argument(
        "--algorithm",
        "-a",
        required=True,
        choices=ALGORITHM_CHOICES,
        type=str.lower,
        help="Algorithm to use (fcfs, sjf, srtf, hrrn).",
    )
    _add_workload_args(run_parser)

    compare_parser = subparsers.add_parser(
        "compare",
        help="Run multiple algorithms on the same workload and compare metrics.",
    )
    compare_parser.add_argument(
        "--algorithms",
        "-a",
        nargs="+",
        choices=ALGORITHM_CHOICES,
        type=str.lower,
        default=ALGORITHM_CHOICES,
        help="Algorithms to compare (default: fcfs sjf srtf hrrn).",
    )
    _add_workload_args(compare_parser)

    generate_parser = subparsers.add_parser("generate", help="Write a random workload file.")
    generate_parser.add_argument(
        "--output",
        "-o",
        required=True,
        help="Destination .json or .csv file.",
    )
    generate_parser.add_argument(
        "--count",
        "-n",
        type=int,
        default=None,
        help="Number of processes (default: 25).",
    )
    generate_parser.add_argument("--seed", type=int, default=None, help="Random seed.")

    return parser


def _resolve_log_level(args: argparse.Namespace) -> str:
    if args.log_level:
        return args.log_level
    if args.verbose >= 2:
        return "DEBUG"
    if args.verbose == 1:
        return "INFO"
    return default_log_level()


def _obtain_processes(args: argparse.Namespace) -> List[ProcessSpec]:
    if args.workload:
        if args.seed is not None:
            logger.warning("--seed is ignored when a workload file is given")
        return load_workload(Path(args.workload))
    return generate_processes(count=args.count, config=GeneratorConfig.from_env(), seed=args.seed)


def _process_table(processes: Sequence[ProcessSpec]) -> Table:
    table = Table(title="Processes", box=box.SIMPLE_HEAVY)
    for h in ("ID", "Arrival", "Burst", "Priority"):
        table.add_column(h, justify="center" if h == "ID" else "right")
    for p in processes:
        table.add_row(
            f"P{p.pid}",
            str(p.arrival_time),
            str(p.burst_time),
            "" if p.priority is None else str(p.priority),
        )
    return table


def _metrics_rows(metrics: Metrics) -> List[tuple[str, str]]:
    return [
        ("AWT", f"{metrics.average_waiting_time:.2f}"),
        ("ATT", f"{metrics.average_turnaround_time:.2f}"),
        ("CPU Utilization", f"{metrics.cpu_utilization_percent:.2f}%"),
        ("Throughput", f"{metrics.throughput:.2f} proc/unit"),
    ]


def _print_result(result: SimulationResult, processes: Sequence[ProcessSpec], console: Console) -> None:
    console.print(f"[bold]Algorithm:[/bold] {result.algorithm.label}")
    console.print()

    console.print(_process_table(processes))

    panel, time_marks = build_rich_gantt(result.timeline)
    console.print(panel)
    if time_marks:
        console.print(time_marks)

    console.print()

    metrics_table = Table(title="Results", box=box.SIMPLE_HEAVY)
    metrics_table.add_column("Metric")
    metrics_table.add_column("Value", justify="right")
    for name, value in _metrics_rows(result.metrics):
        metrics_table.add_row(name, value)

    console.print(metrics_table)


def _print_comparison(results: Sequence[SimulationResult], console: Console) -> None:
    summary_table = Table(title="Algorithm comparison", box=box.SIMPLE_HEAVY)
    summary_table.add_column("Algorithm")
    summary_table.add_column("Slices", justify="right")
    for name, _ in _metrics_rows(Metrics.empty()):
        summary_table.add_column(name, justify="right")

    for result in results:
        summary_table.add_row(
            result.algorithm.label,
            str(len(result.timeline)),
            *(value for _, value in _metrics_rows(result.metrics)),
        )

    console.print(summary_table)


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    console = Console()

    try:
        configure_logging(_resolve_log_level(args))

        if args.command == "run":
            processes = _obtain_processes(args)
            result = run_simulation(processes, args.algorithm)
            _print_result(result, processes, console)
            return 0

        if args.command == "compare":
            processes = _obtain_processes(args)
            results = compare_algorithms(processes, args.algorithms)
            _print_comparison(results, console)
            return 0

        if args.command == "generate":
            processes = generate_processes(count=args.count, config=GeneratorConfig.from_env(), seed=args.seed)
            path = save_workload(processes, args.output)
            console.print(f"Wrote {len(processes)} processes to [green]{path}[/green]")
            return 0
    except (SchedulerError, ValueError, OSError) as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        console.print(f"[red]Error: {escape(str(exc))}[/red]")
        return 2

    parser.error(f"Unknown command: {args.command}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())

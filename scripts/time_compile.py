#!/usr/bin/env python3
"""Quick perf benchmark for chain compilation (one compile per simulated keystroke)."""

from __future__ import annotations

import argparse
import cProfile
import io
from pathlib import Path
import pstats
import statistics
import time

from tqdm import tqdm

from ropscript.pipeline import compile_script
from ropscript.project import ProjectFile, load_project


def _collect_projects(root: Path) -> list[Path]:
    if root.is_file():
        return [root]
    return [path for path in sorted(root.rglob("*.rop")) if path.is_file()]


def _run_once(
    projects: list[ProjectFile],
    *,
    keystrokes: int,
    label: str,
    show_progress: bool,
) -> tuple[float, int, int]:
    start = time.perf_counter()
    total_bytes = 0
    total_errors = 0
    steps = range(keystrokes)
    iterator = tqdm(steps, desc=label, unit="compile") if show_progress else steps
    for _ in iterator:
        for project in projects:
            result = compile_script(project.input, project.gadgets, options=project.assembler_options())
            total_bytes += len(result.output_bytes)
            total_errors += result.error_count
    duration = time.perf_counter() - start
    return duration, total_bytes, total_errors


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark chain script compile latency")
    parser.add_argument("path", type=Path, help="A .rop project file or a directory of them")
    parser.add_argument("--keystrokes", type=int, default=200, help="Compiles per run and project")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Run cProfile and print top hotspots",
    )
    parser.add_argument(
        "--profile-top",
        type=int,
        default=30,
        help="Number of cProfile rows to print (default: 30)",
    )
    parser.add_argument(
        "--profile-sort",
        type=str,
        default="tottime",
        help="cProfile sort key (default: tottime, common: cumulative)",
    )
    args = parser.parse_args()

    if not args.path.exists():
        raise SystemExit(f"Invalid path: {args.path}")
    paths = _collect_projects(args.path)
    if not paths:
        raise SystemExit(f"No .rop files found under {args.path}")
    projects = [load_project(path) for path in paths]

    keystrokes = max(args.keystrokes, 1)
    show_progress = not args.no_progress

    def _benchmark() -> tuple[list[float], int, int]:
        for warmup_idx in range(max(args.warmups, 0)):
            _run_once(
                projects,
                keystrokes=keystrokes,
                label=f"warmup {warmup_idx + 1}/{max(args.warmups, 0)}",
                show_progress=show_progress,
            )

        timings: list[float] = []
        bytes_count = 0
        errors_count = 0
        for run_idx in range(max(args.runs, 1)):
            duration, bytes_count, errors_count = _run_once(
                projects,
                keystrokes=keystrokes,
                label=f"run {run_idx + 1}/{max(args.runs, 1)}",
                show_progress=show_progress,
            )
            timings.append(duration)
        return timings, bytes_count, errors_count

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, bytes_count, errors_count = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        stats = pstats.Stats(profiler, stream=stream)
        stats.sort_stats(args.profile_sort).print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, bytes_count, errors_count = _benchmark()

    compiles = keystrokes * len(projects)
    mean = statistics.mean(timings)

    print(f"Projects: {len(projects)}")
    print(f"Compiles per run: {compiles}")
    print(f"Bytes emitted per run: {bytes_count}")
    print(f"Errors per run: {errors_count}")
    print(f"Runs: {len(timings)} (warmups={max(args.warmups, 0)})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Per compile (mean): {mean / compiles * 1000:.3f}ms")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

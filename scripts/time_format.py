#!/usr/bin/env python3
"""Quick perf benchmark for Turtle formatting."""

from __future__ import annotations

import argparse
import cProfile
import io
from pathlib import Path
import pstats
import statistics
import sys
import time

from loguru import logger
from tqdm import tqdm

from turtlefmt import FormatOptions, FormatStyle, TurtleFormatError, parse_turtle, run_format


def _collect_turtle_files(root: Path) -> list[Path]:
    files = sorted(root.rglob("*.ttl"))
    return [path for path in files if path.is_file()]


def _run_once(
    sources: list[str],
    options: FormatOptions,
    *,
    label: str,
    show_progress: bool,
) -> tuple[float, int, int]:
    start = time.perf_counter()
    total_changed = 0
    total_failures = 0
    iterator = (
        tqdm(sources, desc=label, unit="file")
        if show_progress
        else sources
    )
    for source in iterator:
        parsed = parse_turtle(source)
        if parsed.has_errors:
            total_failures += 1
            continue
        try:
            result = run_format(source, options, parse=parsed)
        except TurtleFormatError:
            total_failures += 1
            continue
        total_changed += int(result.changed)
    duration = time.perf_counter() - start
    return duration, total_changed, total_failures


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark Turtle formatting throughput")
    parser.add_argument("root", type=Path, help="Directory searched recursively for .ttl files")
    parser.add_argument(
        "--style",
        type=FormatStyle,
        choices=list(FormatStyle),
        default=FormatStyle.DEFAULT,
        help="Formatting style (default: default)",
    )
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
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Minimum level of turtlefmt log messages shown on stderr (default: WARNING)",
    )
    args = parser.parse_args()

    logger.remove()
    logger.add(sys.stderr, level=args.log_level.upper())
    logger.enable("turtlefmt")

    root: Path = args.root
    if not root.exists() or not root.is_dir():
        raise SystemExit(f"Invalid root: {root}")

    files = _collect_turtle_files(root)
    if not files:
        raise SystemExit(f"No .ttl files found under {root}")
    sources = [path.read_text(encoding="utf-8") for path in files]
    options = FormatOptions.for_style(args.style)
    show_progress = not args.no_progress

    def _benchmark() -> tuple[list[float], int, int]:
        for warmup_idx in range(max(args.warmups, 0)):
            _run_once(
                sources,
                options,
                label=f"warmup {warmup_idx + 1}/{max(args.warmups, 0)}",
                show_progress=show_progress,
            )

        timings: list[float] = []
        changed_count = 0
        failure_count = 0
        for run_idx in range(max(args.runs, 1)):
            duration, changed_count, failure_count = _run_once(
                sources,
                options,
                label=f"run {run_idx + 1}/{max(args.runs, 1)}",
                show_progress=show_progress,
            )
            timings.append(duration)
        return timings, changed_count, failure_count

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, changed_count, failure_count = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        stats = pstats.Stats(profiler, stream=stream)
        stats.sort_stats(args.profile_sort).print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, changed_count, failure_count = _benchmark()

    mean = statistics.mean(timings)

    print(f"Dataset: {root}")
    print(f"Files: {len(files)} (changed={changed_count}, failed={failure_count})")
    print(f"Style: {args.style}")
    print(f"Runs: {len(timings)} (warmups={max(args.warmups, 0)})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Files/s (mean): {len(files) / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

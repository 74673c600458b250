#!/usr/bin/env python3
"""Quick perf benchmark for configuration parsing."""

from __future__ import annotations

import argparse
import cProfile
import io
from pathlib import Path
import pstats
import statistics
import time

from tqdm import tqdm

from confslice.model import Configuration
from confslice.pipeline import load_and_parse


def _collect_config_files(root: Path, pattern: str) -> list[Path]:
    return [path for path in sorted(root.rglob(pattern)) if path.is_file()]


def _count_members(config: Configuration | None) -> int:
    if config is None:
        return 0
    return config.size_of_keys() + config.size_of_entities()


def _run_once(
    files: list[Path],
    *,
    label: str,
    show_progress: bool,
) -> tuple[float, int, int, int]:
    start = time.perf_counter()
    total_members = 0
    total_failures = 0
    iterator = tqdm(files, desc=label, unit="file") if show_progress else files
    for path in iterator:
        parsed = load_and_parse(path)
        total_members += _count_members(parsed.configuration)
        total_failures += 0 if parsed.ok else 1
    duration = time.perf_counter() - start
    return duration, len(files), total_members, total_failures


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark configuration parsing throughput")
    parser.add_argument("root", type=Path, help="Directory holding configuration files")
    parser.add_argument("--pattern", default="*.conf", help="Glob for files under root (default: *.conf)")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    parser.add_argument("--profile", action="store_true", help="Run cProfile and print top hotspots")
    parser.add_argument("--profile-top", type=int, default=30, help="Number of cProfile rows to print")
    parser.add_argument("--profile-sort", type=str, default="tottime", help="cProfile sort key")
    args = parser.parse_args()

    root: Path = args.root
    if not root.is_dir():
        raise SystemExit(f"Invalid root: {root}")

    files = _collect_config_files(root, args.pattern)
    if not files:
        raise SystemExit(f"No {args.pattern} files found under {root}")

    show_progress = not args.no_progress
    runs = max(args.runs, 1)
    warmups = max(args.warmups, 0)

    def _benchmark() -> tuple[list[float], int, int, int]:
        for warmup_idx in range(warmups):
            _run_once(files, label=f"warmup {warmup_idx + 1}/{warmups}", show_progress=show_progress)

        timings: list[float] = []
        files_count = members_count = failures_count = 0
        for run_idx in range(runs):
            duration, files_count, members_count, failures_count = _run_once(
                files,
                label=f"run {run_idx + 1}/{runs}",
                show_progress=show_progress,
            )
            timings.append(duration)
        return timings, files_count, members_count, failures_count

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, files_count, members_count, failures_count = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        stats = pstats.Stats(profiler, stream=stream)
        stats.sort_stats(args.profile_sort).print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, files_count, members_count, failures_count = _benchmark()

    mean = statistics.mean(timings)
    print(f"Dataset: {root}")
    print(f"Files: {files_count}")
    print(f"Top-level members: {members_count}")
    print(f"Failed files: {failures_count}")
    print(f"Runs: {len(timings)} (warmups={warmups})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Files/s (mean): {files_count / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

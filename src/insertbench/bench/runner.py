"""
Benchmark runner: sweeps insertion sort variants over sizes and distributions.

Usage (from repo root):
    python -m insertbench.bench.runner
    python -m insertbench.bench.runner --config experiments/configs/default.yaml
    insertbench --sizes 100 1000 --variant plain --variant adaptive --seed 7

Outputs:
    - <output>.csv            # averaged metrics per (variant, data type, n)
    - <output>.meta.json      # environment info + resolved config (unless --no-meta)
    - (console) rich/tqdm progress and summary

Design notes:
- Every measured run sorts freshly generated data from one seeded RNG.
- A timeout for (variant, distribution) at size n skips larger sizes for that pair.
- Verification failures are reported but do not abort the sweep.
"""

from __future__ import annotations

import argparse
import datetime as _dt
import json
import os
import platform
import subprocess
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd
import psutil
from rich.console import Console
from tqdm import tqdm

from insertbench.algorithms import VARIANTS, SortMetrics
from insertbench.bench.config import DATA_TYPE_LABELS, BenchConfig, load_config
from insertbench.bench.measure import measure_variant
from insertbench.bench.tracker import PerformanceTracker
from insertbench.datasets import make_dataset

_console = Console()


# ------------------------- helpers: meta ------------------------- #

def _git_commit_short() -> Optional[str]:
    try:
        out = subprocess.check_output(["git", "rev-parse", "--short", "HEAD"], stderr=subprocess.DEVNULL)
        return out.decode("utf-8").strip()
    except (OSError, subprocess.CalledProcessError):
        return None


def _gather_meta(cfg: BenchConfig) -> Dict[str, Any]:
    return {
        "python": platform.python_version(),
        "numpy": np.__version__,
        "pandas": pd.__version__,
        "psutil": psutil.__version__,
        "git_commit": _git_commit_short(),
        "machine": {
            "cpu": platform.processor() or platform.machine(),
            "cores_logical": psutil.cpu_count(logical=True),
            "cores_physical": psutil.cpu_count(logical=False),
            "ram_gb": round(psutil.virtual_memory().total / (1024**3), 2),
            "platform": platform.platform(),
        },
        "start_time": _dt.datetime.now().isoformat(timespec="seconds"),
        "pid": os.getpid(),
        "cwd": str(Path.cwd()),
        "config": cfg.to_dict(),
    }


def _meta_path(output: Path) -> Path:
    return output.with_suffix(".meta.json")


# ------------------------- core runner ------------------------- #

def run_benchmarks(cfg: BenchConfig, console: Optional[Console] = None) -> PerformanceTracker:
    """
    Run the full sweep described by `cfg` and return the populated tracker.

    Nothing is written to disk here; see `main()` for export.
    """
    console = console or _console
    tracker = PerformanceTracker()
    rng = np.random.default_rng(cfg.seed)

    # (variant, dist) -> smallest n that timed out or errored; sizes >= it are skipped
    skipped: Dict[Tuple[str, str], int] = {}

    console.print(f"[bold]Variants:[/bold] {', '.join(cfg.variants)}")
    console.print(f"[bold]Distributions:[/bold] {', '.join(cfg.distributions)}")
    console.print()

    for n in tqdm(cfg.sizes, desc="Sizes", unit="n", disable=not console.is_terminal):
        console.print(f"\n--- Testing with n = {n} ---")
        for variant in cfg.variants:
            for dist in cfg.distributions:
                limit = skipped.get((variant, dist))
                if limit is not None and n >= limit:
                    continue
                label = DATA_TYPE_LABELS[dist]
                spec = {"dist": dist, "params": {}}

                res = measure_variant(
                    variant_name=variant,
                    variant_fn=VARIANTS[variant],
                    make_input=lambda: make_dataset(int(n), spec, rng),
                    warmup_runs=cfg.warmup_runs,
                    measurement_runs=cfg.measurement_runs,
                    disable_gc=cfg.disable_gc,
                    timeout_seconds=cfg.timeout_seconds,
                )

                if res["unsorted_runs"]:
                    console.print(
                        f"[bold red]ERROR:[/bold red] {variant}/{label} n={n}: "
                        f"{res['unsorted_runs']} run(s) not sorted ({res['first_failure']})"
                    )

                if res["samples"]:
                    avg = SortMetrics.mean(res["samples"])
                    tracker.add_result(label, int(n), avg, variant=variant)
                    console.print(
                        f"{variant:>8s} {label:<13s} {avg.elapsed_ms:10.2f} ms, "
                        f"{avg.comparisons:,} comparisons, {avg.shifts:,} shifts"
                    )

                status = res["status"]
                if status in ("timeout", "error"):
                    skipped[(variant, dist)] = min(skipped.get((variant, dist), n), n)
                if status == "timeout":
                    console.print(
                        f"[yellow]{variant}/{label}: timed out at n={n} "
                        f"(run {res['timed_out_on_repeat']}); skipping larger sizes[/yellow]"
                    )
                elif status == "error":
                    console.print(f"[bold red]{variant}/{label} failed at n={n}:[/bold red] {res['error']}")

    return tracker


# ------------------------- CLI ------------------------- #

def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Benchmark insertion sort variants over synthetic data.")
    p.add_argument("--config", type=str, default=None, help="Path to YAML benchmark config")
    p.add_argument("--sizes", type=int, nargs="+", default=None, help="Input sizes to test")
    p.add_argument(
        "--variant",
        dest="variants",
        action="append",
        choices=sorted(VARIANTS),
        default=None,
        help="Variant to run (repeatable)",
    )
    p.add_argument("--seed", type=int, default=None, help="RNG seed for data generation")
    p.add_argument("--output", type=str, default=None, help="CSV output path")
    p.add_argument("--runs", dest="measurement_runs", type=int, default=None, help="Measured runs per cell")
    p.add_argument("--warmup", dest="warmup_runs", type=int, default=None, help="Warmup runs per cell")
    p.add_argument("--no-meta", dest="no_meta", action="store_true", help="Do not write <output>.meta.json")
    return p.parse_args(argv)


def _resolve_config(args: argparse.Namespace) -> BenchConfig:
    if args.config is not None:
        config_path = Path(args.config).resolve()
        if not config_path.exists():
            raise SystemExit(f"Config file not found: {config_path}")
        base = load_config(config_path)
    else:
        base = BenchConfig()
    return base.with_overrides(
        sizes=args.sizes,
        variants=args.variants,
        seed=args.seed,
        output=args.output,
        measurement_runs=args.measurement_runs,
        warmup_runs=args.warmup_runs,
        write_meta=False if args.no_meta else None,
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    try:
        cfg = _resolve_config(args)
    except ValueError as e:
        _console.print(f"[bold red]Invalid configuration:[/bold red] {e}")
        raise

    _console.print("[bold]=== Insertion Sort Performance Benchmark ===[/bold]\n")
    tracker = run_benchmarks(cfg)
    tracker.print_summary(_console)

    output = Path(cfg.output)
    written: List[Path] = []
    try:
        written.append(tracker.export_csv(output))
        if cfg.write_meta:
            meta_path = _meta_path(output)
            with meta_path.open("w", encoding="utf-8") as f:
                json.dump(_gather_meta(cfg), f, indent=2)
            written.append(meta_path)
    except OSError as e:
        _console.print(f"[bold red]Error exporting results:[/bold red] {e}")
        raise SystemExit(1) from e

    _console.print("[bold green]Done.[/bold green] Wrote:")
    for path in written:
        _console.print(f" - {path}")


if __name__ == "__main__":
    main()

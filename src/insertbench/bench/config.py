"""
Benchmark configuration: defaults, YAML loading, validation.

A config file is a flat YAML mapping; every key is optional and overlays the
defaults below. Example (experiments/configs/default.yaml):

    sizes: [100, 1000, 5000]
    variants: [plain, binary, sentinel, adaptive]
    distributions: [random, sorted, reversed, nearly_sorted, few_unique]
    warmup_runs: 3
    measurement_runs: 5
    seed: 42
    disable_gc: true
    timeout_seconds: 60
    output: performance_results.csv
    write_meta: true
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from insertbench.algorithms import VARIANTS
from insertbench.datasets import SUPPORTED_DISTS

__all__ = ["DATA_TYPE_LABELS", "BenchConfig", "load_config", "validate_config"]

# Display / CSV labels per distribution, in sweep order.
DATA_TYPE_LABELS: Dict[str, str] = {
    "random": "Random",
    "sorted": "Sorted",
    "reversed": "Reverse",
    "nearly_sorted": "NearlySorted",
    "few_unique": "FewUnique",
}


@dataclass(frozen=True)
class BenchConfig:
    sizes: List[int] = field(default_factory=lambda: [100, 1000, 5000])
    variants: List[str] = field(default_factory=lambda: ["adaptive"])
    distributions: List[str] = field(default_factory=lambda: list(DATA_TYPE_LABELS))
    warmup_runs: int = 3
    measurement_runs: int = 5
    seed: Optional[int] = None
    disable_gc: bool = True
    timeout_seconds: float = 60.0
    output: str = "performance_results.csv"
    write_meta: bool = True

    def with_overrides(self, **overrides: Any) -> "BenchConfig":
        """Return a validated copy with the non-None overrides applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return validate_config(replace(self, **changes))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_config(path: Path) -> BenchConfig:
    with path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config {path} must be a YAML mapping, got {type(raw).__name__}")

    known = {f.name for f in fields(BenchConfig)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ValueError(f"Unknown config keys: {unknown}. Known: {sorted(known)}")

    return validate_config(BenchConfig(**raw))


def validate_config(cfg: BenchConfig) -> BenchConfig:
    """Check types and ranges; return a normalized copy (lists, ints, floats)."""
    sizes = _as_list(cfg.sizes, "sizes")
    if not sizes:
        raise ValueError("Config 'sizes' must be a non-empty list of positive integers")
    for n in sizes:
        if not isinstance(n, int) or isinstance(n, bool) or n <= 0:
            raise ValueError(f"Config 'sizes' must hold positive integers; got {n!r}")

    variants = _as_list(cfg.variants, "variants")
    if not variants:
        raise ValueError("Config 'variants' must name at least one variant")
    bad = [v for v in variants if v not in VARIANTS]
    if bad:
        raise ValueError(f"Unknown variant(s): {bad}. Supported: {sorted(VARIANTS)}")

    dists = _as_list(cfg.distributions, "distributions")
    if not dists:
        raise ValueError("Config 'distributions' must name at least one distribution")
    bad = [d for d in dists if d not in SUPPORTED_DISTS]
    if bad:
        raise ValueError(f"Unknown distribution(s): {bad}. Supported: {sorted(SUPPORTED_DISTS)}")

    for name in ("warmup_runs", "measurement_runs"):
        val = getattr(cfg, name)
        if not isinstance(val, int) or isinstance(val, bool) or val < 0:
            raise ValueError(f"Config '{name}' must be a nonnegative integer; got {val!r}")
    if cfg.measurement_runs == 0:
        raise ValueError("Config 'measurement_runs' must be at least 1")

    if cfg.seed is not None and (not isinstance(cfg.seed, int) or isinstance(cfg.seed, bool)):
        raise ValueError(f"Config 'seed' must be an integer or null; got {cfg.seed!r}")

    if not isinstance(cfg.timeout_seconds, (int, float)) or isinstance(cfg.timeout_seconds, bool):
        raise ValueError(f"Config 'timeout_seconds' must be a number; got {cfg.timeout_seconds!r}")
    timeout = float(cfg.timeout_seconds)
    if timeout <= 0:
        raise ValueError("Config 'timeout_seconds' must be positive")

    for name in ("disable_gc", "write_meta"):
        val = getattr(cfg, name)
        if not isinstance(val, bool):
            raise ValueError(f"Config '{name}' must be true or false; got {val!r}")

    if not isinstance(cfg.output, str) or not cfg.output:
        raise ValueError("Config 'output' must be a non-empty path string")

    return replace(
        cfg,
        sizes=list(sizes),
        variants=list(variants),
        distributions=list(dists),
        timeout_seconds=timeout,
    )


def _as_list(val: Any, name: str) -> List[Any]:
    if isinstance(val, (list, tuple)):
        return list(val)
    raise ValueError(f"Config '{name}' must be a list; got {type(val).__name__}")

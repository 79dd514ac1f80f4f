"""
Experiment runner: orchestrates a benchmarking sweep from a YAML config.

Usage (from repo root):
    sortcatalog-bench experiments/configs/01_random_scaling.yaml
    python -m sortcatalog.bench.runner experiments/configs/01_random_scaling.yaml

Config keys:
    experiment_name, output_dir, seed, repeats, warmup, disable_gc,
    timeout_seconds, dataset, sizes, algorithms         (required)
    order: "ascending" | "descending"                   (optional, default ascending)
    validate: bool                                      (optional, default true)

`algorithms` lists strategy names from `sortcatalog.algorithms.STRATEGIES`,
either as plain strings or as {"name": ...} mappings.

Outputs in a new run directory:
    - config_resolved.yaml    # the config we actually used
    - meta.json               # environment info (python, numpy, cpu/ram, git commit)
    - results.jsonl           # one JSON line per timing sample or failure
    - summary.csv             # median + IQR per (algo, n)

Design notes:
- For each size n, we generate ONE dataset and give the same input to every strategy.
- On timeout/error/invalid output for a strategy at size n, we skip larger sizes for it.
"""

from __future__ import annotations

import argparse
import datetime as _dt
import json
import logging
import operator
import os
import platform
import subprocess
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import numpy as np
import pandas as pd
import psutil
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from tqdm import tqdm

from sortcatalog.algorithms import Strategy, get_strategy
from sortcatalog.bench.measure import time_sort_call
from sortcatalog.datasets import make_dataset

__all__ = ["REQUIRED_KEYS", "ORDERS", "run_experiment", "main"]

logger = logging.getLogger(__name__)
_console = Console()

REQUIRED_KEYS = [
    "experiment_name",
    "output_dir",
    "seed",
    "repeats",
    "warmup",
    "disable_gc",
    "timeout_seconds",
    "dataset",
    "sizes",
    "algorithms",
]

ORDERS: Dict[str, Callable[[Any, Any], bool]] = {
    "ascending": operator.lt,
    "descending": operator.gt,
}

SUMMARY_COLUMNS = ["algo", "n", "samples_ok", "median_ns", "iqr_ns", "min_ns", "max_ns"]


# ------------------------- helpers: IO & meta ------------------------- #

def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    if not isinstance(cfg, dict):
        raise ValueError(f"Config must be a YAML mapping: {path}")
    return cfg


def _write_yaml(obj: Dict[str, Any], path: Path) -> None:
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(obj, f, sort_keys=False)


def _append_jsonl(obj: Dict[str, Any], path: Path) -> None:
    with path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(obj, separators=(",", ":"), ensure_ascii=False))
        f.write("\n")


def _ensure_run_dir(base_dir: Path, experiment_name: str) -> Path:
    base_dir.mkdir(parents=True, exist_ok=True)
    stamp = _dt.datetime.now().strftime("%Y%m%d_%H%M%S")
    run_dir = base_dir / f"{stamp}_{experiment_name}"
    # Two runs in the same second get a numeric suffix
    suffix = 1
    while run_dir.exists():
        run_dir = base_dir / f"{stamp}_{experiment_name}_{suffix}"
        suffix += 1
    run_dir.mkdir(parents=False, exist_ok=False)
    return run_dir


def _git_commit_short() -> Optional[str]:
    try:
        out = subprocess.check_output(["git", "rev-parse", "--short", "HEAD"], stderr=subprocess.DEVNULL)
    except (OSError, subprocess.CalledProcessError):
        return None
    return out.decode("utf-8").strip()


def _gather_meta() -> Dict[str, Any]:
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
    }


def _resolve_algorithms(cfg_algos: List[Any]) -> List[Strategy]:
    strategies: List[Strategy] = []
    seen = set()
    for entry in cfg_algos:
        name = entry.get("name") if isinstance(entry, dict) else entry
        if not name or not isinstance(name, str):
            raise ValueError("Each algorithm must be a strategy name or have a string 'name' field")
        if name in seen:
            raise ValueError(f"Duplicate algorithm name in config: {name}")
        seen.add(name)
        strategies.append(get_strategy(name))
    return strategies


def _resolve_order(name: Any) -> Callable[[Any, Any], bool]:
    if name not in ORDERS:
        raise ValueError(f"Config 'order' must be one of {sorted(ORDERS)}; got {name!r}")
    return ORDERS[name]


def _iqr(s: pd.Series) -> float:
    return s.quantile(0.75) - s.quantile(0.25)


def _aggregate_summary(jsonl_path: Path) -> pd.DataFrame:
    if not jsonl_path.exists():
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    df = pd.read_json(jsonl_path, lines=True)
    # Failure lines carry no time_ns
    if "time_ns" not in df.columns:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    df = df[df["time_ns"].notna()]
    if df.empty:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    out = df.groupby(["algo", "n"], as_index=False).agg(
        samples_ok=("time_ns", "count"),
        median_ns=("time_ns", "median"),
        iqr_ns=("time_ns", _iqr),
        min_ns=("time_ns", "min"),
        max_ns=("time_ns", "max"),
    )
    out[["median_ns", "iqr_ns", "min_ns", "max_ns"]] = out[
        ["median_ns", "iqr_ns", "min_ns", "max_ns"]
    ].astype("int64")
    return out[SUMMARY_COLUMNS].sort_values(["algo", "n"], ignore_index=True)


def _print_summary(summary: pd.DataFrame, sizes: List[int]) -> None:
    table = Table(title="Benchmark Summary (median ± IQR in ms)")
    table.add_column("Algorithm", style="bold")
    picks = sorted({sizes[0], sizes[len(sizes) // 2], sizes[-1]})
    for n in picks:
        table.add_column(f"n={n}", justify="right")

    for algo in summary["algo"].unique():
        row = [str(algo)]
        for n in picks:
            s = summary[(summary["algo"] == algo) & (summary["n"] == n)]
            if s.empty:
                row.append("—")
            else:
                med = int(s["median_ns"].iloc[0]) / 1e6
                iqr = int(s["iqr_ns"].iloc[0]) / 1e6
                row.append(f"{med:.2f} ± {iqr:.2f}")
        table.add_row(*row)

    _console.print()
    _console.print(table)
    _console.print()


# ------------------------- core runner ------------------------- #

def run_experiment(config_path: Path, *, show_progress: bool = True) -> Path:
    """Run the sweep described by `config_path` and return the new run directory."""
    cfg = _load_yaml(config_path)

    missing = [k for k in REQUIRED_KEYS if k not in cfg]
    if missing:
        raise ValueError(f"Missing required config keys: {missing}")

    experiment_name = str(cfg["experiment_name"])
    output_dir = Path(cfg["output_dir"])
    sizes: List[int] = [int(n) for n in cfg["sizes"]]
    repeats = int(cfg["repeats"])
    warmup = bool(cfg["warmup"])
    disable_gc = bool(cfg["disable_gc"])
    timeout_seconds = float(cfg["timeout_seconds"])
    dataset_spec: Dict[str, Any] = dict(cfg["dataset"])
    order_name = cfg.get("order", "ascending")
    less = _resolve_order(order_name)
    validate = bool(cfg.get("validate", True))

    if not sizes or any(n <= 0 for n in sizes):
        # Strategies reject empty input, so n=0 is not a meaningful size
        raise ValueError("Config 'sizes' must be a non-empty list of positive integers")

    algos = _resolve_algorithms(list(cfg["algorithms"]))

    run_dir = _ensure_run_dir(output_dir, experiment_name)
    results_path = run_dir / "results.jsonl"
    summary_path = run_dir / "summary.csv"
    meta_path = run_dir / "meta.json"
    cfg_resolved_path = run_dir / "config_resolved.yaml"

    _write_yaml(cfg, cfg_resolved_path)
    with meta_path.open("w", encoding="utf-8") as f:
        json.dump(_gather_meta(), f, indent=2)

    logger.info("Run directory: %s", run_dir)
    logger.info("Experiment %s: %s (order=%s)", experiment_name, ", ".join(a.name for a in algos), order_name)

    rng = np.random.default_rng(int(cfg["seed"]))
    skipped = {a.name: False for a in algos}

    for n in tqdm(sizes, desc="Sizes", unit="n", disable=not show_progress):
        base_a = make_dataset(n, dataset_spec, rng)

        for strategy in algos:
            if skipped[strategy.name]:
                continue

            res = time_sort_call(
                algo_name=strategy.name,
                algo_fn=strategy.sort,
                a=base_a,
                less=less,
                repeats=repeats,
                warmup=warmup,
                disable_gc=disable_gc,
                timeout_seconds=timeout_seconds,
                validate=validate,
            )

            for trial_idx, t_ns in enumerate(res["samples_ns"]):
                _append_jsonl(
                    {
                        "algo": strategy.name,
                        "n": n,
                        "dataset": dataset_spec,
                        "order": order_name,
                        "trial": trial_idx,
                        "time_ns": int(t_ns),
                    },
                    results_path,
                )

            status = res["status"]
            if status != "ok":
                skipped[strategy.name] = True
                logger.warning("%s: %s at n=%d, skipping larger sizes", strategy.name, status, n)
                _append_jsonl(
                    {
                        "algo": strategy.name,
                        "n": n,
                        "status": status,
                        "error": res["error"],
                        "timed_out_on_repeat": res["timed_out_on_repeat"],
                    },
                    results_path,
                )

    summary_df = _aggregate_summary(results_path)
    summary_df.to_csv(summary_path, index=False)

    if show_progress:
        _print_summary(summary_df, sizes)
    logger.info("Wrote %s, %s, %s, %s", results_path, summary_path, meta_path, cfg_resolved_path)
    return run_dir


# ------------------------- CLI ------------------------- #

def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Run a sorting benchmark experiment from a YAML config.")
    p.add_argument("config", type=str, help="Path to YAML experiment config")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_console, rich_tracebacks=True)],
    )
    config_path = Path(args.config).resolve()
    if not config_path.exists():
        raise SystemExit(f"Config file not found: {config_path}")
    try:
        run_experiment(config_path)
    except Exception:
        logger.exception("Runner failed")
        raise


if __name__ == "__main__":
    main()

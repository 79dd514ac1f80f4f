from __future__ import annotations

import json
from pathlib import Path

import pandas as pd
import pytest
import yaml

from sortcatalog.bench.runner import main, run_experiment


def _write_config(tmp_path: Path, **overrides) -> Path:
    cfg = {
        "experiment_name": "smoke",
        "output_dir": str(tmp_path / "runs"),
        "seed": 42,
        "repeats": 2,
        "warmup": False,
        "disable_gc": False,
        "timeout_seconds": 30.0,
        "dataset": {"dist": "random", "params": {"range": [0, 999]}},
        "sizes": [8, 16],
        "algorithms": ["insertion_sort", {"name": "heap_sort"}, "radix_sort"],
    }
    cfg.update(overrides)
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump(cfg), encoding="utf-8")
    return path


def _read_jsonl(path: Path):
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]


def test_run_writes_all_outputs(tmp_path: Path) -> None:
    run_dir = run_experiment(_write_config(tmp_path), show_progress=False)

    for name in ("config_resolved.yaml", "meta.json", "results.jsonl", "summary.csv"):
        assert (run_dir / name).exists(), name

    meta = json.loads((run_dir / "meta.json").read_text(encoding="utf-8"))
    assert {"python", "numpy", "pandas", "machine"} <= set(meta)

    rows = _read_jsonl(run_dir / "results.jsonl")
    assert len(rows) == 3 * 2 * 2
    assert all("status" not in r for r in rows)

    summary = pd.read_csv(run_dir / "summary.csv")
    assert len(summary) == 6
    assert set(summary["algo"]) == {"insertion_sort", "heap_sort", "radix_sort"}
    assert (summary["samples_ok"] == 2).all()
    assert (summary["min_ns"] <= summary["median_ns"]).all()


def test_failing_strategy_is_skipped_for_larger_sizes(tmp_path: Path) -> None:
    path = _write_config(
        tmp_path,
        order="descending",
        dataset={"dist": "sorted"},
        algorithms=["shell_sort", "radix_sort"],
    )
    run_dir = run_experiment(path, show_progress=False)

    rows = _read_jsonl(run_dir / "results.jsonl")
    failures = [r for r in rows if "status" in r]
    assert len(failures) == 1
    assert failures[0]["algo"] == "radix_sort"
    assert failures[0]["status"] == "error"
    assert failures[0]["n"] == 8

    summary = pd.read_csv(run_dir / "summary.csv")
    assert set(summary["algo"]) == {"shell_sort"}


@pytest.mark.parametrize(
    ("overrides", "exc"),
    [
        ({"algorithms": ["bogo_sort"]}, KeyError),
        ({"algorithms": ["heap_sort", "heap_sort"]}, ValueError),
        ({"order": "sideways"}, ValueError),
        ({"sizes": []}, ValueError),
        ({"sizes": [0, 4]}, ValueError),
    ],
)
def test_bad_config(tmp_path: Path, overrides, exc) -> None:
    with pytest.raises(exc):
        run_experiment(_write_config(tmp_path, **overrides), show_progress=False)


def test_missing_keys(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({"experiment_name": "x"}), encoding="utf-8")
    with pytest.raises(ValueError, match="Missing required config keys"):
        run_experiment(path, show_progress=False)


def test_main_rejects_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        main([str(tmp_path / "nope.yaml")])

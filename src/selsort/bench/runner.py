"""
Experiment runner: times and validates selection-sort variants from a YAML config.

Usage (from repo root):
    python -m selsort.bench.runner experiments/configs/01_random_scaling.yaml
    selsort-bench experiments/configs/02_fuel_hazard.yaml

Outputs in a new run directory:
    - config_resolved.yaml    # the config we actually used
    - meta.json               # python/numpy/pandas/psutil versions, machine, git commit
    - results.jsonl           # one JSON line per sample, status event or validation
    - summary.csv             # median + IQR per (algo, n), plus validity
    - (console) rich table + tqdm progress over sizes

Design notes:
- One dataset per size n, shared by every algorithm.
- With `validate: true` (the default) each (algo, n) gets one extra untimed
  call whose output is checked against the sorting contract. A failed check
  is recorded, not raised: an under-fuelled `selection_sort_fuel` run shows
  up as `valid: false` in the results instead of stopping the experiment.
- After a timeout or error an algorithm is skipped for the remaining sizes.
"""

from __future__ import annotations

import argparse
import datetime as _dt
import importlib
import json
import os
import platform
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import numpy as np
import pandas as pd
import psutil
import yaml
from rich.console import Console
from rich.table import Table
from tqdm import tqdm

from selsort.bench.measure import time_sort_call
from selsort.datasets import make_dataset
from selsort.validate import assert_sorting_contract

__all__ = ["AlgoSpec", "REQUIRED_KEYS", "main", "run_experiment"]

_console = Console()

REQUIRED_KEYS = (
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
)

_SUMMARY_COLUMNS = ["algo", "n", "samples_ok", "median_ns", "iqr_ns", "min_ns", "max_ns", "valid"]


@dataclass(frozen=True)
class AlgoSpec:
    name: str
    sort_fn: Any
    config: Dict[str, Any]


# ------------------------- IO & meta ------------------------- #

def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    if not isinstance(cfg, dict):
        raise ValueError(f"Config {path} must be a YAML mapping")
    return cfg


def _write_yaml(obj: Dict[str, Any], path: Path) -> None:
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(obj, f, sort_keys=False)


def _append_jsonl(obj: Dict[str, Any], path: Path) -> None:
    with path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(obj, separators=(",", ":")) + "\n")


def _new_run_dir(base_dir: Path, experiment_name: str) -> Path:
    stamp = _dt.datetime.now().strftime("%Y%m%d_%H%M%S")
    base_dir.mkdir(parents=True, exist_ok=True)
    run_dir = base_dir / f"{stamp}_{experiment_name}"
    run_dir.mkdir(exist_ok=False)
    return run_dir


def _git_commit_short() -> Optional[str]:
    try:
        out = subprocess.check_output(
            ["git", "rev-parse", "--short", "HEAD"], stderr=subprocess.DEVNULL
        )
    except (OSError, subprocess.CalledProcessError):
        return None
    return out.decode("utf-8").strip() or None


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
    }


# ------------------------- config ------------------------- #

def _resolve_algorithms(entries: List[Dict[str, Any]]) -> List[AlgoSpec]:
    specs: List[AlgoSpec] = []
    seen = set()
    for entry in entries:
        if not isinstance(entry, dict):
            raise ValueError(f"Algorithm entries must be mappings; got {entry!r}")
        name = entry.get("name")
        if not name or not isinstance(name, str):
            raise ValueError("Each algorithm must have a string 'name' field")
        label = str(entry.get("label", name))
        if label in seen:
            raise ValueError(f"Duplicate algorithm label in config: {label}")
        seen.add(label)

        try:
            mod = importlib.import_module(f"selsort.algorithms.{name}")
        except ImportError as e:
            raise ImportError(f"Could not import algorithm module 'selsort.algorithms.{name}': {e!r}") from e
        if not callable(getattr(mod, "sort", None)):
            raise AttributeError(f"Algorithm module '{name}' must define a callable `sort(a, *, config=None)`")

        config = entry.get("config") or {}
        if not isinstance(config, dict):
            raise ValueError(f"Algorithm '{label}': 'config' must be a dict if provided")
        specs.append(AlgoSpec(name=label, sort_fn=mod.sort, config=config))
    return specs


def _check_config(cfg: Dict[str, Any]) -> None:
    missing = [k for k in REQUIRED_KEYS if k not in cfg]
    if missing:
        raise ValueError(f"Missing required config keys: {missing}")
    sizes = cfg["sizes"]
    if not isinstance(sizes, list) or not sizes:
        raise ValueError("Config 'sizes' must be a non-empty list of nonnegative integers")
    if any(isinstance(n, bool) or not isinstance(n, int) or n < 0 for n in sizes):
        raise ValueError(f"Config 'sizes' must hold nonnegative integers; got {sizes}")
    if not isinstance(cfg["dataset"], dict):
        raise ValueError("Config 'dataset' must be a mapping with 'dist' and 'params'")
    if not isinstance(cfg["algorithms"], list) or not cfg["algorithms"]:
        raise ValueError("Config 'algorithms' must be a non-empty list")


# ------------------------- validation ------------------------- #

def _validate_output(spec: AlgoSpec, a: List[int]) -> Dict[str, Any]:
    record: Dict[str, Any] = {"kind": "validation", "algo": spec.name, "n": len(a)}
    try:
        out = spec.sort_fn(list(a), config=spec.config)
    except Exception as e:
        record.update(valid=False, error=f"sort raised {e!r}", out_len=None)
        return record
    try:
        assert_sorting_contract(a, out)
    except AssertionError as e:
        record.update(valid=False, error=str(e), out_len=len(out))
    else:
        record.update(valid=True, error=None, out_len=len(out))
    return record


# ------------------------- summary ------------------------- #

def _aggregate_summary(jsonl_path: Path) -> pd.DataFrame:
    if not jsonl_path.exists():
        return pd.DataFrame(columns=_SUMMARY_COLUMNS)
    df = pd.read_json(jsonl_path, lines=True, dtype={"algo": str})
    if df.empty or "kind" not in df.columns:
        return pd.DataFrame(columns=_SUMMARY_COLUMNS)

    samples = df[df["kind"] == "sample"]
    if samples.empty:
        return pd.DataFrame(columns=_SUMMARY_COLUMNS)

    g = samples.groupby(["algo", "n"])["time_ns"]
    out = g.agg(
        samples_ok="count", median_ns="median", min_ns="min", max_ns="max"
    ).reset_index()
    out["iqr_ns"] = (g.quantile(0.75) - g.quantile(0.25)).to_numpy()
    cols = ["median_ns", "iqr_ns", "min_ns", "max_ns"]
    out[cols] = out[cols].astype("int64")

    checks = df[df["kind"] == "validation"]
    if checks.empty:
        out["valid"] = None
    else:
        out = out.merge(checks[["algo", "n", "valid"]], on=["algo", "n"], how="left")
    return out[_SUMMARY_COLUMNS].sort_values(["algo", "n"], ignore_index=True)


def _print_summary(summary: pd.DataFrame, invalid: List[Dict[str, Any]]) -> None:
    table = Table(title="Benchmark Summary (median ± IQR in ms)")
    table.add_column("Algorithm", style="bold")
    table.add_column("n", justify="right")
    table.add_column("time", justify="right")
    table.add_column("valid", justify="center")
    for row in summary.itertuples(index=False):
        if row.valid is None or pd.isna(row.valid):
            valid = "—"
        else:
            valid = "[green]yes[/]" if row.valid else "[red]no[/]"
        table.add_row(
            str(row.algo),
            str(row.n),
            f"{row.median_ns / 1e6:.2f} ± {row.iqr_ns / 1e6:.2f}",
            valid,
        )
    _console.print()
    _console.print(table)
    for rec in invalid:
        _console.print(f"[yellow]invalid output[/] {rec['algo']} n={rec['n']}: {rec['error']}")
    _console.print()


# ------------------------- core runner ------------------------- #

def run_experiment(config_path: Path) -> Path:
    """Run the experiment described by `config_path`; return the run directory."""
    config_path = Path(config_path)
    cfg = _load_yaml(config_path)
    _check_config(cfg)

    experiment_name = str(cfg["experiment_name"])
    sizes: List[int] = list(cfg["sizes"])
    repeats = int(cfg["repeats"])
    dataset_spec: Dict[str, Any] = dict(cfg["dataset"])
    validate = bool(cfg.get("validate", True))
    algos = _resolve_algorithms(list(cfg["algorithms"]))

    run_dir = _new_run_dir(Path(cfg["output_dir"]), experiment_name)
    results_path = run_dir / "results.jsonl"
    summary_path = run_dir / "summary.csv"
    meta_path = run_dir / "meta.json"

    _write_yaml(cfg, run_dir / "config_resolved.yaml")
    with meta_path.open("w", encoding="utf-8") as f:
        json.dump(_gather_meta(), f, indent=2)

    rng = np.random.default_rng(int(cfg["seed"]))
    skipped = set()
    invalid: List[Dict[str, Any]] = []

    _console.print(f"[bold green]Run directory:[/bold green] {run_dir}")
    _console.print(f"[bold]Algorithms:[/bold] {', '.join(a.name for a in algos)}")

    for n in tqdm(sizes, desc="Sizes", unit="n"):
        base_a = make_dataset(n, dataset_spec, rng)

        for spec in algos:
            if spec.name in skipped:
                continue

            if validate:
                check = _validate_output(spec, base_a)
                _append_jsonl(check, results_path)
                if not check["valid"]:
                    invalid.append(check)

            res = time_sort_call(
                algo_name=spec.name,
                algo_fn=spec.sort_fn,
                a=base_a,
                config=spec.config,
                repeats=repeats,
                warmup=bool(cfg["warmup"]),
                disable_gc=bool(cfg["disable_gc"]),
                timeout_seconds=float(cfg["timeout_seconds"]),
                defensive_copy=True,
            )
            for trial, t_ns in enumerate(res["samples_ns"]):
                _append_jsonl(
                    {
                        "kind": "sample",
                        "algo": spec.name,
                        "n": n,
                        "dataset": dataset_spec,
                        "trial": trial,
                        "time_ns": int(t_ns),
                        "config": spec.config,
                    },
                    results_path,
                )

            if res["status"] != "ok":
                skipped.add(spec.name)
                _append_jsonl(
                    {
                        "kind": "status",
                        "algo": spec.name,
                        "n": n,
                        "status": res["status"],
                        "error": res["error"],
                        "timed_out_on_repeat": res["timed_out_on_repeat"],
                        "config": spec.config,
                    },
                    results_path,
                )

    summary = _aggregate_summary(results_path)
    summary.to_csv(summary_path, index=False)
    _print_summary(summary, invalid)

    _console.print("[bold green]Done.[/bold green] Wrote:")
    for p in (results_path, summary_path, meta_path):
        _console.print(f" - {p}")
    return run_dir


# ------------------------- CLI ------------------------- #

def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Time and validate selection-sort variants from a YAML config.")
    p.add_argument("config", type=str, help="Path to YAML experiment config")
    return p.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    config_path = Path(args.config).resolve()
    if not config_path.exists():
        raise SystemExit(f"Config file not found: {config_path}")
    try:
        run_experiment(config_path)
    except Exception as e:
        _console.print(f"[bold red]Runner failed:[/bold red] {e!r}")
        raise


if __name__ == "__main__":
    main()

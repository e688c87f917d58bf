"""Run manifest for a tidy run: provenance of the input and what was written."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import Any

import numpy
import pandas

from linefish.artifacts import file_sha256
from linefish.config import MANIFEST_VERSION, Column, PipelineConfig
from linefish.types import TidyResult


def _git(args: list[str], cwd: Path) -> str | None:
    try:
        return subprocess.check_output(
            ["git", *args], cwd=cwd, text=True, stderr=subprocess.DEVNULL
        ).strip()
    except (OSError, subprocess.CalledProcessError):
        return None


def build_run_manifest(
    config: PipelineConfig, result: TidyResult, project_root: Path
) -> dict[str, Any]:
    commit = _git(["rev-parse", "HEAD"], project_root)
    status = _git(["status", "--porcelain"], project_root)
    years = result.wide[Column.YEAR]
    return {
        "manifest_version": MANIFEST_VERSION,
        "input_path": str(config.input_path.resolve()),
        "input_sha256": file_sha256(config.input_path),
        "python_executable": sys.executable,
        "library_versions": {
            "python": sys.version.split()[0],
            "numpy": numpy.__version__,
            "pandas": pandas.__version__,
        },
        "git_commit": commit or "UNKNOWN",
        # Outside a checkout the tree state is unknown; record it as dirty.
        "git_dirty": True if status is None else bool(status),
        "n_raw_rows": result.n_raw_rows,
        "n_dropped_rows": result.n_dropped_rows,
        "dropped_year_labels": result.dropped_year_labels,
        "n_years": len(result.wide),
        "year_min": int(years.min()),
        "year_max": int(years.max()),
        "artifacts": {
            "tidy_wide": str(config.tidy_wide_path.resolve()),
            "tidy_long": str(config.tidy_long_path.resolve()),
            "summary": str(config.summary_path.resolve()),
        },
    }

from __future__ import annotations

import json
from pathlib import Path

import numpy as np
import pandas as pd

from linefish.artifacts import ValidationResult, read_csv_if_exists, validate_columns
from linefish.config import (
    MANIFEST_REQUIRED_KEYS,
    METRIC_ORDER,
    REQUIRED_REPORT_ARTIFACTS,
    ArtifactName,
    Column,
)
from linefish.summary import summarise_wide
from linefish.tidy import derive_cpue


def _coerce_numeric(
    df: pd.DataFrame, columns: list[str], errors: list[str], file_name: str
) -> pd.DataFrame | None:
    out = df.copy()
    ok = True
    for col in columns:
        coerced = pd.to_numeric(out[col], errors="coerce")
        bad = coerced.isna() & out[col].notna()
        if bad.any():
            rows = bad[bad].index.tolist()
            errors.append(f"{file_name}: non-numeric {col} at row(s) {rows}")
            ok = False
        out[col] = coerced.astype(float)
    return out if ok else None


def _audit_wide(raw_wide: pd.DataFrame, errors: list[str]) -> pd.DataFrame | None:
    name = ArtifactName.TIDY_WIDE
    if not validate_columns(raw_wide, Column.WIDE, errors, name):
        return None
    if list(raw_wide.columns) != Column.WIDE:
        errors.append(f"{name}: column order {list(raw_wide.columns)} != {Column.WIDE}")
    wide = _coerce_numeric(raw_wide, Column.WIDE, errors, name)
    if wide is None:
        return None

    years = wide[Column.YEAR]
    if years.isna().any():
        errors.append(f"{name}: missing {Column.YEAR} values")
        return None
    fractional = sorted(float(y) for y in years if y != np.floor(y))
    if fractional:
        errors.append(f"{name}: non-integer years {fractional}")
        return None
    wide[Column.YEAR] = years.astype("int64")
    years = wide[Column.YEAR]

    dups = sorted(int(y) for y, n in years.value_counts().items() if n > 1)
    if dups:
        errors.append(f"{name}: duplicate years {dups}")
    if not years.is_monotonic_increasing:
        errors.append(f"{name}: years not sorted ascending")
    bad_years = sorted(int(y) for y in years if not 1000 <= int(y) <= 9999)
    if bad_years:
        errors.append(f"{name}: years not 4-digit {bad_years}")

    cpue = wide[Column.CPUE].to_numpy(dtype=float)
    if np.isinf(cpue).any():
        errors.append(f"{name}: infinite {Column.CPUE}")
    expected = derive_cpue(wide[Column.TONNES], wide[Column.DAYS])
    if not np.allclose(cpue, expected.to_numpy(), equal_nan=True):
        errors.append(f"{name}: {Column.CPUE} inconsistent with tonnes/days")
    return wide


def _audit_long(long: pd.DataFrame, wide: pd.DataFrame, errors: list[str]) -> None:
    name = ArtifactName.TIDY_LONG
    if not validate_columns(long, Column.LONG, errors, name):
        return
    long = _coerce_numeric(long, [Column.YEAR, Column.VALUE], errors, name)
    if long is None:
        return
    n_metrics = len(METRIC_ORDER)
    if len(long) != n_metrics * len(wide):
        errors.append(
            f"{name}: expected {n_metrics * len(wide)} rows, got {len(long)}"
        )
        return

    expected_years = np.repeat(wide[Column.YEAR].to_numpy(), n_metrics)
    if not np.array_equal(long[Column.YEAR].to_numpy(), expected_years):
        errors.append(f"{name}: year order does not match {ArtifactName.TIDY_WIDE}")
    expected_metrics = METRIC_ORDER * len(wide)
    if long[Column.METRIC].astype(str).tolist() != expected_metrics:
        errors.append(f"{name}: metric order != {METRIC_ORDER} within each year")
        return

    expected_values = wide[METRIC_ORDER].to_numpy(dtype=float).reshape(-1)
    if not np.allclose(long[Column.VALUE].to_numpy(dtype=float), expected_values, equal_nan=True):
        errors.append(f"{name}: values differ from {ArtifactName.TIDY_WIDE}")


def _audit_summary(summary: pd.DataFrame, wide: pd.DataFrame, errors: list[str]) -> None:
    name = ArtifactName.SUMMARY
    if not validate_columns(summary, Column.SUMMARY, errors, name):
        return
    if len(summary) != 1:
        errors.append(f"{name}: expected 1 row, got {len(summary)}")
        return
    summary = _coerce_numeric(summary, Column.SUMMARY, errors, name)
    if summary is None:
        return
    expected = summarise_wide(wide)
    for col in Column.SUMMARY:
        actual = float(summary[col].iloc[0])
        want = float(expected[col].iloc[0])
        if not np.isclose(actual, want, equal_nan=True):
            errors.append(f"{name}: {col} {actual} != {want}")


def _audit_manifest(manifest: dict, wide: pd.DataFrame, errors: list[str]) -> None:
    name = ArtifactName.MANIFEST
    missing = [k for k in MANIFEST_REQUIRED_KEYS if k not in manifest]
    if missing:
        errors.append(f"{name}: missing keys {missing}")
        return
    if manifest["n_years"] != len(wide):
        errors.append(f"{name}: n_years {manifest['n_years']} != {len(wide)}")
    if manifest["n_dropped_rows"] != len(manifest["dropped_year_labels"]):
        errors.append(f"{name}: n_dropped_rows does not match dropped_year_labels")
    if len(wide) and manifest["year_min"] != int(wide[Column.YEAR].min()):
        errors.append(f"{name}: year_min mismatch")
    if len(wide) and manifest["year_max"] != int(wide[Column.YEAR].max()):
        errors.append(f"{name}: year_max mismatch")


def run_artifact_audit(data_dir: Path, reports_dir: Path) -> ValidationResult:
    errors: list[str] = []
    for path in [
        data_dir / ArtifactName.TIDY_WIDE,
        data_dir / ArtifactName.TIDY_LONG,
        *[reports_dir / n for n in REQUIRED_REPORT_ARTIFACTS],
    ]:
        if not path.exists():
            errors.append(f"missing artifact: {path.name}")

    raw_wide = read_csv_if_exists(data_dir / ArtifactName.TIDY_WIDE)
    wide = None if raw_wide is None else _audit_wide(raw_wide, errors)
    if wide is None:
        return ValidationResult(ok=False, errors=errors)

    long = read_csv_if_exists(data_dir / ArtifactName.TIDY_LONG)
    if long is not None:
        _audit_long(long, wide, errors)

    summary = read_csv_if_exists(reports_dir / ArtifactName.SUMMARY)
    if summary is not None:
        _audit_summary(summary, wide, errors)

    manifest_path = reports_dir / ArtifactName.MANIFEST
    if manifest_path.exists():
        manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
        _audit_manifest(manifest, wide, errors)

    return ValidationResult(ok=not errors, errors=errors)

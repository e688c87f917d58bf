from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

REQUIRED_COLUMNS: Final[list[str]] = ["calendar_year", "licences", "days", "tonnes"]

# Long-form metric order drives faceted output; keep it fixed.
METRIC_ORDER: Final[list[str]] = ["tonnes", "days", "licences"]

YEAR_PATTERN: Final[str] = r"\d{4}"

DEFAULT_INPUT_CANDIDATES: Final[list[str]] = ["export.csv", "code/export.csv"]

MANIFEST_VERSION: Final[str] = "1.0"


class Column:
    YEAR = "calendar_year"
    LICENCES = "licences"
    DAYS = "days"
    TONNES = "tonnes"
    CPUE = "cpue_t_per_day"
    METRIC = "metric"
    VALUE = "value"

    WIDE = [YEAR, LICENCES, DAYS, TONNES, CPUE]
    LONG = [YEAR, METRIC, VALUE]
    SUMMARY = ["year_min", "year_max", "total_t", "total_days", "mean_cpue"]


class ArtifactName:
    TIDY_WIDE = "commercial_line_tidy_wide.csv"
    TIDY_LONG = "commercial_line_tidy_long.csv"
    SUMMARY = "tidy_summary.csv"
    MANIFEST = "run_manifest.json"


REQUIRED_REPORT_ARTIFACTS: Final[list[str]] = [
    ArtifactName.SUMMARY,
    ArtifactName.MANIFEST,
]

MANIFEST_REQUIRED_KEYS: Final[list[str]] = [
    "manifest_version",
    "input_path",
    "input_sha256",
    "python_executable",
    "library_versions",
    "git_commit",
    "git_dirty",
    "n_raw_rows",
    "n_dropped_rows",
    "dropped_year_labels",
    "n_years",
    "year_min",
    "year_max",
    "artifacts",
]


@dataclass(frozen=True)
class PipelineConfig:
    input_path: Path
    data_dir: Path
    reports_dir: Path

    @property
    def tidy_wide_path(self) -> Path:
        return self.data_dir / ArtifactName.TIDY_WIDE

    @property
    def tidy_long_path(self) -> Path:
        return self.data_dir / ArtifactName.TIDY_LONG

    @property
    def summary_path(self) -> Path:
        return self.reports_dir / ArtifactName.SUMMARY

    @property
    def manifest_path(self) -> Path:
        return self.reports_dir / ArtifactName.MANIFEST

from __future__ import annotations

import logging
from pathlib import Path

from linefish.artifacts import ensure_reports_dir, write_csv, write_manifest
from linefish.config import PipelineConfig
from linefish.io import LoadedRaw, load_raw_records
from linefish.manifest import build_run_manifest
from linefish.qa import validate_tidy_wide
from linefish.reshape import to_long
from linefish.summary import summarise_wide
from linefish.tidy import tidy_wide
from linefish.types import TidyBundle

logger = logging.getLogger(__name__)


def run_tidy_contract(config: PipelineConfig, project_root: Path | None = None) -> TidyBundle:
    loaded: LoadedRaw = load_raw_records(config.input_path)
    result = tidy_wide(loaded.frame)
    validate_tidy_wide(result.wide)
    long = to_long(result.wide)
    summary = summarise_wide(result.wide)

    write_csv(result.wide, config.tidy_wide_path)
    write_csv(long, config.tidy_long_path)
    reports = ensure_reports_dir(config.reports_dir)
    write_csv(summary, config.summary_path)

    manifest = build_run_manifest(
        config, result, project_root or config.input_path.resolve().parent
    )
    write_manifest(manifest, config.manifest_path)
    logger.info(
        "Wrote tidy CSVs:\n - %s\n - %s\nReports in %s",
        config.tidy_wide_path.resolve(),
        config.tidy_long_path.resolve(),
        reports.resolve(),
    )

    return TidyBundle(
        config=config,
        tidy=result,
        wide=result.wide,
        long=long,
        summary=summary,
    )

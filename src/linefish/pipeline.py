from __future__ import annotations

from pathlib import Path
from typing import Callable

from linefish.artifacts import ValidationResult
from linefish.config import PipelineConfig
from linefish.locate import resolve_config
from linefish.types import TidyBundle
from linefish.workflows.audit import run_artifact_audit
from linefish.workflows.tidy_contract import run_tidy_contract


def run_01_tidy_and_write(
    base_dir: Path,
    input_path: Path | None = None,
    output_dir: Path | None = None,
    prompt: Callable[[], str] | None = None,
    project_root: Path | None = None,
) -> TidyBundle:
    config = resolve_config(
        base_dir=base_dir, input_path=input_path, output_dir=output_dir, prompt=prompt
    )
    return run_tidy_contract(config, project_root=project_root)


def run_02_artifact_audit(config: PipelineConfig) -> ValidationResult:
    return run_artifact_audit(data_dir=config.data_dir, reports_dir=config.reports_dir)

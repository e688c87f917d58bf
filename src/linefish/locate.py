"""Resolve input and output locations for a tidy run.

Every probe is relative to an explicit ``base_dir``; nothing here reads the
process working directory.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from linefish.config import DEFAULT_INPUT_CANDIDATES, PipelineConfig

logger = logging.getLogger(__name__)


def resolve_input_path(
    base_dir: Path,
    input_path: Path | None = None,
    prompt: Callable[[], str] | None = None,
) -> Path:
    if input_path is not None:
        path = Path(input_path)
        if not path.exists():
            raise FileNotFoundError(f"Missing input file: {path}")
        return path

    probed = [base_dir / name for name in DEFAULT_INPUT_CANDIDATES]
    for candidate in probed:
        if candidate.is_file():
            return candidate

    if prompt is not None:
        answer = prompt().strip()
        if answer:
            path = Path(answer).expanduser()
            if not path.exists():
                raise FileNotFoundError(f"Missing input file: {path}")
            return path

    raise FileNotFoundError(
        f"No input CSV found; probed {[str(p) for p in probed]}"
    )


def resolve_data_dir(base_dir: Path, output_dir: Path | None = None) -> Path:
    if output_dir is not None:
        return Path(output_dir)
    sibling = base_dir.parent / "data"
    if sibling.is_dir():
        return sibling
    return base_dir


def resolve_reports_dir(base_dir: Path, output_dir: Path | None = None) -> Path:
    if output_dir is not None:
        return Path(output_dir) / "reports"
    sibling = base_dir.parent / "reports"
    if sibling.is_dir():
        return sibling
    return base_dir / "reports"


def resolve_config(
    base_dir: Path,
    input_path: Path | None = None,
    output_dir: Path | None = None,
    prompt: Callable[[], str] | None = None,
) -> PipelineConfig:
    base_dir = Path(base_dir)
    config = PipelineConfig(
        input_path=resolve_input_path(base_dir, input_path, prompt),
        data_dir=resolve_data_dir(base_dir, output_dir),
        reports_dir=resolve_reports_dir(base_dir, output_dir),
    )
    logger.info(
        "Reading %s; tidy tables to %s; reports to %s",
        config.input_path.resolve(),
        config.data_dir.resolve(),
        config.reports_dir.resolve(),
    )
    return config

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from linefish.config import PipelineConfig


@dataclass(frozen=True)
class TidyResult:
    wide: pd.DataFrame
    n_raw_rows: int
    n_dropped_rows: int
    dropped_year_labels: list[str]


@dataclass(frozen=True)
class TidyBundle:
    config: PipelineConfig
    tidy: TidyResult
    wide: pd.DataFrame
    long: pd.DataFrame
    summary: pd.DataFrame

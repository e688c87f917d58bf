from __future__ import annotations

import logging

import numpy as np
import pandas as pd

from linefish.config import Column
from linefish.errors import InvariantViolation, NoValidYearsError
from linefish.io import require_columns
from linefish.parse import extract_year, parse_number
from linefish.types import TidyResult

logger = logging.getLogger(__name__)

_METRICS = [Column.LICENCES, Column.DAYS, Column.TONNES]


def derive_cpue(tonnes: pd.Series, days: pd.Series) -> pd.Series:
    """Tonnes per day where ``days > 0``; NaN otherwise."""
    positive = days > 0
    safe_days = days.where(positive, other=1.0)
    return pd.Series(
        np.where(positive, tonnes / safe_days, np.nan),
        index=tonnes.index,
        dtype="float64",
        name=Column.CPUE,
    )


def tidy_wide(raw: pd.DataFrame) -> TidyResult:
    require_columns(raw, [Column.YEAR, *_METRICS])

    years = raw[Column.YEAR].map(extract_year)
    keep = years.notna()
    dropped = raw.loc[~keep, Column.YEAR]
    dropped_labels = ["" if pd.isna(v) else str(v) for v in dropped.tolist()]
    if dropped_labels:
        logger.info(
            "Dropped %d row(s) without a 4-digit year: %s",
            len(dropped_labels),
            dropped_labels,
        )
    if not keep.any():
        raise NoValidYearsError(
            f"No row of {len(raw)} has a 4-digit {Column.YEAR} value"
        )

    parsed = pd.DataFrame({Column.YEAR: years[keep].astype("int64")})
    for col in _METRICS:
        parsed[col] = raw.loc[keep, col].map(parse_number).astype("float64")

    wide = (
        parsed.groupby(Column.YEAR, as_index=False, sort=True)[_METRICS]
        .sum(min_count=0)
        .sort_values(Column.YEAR, kind="mergesort")
        .reset_index(drop=True)
    )
    if wide[Column.YEAR].isna().any():
        raise InvariantViolation(f"Missing {Column.YEAR} after aggregation")

    wide[Column.CPUE] = derive_cpue(wide[Column.TONNES], wide[Column.DAYS])
    wide = wide[Column.WIDE]

    negative = wide.loc[(wide[_METRICS] < 0).any(axis=1), Column.YEAR].tolist()
    if negative:
        logger.warning("Negative yearly totals for year(s) %s", negative)

    logger.info(
        "Aggregated %d raw row(s) into %d year(s)", int(keep.sum()), len(wide)
    )
    return TidyResult(
        wide=wide,
        n_raw_rows=int(len(raw)),
        n_dropped_rows=len(dropped_labels),
        dropped_year_labels=dropped_labels,
    )

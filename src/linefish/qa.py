from __future__ import annotations

import pandas as pd

from linefish.config import Column
from linefish.errors import DuplicateYearError, MissingYearError
from linefish.io import require_columns


def validate_tidy_wide(wide: pd.DataFrame) -> None:
    require_columns(wide, Column.WIDE)

    years = wide[Column.YEAR]
    n_missing = int(years.isna().sum())
    if n_missing:
        raise MissingYearError(f"tidy_wide: {n_missing} row(s) with missing {Column.YEAR}")

    counts = years.value_counts()
    dups = sorted(int(y) for y in counts[counts > 1].index)
    if dups:
        raise DuplicateYearError(
            f"tidy_wide: duplicate years remain after aggregation: {dups}"
        )

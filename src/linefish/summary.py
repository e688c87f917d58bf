from __future__ import annotations

import numpy as np
import pandas as pd

from linefish.config import Column


def summarise_wide(wide: pd.DataFrame) -> pd.DataFrame:
    cpue = wide[Column.CPUE].dropna()
    row = {
        "year_min": int(wide[Column.YEAR].min()),
        "year_max": int(wide[Column.YEAR].max()),
        "total_t": float(wide[Column.TONNES].sum()),
        "total_days": float(wide[Column.DAYS].sum()),
        "mean_cpue": float(cpue.mean()) if len(cpue) else np.nan,
    }
    return pd.DataFrame([row], columns=Column.SUMMARY)

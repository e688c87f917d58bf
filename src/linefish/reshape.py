from __future__ import annotations

import pandas as pd

from linefish.config import METRIC_ORDER, Column


def to_long(wide: pd.DataFrame) -> pd.DataFrame:
    """Pivot the yearly metrics into one ``(calendar_year, metric, value)`` row each.

    Rows are ordered by year, then by ``METRIC_ORDER``.
    """
    long = wide.melt(
        id_vars=[Column.YEAR],
        value_vars=METRIC_ORDER,
        var_name=Column.METRIC,
        value_name=Column.VALUE,
    )
    rank = long[Column.METRIC].map({m: i for i, m in enumerate(METRIC_ORDER)})
    order = (
        pd.DataFrame({"year": long[Column.YEAR], "rank": rank})
        .sort_values(["year", "rank"], kind="mergesort")
        .index
    )
    return long.loc[order, Column.LONG].reset_index(drop=True)

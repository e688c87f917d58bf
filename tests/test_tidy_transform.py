from __future__ import annotations

import logging

import numpy as np
import pandas as pd
import pytest

from linefish.errors import NoValidYearsError, SchemaError
from linefish.parse import extract_year, parse_number
from linefish.tidy import derive_cpue, tidy_wide


def _raw(rows: list[tuple[str, str, str, str]]) -> pd.DataFrame:
    return pd.DataFrame(rows, columns=["calendar_year", "licences", "days", "tonnes"], dtype=object)


def test_grand_total_row_is_dropped() -> None:
    raw = _raw([("2020", "1,200", "300", "450.5"), ("Grand Total", "9999", "9999", "9999")])
    result = tidy_wide(raw)
    wide = result.wide

    assert len(wide) == 1
    row = wide.iloc[0]
    assert row["calendar_year"] == 2020
    assert row["licences"] == pytest.approx(1200.0)
    assert row["days"] == pytest.approx(300.0)
    assert row["tonnes"] == pytest.approx(450.5)
    assert row["cpue_t_per_day"] == pytest.approx(1.5017, abs=1e-4)
    assert result.n_raw_rows == 2
    assert result.n_dropped_rows == 1
    assert result.dropped_year_labels == ["Grand Total"]


def test_same_year_rows_are_summed() -> None:
    raw = _raw([("2019", "1", "100", "50"), ("2019", "2", "50", "25")])
    wide = tidy_wide(raw).wide

    assert wide["calendar_year"].tolist() == [2019]
    assert wide.loc[0, "days"] == pytest.approx(150.0)
    assert wide.loc[0, "tonnes"] == pytest.approx(75.0)
    assert wide.loc[0, "cpue_t_per_day"] == pytest.approx(0.5)


def test_zero_days_gives_missing_cpue() -> None:
    wide = tidy_wide(_raw([("2001", "1", "0", "10")])).wide
    cpue = wide.loc[0, "cpue_t_per_day"]
    assert pd.isna(cpue)
    assert not np.isinf(wide["cpue_t_per_day"].to_numpy(dtype=float)).any()


def test_all_missing_metric_sums_to_zero() -> None:
    wide = tidy_wide(_raw([("2005", "", "n/a", "-"), ("2005", None, None, None)])).wide
    assert wide.loc[0, ["licences", "days", "tonnes"]].tolist() == [0.0, 0.0, 0.0]
    assert pd.isna(wide.loc[0, "cpue_t_per_day"])


def test_output_sorted_with_fixed_columns() -> None:
    raw = _raw([("2003", "1", "1", "1"), ("1999", "1", "1", "1"), ("2001", "1", "1", "1")])
    wide = tidy_wide(raw).wide
    assert wide["calendar_year"].tolist() == [1999, 2001, 2003]
    assert list(wide.columns) == ["calendar_year", "licences", "days", "tonnes", "cpue_t_per_day"]


def test_annotated_year_survives() -> None:
    wide = tidy_wide(_raw([("2024 incomplete", "5", "2", "1")])).wide
    assert wide["calendar_year"].tolist() == [2024]


def test_no_valid_years_is_fatal() -> None:
    with pytest.raises(NoValidYearsError):
        tidy_wide(_raw([("Grand Total", "1", "1", "1"), ("", "1", "1", "1")]))


def test_missing_metric_column_is_schema_error() -> None:
    raw = pd.DataFrame({"calendar_year": ["2020"], "days": ["1"], "tonnes": ["1"]})
    with pytest.raises(SchemaError):
        tidy_wide(raw)


def test_tonnes_are_conserved(synthetic_export_frame: pd.DataFrame) -> None:
    wide = tidy_wide(synthetic_export_frame).wide
    valid = synthetic_export_frame["calendar_year"].map(extract_year).notna()
    expected = sum(
        parse_number(v) or 0.0 for v in synthetic_export_frame.loc[valid, "tonnes"]
    )
    assert wide["tonnes"].sum() == pytest.approx(expected)
    assert wide["tonnes"].sum() == pytest.approx(1536.75)


def test_years_unique_after_aggregation(synthetic_export_frame: pd.DataFrame) -> None:
    wide = tidy_wide(synthetic_export_frame).wide
    assert wide["calendar_year"].is_unique
    assert wide["calendar_year"].tolist() == [1990, 1991, 1992, 1993, 2024]


def test_input_frame_is_not_mutated(synthetic_export_frame: pd.DataFrame) -> None:
    before = synthetic_export_frame.copy()
    tidy_wide(synthetic_export_frame)
    pd.testing.assert_frame_equal(synthetic_export_frame, before)


def test_dropped_rows_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    raw = _raw([("2020", "1", "1", "1"), ("Grand Total", "1", "1", "1")])
    with caplog.at_level(logging.INFO, logger="linefish.tidy"):
        tidy_wide(raw)
    assert any("Grand Total" in r.getMessage() for r in caplog.records)


def test_derive_cpue_handles_negative_days() -> None:
    out = derive_cpue(pd.Series([10.0, 10.0, 0.0]), pd.Series([-1.0, 0.0, 4.0]))
    assert pd.isna(out.iloc[0])
    assert pd.isna(out.iloc[1])
    assert out.iloc[2] == 0.0


def test_negative_totals_log_warning(caplog: pytest.LogCaptureFixture) -> None:
    raw = _raw([("2010", "1", "10", "-5"), ("2011", "1", "10", "5")])
    with caplog.at_level(logging.WARNING, logger="linefish.tidy"):
        wide = tidy_wide(raw).wide
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "2010" in warnings[0].getMessage()
    assert "2011" not in warnings[0].getMessage()
    assert wide.loc[0, "tonnes"] == pytest.approx(-5.0)

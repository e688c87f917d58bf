from __future__ import annotations

import math

import pytest

from linefish.parse import extract_year, parse_number


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2020", 2020),
        (" 1995 ", 1995),
        ("2024 incomplete", 2024),
        ("FY2018-19", 2018),
        ("Grand Total", None),
        ("98", None),
        ("", None),
        (None, None),
        (float("nan"), None),
    ],
)
def test_extract_year(text, expected) -> None:
    assert extract_year(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1,200", 1200.0),
        ("$1,234.50", 1234.5),
        ("450.5", 450.5),
        ("12 t", 12.0),
        ("-3", -3.0),
        (".5", 0.5),
        (7, 7.0),
    ],
)
def test_parse_number_strips_formatting(text, expected) -> None:
    assert parse_number(text) == pytest.approx(expected)


@pytest.mark.parametrize("text", ["", "n/a", "NA", "-", None, float("nan"), float("inf")])
def test_parse_number_failure_is_missing(text) -> None:
    assert parse_number(text) is None


def test_parse_number_never_returns_nan() -> None:
    out = parse_number("12,5")
    assert out is not None and not math.isnan(out)

from __future__ import annotations

from pathlib import Path
from uuid import uuid4
import shutil

import pandas as pd
import pytest


def _make_synthetic_export() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "Calendar Year": ["1990", "1991", "1991", "1992", "1993", "2024 incomplete", "Grand Total"],
            "Licences": ["1,200", "300", "50", "", "10", "5", "9999"],
            "Days": ["300", "100", "50", "0", "n/a", "2", "9999"],
            "Tonnes": ["450.5", "$50", "25", "10", "1,000.25", "1", "9999"],
        }
    )


@pytest.fixture()
def workspace_tmp_dir() -> Path:
    root = Path(".test_tmp") / str(uuid4())
    root.mkdir(parents=True, exist_ok=True)
    try:
        yield root
    finally:
        shutil.rmtree(root, ignore_errors=True)


@pytest.fixture()
def synthetic_export_csv(workspace_tmp_dir: Path) -> Path:
    path = workspace_tmp_dir / "export.csv"
    _make_synthetic_export().to_csv(path, index=False)
    return path


@pytest.fixture()
def synthetic_export_frame() -> pd.DataFrame:
    frame = _make_synthetic_export()
    frame.columns = ["calendar_year", "licences", "days", "tonnes"]
    return frame

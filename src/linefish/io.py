from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

import pandas as pd

from linefish.config import REQUIRED_COLUMNS
from linefish.errors import SchemaError

logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_NON_ALNUM = re.compile(r"[^0-9a-zA-Z]+")


@dataclass(frozen=True)
class LoadedRaw:
    frame: pd.DataFrame
    source_path: Path
    original_columns: list[str]


def clean_column_name(name: object) -> str:
    text = str(name).strip()
    text = text.replace("%", " percent ").replace("#", " number ")
    text = _CAMEL_BOUNDARY.sub("_", text)
    text = _NON_ALNUM.sub("_", text).strip("_").lower()
    return text or "x"


def clean_names(df: pd.DataFrame) -> pd.DataFrame:
    seen: dict[str, int] = {}
    names: list[str] = []
    for col in df.columns:
        base = clean_column_name(col)
        seen[base] = seen.get(base, 0) + 1
        names.append(base if seen[base] == 1 else f"{base}_{seen[base]}")
    out = df.copy()
    out.columns = names
    return out


def require_columns(df: pd.DataFrame, required: list[str]) -> None:
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise SchemaError(
            f"Missing columns in CSV: {', '.join(missing)} (found: {list(df.columns)})"
        )


def load_raw_records(path: Path) -> LoadedRaw:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Missing input file: {path}")

    # Header row is read as data so duplicate and blank names reach clean_names as written.
    table = pd.read_csv(path, dtype=str, header=None, skipinitialspace=True, na_filter=False)
    original_columns = ["" if pd.isna(c) else str(c) for c in table.iloc[0].tolist()]
    raw = table.iloc[1:].reset_index(drop=True)
    raw.columns = original_columns
    frame = clean_names(raw)
    require_columns(frame, REQUIRED_COLUMNS)
    logger.info("Read %d raw rows from %s", len(frame), path.resolve())
    return LoadedRaw(frame=frame, source_path=path, original_columns=original_columns)

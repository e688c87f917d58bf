"""Per-cell parsers for raw QFish export values.

Both parsers are total: they return ``None`` for anything they cannot
interpret instead of raising, so a single bad cell never aborts a run.
"""

from __future__ import annotations

import math
import re
from typing import Any

from linefish.config import YEAR_PATTERN

_YEAR_RE = re.compile(YEAR_PATTERN)
_NUMBER_RE = re.compile(r"[-+]?(?:\d+(?:\.\d*)?|\.\d+)")
_GROUPING_MARK = ","


def _cell_text(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    text = str(value).strip()
    return text or None


def extract_year(value: Any) -> int | None:
    """Return the first run of four digits in ``value`` as an int.

    ``"2024 incomplete"`` yields 2024; ``"Grand Total"`` yields None.
    """
    text = _cell_text(value)
    if text is None:
        return None
    match = _YEAR_RE.search(text)
    if match is None:
        return None
    return int(match.group(0))


def parse_number(value: Any) -> float | None:
    """Parse a formatted number such as ``"$1,200.50"`` or ``"450 t"``.

    Grouping commas are removed, then the first signed decimal in the text
    is taken; surrounding symbols and units are ignored.
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        out = float(value)
        return out if math.isfinite(out) else None
    text = _cell_text(value)
    if text is None:
        return None
    match = _NUMBER_RE.search(text.replace(_GROUPING_MARK, ""))
    if match is None:
        return None
    return float(match.group(0))

"""Shape raw spreadsheet rows into the charting library's series format.

The charting client expects ``{"s": "ok", "c": [...]}``: a status flag and
the close values in row order.
"""

import math
import re
from dataclasses import dataclass, field
from typing import Any, Sequence

# Longest numeric prefix, same grammar as JavaScript's parseFloat
_NUMERIC_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)

VALUE_COLUMN = 1


@dataclass
class FormattedSeries:
    status: str = "ok"
    values: list[float] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"s": self.status, "c": list(self.values)}


# Served when the Sheets client can't be built. Never cached.
MOCK_SERIES = FormattedSeries(values=[100, 105, 95, 110, 115, 105, 100, 90, 95, 120])


def parse_float(cell: Any) -> float | None:
    """Parse the leading number of a cell, or None when there isn't a finite one.

    "12.5kg" -> 12.5, "  7" -> 7.0, "abc" -> None, "1e999" -> None.
    """
    if isinstance(cell, bool):
        return None
    if isinstance(cell, (int, float)):
        value = float(cell)
    else:
        match = _NUMERIC_PREFIX.match(str(cell).lstrip())
        if not match:
            return None
        value = float(match.group(0))
    return value if math.isfinite(value) else None


def format_rows(rows: Sequence[Sequence[Any]]) -> FormattedSeries:
    """Drop the header row and keep every row whose column B is numeric."""
    series = FormattedSeries()
    for row in rows[1:]:
        if len(row) <= VALUE_COLUMN:
            continue
        cell = row[VALUE_COLUMN]
        if cell is None or cell == "":
            continue
        value = parse_float(cell)
        if value is not None:
            series.values.append(value)
    return series

from __future__ import annotations

from typing import Sequence

from ..models import ColumnKind, ColumnProfile
from ..values import NULL, Number, Record, Value, is_empty

NUMERIC_SHARE_THRESHOLD = 0.7
SAMPLE_SIZE = 5


def profile_column(name: str, values: Sequence[Value]) -> ColumnProfile:
    """Profile one column from its cell values in row order."""
    present = [v for v in values if not is_empty(v)]
    numbers = [v.value for v in present if isinstance(v, Number)]

    numeric = bool(present) and len(numbers) / len(present) > NUMERIC_SHARE_THRESHOLD
    python_values = [v.to_python() for v in present]

    stats: dict[str, float] = {}
    if numeric:
        total = float(sum(numbers))
        stats = {
            "min": float(min(numbers)),
            "max": float(max(numbers)),
            "average": total / len(numbers),
            "sum": total,
        }

    return ColumnProfile(
        name=name,
        kind=ColumnKind.NUMERIC if numeric else ColumnKind.TEXT,
        non_empty_count=len(present),
        unique_count=len(set(python_values)),
        sample_values=python_values[:SAMPLE_SIZE],
        **stats,
    )


def profile_columns(columns: Sequence[str], records: Sequence[Record]) -> list[ColumnProfile]:
    """One ColumnProfile per column, in header order.

    A column is numeric when more than 70% of its non-empty values are
    numbers; min/max/average/sum are computed over the numeric values only.
    """
    return [
        profile_column(name, [record.get(name, NULL) for record in records])
        for name in columns
    ]

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Optional, Sequence

from ..models import QuoteMode
from ..values import Record
from .coerce import coerce_value
from .fields import split_fields


@dataclass
class Materialized:
    """Records built from the data lines plus counters for the repairs made on the way."""

    records: list[Record] = field(default_factory=list)
    padded: int = 0
    truncated: int = 0
    limit_reached: bool = False
    row_limit: Optional[int] = None

    def notes(self) -> list[str]:
        out: list[str] = []
        if self.padded:
            out.append(f"{self.padded} row(s) had fewer fields than the header and were padded with empty values")
        if self.truncated:
            out.append(f"{self.truncated} row(s) had more fields than the header; extra fields were dropped")
        if self.limit_reached:
            out.append(f"row limit of {self.row_limit} reached; remaining lines were not read")
        return out


def materialize_rows(
    lines: Sequence[str],
    delimiter: str,
    columns: Sequence[str],
    *,
    row_limit: Optional[int] = None,
    quoting: QuoteMode = QuoteMode.LENIENT,
) -> Materialized:
    """Turn data lines into typed records.

    Short rows are padded with empty fields and long rows are cut to the
    header width; neither is an error. Reading stops once `row_limit` records
    exist.
    """
    out = Materialized(row_limit=row_limit)
    width = len(columns)

    for line in lines:
        if not line.strip():
            continue
        if row_limit is not None and len(out.records) >= row_limit:
            out.limit_reached = True
            break

        fields = split_fields(line, delimiter, quoting)
        if len(fields) < width:
            fields.extend([""] * (width - len(fields)))
            out.padded += 1
        elif len(fields) > width:
            fields = fields[:width]
            out.truncated += 1

        record = {name: coerce_value(token) for name, token in zip(columns, fields)}
        out.records.append(MappingProxyType(record))

    return out

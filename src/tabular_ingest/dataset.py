from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Any

import pandas as pd

from .models import ColumnProfile, Delimiter, QualityReport
from .profile.schema import profile_columns
from .values import Record, record_to_python


@dataclass(frozen=True)
class Dataset:
    """
    The structured result of parsing one document.

    columns: unique column names in header order
    records: one read-only mapping per data row, each with every column
    delimiter: separator used to split the document
    header_index: position of the header among the normalized lines
    row_count: number of records
    quality: score plus issue list (scored problems, then repair notes)
    """
    columns: tuple[str, ...]
    records: tuple[Record, ...]
    delimiter: Delimiter
    header_index: int
    row_count: int
    quality: QualityReport

    @cached_property
    def profiles(self) -> list[ColumnProfile]:
        return profile_columns(self.columns, self.records)

    def profile(self, column: str) -> ColumnProfile:
        for p in self.profiles:
            if p.name == column:
                return p
        raise KeyError(f"Unknown column '{column}'")

    def sample_records(self, n: int = 5) -> list[Record]:
        return list(self.records[: max(0, n)])

    def to_rows(self) -> list[dict[str, Any]]:
        """Records as plain dicts of None / float / str."""
        return [record_to_python(r) for r in self.records]

    def to_frame(self) -> pd.DataFrame:
        """Records as a DataFrame with one column per header name, in order."""
        return pd.DataFrame(self.to_rows(), columns=list(self.columns))

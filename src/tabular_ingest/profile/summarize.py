from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from ..utils import write_json
from ..values import record_to_python

if TYPE_CHECKING:
    from ..dataset import Dataset

SUMMARY_SCHEMA = "tabular_ingest.summary.v1"


def build_summary(dataset: "Dataset", *, sample_size: int = 5) -> dict[str, Any]:
    """Machine-readable summary of a parsed dataset.

    This is what downstream consumers read: column names, column profiles,
    the quality report and a handful of sample records. Statistics that do
    not apply to a column (min/max/... on text) are omitted rather than null.
    """
    return {
        "_schema": SUMMARY_SCHEMA,
        "rows": dataset.row_count,
        "cols": len(dataset.columns),
        "delimiter": dataset.delimiter.display_name,
        "header_index": dataset.header_index,
        "columns": list(dataset.columns),
        "profiles": [p.model_dump(mode="json", exclude_none=True) for p in dataset.profiles],
        "quality": dataset.quality.model_dump(mode="json"),
        "sample_records": [record_to_python(r) for r in dataset.sample_records(sample_size)],
    }


def write_summary(dataset: "Dataset", out_path: Path, *, sample_size: int = 5) -> dict[str, Any]:
    payload = build_summary(dataset, sample_size=sample_size)
    write_json(out_path, payload)
    return payload

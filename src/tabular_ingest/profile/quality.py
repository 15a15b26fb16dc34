from __future__ import annotations

from typing import Iterable, Sequence

from ..models import QualityReport
from ..values import NULL, Record, is_empty

BASE_SCORE = 100
EMPTY_RATIO_THRESHOLD = 0.3
EMPTY_RATIO_PENALTY = 30

NO_DATA_ISSUE = "no data rows found"


def empty_cell_ratio(columns: Sequence[str], records: Sequence[Record]) -> float:
    cells = len(records) * len(columns)
    if cells == 0:
        return 0.0
    empty = 0
    for record in records:
        for column in columns:
            if is_empty(record.get(column, NULL)):
                empty += 1
    return empty / cells


def assess_quality(
    columns: Sequence[str],
    records: Sequence[Record],
    notes: Iterable[str] = (),
) -> QualityReport:
    """Score how clean the parsed rows are.

    No records scores 0. Otherwise start at 100 and take 30 off when more
    than 30% of cells are null or empty text; the issue reports the ratio as
    a percentage rounded to one decimal place (e.g. "40.0%").

    `notes` are informational (repairs made while parsing) and are appended
    after the scored issues without affecting the score.
    """
    issues: list[str] = []
    if not records:
        score = 0
        issues.append(NO_DATA_ISSUE)
    else:
        score = BASE_SCORE
        ratio = empty_cell_ratio(columns, records)
        if ratio > EMPTY_RATIO_THRESHOLD:
            score -= EMPTY_RATIO_PENALTY
            issues.append(f"high empty-cell ratio: {ratio * 100:.1f}%")

    issues.extend(notes)
    return QualityReport(score=max(0, score), issues=issues)

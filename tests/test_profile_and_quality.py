from __future__ import annotations

import pytest

from tabular_ingest.models import ColumnKind
from tabular_ingest.profile.quality import assess_quality, empty_cell_ratio
from tabular_ingest.profile.schema import profile_columns
from tabular_ingest.values import NULL, Number, Text


def _records(rows: list[list[object]], columns: list[str]) -> list[dict]:
    return [dict(zip(columns, row)) for row in rows]


def test_forty_percent_empty_scores_seventy_with_one_issue() -> None:
    columns = ["a", "b"]
    records = _records(
        [
            [Number(1.0), NULL],
            [Number(2.0), Text("")],
            [NULL, Text("x")],
            [Number(4.0), NULL],
            [Number(5.0), Text("y")],
        ],
        columns,
    )
    assert empty_cell_ratio(columns, records) == pytest.approx(0.4)

    report = assess_quality(columns, records)
    assert report.score == 70
    assert report.issues == ["high empty-cell ratio: 40.0%"]


def test_thirty_percent_empty_is_not_penalized() -> None:
    columns = ["a"]
    records = _records([[NULL]] * 3 + [[Text("v")]] * 7, columns)
    report = assess_quality(columns, records)
    assert report.score == 100
    assert report.issues == []


def test_no_records_scores_zero() -> None:
    report = assess_quality(["a", "b"], [])
    assert report.score == 0
    assert report.issues == ["no data rows found"]


def test_notes_are_informational() -> None:
    report = assess_quality(["a"], _records([[Number(1.0)]], ["a"]), ["1 row(s) were padded"])
    assert report.score == 100
    assert report.issues == ["1 row(s) were padded"]


def test_numeric_column_statistics() -> None:
    columns = ["name", "amount"]
    records = _records(
        [[Text("Alice"), Number(100.0)], [Text("Bob"), Number(200.0)]],
        columns,
    )
    name, amount = profile_columns(columns, records)

    assert name.kind == ColumnKind.TEXT
    assert name.min is None and name.average is None
    assert name.sample_values == ["Alice", "Bob"]

    assert amount.kind == ColumnKind.NUMERIC
    assert amount.min == 100.0
    assert amount.max == 200.0
    assert amount.average == 150.0
    assert amount.sum == 300.0
    assert amount.non_empty_count == 2
    assert amount.unique_count == 2


def test_numeric_threshold_is_strictly_above_seventy_percent() -> None:
    columns = ["v"]
    seven_of_ten = [[Number(float(i))] for i in range(7)] + [[Text("n/a")]] * 3
    eight_of_ten = [[Number(float(i))] for i in range(8)] + [[Text("n/a")]] * 2

    (p7,) = profile_columns(columns, _records(seven_of_ten, columns))
    (p8,) = profile_columns(columns, _records(eight_of_ten, columns))

    assert p7.kind == ColumnKind.TEXT
    assert p7.sum is None
    assert p8.kind == ColumnKind.NUMERIC
    # statistics cover the numeric values only
    assert p8.sum == float(sum(range(8)))
    assert p8.average == pytest.approx(3.5)


def test_empty_values_are_excluded_and_samples_capped() -> None:
    columns = ["c"]
    rows = [[NULL], [Text("")]] + [[Text(t)] for t in ["a", "b", "a", "c", "d", "e", "f"]]
    (p,) = profile_columns(columns, _records(rows, columns))
    assert p.non_empty_count == 7
    assert p.unique_count == 6
    assert p.sample_values == ["a", "b", "a", "c", "d"]


def test_all_empty_column_is_text_without_stats() -> None:
    (p,) = profile_columns(["c"], [{"c": NULL}, {"c": NULL}])
    assert p.kind == ColumnKind.TEXT
    assert p.non_empty_count == 0
    assert p.max is None

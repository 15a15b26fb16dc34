from __future__ import annotations

import pytest

from tabular_ingest.config import DEFAULT_ROW_LIMIT, IngestSettings
from tabular_ingest.errors import InsufficientDataError, UploadRejectedError
from tabular_ingest.intents import extract_analysis_intents
from tabular_ingest.models import Delimiter, QuoteMode
from tabular_ingest.upload import delimiter_hint, parse_upload, validate_upload


def test_valid_upload() -> None:
    check = validate_upload("sales.CSV", 1024)
    assert check.is_valid is True
    assert check.errors == []


def test_upload_reports_every_problem() -> None:
    settings = IngestSettings(max_file_size=100)
    check = validate_upload("report.xlsx", 101, settings)
    assert check.is_valid is False
    assert len(check.errors) == 2
    assert any("too large" in e for e in check.errors)
    assert any(".csv" in e for e in check.errors)


def test_missing_file_name() -> None:
    check = validate_upload(None, 0)
    assert check.is_valid is False


def test_tsv_name_hints_tab() -> None:
    assert delimiter_hint("data.tsv") == Delimiter.TAB
    assert delimiter_hint("data.csv") is None


def test_parse_upload_uses_tsv_hint() -> None:
    # every line also splits evenly on commas; the name decides
    data = "a,1\tb,2\nc,3\td,4\ne,5\tf,6\n".encode("utf-8")
    ds = parse_upload("pairs.tsv", data, row_limit=10)
    assert ds.delimiter == Delimiter.TAB
    assert ds.columns == ("a_1", "b_2")


def test_parse_upload_rejects_before_parsing() -> None:
    with pytest.raises(UploadRejectedError) as ei:
        parse_upload("notes.txt", b"a,b\n1,2\n")
    assert ei.value.file_name == "notes.txt"
    assert ei.value.errors


def test_parse_upload_propagates_insufficient_data() -> None:
    with pytest.raises(InsufficientDataError):
        parse_upload("empty.csv", b"header_only\n")


def test_settings_from_env() -> None:
    env = {
        "TABULAR_INGEST_ROW_LIMIT": "250",
        "TABULAR_INGEST_MAX_FILE_SIZE": "2048",
        "TABULAR_INGEST_QUOTING": "STRICT",
    }
    settings = IngestSettings.from_env(env)
    assert settings.row_limit == 250
    assert settings.max_file_size == 2048
    assert settings.quoting == QuoteMode.STRICT


def test_settings_from_env_falls_back_on_bad_values() -> None:
    env = {
        "TABULAR_INGEST_ROW_LIMIT": "-5",
        "TABULAR_INGEST_MAX_FILE_SIZE": "lots",
        "TABULAR_INGEST_QUOTING": "sloppy",
    }
    settings = IngestSettings.from_env(env)
    assert settings.row_limit == DEFAULT_ROW_LIMIT
    assert settings.quoting == QuoteMode.LENIENT


def test_settings_from_process_env(monkeypatch) -> None:
    monkeypatch.setenv("TABULAR_INGEST_ROW_LIMIT", "7")
    assert IngestSettings.from_env().row_limit == 7


def test_delimiter_from_name() -> None:
    assert Delimiter.from_name("tab") == Delimiter.TAB
    assert Delimiter.from_name("\\t") == Delimiter.TAB
    assert Delimiter.from_name("\t") == Delimiter.TAB
    assert Delimiter.from_name(" Semicolon ") == Delimiter.SEMICOLON
    assert Delimiter.from_name("|") == Delimiter.PIPE
    with pytest.raises(ValueError):
        Delimiter.from_name("colon")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("売上のトレンドを分析して", ["trend"]),
        ("Show the TREND and any outlier", ["trend", "anomaly"]),
        ("地域別の売上比較をお願いします", ["comparison"]),
        ("相関を調べて", ["correlation"]),
        ("hello", ["summary"]),
        ("", ["summary"]),
    ],
)
def test_extract_analysis_intents(text: str, expected: list[str]) -> None:
    assert extract_analysis_intents(text) == expected

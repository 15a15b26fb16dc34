from __future__ import annotations

import itertools
import re
from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence

from ..errors import InsufficientDataError
from ..models import QuoteMode
from .coerce import is_number_token
from .fields import split_fields

CONSISTENCY_WEIGHT = 50.0
NON_EMPTY_POINTS = 10
NON_NUMERIC_POINTS = 5
KEYWORD_POINTS = 15

PLACEHOLDER_PREFIX = "column"

# Vocabulary that tends to show up in header rows (Japanese and English).
HEADER_KEYWORDS: tuple[str, ...] = (
    # identifiers
    "id", "code", "number", "番号", "コード",
    # names / entities
    "name", "customer", "user", "product", "item", "category", "region", "status", "type",
    "名前", "氏名", "顧客", "商品", "品名", "カテゴリ", "区分", "地域", "担当",
    # dates / times
    "date", "time", "day", "month", "year", "日付", "日時", "年月", "期間",
    # money / quantities
    "amount", "price", "cost", "total", "sales", "revenue", "qty", "quantity", "count",
    "金額", "価格", "単価", "売上", "合計", "数量", "件数",
)

_QUOTES_RE = re.compile(r"[\"']")
# word characters, whitespace, kana and CJK ideographs are kept
_DISALLOWED_RE = re.compile(r"[^\w\s\u3040-\u30ff\u3400-\u4dbf\u4e00-\u9fff\uff66-\uff9f]")
_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class HeaderLocation:
    """The chosen header row and the column names derived from it."""

    index: int
    columns: tuple[str, ...]
    raw_fields: tuple[str, ...]
    score: float
    renamed: tuple[tuple[int, str, str], ...] = field(default_factory=tuple)

    def notes(self) -> list[str]:
        """Informational messages for every column whose name was generated or suffixed."""
        out: list[str] = []
        for position, original, final in self.renamed:
            if original:
                out.append(f"column {position + 1} '{original}' renamed to '{final}'")
            else:
                out.append(f"column {position + 1} has no name; using '{final}'")
        return out


def clean_column_name(raw: str) -> str:
    """
    Strip quotes, replace characters outside the word/whitespace/CJK
    allow-list with '_', and collapse whitespace runs to a single '_'.
    May return an empty string.
    """
    name = _QUOTES_RE.sub("", raw).strip()
    name = _DISALLOWED_RE.sub("_", name)
    name = _WHITESPACE_RE.sub("_", name)
    return name.strip()


def build_column_names(
    raw_fields: Sequence[str],
    placeholders: Optional[Iterator[int]] = None,
) -> tuple[tuple[str, ...], tuple[tuple[int, str, str], ...]]:
    """
    Clean header fields into unique column names.

    Empty names become 'column_<n>' from a running counter. A name already
    taken gets the first free '_2', '_3', ... suffix, so later duplicates never
    overwrite earlier columns in a record.

    Returns (names, renamed) where renamed lists (position, cleaned, final)
    for every name that was generated or suffixed.
    """
    counter = placeholders if placeholders is not None else itertools.count(1)
    taken: set[str] = set()
    names: list[str] = []
    renamed: list[tuple[int, str, str]] = []

    for position, raw in enumerate(raw_fields):
        cleaned = clean_column_name(raw)
        base = cleaned or f"{PLACEHOLDER_PREFIX}_{next(counter)}"
        final = base
        suffix = 2
        while final in taken:
            final = f"{base}_{suffix}"
            suffix += 1
        taken.add(final)
        names.append(final)
        if final != cleaned:
            renamed.append((position, cleaned, final))

    return tuple(names), tuple(renamed)


def score_header_candidate(fields: Sequence[str], following_counts: Sequence[int]) -> float:
    """Score one candidate row.

    Up to 50 points for how many following lines share its field count,
    then for each non-empty field: +10, +5 if it is not a number, +15 if it
    contains a HEADER_KEYWORDS term (case-insensitive).
    """
    width = len(fields)
    if following_counts:
        matching = sum(1 for c in following_counts if c == width)
        score = CONSISTENCY_WEIGHT * matching / len(following_counts)
    else:
        score = 0.0

    for value in fields:
        if not value:
            continue
        score += NON_EMPTY_POINTS
        if not is_number_token(value):
            score += NON_NUMERIC_POINTS
        lowered = value.lower()
        if any(term in lowered for term in HEADER_KEYWORDS):
            score += KEYWORD_POINTS
    return score


def locate_header(
    lines: Sequence[str],
    delimiter: str,
    *,
    candidates: int = 5,
    lookahead: int = 10,
    quoting: QuoteMode = QuoteMode.LENIENT,
) -> HeaderLocation:
    """
    Choose the header row among the first `candidates` lines.

    Only lines followed by at least one other line qualify. The highest score
    wins and ties keep the earliest row. Callers guarantee at least two lines.
    """
    if len(lines) < 2:
        raise InsufficientDataError(line_count=len(lines))

    split = [split_fields(ln, delimiter, quoting) for ln in lines[: candidates + lookahead]]

    best_index = 0
    best_score = float("-inf")
    last_candidate = min(candidates, len(lines) - 1)
    for index in range(last_candidate):
        following = [len(f) for f in split[index + 1 : index + 1 + lookahead]]
        score = score_header_candidate(split[index], following)
        if score > best_score:
            best_index = index
            best_score = score

    raw_fields = tuple(split[best_index])
    columns, renamed = build_column_names(raw_fields)
    return HeaderLocation(
        index=best_index,
        columns=columns,
        raw_fields=raw_fields,
        score=best_score,
        renamed=renamed,
    )

from __future__ import annotations

from typing import Optional, Union

from ..config import IngestSettings
from ..dataset import Dataset
from ..errors import InsufficientDataError
from ..models import Delimiter
from ..profile.quality import assess_quality
from .delimiter import detect_delimiter
from .header import locate_header
from .materialize import materialize_rows
from .normalize import decode_document, normalize_lines

MIN_USABLE_LINES = 2


def parse(
    raw: Union[str, bytes],
    row_limit: Optional[int] = None,
    *,
    delimiter: Optional[Delimiter] = None,
    settings: Optional[IngestSettings] = None,
) -> Dataset:
    """
    Parse one delimited-text document into a Dataset.

    Steps: decode -> normalize -> detect delimiter (unless given) -> locate
    header -> materialize records (at most `row_limit`, defaulting to
    settings.row_limit) -> assess quality.

    Raises InsufficientDataError when fewer than two usable lines remain after
    normalization; nothing else in the pipeline raises on malformed input.
    The call holds no shared state and performs no I/O.
    """
    settings = settings or IngestSettings()
    limit = settings.row_limit if row_limit is None else row_limit
    if limit < 1:
        raise ValueError(f"row_limit must be positive, got {limit}")

    lines = normalize_lines(decode_document(raw))
    if len(lines) < MIN_USABLE_LINES:
        raise InsufficientDataError(line_count=len(lines))

    if delimiter is None:
        delimiter = detect_delimiter(
            lines, sample_size=settings.sample_lines, quoting=settings.quoting
        )

    header = locate_header(
        lines,
        delimiter.value,
        candidates=settings.header_candidates,
        lookahead=settings.header_lookahead,
        quoting=settings.quoting,
    )

    rows = materialize_rows(
        lines[header.index + 1 :],
        delimiter.value,
        header.columns,
        row_limit=limit,
        quoting=settings.quoting,
    )

    notes: list[str] = []
    if header.index > 0:
        notes.append(
            f"header found on line {header.index + 1}; "
            f"{header.index} line(s) above it were ignored"
        )
    notes.extend(header.notes())
    notes.extend(rows.notes())

    quality = assess_quality(header.columns, rows.records, notes)
    return Dataset(
        columns=header.columns,
        records=tuple(rows.records),
        delimiter=delimiter,
        header_index=header.index,
        row_count=len(rows.records),
        quality=quality,
    )

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import PurePath
from typing import Optional, Union

from .config import IngestSettings
from .dataset import Dataset
from .errors import UploadRejectedError
from .models import Delimiter
from .parse.engine import parse

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS: tuple[str, ...] = (".csv", ".tsv")


@dataclass(frozen=True)
class UploadCheck:
    is_valid: bool
    errors: list[str] = field(default_factory=list)


def _extension(file_name: str) -> str:
    return PurePath(file_name).suffix.lower()


def validate_upload(
    file_name: Optional[str],
    size: int,
    settings: Optional[IngestSettings] = None,
) -> UploadCheck:
    """
    Check an uploaded file before it is read.

    Only .csv and .tsv names are accepted and the size must not exceed
    settings.max_file_size. All problems are reported, not just the first.
    """
    settings = settings or IngestSettings()
    if not file_name:
        return UploadCheck(is_valid=False, errors=["no file was provided"])

    errors: list[str] = []
    if size > settings.max_file_size:
        limit_mb = settings.max_file_size / (1024 * 1024)
        errors.append(f"file is too large ({size} bytes; limit is {limit_mb:g} MB)")
    if _extension(file_name) not in ALLOWED_EXTENSIONS:
        errors.append("only CSV (.csv) and TSV (.tsv) files are supported")

    return UploadCheck(is_valid=not errors, errors=errors)


def delimiter_hint(file_name: str) -> Optional[Delimiter]:
    """A .tsv name means tab-separated; anything else is left to detection."""
    if _extension(file_name) == ".tsv":
        return Delimiter.TAB
    return None


def parse_upload(
    file_name: str,
    data: Union[bytes, str],
    *,
    settings: Optional[IngestSettings] = None,
    row_limit: Optional[int] = None,
    delimiter: Optional[Delimiter] = None,
) -> Dataset:
    """
    Validate an uploaded file and parse it.

    An explicit `delimiter` wins over the file-name hint, which wins over
    detection. Raises UploadRejectedError or InsufficientDataError.
    """
    settings = settings or IngestSettings()
    size = len(data) if isinstance(data, bytes) else len(data.encode("utf-8"))

    check = validate_upload(file_name, size, settings)
    if not check.is_valid:
        logger.warning("Rejected upload %s: %s", file_name, "; ".join(check.errors))
        raise UploadRejectedError(file_name, check.errors)

    chosen = delimiter or delimiter_hint(file_name)
    logger.debug("Parsing %s (%d bytes, delimiter=%s)", file_name, size, chosen or "auto")

    dataset = parse(data, row_limit, delimiter=chosen, settings=settings)
    logger.info(
        "Parsed %s: %d row(s) x %d column(s), delimiter=%s, quality=%d",
        file_name,
        dataset.row_count,
        len(dataset.columns),
        dataset.delimiter.display_name,
        dataset.quality.score,
    )
    return dataset

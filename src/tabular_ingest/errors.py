from __future__ import annotations

from typing import Sequence


class TabularIngestError(ValueError):
    """Base class for errors raised by tabular_ingest."""


class InsufficientDataError(TabularIngestError):
    """Raised when a document has fewer than two usable lines (header plus one data row)."""

    def __init__(self, line_count: int) -> None:
        self.line_count = line_count
        super().__init__(
            f"Not enough data: found {line_count} usable line(s); "
            "a header row and at least one data row are required."
        )


class UploadRejectedError(TabularIngestError):
    """Raised when an uploaded file fails the name/size checks."""

    def __init__(self, file_name: str, errors: Sequence[str]) -> None:
        self.file_name = file_name
        self.errors = list(errors)
        super().__init__(f"File '{file_name}' rejected: " + "; ".join(self.errors))

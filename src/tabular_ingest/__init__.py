"""Adaptive ingestion of delimited text into typed, profiled datasets."""

from .config import IngestSettings
from .dataset import Dataset
from .errors import InsufficientDataError, TabularIngestError, UploadRejectedError
from .models import ColumnKind, ColumnProfile, Delimiter, QualityReport, QuoteMode
from .parse import parse
from .values import NULL, Null, Number, Record, Text, Value

__all__ = [
    "NULL",
    "ColumnKind",
    "ColumnProfile",
    "Dataset",
    "Delimiter",
    "IngestSettings",
    "InsufficientDataError",
    "Null",
    "Number",
    "QualityReport",
    "QuoteMode",
    "Record",
    "TabularIngestError",
    "Text",
    "UploadRejectedError",
    "Value",
    "parse",
]

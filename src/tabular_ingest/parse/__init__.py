"""Parse stage.

Turns a raw delimited-text document into typed records: normalize lines,
detect the delimiter, locate the header row, then tokenize, repair and
coerce each data row.
"""

from .coerce import coerce_value, is_number_token
from .delimiter import DelimiterScore, detect_delimiter, score_delimiters
from .engine import parse
from .fields import split_fields
from .header import HeaderLocation, build_column_names, clean_column_name, locate_header
from .materialize import Materialized, materialize_rows
from .normalize import decode_document, normalize_lines, normalize_text

__all__ = [
    "DelimiterScore",
    "HeaderLocation",
    "Materialized",
    "build_column_names",
    "clean_column_name",
    "coerce_value",
    "decode_document",
    "detect_delimiter",
    "is_number_token",
    "locate_header",
    "materialize_rows",
    "normalize_lines",
    "normalize_text",
    "parse",
    "score_delimiters",
    "split_fields",
]

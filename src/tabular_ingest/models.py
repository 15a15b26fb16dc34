from __future__ import annotations

from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, Field


class Delimiter(str, Enum):
    """
    Field separators the parser knows about.

    Member order is the detection preference order: when two delimiters split
    a document equally well, the one listed first wins.
    """
    COMMA = ","
    SEMICOLON = ";"
    TAB = "\t"
    PIPE = "|"

    @property
    def display_name(self) -> str:
        return _DELIMITER_DISPLAY[self]

    @classmethod
    def from_name(cls, name: str) -> "Delimiter":
        """
        Resolve a user-supplied delimiter: a member name ("tab"), the literal
        character (";") or an escaped tab ("\\t").
        """
        for member in cls:
            if name == member.value:
                return member
        key = name.strip().lower()
        if key in _DELIMITER_ALIASES:
            return _DELIMITER_ALIASES[key]
        raise ValueError(
            f"Unknown delimiter '{name}'. Expected one of: comma, semicolon, tab, pipe."
        )


_DELIMITER_DISPLAY = {
    Delimiter.COMMA: "comma (,)",
    Delimiter.SEMICOLON: "semicolon (;)",
    Delimiter.TAB: "tab (\\t)",
    Delimiter.PIPE: "pipe (|)",
}

_DELIMITER_ALIASES = {
    "comma": Delimiter.COMMA,
    "semicolon": Delimiter.SEMICOLON,
    "tab": Delimiter.TAB,
    "\\t": Delimiter.TAB,
    "pipe": Delimiter.PIPE,
}


class QuoteMode(str, Enum):
    """
    Quoting rules for the field tokenizer.

    - LENIENT: both double and single quotes open a quoted span
    - STRICT: only double quotes do; apostrophes are ordinary characters
    """
    LENIENT = "lenient"
    STRICT = "strict"


class ColumnKind(str, Enum):
    NUMERIC = "numeric"
    TEXT = "text"


class ColumnProfile(BaseModel):
    """
    Inferred type and statistics for one column.

    non_empty_count: values that are neither null nor empty text
    unique_count: distinct values among those
    sample_values: first five of those values, in row order
    min / max / average / sum: only set when kind is numeric
    """
    name: str
    kind: ColumnKind
    non_empty_count: int = 0
    unique_count: int = 0
    sample_values: List[Union[float, str]] = Field(default_factory=list)
    min: Optional[float] = None
    max: Optional[float] = None
    average: Optional[float] = None
    sum: Optional[float] = None


class QualityReport(BaseModel):
    """
    Aggregate data-quality verdict for one parsed document.

    score: 0..100, lowered only by scored problems (empty cells, no data)
    issues: human-readable descriptions; scored problems first, then
            informational notes about repairs the parser made
    """
    score: int = Field(default=100, ge=0, le=100)
    issues: List[str] = Field(default_factory=list)

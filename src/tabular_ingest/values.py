from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Dict, Mapping, Optional, Union


@dataclass(frozen=True)
class Null:
    """An empty cell."""

    kind: ClassVar[str] = "null"

    def to_python(self) -> None:
        return None


@dataclass(frozen=True)
class Number:
    """A numeric cell, always held as a float."""

    value: float
    kind: ClassVar[str] = "number"

    def to_python(self) -> float:
        return self.value


@dataclass(frozen=True)
class Text:
    """A textual cell: the trimmed token, unchanged."""

    value: str
    kind: ClassVar[str] = "text"

    def to_python(self) -> str:
        return self.value


Value = Union[Null, Number, Text]

# One data row: column name -> Value, one entry per header column.
Record = Mapping[str, Value]

NULL = Null()


def is_empty(value: Value) -> bool:
    """True for Null and for Text holding an empty string."""
    if isinstance(value, Null):
        return True
    if isinstance(value, Text):
        return value.value == ""
    return False


def record_to_python(record: Record) -> Dict[str, Optional[Union[float, str]]]:
    return {name: value.to_python() for name, value in record.items()}

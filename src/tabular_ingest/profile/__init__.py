"""Profile stage.

Per-column type inference and statistics, the data-quality score, and the
JSON summary handed to downstream consumers.
"""

from .quality import assess_quality
from .schema import profile_columns
from .summarize import build_summary, write_summary

__all__ = ["assess_quality", "build_summary", "profile_columns", "write_summary"]

from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from .models import QuoteMode

DEFAULT_ROW_LIMIT = 10_000
DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024  # 10 MiB

ENV_ROW_LIMIT = "TABULAR_INGEST_ROW_LIMIT"
ENV_MAX_FILE_SIZE = "TABULAR_INGEST_MAX_FILE_SIZE"
ENV_QUOTING = "TABULAR_INGEST_QUOTING"


class IngestSettings(BaseModel):
    """
    Tunables for one ingestion call.

    row_limit: ceiling on materialized records (rows past it are not read)
    max_file_size: upload size limit in bytes
    quoting: tokenizer quote rules (lenient accepts ' as well as ")
    sample_lines: leading lines sampled by delimiter detection
    header_candidates: leading lines considered as the header row
    header_lookahead: data lines used to score each header candidate
    """
    model_config = ConfigDict(frozen=True)

    row_limit: int = Field(default=DEFAULT_ROW_LIMIT, gt=0)
    max_file_size: int = Field(default=DEFAULT_MAX_FILE_SIZE, gt=0)
    quoting: QuoteMode = QuoteMode.LENIENT
    sample_lines: int = Field(default=5, gt=0)
    header_candidates: int = Field(default=5, gt=0)
    header_lookahead: int = Field(default=10, gt=0)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "IngestSettings":
        """
        Build settings from TABULAR_INGEST_* environment variables.

        Missing, malformed or non-positive values fall back to the defaults.
        """
        env = os.environ if environ is None else environ
        return cls(
            row_limit=_env_positive_int(env, ENV_ROW_LIMIT, DEFAULT_ROW_LIMIT),
            max_file_size=_env_positive_int(env, ENV_MAX_FILE_SIZE, DEFAULT_MAX_FILE_SIZE),
            quoting=_env_quoting(env, QuoteMode.LENIENT),
        )


def _env_positive_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        v = int(raw)
        return v if v > 0 else default
    except ValueError:
        return default


def _env_quoting(env: Mapping[str, str], default: QuoteMode) -> QuoteMode:
    raw = env.get(ENV_QUOTING)
    if raw is None or raw.strip() == "":
        return default
    try:
        return QuoteMode(raw.strip().lower())
    except ValueError:
        return default

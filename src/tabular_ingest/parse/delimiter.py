from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Sequence

from ..models import Delimiter, QuoteMode
from .fields import field_count


@dataclass(frozen=True)
class DelimiterScore:
    """How consistently one candidate splits the sampled lines."""

    delimiter: Delimiter
    counts: tuple[int, ...]
    mode: int
    consistency: float

    @property
    def eligible(self) -> bool:
        # A delimiter that never splits a line is never picked.
        return self.mode > 1


def _mode(counts: Sequence[int]) -> int:
    if not counts:
        return 0
    # most_common keeps first-seen order among equal counts
    return Counter(counts).most_common(1)[0][0]


def score_delimiters(
    lines: Sequence[str],
    *,
    sample_size: int = 5,
    quoting: QuoteMode = QuoteMode.LENIENT,
) -> list[DelimiterScore]:
    """Score every candidate delimiter against the first `sample_size` non-empty lines."""
    sample = [ln for ln in lines if ln.strip()][:sample_size]
    scores: list[DelimiterScore] = []
    for delim in Delimiter:
        counts = tuple(field_count(ln, delim.value, quoting) for ln in sample)
        mode = _mode(counts)
        consistency = (sum(1 for c in counts if c == mode) / len(counts)) if counts else 0.0
        scores.append(DelimiterScore(delimiter=delim, counts=counts, mode=mode, consistency=consistency))
    return scores


def detect_delimiter(
    lines: Sequence[str],
    *,
    sample_size: int = 5,
    quoting: QuoteMode = QuoteMode.LENIENT,
) -> Delimiter:
    """
    Pick the delimiter whose field counts are most consistent across the
    leading lines. Ties go to the earlier candidate (comma, semicolon, tab,
    pipe); with no splitting candidate at all the answer is comma.
    """
    best = Delimiter.COMMA
    best_consistency = -1.0
    for score in score_delimiters(lines, sample_size=sample_size, quoting=quoting):
        if not score.eligible:
            continue
        if score.consistency > best_consistency:
            best = score.delimiter
            best_consistency = score.consistency
    return best

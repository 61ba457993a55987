"""
Score curve: maps keyword coverage to a 0-100 score.

Two linear segments: the first half of coverage earns 70 points, the second
half the remaining 30.
"""

from __future__ import annotations

import math

KNEE_COVERAGE = 0.5
KNEE_SCORE = 70
MAX_SCORE = 100


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positive values."""
    return int(math.floor(value + 0.5))


def clamp_score(value: float) -> int:
    """Clamp to [0, 100] and round."""
    return round_half_up(min(max(value, 0.0), float(MAX_SCORE)))


def coverage_to_score(pct: float) -> int:
    """
    Map a coverage fraction to a score.

    0.0 -> 0, 0.5 -> 70, 1.0 -> 100. Out-of-range input is clamped to [0, 1].
    """
    pct = min(max(pct, 0.0), 1.0)

    if pct <= KNEE_COVERAGE:
        score = round_half_up(pct * KNEE_SCORE / KNEE_COVERAGE)
    else:
        score = round_half_up(
            KNEE_SCORE + (pct - KNEE_COVERAGE) * (MAX_SCORE - KNEE_SCORE) / (1 - KNEE_COVERAGE)
        )

    return min(MAX_SCORE, score)

"""Admissions label transform.

Models can be trained on a log-compressed, capped admissions label; the
inverse maps their scores back to admissions.
"""

import math

ADMISSIONS_CAP = 300.0


def log_label(admissions: float, cap: float = ADMISSIONS_CAP) -> float:
    """Return log(1 + admissions) with admissions capped at ``cap``."""
    if admissions < 0:
        raise ValueError(f"admissions must be non-negative, got {admissions}")
    return math.log1p(min(admissions, cap))


def inverse_log_label(score: float) -> float:
    """Map a score predicted on the log label back to admissions."""
    return math.expm1(score)

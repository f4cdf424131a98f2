"""History window features.

Existence flags and per-show averages for the historical reporting windows
of a showtime record.
"""

from domain.value_objects import HISTORY_WINDOWS, RawShowtimeRecord

# Minimum week of release at which each window can hold data
WINDOW_MIN_WEEK: dict[str, int] = {
    "preview": 1,
    "total_preview": 1,
    "first_week": 2,
    "total_first_week": 2,
    "last_weekend": 2,
    "last_week": 2,
    "total_last_week": 2,
    "pre_last_week": 3,
    "total_pre_last_week": 3,
}

# Coarse flags: the window group exists at all for the week of release
EXISTENCE_THRESHOLDS: dict[str, int] = {
    "preview_exists": 1,
    "last_week_exists": 2,
    "pre_last_week_exists": 3,
}


def existence_flags(record: RawShowtimeRecord) -> dict[str, float]:
    """Derive the existence flags of every history window.

    A window can exist chronologically and still have zero shows, so both
    the coarse ``*_exists`` flags and the ``<window>_shows_exist`` flags are
    produced.

    Args:
        record: Showtime record

    Returns:
        Flag name to 0.0 / 1.0
    """
    week_nr = record.week_nr
    flags = {
        name: 1.0 if week_nr >= threshold else 0.0
        for name, threshold in EXISTENCE_THRESHOLDS.items()
    }
    for window in HISTORY_WINDOWS:
        exists = week_nr >= WINDOW_MIN_WEEK[window]
        flags[f"{window}_shows_exist"] = (
            1.0 if exists and record.window_shows(window) > 0 else 0.0
        )
    return flags


def safe_average(admissions: float, shows: float) -> float:
    """Return admissions per show, or 0.0 when there were no shows."""
    if shows > 0:
        return admissions / shows
    return 0.0


def average_admissions(record: RawShowtimeRecord) -> dict[str, float]:
    """Derive the admissions-per-show average of every history window.

    Args:
        record: Showtime record

    Returns:
        ``<window>_average_admissions`` to average
    """
    return {
        f"{window}_average_admissions": safe_average(
            record.window_admissions(window), record.window_shows(window)
        )
        for window in HISTORY_WINDOWS
    }

"""Cyclical time encoding.

Calendar components are mapped onto the unit circle so that the end of a
cycle sits next to its start (23:55 is close to 00:00, December to January).
"""

import calendar
import math
from datetime import datetime

# Weekday index of Friday, Saturday and Sunday with Sunday as 0
WEEKEND_DAYS = frozenset({5, 6, 0})


def cycle(position: float, period: float) -> tuple[float, float]:
    """Encode a position within a cycle as a (sin, cos) pair.

    Args:
        position: Zero-based position within the cycle
        period: Length of the cycle

    Returns:
        Tuple of (sin, cos) of 2π·position/period

    Raises:
        ValueError: If period is not positive
    """
    if period <= 0:
        raise ValueError(f"period must be positive, got {period}")
    angle = 2 * math.pi * position / period
    return math.sin(angle), math.cos(angle)


def week_day_index(dt: datetime) -> int:
    """Return the weekday of a datetime with 0=Sunday through 6=Saturday."""
    return dt.isoweekday() % 7


def days_in_year(year: int) -> int:
    """Return 366 for leap years, else 365."""
    return 366 if calendar.isleap(year) else 365


def encode_cyclical_time(dt: datetime) -> dict[str, float]:
    """Derive the calendar features of a showtime start.

    Args:
        dt: Start of the showtime

    Returns:
        Year, weekend flag and the sin/cos pair of every cyclical component
    """
    features: dict[str, float] = {
        "year": float(dt.year),
        "is_weekend": 1.0 if week_day_index(dt) in WEEKEND_DAYS else 0.0,
    }
    components = (
        ("month", dt.month - 1, 12),
        ("day_of_month", dt.day - 1, calendar.monthrange(dt.year, dt.month)[1]),
        ("day_of_year", dt.timetuple().tm_yday - 1, days_in_year(dt.year)),
        ("week_day", week_day_index(dt), 7),
        ("hour", dt.hour, 24),
        ("minute_of_day", dt.hour * 60 + dt.minute, 1440),
    )
    for name, position, period in components:
        features[f"sin_{name}"], features[f"cos_{name}"] = cycle(position, period)
    return features

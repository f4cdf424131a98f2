"""Domain services for showtime predictions.

Services contain pure business logic and operate on value objects.
"""

from .cyclical_time import cycle, encode_cyclical_time, week_day_index
from .event_features import encode_rating, parse_genres
from .fake_showtime_generator import FakeShowtimeGenerator
from .feature_deriver import FeatureDeriver
from .history_features import average_admissions, existence_flags, safe_average
from .label_transform import inverse_log_label, log_label
from .showtime_slot_optimizer import (
    DEFAULT_EARLIEST_START,
    DEFAULT_LATEST_START,
    DEFAULT_SLOT_INTERVAL,
    ShowtimeSlotOptimizer,
)

__all__ = [
    "DEFAULT_EARLIEST_START",
    "DEFAULT_LATEST_START",
    "DEFAULT_SLOT_INTERVAL",
    "FakeShowtimeGenerator",
    "FeatureDeriver",
    "ShowtimeSlotOptimizer",
    "average_admissions",
    "cycle",
    "encode_cyclical_time",
    "encode_rating",
    "existence_flags",
    "inverse_log_label",
    "log_label",
    "parse_genres",
    "safe_average",
    "week_day_index",
]

"""Value objects for the showtime domain.

Value objects are immutable data carriers that represent domain concepts.
They have no identity and are compared by their attributes.
"""

from .feature_set import (
    CYCLICAL_TIME_COLUMNS,
    FULL_FEATURE_COLUMNS,
    MULTI_HOT_COLUMNS,
    ONE_HOT_COLUMNS,
    REDUCED_FEATURE_COLUMNS,
    FeatureSet,
)
from .feature_vector import DerivedFeatureVector
from .model_info import ModelInfo
from .prediction_result import AdmissionResult, Prediction, SlotSearchResult
from .showtime_record import HISTORY_WINDOWS, RawShowtimeRecord

__all__ = [
    "AdmissionResult",
    "CYCLICAL_TIME_COLUMNS",
    "DerivedFeatureVector",
    "FULL_FEATURE_COLUMNS",
    "FeatureSet",
    "HISTORY_WINDOWS",
    "ModelInfo",
    "MULTI_HOT_COLUMNS",
    "ONE_HOT_COLUMNS",
    "Prediction",
    "REDUCED_FEATURE_COLUMNS",
    "RawShowtimeRecord",
    "SlotSearchResult",
]

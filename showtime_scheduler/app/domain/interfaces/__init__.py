"""Domain interfaces for showtime predictions.

Interfaces define contracts between the domain and infrastructure layers.
The domain depends on these abstractions, not on concrete implementations.
"""

from .attendance_predictor import IAttendancePredictor
from .categorical_encoder import ICategoricalEncoder

__all__ = [
    "IAttendancePredictor",
    "ICategoricalEncoder",
]

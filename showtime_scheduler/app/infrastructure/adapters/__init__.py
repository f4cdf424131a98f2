"""Infrastructure adapters for showtime predictions.

These adapters implement domain interfaces using external libraries
like XGBoost and scikit-learn.
"""

from .one_hot_encoder import OneHotCategoricalEncoder, VocabularyError
from .xgboost_predictor import (
    FeatureContractError,
    ModelNotFoundError,
    PredictionError,
    XGBoostAttendancePredictor,
    load_model_info,
    save_model_info,
)

__all__ = [
    "FeatureContractError",
    "ModelNotFoundError",
    "OneHotCategoricalEncoder",
    "PredictionError",
    "VocabularyError",
    "XGBoostAttendancePredictor",
    "load_model_info",
    "save_model_info",
]

"""Model info value object.

Immutable data structure for the feature contract of a trained model.
"""

from dataclasses import dataclass
from datetime import datetime

from .feature_set import FeatureSet


@dataclass(frozen=True)
class ModelInfo:
    """Information about a trained attendance model.

    Attributes:
        model_id: Unique identifier for the model
        created_at: When the model was created
        feature_names: Expanded feature names, in the model's column order
        feature_set: Feature set variant the model was trained on
        log_label: True if the model was trained on log(1 + admissions)
        version: Model version string
    """

    model_id: str
    created_at: datetime
    feature_names: tuple[str, ...]
    feature_set: FeatureSet = FeatureSet.REDUCED
    log_label: bool = False
    version: str = "1.0.0"

    def __post_init__(self) -> None:
        """Validate model info values."""
        if not self.model_id:
            raise ValueError("model_id cannot be empty")
        if not self.feature_names:
            raise ValueError("feature_names cannot be empty")
        if len(set(self.feature_names)) != len(self.feature_names):
            raise ValueError("feature_names must be unique")

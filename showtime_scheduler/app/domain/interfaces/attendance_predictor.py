"""Attendance predictor interface.

Contract for scoring derived feature vectors with a trained model.
"""

from abc import ABC, abstractmethod

from domain.value_objects import DerivedFeatureVector


class IAttendancePredictor(ABC):
    """Contract for attendance prediction operations.

    Implementations must be safe for concurrent read-only use and
    deterministic for identical features within one model version.
    """

    @abstractmethod
    def predict(self, features: DerivedFeatureVector) -> float:
        """Predict the attendance of one showtime.

        Args:
            features: Features derived from the showtime record

        Returns:
            Predicted admissions

        Raises:
            PredictionError: If the model cannot score the features
        """
        pass

"""XGBoost predictor adapter.

Infrastructure adapter that implements IAttendancePredictor using XGBoost.
"""

import json
import logging
from datetime import datetime
from pathlib import Path

import numpy as np
import xgboost as xgb
from domain.interfaces import IAttendancePredictor
from domain.services import inverse_log_label
from domain.value_objects import DerivedFeatureVector, FeatureSet, ModelInfo

_LOGGER = logging.getLogger(__name__)


class ModelNotFoundError(Exception):
    """Raised when a model or its feature contract cannot be found."""

    pass


class PredictionError(Exception):
    """Raised when the model cannot score a feature vector."""

    pass


class FeatureContractError(PredictionError):
    """Raised when derived features do not match the model's feature contract."""

    def __init__(self, missing: list[str], unexpected: list[str]) -> None:
        self.missing = missing
        self.unexpected = unexpected
        super().__init__(
            "Derived features do not match the model's feature contract "
            f"(missing: {', '.join(missing) or 'none'}; "
            f"unexpected: {', '.join(unexpected) or 'none'})"
        )


class XGBoostAttendancePredictor(IAttendancePredictor):
    """XGBoost implementation of the attendance predictor.

    Feature vectors are aligned to the model's feature contract before
    scoring. Scores of models trained on the log label are mapped back to
    admissions.
    """

    def __init__(self, model: xgb.XGBRegressor, model_info: ModelInfo) -> None:
        """Initialize the XGBoost predictor.

        Args:
            model: Trained XGBoost regressor
            model_info: Feature contract the model was trained with
        """
        self._model = model
        self._model_info = model_info
        self._feature_names = model_info.feature_names
        self._expected = frozenset(model_info.feature_names)

    @classmethod
    def from_files(
        cls, model_path: str | Path, contract_path: str | Path
    ) -> "XGBoostAttendancePredictor":
        """Load a model saved with ``XGBRegressor.save_model`` and its contract.

        Args:
            model_path: Path to the XGBoost model (JSON or UBJSON)
            contract_path: Path to the feature contract JSON

        Raises:
            ModelNotFoundError: If either file does not exist
            PredictionError: If either file cannot be read
        """
        model_path = Path(model_path)
        contract_path = Path(contract_path)
        for path in (model_path, contract_path):
            if not path.exists():
                raise ModelNotFoundError(f"Model file not found: {path}")

        try:
            model = xgb.XGBRegressor()
            model.load_model(str(model_path))
            model_info = load_model_info(contract_path)
        except (xgb.core.XGBoostError, OSError, json.JSONDecodeError, KeyError, ValueError) as e:
            raise PredictionError(f"Failed to load model from {model_path}: {e}") from e

        _LOGGER.info(
            "Loaded model %s (%s feature set, %d features) from %s",
            model_info.model_id,
            model_info.feature_set.value,
            len(model_info.feature_names),
            model_path,
        )
        return cls(model, model_info)

    @property
    def model_info(self) -> ModelInfo:
        """Feature contract of the loaded model."""
        return self._model_info

    def predict(self, features: DerivedFeatureVector) -> float:
        """Predict attendance with XGBoost.

        Args:
            features: Derived feature vector

        Returns:
            Predicted admissions

        Raises:
            FeatureContractError: If the features do not match the contract
            PredictionError: If XGBoost fails to score the features
        """
        row = self._prepare_features(features)
        try:
            prediction = self._model.predict(row)
        except (xgb.core.XGBoostError, ValueError) as e:
            raise PredictionError(
                f"Model {self._model_info.model_id} failed to predict: {e}"
            ) from e

        score = float(prediction[0])
        if self._model_info.log_label:
            return inverse_log_label(score)
        return score

    def _prepare_features(self, features: DerivedFeatureVector) -> np.ndarray:
        """Prepare the feature row in the model's column order.

        Args:
            features: Derived feature vector

        Returns:
            Numpy array of shape (1, n_features)
        """
        if set(features.names) != self._expected:
            missing = [name for name in self._feature_names if name not in features]
            unexpected = [name for name in features.names if name not in self._expected]
            raise FeatureContractError(missing, unexpected)
        return np.array([features.values_for(self._feature_names)], dtype=np.float32)


def load_model_info(path: str | Path) -> ModelInfo:
    """Read a feature contract written by :func:`save_model_info`."""
    with open(path) as f:
        metadata = json.load(f)

    return ModelInfo(
        model_id=metadata["model_id"],
        created_at=datetime.fromisoformat(metadata["created_at"]),
        feature_names=tuple(metadata["feature_names"]),
        feature_set=FeatureSet(metadata.get("feature_set", FeatureSet.REDUCED.value)),
        log_label=bool(metadata.get("log_label", False)),
        version=metadata.get("version", "1.0.0"),
    )


def save_model_info(path: str | Path, info: ModelInfo) -> None:
    """Write a feature contract next to a saved model."""
    metadata = {
        "model_id": info.model_id,
        "created_at": info.created_at.isoformat(),
        "feature_names": list(info.feature_names),
        "feature_set": info.feature_set.value,
        "log_label": info.log_label,
        "version": info.version,
    }
    with open(path, "w") as f:
        json.dump(metadata, f, indent=2)

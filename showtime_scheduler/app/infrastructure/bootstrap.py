"""Service wiring.

Builds the application service from settings: vocabularies, feature
deriver, XGBoost predictor and slot optimizer.
"""

import logging

from application.services import ShowtimeApplicationService
from domain.interfaces import IAttendancePredictor, ICategoricalEncoder
from domain.services import FeatureDeriver, ShowtimeSlotOptimizer

from .adapters import OneHotCategoricalEncoder, XGBoostAttendancePredictor
from .config import SchedulerSettings

_LOGGER = logging.getLogger(__name__)


def create_application_service(
    settings: SchedulerSettings,
    predictor: IAttendancePredictor | None = None,
    encoder: ICategoricalEncoder | None = None,
) -> ShowtimeApplicationService:
    """Create the showtime application service.

    Args:
        settings: Scheduler settings
        predictor: Predictor to use instead of loading the configured model
        encoder: Encoder to use instead of loading the configured vocabularies

    Returns:
        Ready-to-use application service

    Raises:
        ModelNotFoundError: If the configured model files do not exist
        VocabularyError: If the configured vocabularies cannot be loaded
        ValueError: If the model was trained on another feature set
    """
    if encoder is None:
        encoder = OneHotCategoricalEncoder.from_json(settings.vocabulary_path)
    if predictor is None:
        xgb_predictor = XGBoostAttendancePredictor.from_files(
            settings.model_path, settings.model_contract_path
        )
        if xgb_predictor.model_info.feature_set is not settings.feature_set:
            raise ValueError(
                f"Model {xgb_predictor.model_info.model_id} was trained on the "
                f"{xgb_predictor.model_info.feature_set.value} feature set, "
                f"but {settings.feature_set.value} is configured"
            )
        predictor = xgb_predictor

    deriver = FeatureDeriver(encoder, settings.feature_set)
    optimizer = ShowtimeSlotOptimizer(deriver, predictor, settings.slot_interval)

    _LOGGER.info(
        "Showtime scheduler ready (%s feature set, %d features, %s slot interval)",
        settings.feature_set.value,
        len(deriver.feature_names()),
        settings.slot_interval,
    )
    return ShowtimeApplicationService(
        optimizer,
        settings.feature_set,
        default_earliest_start=settings.earliest_start,
        default_latest_start=settings.latest_start,
    )

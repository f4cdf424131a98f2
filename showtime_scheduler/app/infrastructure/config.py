"""Scheduler settings.

Settings are read from environment variables.
"""

import logging
import os
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path
from typing import Mapping

from domain.services import DEFAULT_EARLIEST_START, DEFAULT_LATEST_START, DEFAULT_SLOT_INTERVAL
from domain.value_objects import FeatureSet

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class SchedulerSettings:
    """Configuration of the showtime scheduler.

    Attributes:
        log_level: Logging level name (debug, info, ...)
        model_path: XGBoost model file
        model_contract_path: Feature contract JSON of the model
        vocabulary_path: Categorical vocabularies JSON
        feature_set: Feature set variant the model was trained on
        earliest_start: Default earliest slot, as offset from midnight
        latest_start: Default latest slot, as offset from midnight
        slot_interval: Step between candidate slots
    """

    log_level: str = "info"
    model_path: Path = Path("/data/models/admissions_model.json")
    model_contract_path: Path = Path("/data/models/admissions_model_features.json")
    vocabulary_path: Path = Path("/data/models/vocabularies.json")
    feature_set: FeatureSet = FeatureSet.REDUCED
    earliest_start: timedelta = DEFAULT_EARLIEST_START
    latest_start: timedelta = DEFAULT_LATEST_START
    slot_interval: timedelta = DEFAULT_SLOT_INTERVAL

    def __post_init__(self) -> None:
        """Validate settings values."""
        if self.slot_interval <= timedelta(0):
            raise ValueError(f"slot_interval must be positive, got {self.slot_interval}")
        if self.earliest_start < timedelta(0) or self.latest_start >= timedelta(days=1):
            raise ValueError(
                f"earliest_start ({self.earliest_start}) and latest_start "
                f"({self.latest_start}) must lie within the day"
            )
        if self.earliest_start > self.latest_start:
            raise ValueError(
                f"earliest_start ({self.earliest_start}) must not be after "
                f"latest_start ({self.latest_start})"
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "SchedulerSettings":
        """Build settings from environment variables.

        Args:
            environ: Variables to read, os.environ if not given

        Raises:
            ValueError: If a variable holds an invalid value
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        feature_set = env.get("FEATURE_SET", defaults.feature_set.value).lower()
        try:
            parsed_feature_set = FeatureSet(feature_set)
        except ValueError as e:
            raise ValueError(
                f"FEATURE_SET must be one of {', '.join(v.value for v in FeatureSet)}, "
                f"got {feature_set!r}"
            ) from e

        return cls(
            log_level=env.get("LOG_LEVEL", defaults.log_level).lower(),
            model_path=Path(env.get("MODEL_PATH", defaults.model_path)),
            model_contract_path=Path(
                env.get("MODEL_CONTRACT_PATH", defaults.model_contract_path)
            ),
            vocabulary_path=Path(env.get("VOCABULARY_PATH", defaults.vocabulary_path)),
            feature_set=parsed_feature_set,
            earliest_start=_hours(env, "EARLIEST_START_HOURS", defaults.earliest_start),
            latest_start=_hours(env, "LATEST_START_HOURS", defaults.latest_start),
            slot_interval=_minutes(env, "SLOT_INTERVAL_MINUTES", defaults.slot_interval),
        )


def configure_logging(level: str = "info") -> None:
    """Configure root logging for the scheduler."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )


def _hours(env: Mapping[str, str], name: str, default: timedelta) -> timedelta:
    value = env.get(name)
    if value is None or value == "":
        return default
    try:
        return timedelta(hours=float(value))
    except ValueError as e:
        raise ValueError(f"{name} must be a number of hours, got {value!r}") from e


def _minutes(env: Mapping[str, str], name: str, default: timedelta) -> timedelta:
    value = env.get(name)
    if value is None or value == "":
        return default
    try:
        return timedelta(minutes=float(value))
    except ValueError as e:
        raise ValueError(f"{name} must be a number of minutes, got {value!r}") from e

"""Showtime Application Service.

Main application service that coordinates the domain services for
attendance prediction and showtime scheduling use cases.
"""

import logging
from datetime import datetime, timedelta
from typing import Sequence

from domain.services import (
    DEFAULT_EARLIEST_START,
    DEFAULT_LATEST_START,
    ShowtimeSlotOptimizer,
)
from domain.value_objects import (
    AdmissionResult,
    FeatureSet,
    RawShowtimeRecord,
    SlotSearchResult,
)

_LOGGER = logging.getLogger(__name__)


class ShowtimeApplicationService:
    """Application service for showtime predictions.

    This service is the main entry point for callers such as an HTTP layer.
    Time window bounds are given in fractional hours (10.25 is 10:15); a
    bound that is not supplied falls back to the configured default, each
    bound independently.
    """

    def __init__(
        self,
        optimizer: ShowtimeSlotOptimizer,
        feature_set: FeatureSet,
        default_earliest_start: timedelta = DEFAULT_EARLIEST_START,
        default_latest_start: timedelta = DEFAULT_LATEST_START,
    ) -> None:
        """Initialize the showtime application service.

        Args:
            optimizer: Slot optimizer wired to the predictor in use
            feature_set: Feature set variant the predictor was trained on
            default_earliest_start: Earliest start when none is requested
            default_latest_start: Latest start when none is requested
        """
        self._optimizer = optimizer
        self._feature_set = feature_set
        self._default_earliest_start = default_earliest_start
        self._default_latest_start = default_latest_start

    def predict_admissions(self, record: RawShowtimeRecord) -> AdmissionResult:
        """Predict the attendance of a single showtime.

        Args:
            record: Showtime record

        Returns:
            Admission result with the prediction and any warnings
        """
        result = self._optimizer.predict_admission(record)
        _LOGGER.debug(
            "Predicted %.1f admissions for %s at %s",
            result.value.attendance,
            record.event_name,
            record.show_datetime.isoformat(),
        )
        return result

    def batch_predict_admissions(
        self, records: Sequence[RawShowtimeRecord]
    ) -> list[AdmissionResult]:
        """Predict the attendance of a batch of showtimes.

        Args:
            records: Showtime records

        Returns:
            One admission result per record, in input order
        """
        _LOGGER.info("Predicting admissions for %d showtimes", len(records))
        return self._optimizer.batch_predict_admissions(records)

    def batch_predict_slot_admissions(
        self,
        record: RawShowtimeRecord,
        slot_times: Sequence[datetime],
    ) -> list[AdmissionResult]:
        """Predict the attendance of one showtime at specific start times.

        Args:
            record: Showtime record; the date of its start is not used
            slot_times: Proposed start times

        Returns:
            One admission result per start time, in input order
        """
        _LOGGER.info(
            "Predicting admissions for %s at %d proposed slots",
            record.event_name,
            len(slot_times),
        )
        return self._optimizer.batch_predict_slot_admissions(record, slot_times)

    def best_show_time(
        self,
        record: RawShowtimeRecord,
        earliest_start_hours: float | None = None,
        latest_start_hours: float | None = None,
    ) -> AdmissionResult:
        """Find the start time with the highest predicted attendance.

        Args:
            record: Showtime record; the date of its start is used
            earliest_start_hours: Earliest start in hours after midnight
            latest_start_hours: Latest start in hours after midnight

        Returns:
            Admission result with the best slot, or an error result
        """
        earliest, latest = self._time_window(earliest_start_hours, latest_start_hours)
        result = self._optimizer.best_show_time(record, earliest, latest)
        self._log_outcome(record, result.errors, result.warnings)
        return result

    def top_n_best_show_times(
        self,
        record: RawShowtimeRecord,
        top_n: int = 3,
        earliest_start_hours: float | None = None,
        latest_start_hours: float | None = None,
    ) -> SlotSearchResult:
        """Find the top N start times with the highest predicted attendance.

        Args:
            record: Showtime record; the date of its start is used
            top_n: Number of slots to return
            earliest_start_hours: Earliest start in hours after midnight
            latest_start_hours: Latest start in hours after midnight

        Returns:
            Slot search result, best slot first
        """
        earliest, latest = self._time_window(earliest_start_hours, latest_start_hours)
        result = self._optimizer.top_n_best_show_times(record, top_n, earliest, latest)
        self._log_outcome(record, result.errors, result.warnings)
        return result

    def get_status(self) -> dict:
        """Get the current configuration of the service.

        Returns:
            Dictionary with status information
        """
        return {
            "feature_set": self._feature_set.value,
            "slot_interval_minutes": self._optimizer.interval.total_seconds() / 60,
            "default_earliest_start": _format_offset(self._default_earliest_start),
            "default_latest_start": _format_offset(self._default_latest_start),
            "timestamp": datetime.now().isoformat(),
        }

    def _time_window(
        self,
        earliest_start_hours: float | None,
        latest_start_hours: float | None,
    ) -> tuple[timedelta, timedelta]:
        """Resolve requested bounds, falling back to the defaults per bound."""
        earliest = (
            self._default_earliest_start
            if earliest_start_hours is None
            else timedelta(hours=earliest_start_hours)
        )
        latest = (
            self._default_latest_start
            if latest_start_hours is None
            else timedelta(hours=latest_start_hours)
        )
        return earliest, latest

    def _log_outcome(
        self,
        record: RawShowtimeRecord,
        errors: Sequence[str],
        warnings: Sequence[str],
    ) -> None:
        """Log the errors and warnings of a slot search."""
        if errors:
            _LOGGER.warning("Slot search for %s failed: %s", record.event_name, "; ".join(errors))
        for warning in warnings:
            _LOGGER.info("Slot search for %s: %s", record.event_name, warning)


def _format_offset(offset: timedelta) -> str:
    """Format an offset from midnight as HH:MM."""
    minutes = int(offset.total_seconds() // 60)
    return f"{minutes // 60:02d}:{minutes % 60:02d}"

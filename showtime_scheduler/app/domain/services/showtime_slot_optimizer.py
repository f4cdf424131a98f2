"""Showtime slot optimizer.

Domain service that predicts attendance for showtimes and searches a day's
time window for the start times with the highest predicted attendance.
"""

import logging
from datetime import datetime, timedelta
from typing import Iterable

from domain.interfaces import IAttendancePredictor
from domain.value_objects import (
    AdmissionResult,
    Prediction,
    RawShowtimeRecord,
    SlotSearchResult,
)

from .feature_deriver import FeatureDeriver

_LOGGER = logging.getLogger(__name__)

# The cinema opens 15 minutes before the first show, but not before 10:00
DEFAULT_EARLIEST_START = timedelta(hours=10, minutes=15)
# The cinema closes 15 minutes after the last show starts, at 23:00 latest
DEFAULT_LATEST_START = timedelta(hours=22, minutes=45)
# Showtimes start on round times
DEFAULT_SLOT_INTERVAL = timedelta(minutes=5)

NEW_RELEASE_MAX_WEEK = 1

NEW_RELEASE_WARNING = (
    "The movie is very new (week number <= 1). The prediction may be less accurate."
)
INVALID_WINDOW_ERROR = "Invalid time window: earliest start must be before latest start."
OUT_OF_DAY_ERROR = "Invalid time window: start times must lie within the day (00:00 to 23:59)."

ONE_DAY = timedelta(days=1)


class ShowtimeSlotOptimizer:
    """Service for showtime attendance predictions and slot searches.

    The optimizer keeps no state between calls; every candidate slot is a
    fresh copy of the caller's record. Predictor failures are not caught
    and abort the whole batch or search.
    """

    def __init__(
        self,
        feature_deriver: FeatureDeriver,
        predictor: IAttendancePredictor,
        interval: timedelta = DEFAULT_SLOT_INTERVAL,
    ) -> None:
        """Initialize the slot optimizer.

        Args:
            feature_deriver: Deriver matching the predictor's feature set
            predictor: Attendance predictor implementation
            interval: Step between candidate start times
        """
        if interval <= timedelta(0):
            raise ValueError(f"interval must be positive, got {interval}")
        self._feature_deriver = feature_deriver
        self._predictor = predictor
        self._interval = interval

    @property
    def interval(self) -> timedelta:
        """Step between candidate start times."""
        return self._interval

    def predict(self, record: RawShowtimeRecord) -> Prediction:
        """Predict the attendance of one showtime.

        Args:
            record: Showtime record

        Returns:
            Prediction labelled with the record's event, theatre and start
        """
        features = self._feature_deriver.derive(record)
        attendance = float(self._predictor.predict(features))
        _LOGGER.debug(
            "Predicted %.2f admissions for %s at %s",
            attendance,
            record.event_name,
            record.show_datetime.isoformat(),
        )
        return Prediction(
            attendance=attendance,
            show_datetime=record.show_datetime,
            event_name=record.event_name,
            theatre_name=record.theatre_name,
        )

    def predict_admission(self, record: RawShowtimeRecord) -> AdmissionResult:
        """Predict the attendance of one showtime, with advisory warnings.

        Args:
            record: Showtime record

        Returns:
            Admission result holding the prediction
        """
        return AdmissionResult(
            value=self.predict(record),
            warnings=self._record_warnings(record),
        )

    def batch_predict_admissions(
        self, records: Iterable[RawShowtimeRecord]
    ) -> list[AdmissionResult]:
        """Predict the attendance of several showtimes.

        Args:
            records: Showtime records

        Returns:
            One admission result per record, in input order
        """
        return [self.predict_admission(record) for record in records]

    def batch_predict_slot_admissions(
        self,
        record: RawShowtimeRecord,
        show_times: Iterable[datetime],
    ) -> list[AdmissionResult]:
        """Predict the attendance of one showtime at each of the given starts.

        Args:
            record: Showtime record; its own start is ignored
            show_times: Start times to evaluate

        Returns:
            One admission result per start time, in input order
        """
        return [
            self.predict_admission(record.with_show_datetime(show_time))
            for show_time in show_times
        ]

    def top_n_best_show_times(
        self,
        record: RawShowtimeRecord,
        top_n: int = 3,
        earliest_start: timedelta | None = None,
        latest_start: timedelta | None = None,
    ) -> SlotSearchResult:
        """Find the start times with the highest predicted attendance.

        Every slot from ``earliest_start`` to ``latest_start`` (both
        inclusive, as offsets from midnight of the record's date) is
        evaluated. Both offsets must lie within the day, so every slot
        falls on the record's date. Slots with equal attendance keep
        chronological order.

        Args:
            record: Showtime record; only the date of its start is used
            top_n: Number of slots to return
            earliest_start: Earliest start time, defaults to 10:15
            latest_start: Latest start time, defaults to 22:45

        Returns:
            Up to ``top_n`` predictions, best first, or an error result
        """
        if earliest_start is None:
            earliest_start = DEFAULT_EARLIEST_START
        if latest_start is None:
            latest_start = DEFAULT_LATEST_START

        if earliest_start < timedelta(0) or latest_start >= ONE_DAY:
            return SlotSearchResult(errors=(OUT_OF_DAY_ERROR,))
        if earliest_start > latest_start:
            return SlotSearchResult(errors=(INVALID_WINDOW_ERROR,))
        if top_n < 1:
            return SlotSearchResult(errors=(f"top_n must be at least 1, got {top_n}.",))

        warnings: list[str] = []
        slots = self.slot_count(earliest_start, latest_start)
        if slots < top_n:
            warnings.append(
                f"Only {slots} predictions could be made within the specified time window, "
                f"which is fewer than the requested top {top_n}."
            )
        warnings.extend(self._record_warnings(record))

        ranked = self._evaluate_all_show_times(record, earliest_start, latest_start)
        _LOGGER.info(
            "Evaluated %d slots for %s on %s, best %.2f admissions at %s",
            len(ranked),
            record.event_name,
            record.show_datetime.date().isoformat(),
            ranked[0].attendance,
            ranked[0].show_datetime.time().isoformat(timespec="minutes"),
        )
        return SlotSearchResult(predictions=tuple(ranked[:top_n]), warnings=tuple(warnings))

    def best_show_time(
        self,
        record: RawShowtimeRecord,
        earliest_start: timedelta | None = None,
        latest_start: timedelta | None = None,
    ) -> AdmissionResult:
        """Find the single start time with the highest predicted attendance.

        Args:
            record: Showtime record; only the date of its start is used
            earliest_start: Earliest start time, defaults to 10:15
            latest_start: Latest start time, defaults to 22:45

        Returns:
            Admission result holding the best slot, or an error result
        """
        result = self.top_n_best_show_times(record, 1, earliest_start, latest_start)
        return AdmissionResult(
            value=result.best,
            warnings=result.warnings,
            errors=result.errors,
        )

    def slot_count(self, earliest_start: timedelta, latest_start: timedelta) -> int:
        """Return the number of slots in an inclusive, valid time window."""
        return (latest_start - earliest_start) // self._interval + 1

    def candidate_times(
        self,
        day: datetime,
        earliest_start: timedelta,
        latest_start: timedelta,
    ) -> list[datetime]:
        """Enumerate the slot start times of a day's time window.

        Args:
            day: Any datetime on the day of the showtime
            earliest_start: First slot, as offset from midnight
            latest_start: Upper bound (inclusive), as offset from midnight

        Returns:
            Start times in chronological order
        """
        midnight = datetime.combine(day.date(), datetime.min.time(), tzinfo=day.tzinfo)
        times: list[datetime] = []
        offset = earliest_start
        while offset <= latest_start:
            times.append(midnight + offset)
            offset += self._interval
        return times

    def _evaluate_all_show_times(
        self,
        record: RawShowtimeRecord,
        earliest_start: timedelta,
        latest_start: timedelta,
    ) -> list[Prediction]:
        """Predict every slot and rank by attendance, keeping ties in time order."""
        predictions = [
            self.predict(record.with_show_datetime(show_time))
            for show_time in self.candidate_times(record.show_datetime, earliest_start, latest_start)
        ]
        # sorted() is stable, so equal scores stay chronological
        return sorted(predictions, key=lambda prediction: prediction.attendance, reverse=True)

    def _record_warnings(self, record: RawShowtimeRecord) -> tuple[str, ...]:
        """Collect the advisory warnings that depend on the record alone."""
        if record.week_nr <= NEW_RELEASE_MAX_WEEK:
            return (NEW_RELEASE_WARNING,)
        return ()

"""Tests for the showtime slot optimizer."""

import math
from datetime import datetime, timedelta, timezone
from typing import Callable

import pytest
from domain.interfaces import IAttendancePredictor
from domain.services import (
    DEFAULT_EARLIEST_START,
    DEFAULT_LATEST_START,
    FeatureDeriver,
    ShowtimeSlotOptimizer,
)
from domain.value_objects import DerivedFeatureVector


def minute_of_day(features: DerivedFeatureVector) -> int:
    """Recover the start minute from its cyclical encoding."""
    angle = math.atan2(features["sin_minute_of_day"], features["cos_minute_of_day"])
    return round(angle / (2 * math.pi) * 1440) % 1440


class MinutePredictor(IAttendancePredictor):
    """Predictor scoring a showtime by its start minute."""

    def __init__(self, score: Callable[[int], float]) -> None:
        self._score = score
        self.calls = 0

    def predict(self, features: DerivedFeatureVector) -> float:
        self.calls += 1
        return self._score(minute_of_day(features))


class FailingPredictor(IAttendancePredictor):
    """Predictor that always fails."""

    def predict(self, features: DerivedFeatureVector) -> float:
        raise RuntimeError("model unavailable")


@pytest.fixture
def make_optimizer(encoder):
    """Factory for optimizers over a minute-based predictor."""

    def _create(score: Callable[[int], float] = lambda minute: 10.0, **kwargs):
        predictor = MinutePredictor(score)
        return ShowtimeSlotOptimizer(FeatureDeriver(encoder), predictor, **kwargs), predictor

    return _create


class TestPredict:
    """Tests for single and batch predictions."""

    def test_predict_labels_the_prediction(self, make_optimizer, make_record) -> None:
        """Test that a prediction carries the record's identity."""
        optimizer, _ = make_optimizer(lambda minute: float(minute))
        prediction = optimizer.predict(make_record())

        assert prediction.attendance == pytest.approx(18 * 60 + 30)
        assert prediction.show_datetime == datetime(2024, 3, 15, 18, 30)
        assert prediction.event_name == "Steel Horizon"
        assert prediction.theatre_name == "Apollo Kino Solaris"

    @pytest.mark.parametrize(("week_nr", "warned"), [(0.0, True), (1.0, True), (1.5, False), (2.0, False)])
    def test_new_release_warning(self, make_optimizer, make_record, week_nr, warned) -> None:
        """Test that very new releases carry an accuracy warning."""
        optimizer, _ = make_optimizer()
        result = optimizer.predict_admission(make_record(week_nr=week_nr))

        assert result.is_success
        assert bool(result.warnings) is warned
        if warned:
            assert "week number <= 1" in result.warnings[0]

    def test_batch_keeps_input_order(self, make_optimizer, make_record) -> None:
        """Test that batch results follow input order with their own warnings."""
        optimizer, _ = make_optimizer(lambda minute: float(minute))
        records = [
            make_record(show_datetime=datetime(2024, 3, 15, 21, 0)),
            make_record(show_datetime=datetime(2024, 3, 15, 11, 0), week_nr=1.0),
            make_record(show_datetime=datetime(2024, 3, 15, 15, 0)),
        ]
        results = optimizer.batch_predict_admissions(records)

        assert [r.value.show_datetime.hour for r in results] == [21, 11, 15]
        assert [bool(r.warnings) for r in results] == [False, True, False]

    def test_batch_slot_admissions(self, make_optimizer, make_record) -> None:
        """Test predicting one record at several start times."""
        optimizer, _ = make_optimizer(lambda minute: float(minute))
        record = make_record()
        times = [datetime(2024, 3, 16, 20, 0), datetime(2024, 3, 16, 12, 0)]
        results = optimizer.batch_predict_slot_admissions(record, times)

        assert [r.value.show_datetime for r in results] == times
        assert [r.value.attendance for r in results] == pytest.approx([1200.0, 720.0])
        assert record.show_datetime == datetime(2024, 3, 15, 18, 30)

    def test_predictor_failure_propagates(self, encoder, make_record) -> None:
        """Test that predictor errors are not swallowed."""
        optimizer = ShowtimeSlotOptimizer(FeatureDeriver(encoder), FailingPredictor())
        with pytest.raises(RuntimeError, match="model unavailable"):
            optimizer.batch_predict_admissions([make_record()])


class TestTopNBestShowTimes:
    """Tests for the slot search."""

    def test_window_slots_are_inclusive(self, make_optimizer, make_record) -> None:
        """Test that both window bounds are evaluated."""
        optimizer, predictor = make_optimizer(lambda minute: float(minute))
        result = optimizer.top_n_best_show_times(
            make_record(), 3, timedelta(hours=10, minutes=15), timedelta(hours=10, minutes=25)
        )

        assert predictor.calls == 3
        assert [p.show_datetime.strftime("%H:%M") for p in result.predictions] == [
            "10:25",
            "10:20",
            "10:15",
        ]
        assert result.warnings == ()

    def test_invalid_window(self, make_optimizer, make_record) -> None:
        """Test that an inverted window is an error without predictions."""
        optimizer, predictor = make_optimizer()
        result = optimizer.top_n_best_show_times(
            make_record(), 3, timedelta(hours=20), timedelta(hours=12)
        )

        assert not result.is_success
        assert result.predictions == ()
        assert "earliest start must be before latest start" in result.errors[0]
        assert predictor.calls == 0

    @pytest.mark.parametrize(
        ("earliest", "latest"),
        [
            (timedelta(hours=-1), timedelta(hours=12)),
            (timedelta(hours=22), timedelta(hours=25)),
            (timedelta(hours=12), timedelta(days=1)),
        ],
    )
    def test_window_outside_the_day(self, make_optimizer, make_record, earliest, latest) -> None:
        """Test that a window leaving the record's date is an error without predictions."""
        optimizer, predictor = make_optimizer()
        result = optimizer.top_n_best_show_times(make_record(), 3, earliest, latest)

        assert not result.is_success
        assert result.predictions == ()
        assert "within the day" in result.errors[0]
        assert predictor.calls == 0

    def test_window_ending_before_midnight(self, make_optimizer, make_record) -> None:
        """Test that the last minute of the day is a valid bound."""
        optimizer, _ = make_optimizer()
        result = optimizer.top_n_best_show_times(
            make_record(), 1, timedelta(hours=23, minutes=55), timedelta(hours=23, minutes=59)
        )

        assert result.is_success
        assert result.best.show_datetime == datetime(2024, 3, 15, 23, 55)

    def test_single_slot_window(self, make_optimizer, make_record) -> None:
        """Test a window whose bounds coincide."""
        optimizer, _ = make_optimizer()
        result = optimizer.top_n_best_show_times(
            make_record(), 1, timedelta(hours=20), timedelta(hours=20)
        )

        assert result.is_success
        assert result.best.show_datetime == datetime(2024, 3, 15, 20, 0)

    def test_decreasing_score_picks_earliest(self, make_optimizer, make_record) -> None:
        """Test that the earliest slot wins when attendance falls over the day."""
        optimizer, _ = make_optimizer(lambda minute: 2000.0 - minute)
        result = optimizer.top_n_best_show_times(make_record(), 2)

        assert result.best.show_datetime == datetime(2024, 3, 15, 10, 15)
        assert result.predictions[1].show_datetime == datetime(2024, 3, 15, 10, 20)

    def test_ties_keep_chronological_order(self, make_optimizer, make_record) -> None:
        """Test that equal scores rank earlier slots first."""
        optimizer, _ = make_optimizer(lambda minute: 5.0)
        result = optimizer.top_n_best_show_times(make_record(), 3)

        assert [p.show_datetime.strftime("%H:%M") for p in result.predictions] == [
            "10:15",
            "10:20",
            "10:25",
        ]

    def test_results_are_sorted_and_truncated(self, make_optimizer, make_record) -> None:
        """Test that results are best first and at most top_n long."""
        optimizer, predictor = make_optimizer(lambda minute: -abs(minute - 19 * 60))
        result = optimizer.top_n_best_show_times(make_record(), 5)

        attendances = [p.attendance for p in result.predictions]
        assert len(attendances) == 5
        assert attendances == sorted(attendances, reverse=True)
        assert result.best.show_datetime == datetime(2024, 3, 15, 19, 0)
        assert predictor.calls == 151

    def test_fewer_slots_than_requested(self, make_optimizer, make_record) -> None:
        """Test the warning when the window holds fewer slots than requested."""
        optimizer, _ = make_optimizer()
        result = optimizer.top_n_best_show_times(
            make_record(), 5, timedelta(hours=10, minutes=15), timedelta(hours=10, minutes=25)
        )

        assert result.is_success
        assert len(result.predictions) == 3
        assert result.warnings == (
            "Only 3 predictions could be made within the specified time window, "
            "which is fewer than the requested top 5.",
        )

    def test_new_release_warning_is_added(self, make_optimizer, make_record) -> None:
        """Test that the search carries the record's warnings."""
        optimizer, _ = make_optimizer()
        result = optimizer.top_n_best_show_times(make_record(week_nr=0.0), 1)
        assert any("week number <= 1" in warning for warning in result.warnings)

    @pytest.mark.parametrize("top_n", [0, -3])
    def test_invalid_top_n(self, make_optimizer, make_record, top_n: int) -> None:
        """Test that a non-positive top_n is an error."""
        optimizer, predictor = make_optimizer()
        result = optimizer.top_n_best_show_times(make_record(), top_n)

        assert not result.is_success
        assert "top_n must be at least 1" in result.errors[0]
        assert predictor.calls == 0

    def test_bounds_default_independently(self, make_optimizer, make_record) -> None:
        """Test that a missing bound falls back to its own default."""
        optimizer, _ = make_optimizer(lambda minute: float(minute))

        only_latest = optimizer.top_n_best_show_times(
            make_record(), 200, latest_start=timedelta(hours=11)
        )
        only_earliest = optimizer.top_n_best_show_times(
            make_record(), 200, earliest_start=timedelta(hours=22)
        )

        assert only_latest.predictions[-1].show_datetime.strftime("%H:%M") == "10:15"
        assert only_latest.best.show_datetime.strftime("%H:%M") == "11:00"
        assert only_earliest.best.show_datetime.strftime("%H:%M") == "22:45"
        assert only_earliest.predictions[-1].show_datetime.strftime("%H:%M") == "22:00"

    def test_search_keeps_record_date(self, make_optimizer, make_record) -> None:
        """Test that slots fall on the record's date."""
        optimizer, _ = make_optimizer()
        result = optimizer.top_n_best_show_times(make_record(), 3)
        assert all(p.show_datetime.date() == datetime(2024, 3, 15).date() for p in result.predictions)

    def test_predictor_failure_aborts_search(self, encoder, make_record) -> None:
        """Test that a predictor failure aborts the whole search."""
        optimizer = ShowtimeSlotOptimizer(FeatureDeriver(encoder), FailingPredictor())
        with pytest.raises(RuntimeError):
            optimizer.top_n_best_show_times(make_record())


class TestBestShowTime:
    """Tests for the single best slot."""

    def test_best_show_time(self, make_optimizer, make_record) -> None:
        """Test that the best slot is the evening peak."""
        optimizer, _ = make_optimizer(lambda minute: -abs(minute - 19 * 60))
        result = optimizer.best_show_time(make_record())

        assert result.is_success
        assert result.value.show_datetime == datetime(2024, 3, 15, 19, 0)

    def test_best_show_time_error(self, make_optimizer, make_record) -> None:
        """Test that window errors carry over."""
        optimizer, _ = make_optimizer()
        result = optimizer.best_show_time(make_record(), timedelta(hours=23), timedelta(hours=10))

        assert not result.is_success
        assert result.value is None


class TestSlots:
    """Tests for slot enumeration."""

    def test_default_window_slot_count(self, make_optimizer) -> None:
        """Test the number of slots between 10:15 and 22:45."""
        optimizer, _ = make_optimizer()
        assert optimizer.slot_count(DEFAULT_EARLIEST_START, DEFAULT_LATEST_START) == 151

    def test_latest_bound_off_grid(self, make_optimizer) -> None:
        """Test that a bound between slots is not exceeded."""
        optimizer, _ = make_optimizer(interval=timedelta(minutes=15))
        times = optimizer.candidate_times(
            datetime(2024, 3, 15, 18, 30), timedelta(hours=12), timedelta(hours=12, minutes=40)
        )

        assert [t.strftime("%H:%M") for t in times] == ["12:00", "12:15", "12:30"]
        assert optimizer.slot_count(timedelta(hours=12), timedelta(hours=12, minutes=40)) == 3

    def test_candidate_times_keep_timezone(self, make_optimizer) -> None:
        """Test that slots keep the record's timezone."""
        optimizer, _ = make_optimizer()
        tz = timezone(timedelta(hours=2))
        times = optimizer.candidate_times(
            datetime(2024, 3, 15, 18, 30, tzinfo=tz), timedelta(hours=12), timedelta(hours=12)
        )
        assert times == [datetime(2024, 3, 15, 12, 0, tzinfo=tz)]

    @pytest.mark.parametrize("interval", [timedelta(0), timedelta(minutes=-5)])
    def test_non_positive_interval_raises_error(self, encoder, interval) -> None:
        """Test that the slot interval must be positive."""
        with pytest.raises(ValueError, match="interval must be positive"):
            ShowtimeSlotOptimizer(FeatureDeriver(encoder), FailingPredictor(), interval)

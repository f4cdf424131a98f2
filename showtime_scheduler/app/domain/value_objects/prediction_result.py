"""Prediction result value objects.

Immutable data structures for attendance prediction outputs.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Prediction:
    """Predicted attendance for one showtime.

    The event and theatre are carried along so that results can be
    interpreted without the request at hand.

    Attributes:
        attendance: Predicted admissions (no unit validation)
        show_datetime: Start of the showtime the prediction was made for
        event_name: Name of the event
        theatre_name: Name of the theatre
    """

    attendance: float
    show_datetime: datetime
    event_name: str
    theatre_name: str


@dataclass(frozen=True)
class AdmissionResult:
    """Outcome of a single admissions prediction.

    Attributes:
        value: The prediction, or None if it could not be made
        warnings: Advisory messages that do not affect success
        errors: Validation messages; any error means failure
    """

    value: Prediction | None = None
    warnings: tuple[str, ...] = ()
    errors: tuple[str, ...] = ()

    @property
    def is_success(self) -> bool:
        """Return True when no errors were reported."""
        return not self.errors


@dataclass(frozen=True)
class SlotSearchResult:
    """Ranked outcome of a showtime slot search.

    Attributes:
        predictions: Best slots, highest predicted attendance first
        warnings: Advisory messages that do not affect success
        errors: Validation messages; any error means failure
    """

    predictions: tuple[Prediction, ...] = ()
    warnings: tuple[str, ...] = ()
    errors: tuple[str, ...] = ()

    @property
    def is_success(self) -> bool:
        """Return True when no errors were reported."""
        return not self.errors

    @property
    def best(self) -> Prediction | None:
        """Return the highest ranked prediction, if any."""
        return self.predictions[0] if self.predictions else None

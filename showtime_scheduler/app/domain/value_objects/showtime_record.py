"""Raw showtime record value object.

Immutable data structure for one observed or candidate showtime.
"""

import dataclasses
from dataclasses import dataclass
from datetime import datetime

# Historical reporting windows, in feature order. Each window has an
# ``<window>_admissions`` and ``<window>_shows`` field on the record.
HISTORY_WINDOWS: tuple[str, ...] = (
    "preview",
    "total_preview",
    "first_week",
    "total_first_week",
    "last_weekend",
    "last_week",
    "total_last_week",
    "pre_last_week",
    "total_pre_last_week",
)


@dataclass(frozen=True)
class RawShowtimeRecord:
    """A single showtime as supplied by the caller.

    ``total_*`` windows cover every theatre showing the event, the others
    only the record's own theatre.

    Attributes:
        theatre_name: Name of the cinema theatre
        country: Country of the theatre
        city: City of the theatre
        event_name: Title of the event (e.g. the movie)
        event_type: Movie, concert, live event, ...
        event_genres: Genres separated by ", "
        event_rating: Textual content-rating label
        length_in_minutes: Running time of the event
        spoken_language: Spoken language of the showing
        presentation_method: Presentation method (e.g. 2D, 3D)
        week_nr: Weeks since release (0 for previews)
        show_datetime: Start of the showtime
        average_admissions: Average admissions of the event at this theatre
        total_average_admissions: Average admissions of the event overall
        admissions: Label - observed admissions (None for candidates)
    """

    theatre_name: str
    country: str
    city: str
    event_name: str
    event_type: str
    event_genres: str
    event_rating: str
    length_in_minutes: float
    spoken_language: str
    presentation_method: str
    week_nr: float
    show_datetime: datetime
    average_admissions: float = 0.0
    total_average_admissions: float = 0.0

    preview_admissions: float = 0.0
    preview_shows: float = 0.0
    total_preview_admissions: float = 0.0
    total_preview_shows: float = 0.0

    first_week_admissions: float = 0.0
    first_week_shows: float = 0.0
    total_first_week_admissions: float = 0.0
    total_first_week_shows: float = 0.0

    last_weekend_admissions: float = 0.0
    last_weekend_shows: float = 0.0

    last_week_admissions: float = 0.0
    last_week_shows: float = 0.0
    total_last_week_admissions: float = 0.0
    total_last_week_shows: float = 0.0

    pre_last_week_admissions: float = 0.0
    pre_last_week_shows: float = 0.0
    total_pre_last_week_admissions: float = 0.0
    total_pre_last_week_shows: float = 0.0

    admissions: float | None = None

    def __post_init__(self) -> None:
        """Validate showtime record values."""
        if self.week_nr < 0:
            raise ValueError(f"week_nr must be non-negative, got {self.week_nr}")
        if self.length_in_minutes < 0:
            raise ValueError(
                f"length_in_minutes must be non-negative, got {self.length_in_minutes}"
            )
        for window in HISTORY_WINDOWS:
            shows = getattr(self, f"{window}_shows")
            if shows < 0:
                raise ValueError(f"{window}_shows must be non-negative, got {shows}")
        if self.admissions is not None and self.admissions < 0:
            raise ValueError(f"admissions must be non-negative, got {self.admissions}")

    def window_admissions(self, window: str) -> float:
        """Return the admissions count recorded for a history window."""
        return getattr(self, f"{window}_admissions")

    def window_shows(self, window: str) -> float:
        """Return the number of shows recorded for a history window."""
        return getattr(self, f"{window}_shows")

    def with_show_datetime(self, show_datetime: datetime) -> "RawShowtimeRecord":
        """Return a copy of this record starting at another time."""
        return dataclasses.replace(self, show_datetime=show_datetime)

"""Fake showtime generator for testing and validation.

Generates synthetic showtime records that mimic real attendance patterns.
"""

import random
from datetime import datetime, timedelta

from domain.value_objects import RawShowtimeRecord

from .event_features import RATING_MIN_AGE

THEATRES: tuple[tuple[str, str, str], ...] = (
    ("Apollo Kino Solaris", "Estonia", "Tallinn"),
    ("Apollo Kino Tasku", "Estonia", "Tartu"),
    ("Apollo Kino Akropolis", "Lithuania", "Vilnius"),
)
EVENTS: tuple[tuple[str, str, float], ...] = (
    # name, genres, popularity (mean admissions at a prime slot)
    ("Northern Lights", "Drama, Romance", 40.0),
    ("Steel Horizon", "Action, Adventure, Sci-Fi", 70.0),
    ("The Little Fox", "Animation, Family, Comedy", 55.0),
    ("Quiet Harbour", "Documentary", 12.0),
)
EVENT_TYPES = ("Movie",)
LANGUAGES = ("Estonian", "English", "Russian")
PRESENTATION_METHODS = ("2D", "3D")


class FakeShowtimeGenerator:
    """Generator for synthetic showtime records.

    Attendance is driven by:
    - Event popularity, decaying with the week of release
    - Time of day (evening peak around 19:00)
    - Weekends
    """

    # Fraction of popularity kept per week since release
    WEEKLY_DECAY = 0.8

    def __init__(self, seed: int | None = None, start_date: datetime | None = None) -> None:
        """Initialize the fake showtime generator.

        Args:
            seed: Random seed for reproducibility
            start_date: Date of the first generated showtime
        """
        self._random = random.Random(seed)
        self._start_date = start_date or datetime(2024, 1, 1)

    def generate(self, num_samples: int = 100) -> list[RawShowtimeRecord]:
        """Generate synthetic showtime records with admissions.

        Args:
            num_samples: Number of records to generate

        Returns:
            Generated records, labelled with admissions
        """
        if num_samples < 1:
            raise ValueError("num_samples must be at least 1")

        return [
            self._generate_single_record(self._random_show_datetime())
            for _ in range(num_samples)
        ]

    def _random_show_datetime(self) -> datetime:
        """Pick a start on a 5-minute grid between 10:00 and 23:00."""
        day = self._start_date + timedelta(days=self._random.randint(0, 364))
        minute_of_day = self._random.randrange(10 * 60, 23 * 60 + 1, 5)
        return day.replace(hour=0, minute=0, second=0, microsecond=0) + timedelta(
            minutes=minute_of_day
        )

    def _generate_single_record(self, show_datetime: datetime) -> RawShowtimeRecord:
        """Generate one labelled showtime record.

        Args:
            show_datetime: Start of the showtime

        Returns:
            A synthetic showtime record
        """
        theatre_name, country, city = self._random.choice(THEATRES)
        event_name, genres, popularity = self._random.choice(EVENTS)
        week_nr = self._random.randint(0, 6)
        demand = popularity * self.WEEKLY_DECAY ** max(0, week_nr - 1)

        history = self._generate_history(week_nr, demand)
        admissions = self._calculate_admissions(demand, show_datetime)

        return RawShowtimeRecord(
            theatre_name=theatre_name,
            country=country,
            city=city,
            event_name=event_name,
            event_type=self._random.choice(EVENT_TYPES),
            event_genres=genres,
            event_rating=self._random.choice(tuple(RATING_MIN_AGE)),
            length_in_minutes=float(self._random.randint(80, 160)),
            spoken_language=self._random.choice(LANGUAGES),
            presentation_method=self._random.choice(PRESENTATION_METHODS),
            week_nr=float(week_nr),
            show_datetime=show_datetime,
            average_admissions=round(demand * 0.6, 1),
            total_average_admissions=round(demand * 0.5, 1),
            admissions=admissions,
            **history,
        )

    def _generate_history(self, week_nr: int, demand: float) -> dict[str, float]:
        """Generate window statistics consistent with the week of release."""
        # Window pairs and the first week of release at which they hold data
        windows = (
            ("preview", 1, 3),
            ("first_week", 2, 30),
            ("last_weekend", 2, 12),
            ("last_week", 2, 30),
            ("pre_last_week", 3, 30),
        )
        history: dict[str, float] = {}
        for window, min_week, max_shows in windows:
            if week_nr >= min_week:
                shows = float(self._random.randint(0, max_shows))
                total_shows = shows * self._random.randint(1, 4)
            else:
                shows = total_shows = 0.0
            per_show = max(0.0, self._random.gauss(demand * 0.7, demand * 0.1))
            history[f"{window}_shows"] = shows
            history[f"{window}_admissions"] = round(shows * per_show)
            if window != "last_weekend":
                history[f"total_{window}_shows"] = total_shows
                history[f"total_{window}_admissions"] = round(total_shows * per_show)
        return history

    def _calculate_admissions(self, demand: float, show_datetime: datetime) -> float:
        """Calculate realistic admissions for a showtime."""
        hour = show_datetime.hour + show_datetime.minute / 60
        # Evening peak at 19:00, falling off towards the morning and late night
        time_factor = max(0.2, 1 - abs(hour - 19) / 10)

        if show_datetime.weekday() >= 4:
            weekend_factor = 1.4
        else:
            weekend_factor = 1.0

        admissions = demand * time_factor * weekend_factor
        noise = self._random.gauss(0, admissions * 0.1)
        return float(max(0, round(admissions + noise)))

"""Pytest configuration for showtime scheduler tests.

This module configures the Python path for tests to find the application
modules and provides shared fixtures.
"""

import sys
from datetime import datetime
from pathlib import Path

import pytest

# Add the application directory to the Python path for test imports
APP_DIR = Path(__file__).parent.parent / "showtime_scheduler" / "app"
sys.path.insert(0, str(APP_DIR))

from domain.interfaces import ICategoricalEncoder  # noqa: E402
from domain.value_objects import RawShowtimeRecord  # noqa: E402

VOCABULARIES = {
    "theatre_name": ["Apollo Kino Solaris", "Apollo Kino Tasku"],
    "country": ["Estonia"],
    "city": ["Tallinn", "Tartu"],
    "event_type": ["Movie", "Concert"],
    "spoken_language": ["Estonian", "English", "Russian"],
    "presentation_method": ["2D", "3D"],
    "event_genres": ["Action", "Comedy", "Drama"],
}


@pytest.fixture
def vocabularies() -> dict[str, list[str]]:
    """Categorical vocabularies shared by the tests."""
    return {column: list(labels) for column, labels in VOCABULARIES.items()}


@pytest.fixture
def make_record():
    """Factory for showtime records with sensible defaults."""

    def _create(**overrides) -> RawShowtimeRecord:
        values = {
            "theatre_name": "Apollo Kino Solaris",
            "country": "Estonia",
            "city": "Tallinn",
            "event_name": "Steel Horizon",
            "event_type": "Movie",
            "event_genres": "Action, Comedy",
            "event_rating": "Alla 12 a. mittesoovitatav",
            "length_in_minutes": 120.0,
            "spoken_language": "English",
            "presentation_method": "2D",
            "week_nr": 3.0,
            "show_datetime": datetime(2024, 3, 15, 18, 30),
            "average_admissions": 25.0,
            "total_average_admissions": 20.0,
            "preview_admissions": 40.0,
            "preview_shows": 2.0,
            "first_week_admissions": 600.0,
            "first_week_shows": 20.0,
            "last_week_admissions": 300.0,
            "last_week_shows": 15.0,
        }
        values.update(overrides)
        return RawShowtimeRecord(**values)

    return _create


class DictEncoder(ICategoricalEncoder):
    """Plain-Python categorical encoder over fixed vocabularies."""

    def __init__(self, vocabularies: dict[str, list[str]]) -> None:
        self._vocabularies = {column: tuple(labels) for column, labels in vocabularies.items()}

    def labels(self, column: str) -> tuple[str, ...]:
        return self._vocabularies[column]

    def encode(self, column: str, value: str) -> tuple[float, ...]:
        return tuple(1.0 if label == value else 0.0 for label in self._vocabularies[column])

    def encode_many(self, column: str, values) -> tuple[float, ...]:
        return tuple(1.0 if label in values else 0.0 for label in self._vocabularies[column])


@pytest.fixture
def encoder(vocabularies) -> ICategoricalEncoder:
    """Categorical encoder over the shared vocabularies."""
    return DictEncoder(vocabularies)

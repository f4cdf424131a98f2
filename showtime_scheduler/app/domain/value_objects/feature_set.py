"""Feature set variants.

Defines the feature columns fed to the attendance predictor. The predictor
and the feature deriver must agree on the variant in effect.
"""

from enum import Enum

# Encoded groups expand into one feature per vocabulary label
# ("<group>=<label>"). Values are the record attribute they encode.
ONE_HOT_COLUMNS: dict[str, str] = {
    "theatre_name_encoded": "theatre_name",
    "country_encoded": "country",
    "city_encoded": "city",
    "event_type_encoded": "event_type",
    "spoken_language_encoded": "spoken_language",
    "presentation_method_encoded": "presentation_method",
}
MULTI_HOT_COLUMNS: dict[str, str] = {
    "event_genres_encoded": "event_genres",
}

CYCLICAL_TIME_COLUMNS: tuple[str, ...] = (
    "sin_month",
    "cos_month",
    "sin_day_of_month",
    "cos_day_of_month",
    "sin_day_of_year",
    "cos_day_of_year",
    "sin_week_day",
    "cos_week_day",
    "sin_hour",
    "cos_hour",
    "sin_minute_of_day",
    "cos_minute_of_day",
)


def _window(name: str, flag: bool = True, shows: bool = True) -> tuple[str, ...]:
    columns = [f"{name}_shows_exist"] if flag else []
    columns.append(f"{name}_admissions")
    if shows:
        columns.append(f"{name}_shows")
    columns.append(f"{name}_average_admissions")
    return tuple(columns)


_EVENT_COLUMNS: tuple[str, ...] = (
    "average_admissions",
    "total_average_admissions",
    "theatre_name_encoded",
    "country_encoded",
    "city_encoded",
)

FULL_FEATURE_COLUMNS: tuple[str, ...] = (
    *_EVENT_COLUMNS,
    "event_type_encoded",
    "event_genres_encoded",
    "event_rating_encoded",
    "length_in_minutes",
    "spoken_language_encoded",
    "presentation_method_encoded",
    "week_nr",
    "year",
    "is_weekend",
    *CYCLICAL_TIME_COLUMNS,
    "preview_exists",
    *_window("preview"),
    *_window("total_preview"),
    "last_week_exists",
    *_window("first_week"),
    *_window("total_first_week"),
    *_window("last_weekend"),
    *_window("last_week"),
    *_window("total_last_week"),
    "pre_last_week_exists",
    *_window("pre_last_week"),
    *_window("total_pre_last_week"),
)

# Permutation importance showed the event type, the existence flags and two
# of the total show counts carry no signal once the rest is present.
REDUCED_FEATURE_COLUMNS: tuple[str, ...] = (
    *_EVENT_COLUMNS,
    "event_genres_encoded",
    "event_rating_encoded",
    "length_in_minutes",
    "spoken_language_encoded",
    "presentation_method_encoded",
    "week_nr",
    "year",
    "is_weekend",
    *CYCLICAL_TIME_COLUMNS,
    *_window("preview", flag=False),
    *_window("total_preview", flag=False, shows=False),
    *_window("first_week", flag=False),
    *_window("total_first_week", flag=False),
    *_window("last_weekend", flag=False),
    *_window("last_week", flag=False),
    *_window("total_last_week", flag=False),
    *_window("pre_last_week", flag=False),
    *_window("total_pre_last_week", flag=False, shows=False),
)


class FeatureSet(str, Enum):
    """Feature set variants the predictor can be trained on.

    Attributes:
        FULL: Every derived column
        REDUCED: Lower-signal columns removed
    """

    FULL = "full"
    REDUCED = "reduced"

    @property
    def columns(self) -> tuple[str, ...]:
        """Return the feature columns of this variant, encoded groups unexpanded."""
        if self is FeatureSet.FULL:
            return FULL_FEATURE_COLUMNS
        return REDUCED_FEATURE_COLUMNS

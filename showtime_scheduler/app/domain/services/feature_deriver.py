"""Feature deriver service.

Domain service that turns a raw showtime record into the flat feature
vector consumed by the attendance predictor.
"""

from domain.interfaces import ICategoricalEncoder
from domain.value_objects import (
    HISTORY_WINDOWS,
    MULTI_HOT_COLUMNS,
    ONE_HOT_COLUMNS,
    DerivedFeatureVector,
    FeatureSet,
    RawShowtimeRecord,
)

from .cyclical_time import encode_cyclical_time
from .event_features import encode_rating, parse_genres
from .history_features import average_admissions, existence_flags


class FeatureDeriver:
    """Service composing the per-record feature transforms.

    The deriver holds no mutable state; the feature set variant and the
    categorical encoder are fixed at construction.
    """

    def __init__(
        self,
        encoder: ICategoricalEncoder,
        feature_set: FeatureSet = FeatureSet.REDUCED,
    ) -> None:
        """Initialize the feature deriver.

        Args:
            encoder: Categorical encoder holding the known vocabularies
            feature_set: Feature set variant the predictor was trained on
        """
        self._encoder = encoder
        self._feature_set = feature_set

    @property
    def feature_set(self) -> FeatureSet:
        """Feature set variant in effect."""
        return self._feature_set

    def feature_names(self) -> tuple[str, ...]:
        """Get the expanded feature names, in derivation order.

        Returns:
            Feature names with encoded groups expanded per vocabulary label
        """
        names: list[str] = []
        for column in self._feature_set.columns:
            attribute = ONE_HOT_COLUMNS.get(column) or MULTI_HOT_COLUMNS.get(column)
            if attribute is None:
                names.append(column)
            else:
                names.extend(f"{column}={label}" for label in self._encoder.labels(attribute))
        return tuple(names)

    def derive(self, record: RawShowtimeRecord) -> DerivedFeatureVector:
        """Derive the feature vector of one showtime record.

        Args:
            record: Showtime record; never modified

        Returns:
            Feature vector holding exactly the columns of the feature set
        """
        scalars = self._scalar_features(record)
        items: list[tuple[str, float]] = []

        for column in self._feature_set.columns:
            if column in ONE_HOT_COLUMNS:
                attribute = ONE_HOT_COLUMNS[column]
                encoded = self._encoder.encode(attribute, getattr(record, attribute))
                items.extend(self._label_items(column, attribute, encoded))
            elif column in MULTI_HOT_COLUMNS:
                attribute = MULTI_HOT_COLUMNS[column]
                encoded = self._encoder.encode_many(attribute, parse_genres(getattr(record, attribute)))
                items.extend(self._label_items(column, attribute, encoded))
            else:
                items.append((column, scalars[column]))

        return DerivedFeatureVector.from_items(items)

    def _label_items(
        self,
        column: str,
        attribute: str,
        encoded: tuple[float, ...],
    ) -> list[tuple[str, float]]:
        """Name the positions of an encoding after the vocabulary labels."""
        labels = self._encoder.labels(attribute)
        if len(labels) != len(encoded):
            raise ValueError(
                f"encoder returned {len(encoded)} values for {attribute}, "
                f"expected {len(labels)}"
            )
        return [(f"{column}={label}", value) for label, value in zip(labels, encoded)]

    def _scalar_features(self, record: RawShowtimeRecord) -> dict[str, float]:
        """Compute every non-encoded feature of the full feature set."""
        features: dict[str, float] = {
            "average_admissions": record.average_admissions,
            "total_average_admissions": record.total_average_admissions,
            "event_rating_encoded": encode_rating(record.event_rating),
            "length_in_minutes": record.length_in_minutes,
            "week_nr": record.week_nr,
        }
        features.update(encode_cyclical_time(record.show_datetime))
        features.update(existence_flags(record))
        features.update(average_admissions(record))
        for window in HISTORY_WINDOWS:
            features[f"{window}_admissions"] = record.window_admissions(window)
            features[f"{window}_shows"] = record.window_shows(window)
        return features

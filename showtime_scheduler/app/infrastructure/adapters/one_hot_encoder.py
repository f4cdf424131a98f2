"""One-hot categorical encoder adapter.

Infrastructure adapter that implements ICategoricalEncoder using
scikit-learn's OneHotEncoder and MultiLabelBinarizer.
"""

import json
import logging
from pathlib import Path
from typing import Iterable, Mapping, Sequence

import numpy as np
from domain.interfaces import ICategoricalEncoder
from domain.services import parse_genres
from domain.value_objects import MULTI_HOT_COLUMNS, ONE_HOT_COLUMNS, RawShowtimeRecord
from sklearn.preprocessing import MultiLabelBinarizer, OneHotEncoder

_LOGGER = logging.getLogger(__name__)


class VocabularyError(Exception):
    """Raised when categorical vocabularies cannot be loaded."""

    pass


class OneHotCategoricalEncoder(ICategoricalEncoder):
    """scikit-learn implementation of the categorical encoder.

    Each column gets a fitted OneHotEncoder (single values) and
    MultiLabelBinarizer (value collections) over its fixed vocabulary.
    Unknown values encode as zeros. Instances are read-only after
    construction and safe to share between threads.
    """

    def __init__(self, vocabularies: Mapping[str, Sequence[str]]) -> None:
        """Initialize the encoder with known vocabularies.

        Args:
            vocabularies: Record attribute name to its known labels
        """
        self._labels: dict[str, tuple[str, ...]] = {}
        self._one_hot: dict[str, OneHotEncoder] = {}
        self._multi_hot: dict[str, MultiLabelBinarizer] = {}

        for column, raw_labels in vocabularies.items():
            # Keep first occurrence order, drop duplicates
            labels = tuple(dict.fromkeys(str(label) for label in raw_labels))
            if not labels:
                raise VocabularyError(f"Vocabulary for {column} is empty")

            one_hot = OneHotEncoder(
                categories=[list(labels)],
                handle_unknown="ignore",
                sparse_output=False,
            )
            one_hot.fit(np.array(labels, dtype=object).reshape(-1, 1))

            multi_hot = MultiLabelBinarizer(classes=list(labels))
            multi_hot.fit([labels])

            self._labels[column] = labels
            self._one_hot[column] = one_hot
            self._multi_hot[column] = multi_hot

        _LOGGER.debug(
            "Categorical encoder ready: %s",
            ", ".join(f"{column}={len(labels)}" for column, labels in self._labels.items()),
        )

    @classmethod
    def from_json(cls, path: str | Path) -> "OneHotCategoricalEncoder":
        """Load vocabularies from a JSON file mapping columns to label lists.

        Args:
            path: Path to the vocabulary file

        Raises:
            VocabularyError: If the file is missing or malformed
        """
        path = Path(path)
        try:
            with open(path) as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise VocabularyError(f"Failed to load vocabularies from {path}: {e}") from e

        if not isinstance(data, dict) or not all(
            isinstance(labels, list) for labels in data.values()
        ):
            raise VocabularyError(
                f"Vocabulary file {path} must map column names to lists of labels"
            )

        _LOGGER.info("Loaded vocabularies for %d columns from %s", len(data), path)
        return cls(data)

    @classmethod
    def from_records(cls, records: Iterable[RawShowtimeRecord]) -> "OneHotCategoricalEncoder":
        """Build vocabularies from the categorical values seen in records.

        Args:
            records: Showtime records, typically the training set

        Returns:
            Encoder over every value that occurs, in first-seen order
        """
        vocabularies: dict[str, dict[str, None]] = {
            column: {} for column in (*ONE_HOT_COLUMNS.values(), *MULTI_HOT_COLUMNS.values())
        }
        for record in records:
            for column in ONE_HOT_COLUMNS.values():
                vocabularies[column][getattr(record, column)] = None
            for column in MULTI_HOT_COLUMNS.values():
                for label in parse_genres(getattr(record, column)):
                    vocabularies[column][label] = None

        return cls({column: list(labels) for column, labels in vocabularies.items() if labels})

    def labels(self, column: str) -> tuple[str, ...]:
        """Get the known vocabulary of a column."""
        return self._labels[column]

    def encode(self, column: str, value: str) -> tuple[float, ...]:
        """One-hot encode a single value."""
        encoder = self._one_hot[column]
        row = encoder.transform(np.array([[str(value or "")]], dtype=object))[0]
        return tuple(float(x) for x in row)

    def encode_many(self, column: str, values: Sequence[str]) -> tuple[float, ...]:
        """Multi-hot encode a collection of values."""
        binarizer = self._multi_hot[column]
        # MultiLabelBinarizer warns on unknown labels, which are expected here
        labels = set(self._labels[column])
        known = [value for value in values if value in labels]
        row = binarizer.transform([known])[0]
        return tuple(float(x) for x in row)

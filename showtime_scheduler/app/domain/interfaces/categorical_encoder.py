"""Categorical encoder interface.

Contract for turning categorical values into fixed-width numeric encodings.
"""

from abc import ABC, abstractmethod
from typing import Sequence


class ICategoricalEncoder(ABC):
    """Contract for one-hot / multi-hot encoding against known vocabularies."""

    @abstractmethod
    def labels(self, column: str) -> tuple[str, ...]:
        """Get the known vocabulary of a column.

        Args:
            column: Record attribute name (e.g. "city")

        Returns:
            Labels in encoding order; one output position per label

        Raises:
            KeyError: If no vocabulary is known for the column
        """
        pass

    @abstractmethod
    def encode(self, column: str, value: str) -> tuple[float, ...]:
        """One-hot encode a single value.

        Unknown values encode as all zeros.

        Args:
            column: Record attribute name
            value: Categorical value

        Returns:
            One float per label of the column's vocabulary
        """
        pass

    @abstractmethod
    def encode_many(self, column: str, values: Sequence[str]) -> tuple[float, ...]:
        """Multi-hot encode a collection of values.

        Repeated values are the same as a single occurrence; unknown values
        are ignored.

        Args:
            column: Record attribute name
            values: Categorical values

        Returns:
            One float per label of the column's vocabulary
        """
        pass

"""Derived feature vector value object.

Immutable, flat mapping from feature name to numeric value.
"""

from dataclasses import dataclass, field
from numbers import Real
from types import MappingProxyType
from typing import Iterable, Mapping


@dataclass(frozen=True)
class DerivedFeatureVector:
    """Features derived from one showtime record.

    Attributes:
        features: Feature name to value, in derivation order
    """

    features: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Freeze the feature mapping."""
        for name, value in self.features.items():
            if not name:
                raise ValueError("feature names cannot be empty")
            if not isinstance(value, Real):
                raise ValueError(f"feature {name} must be numeric, got {value!r}")
        object.__setattr__(
            self,
            "features",
            MappingProxyType({name: float(value) for name, value in self.features.items()}),
        )

    @classmethod
    def from_items(cls, items: Iterable[tuple[str, float]]) -> "DerivedFeatureVector":
        """Create a vector from (name, value) pairs, rejecting duplicate names."""
        features: dict[str, float] = {}
        for name, value in items:
            if name in features:
                raise ValueError(f"duplicate feature name: {name}")
            features[name] = value
        return cls(features=features)

    @property
    def names(self) -> tuple[str, ...]:
        """Return the feature names in derivation order."""
        return tuple(self.features)

    def values_for(self, names: Iterable[str]) -> list[float]:
        """Return feature values in the order of the given names.

        Raises:
            KeyError: If a requested feature is not present
        """
        return [self.features[name] for name in names]

    def __getitem__(self, name: str) -> float:
        return self.features[name]

    def __contains__(self, name: object) -> bool:
        return name in self.features

    def __len__(self) -> int:
        return len(self.features)

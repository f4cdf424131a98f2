"""Domain layer for the showtime scheduler.

This package contains the feature derivation and slot search logic,
following Domain-Driven Design (DDD) principles.

The domain layer is pure Python with no dependencies on XGBoost,
scikit-learn, or any other infrastructure concern.
"""

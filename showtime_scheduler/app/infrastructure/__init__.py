"""Infrastructure layer for the showtime scheduler.

This package contains implementations of domain interfaces
that interact with external libraries (XGBoost, scikit-learn),
along with settings and service wiring.
"""

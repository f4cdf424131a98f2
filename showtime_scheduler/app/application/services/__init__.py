"""Application services for showtime predictions.

These services orchestrate domain logic with infrastructure adapters
to fulfill use cases.
"""

from .showtime_application_service import ShowtimeApplicationService

__all__ = [
    "ShowtimeApplicationService",
]

from .exceptions import (
    InsufficientSeatsException,
    SelfBookingForbiddenException,
    TripNotFoundException,
    TripValidationException,
)

__all__ = [
    "TripValidationException",
    "TripNotFoundException",
    "SelfBookingForbiddenException",
    "InsufficientSeatsException",
]

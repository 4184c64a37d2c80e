from .booking import Booking
from .trip import Trip

__all__ = ["Booking", "Trip"]

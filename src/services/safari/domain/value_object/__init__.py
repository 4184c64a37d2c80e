from .booking_id import BookingId
from .itinerary import Itinerary
from .trip_period import TripPeriod
from .username import Username

__all__ = ["BookingId", "Itinerary", "TripPeriod", "Username"]

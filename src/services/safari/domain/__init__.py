from .enum import CarState, CarType, Destination
from .value_object import BookingId, Itinerary, TripPeriod, Username
from .exception import (
    InsufficientSeatsException,
    SelfBookingForbiddenException,
    TripNotFoundException,
    TripValidationException,
)
from .event import SeatsReserved
from .entity import Booking, Trip
from .factory import TripFactory, TripOffer
from .validator import TripOfferParser, TripOfferValidator
from .repository import TripCatalogRepository
from .service import CatalogStats, SearchResult, TripSearch, TripSearchCriteria

__all__ = [
    "CarState",
    "CarType",
    "Destination",
    "BookingId",
    "Itinerary",
    "TripPeriod",
    "Username",
    "InsufficientSeatsException",
    "SelfBookingForbiddenException",
    "TripNotFoundException",
    "TripValidationException",
    "SeatsReserved",
    "Booking",
    "Trip",
    "TripFactory",
    "TripOffer",
    "TripOfferParser",
    "TripOfferValidator",
    "TripCatalogRepository",
    "CatalogStats",
    "SearchResult",
    "TripSearch",
    "TripSearchCriteria",
]

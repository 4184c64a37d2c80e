from .trip_offer_parser import TripOfferParser
from .trip_offer_validator import TripOfferValidator

__all__ = ["TripOfferParser", "TripOfferValidator"]

from .trip_factory import TripFactory, TripOffer

__all__ = ["TripFactory", "TripOffer"]

from .currency import Currency
from .iso_date_time import IsoDateTime
from .money import Money
from .trip_id import TripId

__all__ = ["TripId", "Currency", "Money", "IsoDateTime"]

from dataclasses import dataclass

from services.safari.domain.value_object import BookingId, Username
from services.shared.domain import IsoDateTime, Money, TripId


@dataclass(frozen=True)
class SeatsReserved:
    """座席が予約されたことを表すドメインイベント"""

    trip_id: TripId
    booking_id: BookingId
    booking_user: Username
    seats: int
    remaining_seats: int
    total_cost: Money
    occurred_at: IsoDateTime

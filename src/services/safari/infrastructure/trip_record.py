from decimal import Decimal

from services.safari.domain.entity import Booking, Trip
from services.safari.domain.enum import CarState, CarType
from services.safari.domain.value_object import (
    BookingId,
    Itinerary,
    TripPeriod,
    Username,
)
from services.shared.domain import IsoDateTime, Money, TripId
from services.shared.utils import to_decimal


def to_entity(record: dict) -> Trip:
    """永続化レコード（JSON / DynamoDB アイテム）を Trip に変換する

    DynamoDB は数値を Decimal で返すため、整数項目は int に戻す。
    """
    currency = record.get("currency", "USD")
    return Trip(
        id=TripId(value=record["trip_id"]),
        title=record["title"],
        image=record["image"],
        period=TripPeriod.from_string(record["start_date"], _to_int(record["days"])),
        car_type=CarType(record["car_type"]),
        car_state=CarState(record["car_state"]),
        itinerary=Itinerary.of(record["itinerary"]),
        available_seats=_to_int(record["available_seats"]),
        price_per_person=Money.of(to_decimal(record["price_per_person"]), currency),
        offered_by=Username(value=record["offered_by"]),
        created_at=IsoDateTime.from_string(record["created_at"]),
        bookings=[_to_booking(b, currency) for b in record.get("bookings", [])],
    )


def _to_booking(record: dict, default_currency: str) -> Booking:
    return Booking(
        id=BookingId(value=record["booking_id"]),
        booking_user=Username(value=record["booking_user"]),
        seats_to_book=_to_int(record["seats_to_book"]),
        total_cost=Money.of(
            to_decimal(record["total_cost"]),
            record.get("currency", default_currency),
        ),
        booked_at=IsoDateTime.from_string(record["booked_at"]),
    )


def _to_int(value: object) -> int:
    if isinstance(value, Decimal):
        if value != value.to_integral_value():
            raise ValueError(f"Expected an integer: {value}")
        return int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Expected an integer: {value!r}")
    return value

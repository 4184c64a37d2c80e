from __future__ import annotations

from pydantic import BaseModel

from services.safari.applications.book_trip import BookingReceipt
from services.safari.domain.entity import Booking, Trip
from services.safari.domain.service import CatalogStats, SearchResult


class BookingData(BaseModel):
    """予約データのレスポンスモデル"""

    booking_id: str
    booking_user: str
    seats_to_book: int
    total_cost: str
    currency: str
    booked_at: str


class TripData(BaseModel):
    """旅行データのレスポンスモデル

    bookings は提供者本人が参照する場合のみ含める。
    """

    trip_id: str
    title: str
    image: str
    start_date: str
    end_date: str
    days: int
    car_type: str
    car_state: str
    itinerary: list[str]
    available_seats: int
    price_per_person: str
    currency: str
    offered_by: str
    created_at: str
    bookings: list[BookingData] | None = None


class CatalogStatsData(BaseModel):
    """カタログ全体の範囲（空カタログでは全て null）"""

    min_days: int | None = None
    max_days: int | None = None
    min_price: str | None = None
    max_price: str | None = None


class TripListData(BaseModel):
    trips: list[TripData]
    count: int
    stats: CatalogStatsData | None = None


class BookingReceiptData(BaseModel):
    """予約完了レスポンスのデータ"""

    trip_id: str
    booking_id: str
    seats_booked: int
    total_cost: str
    currency: str
    remaining_seats: int


class TripResponse(BaseModel):
    status: str = "success"
    data: TripData


class TripListResponse(BaseModel):
    status: str = "success"
    data: TripListData


class BookingReceiptResponse(BaseModel):
    status: str = "success"
    message: str
    data: BookingReceiptData


class ErrorResponse(BaseModel):
    """エラーレスポンスモデル"""

    status: str = "error"
    error_code: str
    message: str
    details: list | None = None


def to_booking_data(booking: Booking) -> BookingData:
    return BookingData(
        booking_id=str(booking.id),
        booking_user=str(booking.booking_user),
        seats_to_book=booking.seats_to_book,
        total_cost=str(booking.total_cost.amount),
        currency=str(booking.total_cost.currency),
        booked_at=str(booking.booked_at),
    )


def to_trip_data(trip: Trip, include_bookings: bool = False) -> TripData:
    """Trip エンティティをレスポンスデータに変換する"""
    return TripData(
        trip_id=str(trip.id),
        title=trip.title,
        image=trip.image,
        start_date=trip.start_date.isoformat(),
        end_date=trip.period.end_date.isoformat(),
        days=trip.days,
        car_type=trip.car_type.value,
        car_state=trip.car_state.value,
        itinerary=trip.itinerary.names(),
        available_seats=trip.available_seats,
        price_per_person=str(trip.price_per_person.amount),
        currency=str(trip.price_per_person.currency),
        offered_by=str(trip.offered_by),
        created_at=str(trip.created_at),
        bookings=[to_booking_data(b) for b in trip.bookings]
        if include_bookings
        else None,
    )


def to_stats_data(stats: CatalogStats) -> CatalogStatsData:
    return CatalogStatsData(
        min_days=stats.min_days,
        max_days=stats.max_days,
        min_price=None if stats.min_price is None else str(stats.min_price),
        max_price=None if stats.max_price is None else str(stats.max_price),
    )


def to_trip_response(trip: Trip, include_bookings: bool = False) -> dict:
    return TripResponse(data=to_trip_data(trip, include_bookings)).model_dump(
        exclude_none=True
    )


def to_search_response(result: SearchResult) -> dict:
    return TripListResponse(
        data=TripListData(
            trips=[to_trip_data(t) for t in result.trips],
            count=len(result.trips),
            stats=to_stats_data(result.stats),
        )
    ).model_dump(exclude={"data": {"trips": {"__all__": {"bookings"}}}})


def to_trip_list_response(trips: list[Trip]) -> dict:
    return TripListResponse(
        data=TripListData(trips=[to_trip_data(t) for t in trips], count=len(trips))
    ).model_dump(exclude_none=True)


def to_receipt_response(receipt: BookingReceipt) -> dict:
    return BookingReceiptResponse(
        message=receipt.message,
        data=BookingReceiptData(
            trip_id=str(receipt.trip_id),
            booking_id=str(receipt.booking_id),
            seats_booked=receipt.seats_booked,
            total_cost=str(receipt.total_cost.amount),
            currency=str(receipt.total_cost.currency),
            remaining_seats=receipt.remaining_seats,
        ),
    ).model_dump()

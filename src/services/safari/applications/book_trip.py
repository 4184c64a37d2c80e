from dataclasses import dataclass

from services.safari.domain.exception import TripNotFoundException
from services.safari.domain.repository import TripCatalogRepository
from services.safari.domain.value_object import BookingId, Username
from services.shared.domain import Money, TripId
from services.shared.utils import get_logger

logger = get_logger()

SUCCESS_MESSAGE = "Booking successful, we will send you the confirmation per email"


@dataclass(frozen=True)
class BookingReceipt:
    """予約完了の控え（booking_id が確認番号）"""

    trip_id: TripId
    booking_id: BookingId
    seats_booked: int
    total_cost: Money
    remaining_seats: int
    message: str = SUCCESS_MESSAGE


class BookTripService:
    """座席予約のユースケース

    カタログの読み込みから保存までを1つのロック区間で行い、
    同時予約による空席数の上書き（lost update）を防ぐ。
    保存に失敗した場合は読み込んだ Trip ごと破棄され、予約は成立しない。
    """

    def __init__(self, repository: TripCatalogRepository) -> None:
        self._repository = repository

    def book(
        self, trip_id: TripId, seats: int, booking_user: Username
    ) -> BookingReceipt:
        """座席を予約する"""
        with self._repository.locked():
            trips = self._repository.load_all()
            trip = next((t for t in trips if t.id == trip_id), None)
            if trip is None:
                raise TripNotFoundException(trip_id)

            booking = trip.book(booking_user, seats)
            self._repository.save_all(trips)

        for event in trip.flush_domain_events():
            logger.info(
                "Seats reserved",
                extra={
                    "trip_id": str(event.trip_id),
                    "booking_id": str(event.booking_id),
                    "booking_user": str(event.booking_user),
                    "seats": event.seats,
                    "remaining_seats": event.remaining_seats,
                },
            )

        return BookingReceipt(
            trip_id=trip.id,
            booking_id=booking.id,
            seats_booked=booking.seats_to_book,
            total_cost=booking.total_cost,
            remaining_seats=trip.available_seats,
        )

from datetime import date
from decimal import Decimal

import pytest

from services.safari.domain.entity import Booking, Trip
from services.safari.domain.enum import CarState, CarType
from services.safari.domain.value_object import (
    BookingId,
    Itinerary,
    TripPeriod,
    Username,
)
from services.safari.infrastructure.json_file_trip_repository import (
    JsonFileTripRepository,
)
from services.shared.domain import Currency, IsoDateTime, Money, TripId


@pytest.fixture
def create_booking():
    """Booking を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        booking_id: str = "booking-1",
        booking_user: str = "neema",
        seats_to_book: int = 1,
        total_cost: Decimal = Decimal("500"),
    ) -> Booking:
        return Booking(
            id=BookingId(value=booking_id),
            booking_user=Username(value=booking_user),
            seats_to_book=seats_to_book,
            total_cost=Money(amount=total_cost, currency=Currency.usd()),
            booked_at=IsoDateTime.from_string("2025-06-01T09:00:00+00:00"),
        )

    return _factory


@pytest.fixture
def create_trip():
    """Trip を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        trip_id: str = "trip-123",
        start_date: date = date(2025, 7, 1),
        days: int = 5,
        car_type: CarType = CarType.POP_UP_ROOF_4X4,
        car_state: CarState = CarState.SLIGHTLY_USED,
        itinerary: tuple[str, ...] = ("Arusha", "Serengeti"),
        available_seats: int = 4,
        price_per_person: Decimal = Decimal("100"),
        offered_by: str = "omar",
        bookings: list[Booking] | None = None,
    ) -> Trip:
        return Trip(
            id=TripId(value=trip_id),
            title="Safari Trip",
            image="safari0.jpg",
            period=TripPeriod(start_date=start_date, days=days),
            car_type=car_type,
            car_state=car_state,
            itinerary=Itinerary.of(itinerary),
            available_seats=available_seats,
            price_per_person=Money(amount=price_per_person, currency=Currency.usd()),
            offered_by=Username(value=offered_by),
            created_at=IsoDateTime.from_string("2025-05-01T12:00:00+00:00"),
            bookings=bookings,
        )

    return _factory


@pytest.fixture
def raw_offer():
    """フォームから届く形式（全て文字列）の旅行オファー"""
    return {
        "start_date": "2025-07-01",
        "car_type": "pop-up roof 4x4 vehicle",
        "car_state": "slightly used",
        "itinerary": '["Arusha", "Serengeti"]',
        "available_seats": "4",
        "price_per_person": "100",
        "days": "5",
    }


@pytest.fixture
def valid_offer():
    """パース済みの妥当な旅行オファー"""
    return {
        "start_date": "2025-07-01",
        "car_type": "pop-up roof 4x4 vehicle",
        "car_state": "slightly used",
        "itinerary": ["Arusha", "Serengeti"],
        "available_seats": 4,
        "price_per_person": Decimal("100"),
        "days": 5,
    }


@pytest.fixture
def json_repository(tmp_path):
    """一時ディレクトリの JSON カタログ"""
    return JsonFileTripRepository(file_path=tmp_path / "safari_trips.json")


@pytest.fixture
def omar():
    return Username(value="omar")


@pytest.fixture
def neema():
    return Username(value="neema")

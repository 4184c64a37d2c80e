from datetime import date

from services.safari.domain.entity.booking import Booking
from services.safari.domain.enum import CarState, CarType
from services.safari.domain.event import SeatsReserved
from services.safari.domain.exception import (
    InsufficientSeatsException,
    SelfBookingForbiddenException,
)
from services.safari.domain.value_object import (
    BookingId,
    Itinerary,
    TripPeriod,
    Username,
)
from services.shared.domain import AggregateRoot, IsoDateTime, Money, TripId
from services.shared.domain.exception import BusinessRuleViolationException

MIN_SEATS = 1
MAX_SEATS = 7
MIN_PRICE = 1
MAX_PRICE = 1000
MIN_DAYS = 1
MAX_DAYS = 365


class Trip(AggregateRoot[TripId]):
    """サファリ旅行の集約ルート

    座席の減算と予約の追加は book() を経由してのみ行う。
    不変条件:
    - available_seats >= 0
    - available_seats + 予約済み座席の合計 == 提供時の座席数
    - 提供者自身の予約は存在しない
    """

    def __init__(
        self,
        id: TripId,
        title: str,
        image: str,
        period: TripPeriod,
        car_type: CarType,
        car_state: CarState,
        itinerary: Itinerary,
        available_seats: int,
        price_per_person: Money,
        offered_by: Username,
        created_at: IsoDateTime,
        bookings: list[Booking] | None = None,
    ) -> None:
        super().__init__(id)
        self._title = title
        self._image = image
        self._period = period
        self._car_type = CarType(car_type)
        self._car_state = CarState(car_state)
        self._itinerary = itinerary
        self._available_seats = available_seats
        self._price_per_person = price_per_person
        self._offered_by = offered_by
        self._created_at = created_at
        self._bookings: list[Booking] = list(bookings or [])

        self._validate_seats()
        self._validate_bookings()

    def _validate_seats(self) -> None:
        if isinstance(self._available_seats, bool) or not isinstance(
            self._available_seats, int
        ):
            raise BusinessRuleViolationException("Available seats must be an integer")
        if self._available_seats < 0:
            raise BusinessRuleViolationException("Available seats cannot be negative")
        if self.original_seats > MAX_SEATS:
            raise BusinessRuleViolationException(
                f"A trip cannot offer more than {MAX_SEATS} seats"
            )

    def _validate_bookings(self) -> None:
        for booking in self._bookings:
            if booking.booking_user == self._offered_by:
                raise BusinessRuleViolationException(
                    "A trip cannot contain a booking by its provider"
                )

    @property
    def title(self) -> str:
        return self._title

    @property
    def image(self) -> str:
        return self._image

    @property
    def period(self) -> TripPeriod:
        return self._period

    @property
    def start_date(self) -> date:
        return self._period.start_date

    @property
    def days(self) -> int:
        return self._period.days

    @property
    def car_type(self) -> CarType:
        return self._car_type

    @property
    def car_state(self) -> CarState:
        return self._car_state

    @property
    def itinerary(self) -> Itinerary:
        return self._itinerary

    @property
    def available_seats(self) -> int:
        return self._available_seats

    @property
    def price_per_person(self) -> Money:
        return self._price_per_person

    @property
    def offered_by(self) -> Username:
        return self._offered_by

    @property
    def created_at(self) -> IsoDateTime:
        return self._created_at

    @property
    def bookings(self) -> tuple[Booking, ...]:
        return tuple(self._bookings)

    @property
    def original_seats(self) -> int:
        """提供時の座席数（残席 + 予約済み座席）"""
        return self._available_seats + sum(b.seats_to_book for b in self._bookings)

    def quote(self, seats: int) -> Money:
        """日数 × 人数 × 1人あたり料金"""
        return self._price_per_person.multiply(self.days * seats)

    def book(
        self,
        booking_user: Username,
        seats: int,
        booked_at: IsoDateTime | None = None,
    ) -> Booking:
        """座席を予約する

        提供者本人の予約は空席数に関係なく拒否する。
        空席が足りない場合は状態を変更せずに例外を送出する。
        """
        if booking_user == self._offered_by:
            raise SelfBookingForbiddenException("You cannot book your own trip.")
        if isinstance(seats, bool) or not isinstance(seats, int) or seats < 1:
            raise BusinessRuleViolationException(
                "Seats to book must be a positive integer"
            )
        if seats > self._available_seats:
            raise InsufficientSeatsException(
                requested=seats, available=self._available_seats
            )

        booking = Booking(
            id=BookingId.generate(),
            booking_user=booking_user,
            seats_to_book=seats,
            total_cost=self.quote(seats),
            booked_at=booked_at or IsoDateTime.now(),
        )
        self._available_seats -= seats
        self._bookings.append(booking)

        self.add_domain_event(
            SeatsReserved(
                trip_id=self.id,
                booking_id=booking.id,
                booking_user=booking_user,
                seats=seats,
                remaining_seats=self._available_seats,
                total_cost=booking.total_cost,
                occurred_at=booking.booked_at,
            )
        )
        return booking

    def to_dict(self) -> dict:
        """永続化用の辞書表現を返す"""
        return {
            "trip_id": str(self.id),
            "title": self._title,
            "image": self._image,
            "start_date": self.start_date.isoformat(),
            "days": self.days,
            "car_type": self._car_type.value,
            "car_state": self._car_state.value,
            "itinerary": self._itinerary.names(),
            "available_seats": self._available_seats,
            "price_per_person": str(self._price_per_person.amount),
            "currency": str(self._price_per_person.currency),
            "offered_by": str(self._offered_by),
            "created_at": str(self._created_at),
            "bookings": [b.to_dict() for b in self._bookings],
        }

from services.safari.domain.value_object import BookingId, Username
from services.shared.domain import Entity, IsoDateTime, Money
from services.shared.domain.exception import BusinessRuleViolationException


class Booking(Entity[BookingId]):
    """座席予約エンティティ

    Trip 集約の内部エンティティ。作成後は変更されない。
    """

    def __init__(
        self,
        id: BookingId,
        booking_user: Username,
        seats_to_book: int,
        total_cost: Money,
        booked_at: IsoDateTime,
    ) -> None:
        super().__init__(id)
        if isinstance(seats_to_book, bool) or not isinstance(seats_to_book, int):
            raise BusinessRuleViolationException("Seats to book must be an integer")
        if seats_to_book < 1:
            raise BusinessRuleViolationException(
                "Seats to book must be a positive integer"
            )
        self._booking_user = booking_user
        self._seats_to_book = seats_to_book
        self._total_cost = total_cost
        self._booked_at = booked_at

    @property
    def booking_user(self) -> Username:
        return self._booking_user

    @property
    def seats_to_book(self) -> int:
        return self._seats_to_book

    @property
    def total_cost(self) -> Money:
        return self._total_cost

    @property
    def booked_at(self) -> IsoDateTime:
        return self._booked_at

    def to_dict(self) -> dict:
        """永続化用の辞書表現を返す"""
        return {
            "booking_id": str(self.id),
            "booking_user": str(self._booking_user),
            "seats_to_book": self._seats_to_book,
            "total_cost": str(self._total_cost.amount),
            "currency": str(self._total_cost.currency),
            "booked_at": str(self._booked_at),
        }

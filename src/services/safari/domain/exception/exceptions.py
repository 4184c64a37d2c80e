from services.shared.domain.exception import (
    BusinessRuleViolationException,
    ResourceNotFoundException,
)


class TripValidationException(BusinessRuleViolationException):
    """旅行オファーの項目が不正な場合

    field に違反した項目名を保持する。
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class TripNotFoundException(ResourceNotFoundException):
    """指定された旅行IDがカタログに存在しない場合"""

    def __init__(self, trip_id: object) -> None:
        super().__init__(f"Trip not found: {trip_id}")
        self.trip_id = str(trip_id)


class SelfBookingForbiddenException(BusinessRuleViolationException):
    """自分が提供した旅行を予約しようとした場合"""

    pass


class InsufficientSeatsException(BusinessRuleViolationException):
    """空席数を超える座席を予約しようとした場合"""

    def __init__(self, requested: int, available: int) -> None:
        super().__init__(
            f"Not enough seats available: requested {requested}, "
            f"available {available}"
        )
        self.requested = requested
        self.available = available

from datetime import date, timedelta
from decimal import Decimal

from services.safari.domain.entity.trip import (
    MAX_DAYS,
    MAX_PRICE,
    MAX_SEATS,
    MIN_DAYS,
    MIN_PRICE,
    MIN_SEATS,
)
from services.safari.domain.enum import CarState, CarType, Destination
from services.safari.domain.exception import TripValidationException
from services.safari.domain.factory import TripOffer


class TripOfferValidator:
    """旅行オファーのドメイン制約チェック

    チェックは以下の順に行い、最初の違反で TripValidationException を送出する。
    1. start_date  2. car_type  3. itinerary  4. available_seats
    5. price_per_person  6. days（開始日 + 日数が表せる範囲か）  7. car_state
    副作用なし。
    """

    def validate(self, offer: TripOffer) -> None:
        self._check_start_date(offer.get("start_date"))
        self._check_car_type(offer.get("car_type"))
        self._check_itinerary(offer.get("itinerary"))
        self._check_available_seats(offer.get("available_seats"))
        self._check_price(offer.get("price_per_person"))
        self._check_days(offer.get("days"))
        self._check_end_date(offer.get("start_date"), offer.get("days"))
        self._check_car_state(offer.get("car_state"))

    def _check_start_date(self, value: object) -> None:
        if value is None or value == "":
            raise TripValidationException(
                "start_date", "A date for the trip is required."
            )
        if isinstance(value, date):
            return
        invalid = f"Invalid start date: {value}. Expected YYYY-MM-DD."
        if not isinstance(value, str):
            raise TripValidationException("start_date", invalid)
        try:
            date.fromisoformat(value)
        except ValueError as e:
            raise TripValidationException("start_date", invalid) from e

    def _check_car_type(self, value: object) -> None:
        allowed = [c.value for c in CarType]
        if value not in allowed:
            raise TripValidationException(
                "car_type",
                "Invalid car type. Allowed values are "
                + ", ".join(f"'{v}'" for v in allowed)
                + ".",
            )

    def _check_itinerary(self, value: object) -> None:
        if not isinstance(value, list | tuple) or len(value) == 0:
            raise TripValidationException(
                "itinerary", "Itinerary must be a non-empty array."
            )
        allowed = Destination.names()
        for destination in value:
            if destination not in allowed:
                raise TripValidationException(
                    "itinerary",
                    f"Invalid destination: {destination}. "
                    f"Allowed: {', '.join(allowed)}",
                )

    def _check_available_seats(self, value: object) -> None:
        if (
            isinstance(value, bool)
            or not isinstance(value, int)
            or not MIN_SEATS <= value <= MAX_SEATS
        ):
            raise TripValidationException(
                "available_seats",
                f"Free places must be an integer between {MIN_SEATS} and {MAX_SEATS}.",
            )

    def _check_price(self, value: object) -> None:
        message = (
            f"Price per place must be a number between {MIN_PRICE} and {MAX_PRICE}."
        )
        if isinstance(value, bool) or not isinstance(value, int | float | Decimal):
            raise TripValidationException("price_per_person", message)
        amount = Decimal(str(value))
        if not amount.is_finite() or not MIN_PRICE <= amount <= MAX_PRICE:
            raise TripValidationException("price_per_person", message)

    def _check_days(self, value: object) -> None:
        if (
            isinstance(value, bool)
            or not isinstance(value, int)
            or not MIN_DAYS <= value <= MAX_DAYS
        ):
            raise TripValidationException(
                "days",
                f"Days must be an integer between {MIN_DAYS} and {MAX_DAYS}.",
            )

    def _check_end_date(self, start_date: object, days: int) -> None:
        """開始日 + 日数が date で表せる範囲に収まるか"""
        if not isinstance(start_date, date):
            start_date = date.fromisoformat(start_date)
        try:
            start_date + timedelta(days=days)
        except OverflowError as e:
            raise TripValidationException(
                "days", "The trip must end before the year 10000."
            ) from e

    def _check_car_state(self, value: object) -> None:
        allowed = [s.value for s in CarState]
        if value not in allowed:
            raise TripValidationException(
                "car_state",
                "Invalid car state. Allowed values are "
                + ", ".join(f"'{v}'" for v in allowed)
                + ".",
            )

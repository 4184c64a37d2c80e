from datetime import date
from decimal import Decimal
from typing import TypedDict

from services.safari.domain.entity import Trip
from services.safari.domain.enum import CarState, CarType
from services.safari.domain.value_object import Itinerary, TripPeriod, Username
from services.shared.domain import Currency, IsoDateTime, Money, TripId

DEFAULT_TITLE = "Safari Trip"
DEFAULT_IMAGE = "safari0.jpg"


class TripOffer(TypedDict, total=False):
    """旅行オファーの入力データ構造（パース済み）"""

    start_date: str | date
    days: int
    car_type: str
    car_state: str
    itinerary: list[str]
    available_seats: int
    price_per_person: Decimal
    title: str
    image: str


class TripFactory:
    """サファリ旅行エンティティのファクトリ

    - 128bit ランダム ID の採番
    - プリミティブ型から Value Object への変換
    - 初期状態（予約なし・作成日時）の設定

    検証済みのオファーを受け取る前提。永続化は呼び出し側の責務。
    """

    def __init__(self, currency: Currency | None = None) -> None:
        self._currency = currency or Currency.usd()

    def create(self, offer: TripOffer, offered_by: Username) -> Trip:
        """新規旅行エンティティを生成する

        Args:
            offer: TripOfferValidator で検証済みのオファー
            offered_by: 提供者

        Returns:
            Trip: 予約が空の状態の旅行エンティティ
        """
        start_date = offer["start_date"]
        if isinstance(start_date, date):
            period = TripPeriod(start_date=start_date, days=offer["days"])
        else:
            period = TripPeriod.from_string(start_date, offer["days"])

        return Trip(
            id=TripId.generate(),
            title=offer.get("title") or DEFAULT_TITLE,
            image=offer.get("image") or DEFAULT_IMAGE,
            period=period,
            car_type=CarType(offer["car_type"]),
            car_state=CarState(offer["car_state"]),
            itinerary=Itinerary.of(offer["itinerary"]),
            available_seats=offer["available_seats"],
            price_per_person=Money(
                amount=Decimal(str(offer["price_per_person"])),
                currency=self._currency,
            ),
            offered_by=offered_by,
            created_at=IsoDateTime.now(),
        )

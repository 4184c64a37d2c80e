from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator, model_validator

from services.safari.domain.enum import CarState, CarType, Destination
from services.safari.domain.service import TripSearchCriteria
from services.shared.utils import to_decimal


class BookTripRequest(BaseModel):
    """座席予約リクエストモデル（seats は文字列でも受け付ける）"""

    seats: int = Field(..., gt=0, description="予約する座席数")


class SearchTripsQuery(BaseModel):
    """旅行検索のクエリ文字列モデル

    HTML フォームから空文字で届いた項目は未指定として扱う。
    """

    destinations: list[Destination] = Field(default_factory=list)
    start_date: date | None = None
    end_date: date | None = None
    min_days: int | None = Field(default=None, ge=0)
    max_days: int | None = Field(default=None, ge=0)
    min_price: Decimal | None = Field(default=None, ge=0)
    max_price: Decimal | None = Field(default=None, ge=0)
    car_type: CarType | None = None
    car_state: CarState | None = None

    @field_validator("destinations", mode="before")
    @classmethod
    def split_destinations(cls, v):
        # API Gateway は同名パラメータをカンマ区切りで結合して渡す
        if v is None or v == "":
            return []
        if isinstance(v, str):
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    @field_validator(
        "start_date",
        "end_date",
        "min_days",
        "max_days",
        "car_type",
        "car_state",
        mode="before",
    )
    @classmethod
    def blank_as_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("min_price", "max_price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        return to_decimal(v)

    def to_criteria(self) -> TripSearchCriteria:
        return TripSearchCriteria(
            destinations=tuple(self.destinations),
            start_date=self.start_date,
            end_date=self.end_date,
            min_days=self.min_days,
            max_days=self.max_days,
            min_price=self.min_price,
            max_price=self.max_price,
            car_type=self.car_type,
            car_state=self.car_state,
        )


class StrictSearchTripsQuery(SearchTripsQuery):
    """予約向け検索のクエリモデル（itinerary=A,B でも目的地を指定できる）"""

    @model_validator(mode="before")
    @classmethod
    def itinerary_alias(cls, data):
        if isinstance(data, dict) and "itinerary" in data:
            data = dict(data)
            itinerary = data.pop("itinerary")
            data.setdefault("destinations", itinerary)
        return data

import json
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from services.safari.domain.factory import TripOffer
from services.shared.utils import to_decimal


class TripOfferParser:
    """送信されたオファーの生値を TripOffer に変換する

    フォームや JSON から届く文字列を型変換するだけで、値の妥当性は判断しない。
    変換できない値はそのまま（数値項目は None で）残し、
    TripOfferValidator に違反項目として報告させる。
    """

    def parse(self, raw: Mapping[str, Any]) -> TripOffer:
        offer: TripOffer = {
            "start_date": _strip(raw.get("start_date")),
            "car_type": _strip(raw.get("car_type")),
            "car_state": _strip(raw.get("car_state")),
            "itinerary": _to_list(raw.get("itinerary")),
            "available_seats": _to_int(raw.get("available_seats")),
            "price_per_person": _to_price(raw.get("price_per_person")),
            "days": _to_int(raw.get("days")),
        }
        for key in ("title", "image"):
            value = _strip(raw.get(key))
            if value:
                offer[key] = value
        return offer


def _strip(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


def _to_list(value: Any) -> Any:
    """JSON 文字列で届いた旅程を配列に戻す"""
    if isinstance(value, str):
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            return value
    if isinstance(value, tuple):
        return list(value)
    return value


def _to_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def _to_price(value: Any) -> Decimal | None:
    try:
        return to_decimal(value)
    except ValueError:
        return None

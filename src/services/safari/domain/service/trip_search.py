from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from services.safari.domain.entity import Trip
from services.safari.domain.enum import CarState, CarType, Destination

TripPredicate = Callable[[Trip], bool]


@dataclass(frozen=True)
class TripSearchCriteria:
    """検索条件（未指定の項目は絞り込みに使わない）"""

    destinations: tuple[Destination, ...] = ()
    start_date: date | None = None
    end_date: date | None = None
    min_days: int | None = None
    max_days: int | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    car_type: CarType | None = None
    car_state: CarState | None = None


@dataclass(frozen=True)
class CatalogStats:
    """絞り込み前のカタログ全体の日数・料金の範囲

    画面のスライダーの上下限に使う。カタログが空の場合は全て None。
    """

    min_days: int | None = None
    max_days: int | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None

    @classmethod
    def from_trips(cls, trips: Sequence[Trip]) -> "CatalogStats":
        if not trips:
            return cls()
        days = [t.days for t in trips]
        prices = [t.price_per_person.amount for t in trips]
        return cls(
            min_days=min(days),
            max_days=max(days),
            min_price=min(prices),
            max_price=max(prices),
        )


@dataclass(frozen=True)
class SearchResult:
    trips: list[Trip]
    stats: CatalogStats


class TripSearch:
    """カタログ検索のドメインサービス

    目的地の一致条件が異なる2つの検索を提供する。
    - search: 旅程がいずれかの目的地を含む（一覧画面の絞り込み）
    - search_strict: 旅程が全ての目的地を含む（予約向けの検索）
    どちらも呼び出し元が存在するため、1つにまとめないこと。
    """

    def search(
        self, trips: Sequence[Trip], criteria: TripSearchCriteria
    ) -> SearchResult:
        predicates = self._predicates(criteria, match_all_destinations=False)
        return SearchResult(
            trips=_apply(trips, predicates),
            stats=CatalogStats.from_trips(trips),
        )

    def search_strict(
        self, trips: Sequence[Trip], criteria: TripSearchCriteria
    ) -> list[Trip]:
        predicates = self._predicates(criteria, match_all_destinations=True)
        return _apply(trips, predicates)

    def _predicates(
        self, criteria: TripSearchCriteria, match_all_destinations: bool
    ) -> list[TripPredicate]:
        predicates: list[TripPredicate] = []

        if criteria.destinations:
            wanted = criteria.destinations
            if match_all_destinations:
                predicates.append(lambda t: t.itinerary.includes_all(wanted))
            else:
                predicates.append(lambda t: t.itinerary.includes_any(wanted))

        if criteria.start_date is not None:
            start = criteria.start_date
            predicates.append(lambda t: t.period.starts_on_or_after(start))

        if criteria.end_date is not None:
            end = criteria.end_date
            predicates.append(lambda t: t.period.ends_on_or_before(end))

        if criteria.min_days is not None:
            min_days = criteria.min_days
            predicates.append(lambda t: t.days >= min_days)

        if criteria.max_days is not None:
            max_days = criteria.max_days
            predicates.append(lambda t: t.days <= max_days)

        if criteria.min_price is not None or criteria.max_price is not None:
            low, high = criteria.min_price, criteria.max_price
            predicates.append(lambda t: t.price_per_person.is_between(low, high))

        if criteria.car_type is not None:
            car_type = criteria.car_type
            predicates.append(lambda t: t.car_type == car_type)

        if criteria.car_state is not None:
            car_state = criteria.car_state
            predicates.append(lambda t: t.car_state.is_at_most(car_state))

        return predicates


def _apply(trips: Sequence[Trip], predicates: list[TripPredicate]) -> list[Trip]:
    return [t for t in trips if all(p(t) for p in predicates)]

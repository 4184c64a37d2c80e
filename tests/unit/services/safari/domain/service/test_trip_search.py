from datetime import date
from decimal import Decimal

import pytest

from services.safari.domain.enum import CarState, CarType, Destination
from services.safari.domain.service import CatalogStats, TripSearch, TripSearchCriteria


@pytest.fixture
def catalog(create_trip):
    return [
        create_trip(
            trip_id="northern",
            itinerary=("Arusha", "Tarangire", "Serengeti"),
            start_date=date(2025, 7, 1),
            days=5,
            price_per_person=Decimal("300"),
            car_type=CarType.POP_UP_ROOF_4X4,
            car_state=CarState.SLIGHTLY_USED,
        ),
        create_trip(
            trip_id="arusha-only",
            itinerary=("Arusha",),
            start_date=date(2025, 8, 10),
            days=2,
            price_per_person=Decimal("120"),
            car_type=CarType.POP_UP_ROOF_MINIVAN,
            car_state=CarState.MODERATELY_USED,
        ),
        create_trip(
            trip_id="lakes",
            itinerary=("Tarangire", "Manyara", "Natron"),
            start_date=date(2025, 9, 1),
            days=8,
            price_per_person=Decimal("750"),
            car_type=CarType.OPEN_SIDED_4X4,
            car_state=CarState.HEAVILY_USED,
        ),
    ]


def _ids(trips):
    return [str(t.id) for t in trips]


class TestTripSearch:
    """TripSearch.search のテスト"""

    def test_no_criteria_returns_whole_catalog(self, catalog):
        result = TripSearch().search(catalog, TripSearchCriteria())
        assert _ids(result.trips) == ["northern", "arusha-only", "lakes"]

    def test_destinations_match_any(self, catalog):
        """いずれかの目的地を含む旅行が返る"""
        criteria = TripSearchCriteria(
            destinations=(Destination.ARUSHA, Destination.TARANGIRE)
        )
        result = TripSearch().search(catalog, criteria)
        assert _ids(result.trips) == ["northern", "arusha-only", "lakes"]

    def test_destination_not_visited_by_any_trip(self, catalog):
        criteria = TripSearchCriteria(destinations=(Destination.KILIMANJARO,))
        assert TripSearch().search(catalog, criteria).trips == []

    def test_start_date_is_inclusive(self, catalog):
        criteria = TripSearchCriteria(start_date=date(2025, 8, 10))
        result = TripSearch().search(catalog, criteria)
        assert _ids(result.trips) == ["arusha-only", "lakes"]

    def test_end_date_uses_start_date_plus_days(self, catalog):
        """northern: 7/1 + 5日 = 7/6 <= 7/6"""
        criteria = TripSearchCriteria(end_date=date(2025, 7, 6))
        result = TripSearch().search(catalog, criteria)
        assert _ids(result.trips) == ["northern"]

    def test_end_date_excludes_trip_ending_later(self, catalog):
        criteria = TripSearchCriteria(end_date=date(2025, 7, 5))
        assert TripSearch().search(catalog, criteria).trips == []

    def test_days_range(self, catalog):
        criteria = TripSearchCriteria(min_days=3, max_days=8)
        result = TripSearch().search(catalog, criteria)
        assert _ids(result.trips) == ["northern", "lakes"]

    def test_price_range(self, catalog):
        criteria = TripSearchCriteria(
            min_price=Decimal("120"), max_price=Decimal("300")
        )
        result = TripSearch().search(catalog, criteria)
        assert _ids(result.trips) == ["northern", "arusha-only"]

    def test_car_type_exact_match(self, catalog):
        criteria = TripSearchCriteria(car_type=CarType.OPEN_SIDED_4X4)
        assert _ids(TripSearch().search(catalog, criteria).trips) == ["lakes"]

    def test_car_state_at_most_moderately_used(self, catalog):
        """moderately used 指定で slightly / moderately が返り、heavily は除外される"""
        criteria = TripSearchCriteria(car_state=CarState.MODERATELY_USED)
        result = TripSearch().search(catalog, criteria)
        assert _ids(result.trips) == ["northern", "arusha-only"]

    def test_car_state_slightly_used(self, catalog):
        criteria = TripSearchCriteria(car_state=CarState.SLIGHTLY_USED)
        assert _ids(TripSearch().search(catalog, criteria).trips) == ["northern"]

    def test_criteria_are_combined_with_and(self, catalog):
        criteria = TripSearchCriteria(
            destinations=(Destination.TARANGIRE,),
            car_state=CarState.MODERATELY_USED,
        )
        assert _ids(TripSearch().search(catalog, criteria).trips) == ["northern"]

    def test_stats_cover_unfiltered_catalog(self, catalog):
        """統計は絞り込み結果ではなくカタログ全体から計算される"""
        criteria = TripSearchCriteria(car_type=CarType.POP_UP_ROOF_MINIVAN)

        result = TripSearch().search(catalog, criteria)

        assert len(result.trips) == 1
        assert result.stats == CatalogStats(
            min_days=2,
            max_days=8,
            min_price=Decimal("120"),
            max_price=Decimal("750"),
        )

    def test_empty_catalog_has_empty_stats(self):
        result = TripSearch().search([], TripSearchCriteria())
        assert result.trips == []
        assert result.stats == CatalogStats(None, None, None, None)


class TestTripSearchStrict:
    """TripSearch.search_strict のテスト"""

    def test_requires_all_destinations(self, catalog):
        """Arusha と Tarangire の両方を含む旅行のみ返る"""
        criteria = TripSearchCriteria(
            destinations=(Destination.ARUSHA, Destination.TARANGIRE)
        )

        strict = TripSearch().search_strict(catalog, criteria)
        loose = TripSearch().search(catalog, criteria).trips

        assert _ids(strict) == ["northern"]
        assert _ids(loose) == ["northern", "arusha-only", "lakes"]

    def test_other_criteria_still_apply(self, catalog):
        criteria = TripSearchCriteria(
            destinations=(Destination.TARANGIRE,),
            car_type=CarType.OPEN_SIDED_4X4,
        )
        assert _ids(TripSearch().search_strict(catalog, criteria)) == ["lakes"]

    def test_no_destinations_returns_everything(self, catalog):
        assert len(TripSearch().search_strict(catalog, TripSearchCriteria())) == 3

from services.safari.domain.entity import Trip
from services.safari.domain.exception import TripNotFoundException
from services.safari.domain.repository import TripCatalogRepository
from services.safari.domain.service import SearchResult, TripSearch, TripSearchCriteria
from services.shared.domain import TripId


class SearchTripsService:
    """カタログ検索のユースケース

    呼び出しごとにストアから読み直す（プロセス内キャッシュは持たない）。
    """

    def __init__(
        self, repository: TripCatalogRepository, search: TripSearch | None = None
    ) -> None:
        self._repository = repository
        self._search = search or TripSearch()

    def search(self, criteria: TripSearchCriteria) -> SearchResult:
        """いずれかの目的地を含む旅行を検索する（統計はカタログ全体）"""
        return self._search.search(self._repository.load_all(), criteria)

    def search_strict(self, criteria: TripSearchCriteria) -> list[Trip]:
        """全ての目的地を含む旅行を検索する"""
        return self._search.search_strict(self._repository.load_all(), criteria)

    def get(self, trip_id: TripId) -> Trip:
        """旅行を1件取得する"""
        trip = self._repository.find_by_id(trip_id)
        if trip is None:
            raise TripNotFoundException(trip_id)
        return trip

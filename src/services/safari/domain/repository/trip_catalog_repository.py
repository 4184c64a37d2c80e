import threading
from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager

from services.safari.domain.entity import Trip
from services.shared.domain import TripId

_catalog_locks: dict[str, threading.RLock] = {}
_catalog_locks_guard = threading.Lock()


def _lock_for(catalog_key: str) -> threading.RLock:
    with _catalog_locks_guard:
        lock = _catalog_locks.get(catalog_key)
        if lock is None:
            lock = _catalog_locks[catalog_key] = threading.RLock()
        return lock


class TripCatalogRepository(ABC):
    """旅行カタログリポジトリのインターフェース

    ストアはカタログ全体を単位として読み書きする（差分更新はしない）。
    具象実装は load_all / save_all / catalog_key のみを実装すればよい。

    カタログ全体を保存するため、別々の旅行への予約でも
    読み込み〜保存の間に割り込まれると更新が失われる。
    書き込みを伴う処理は必ず locked() の内側で行うこと。
    """

    @property
    @abstractmethod
    def catalog_key(self) -> str:
        """物理ストアを一意に表すキー（書き込みの直列化単位）"""
        raise NotImplementedError

    @abstractmethod
    def load_all(self) -> list[Trip]:
        """カタログ全体を読み込む

        ストアが未作成なら空リスト、読めない場合は CatalogUnavailableException。
        """
        raise NotImplementedError

    @abstractmethod
    def save_all(self, trips: list[Trip]) -> None:
        """カタログ全体を保存する（失敗時は PersistenceException）"""
        raise NotImplementedError

    @contextmanager
    def locked(self) -> Iterator[None]:
        """同じカタログへの書き込みを直列化する（再入可能）"""
        with _lock_for(self.catalog_key):
            yield

    def save(self, trip: Trip) -> None:
        """旅行を1件追加または置き換えて保存する"""
        with self.locked():
            trips = self.load_all()
            for index, existing in enumerate(trips):
                if existing.id == trip.id:
                    trips[index] = trip
                    break
            else:
                trips.append(trip)
            self.save_all(trips)

    def find_by_id(self, trip_id: TripId) -> Trip | None:
        """IDで旅行を検索する"""
        return next((t for t in self.load_all() if t.id == trip_id), None)

import json
import os
import tempfile
from pathlib import Path

from services.safari.domain.entity import Trip
from services.safari.domain.repository import TripCatalogRepository
from services.safari.infrastructure.trip_record import to_entity
from services.shared.domain.exception import (
    CatalogUnavailableException,
    DomainException,
    PersistenceException,
)
from services.shared.utils import get_logger

logger = get_logger()


class JsonFileTripRepository(TripCatalogRepository):
    """JSON ファイルを使用した TripCatalogRepository の具象実装

    ファイルが存在しない場合は空のカタログとして扱う。
    書き込みは一時ファイル + rename で行い、途中で落ちても既存のカタログを壊さない。
    """

    def __init__(self, file_path: str | os.PathLike | None = None) -> None:
        self.file_path = Path(
            file_path or os.getenv("CATALOG_FILE_PATH", "data/safari_trips.json")
        )

    @property
    def catalog_key(self) -> str:
        return f"file:{self.file_path.resolve()}"

    def load_all(self) -> list[Trip]:
        """カタログファイルを読み込む"""
        if not self.file_path.exists():
            logger.info(
                "Catalog file does not exist yet",
                extra={"file_path": str(self.file_path)},
            )
            return []

        try:
            with self.file_path.open(encoding="utf-8") as f:
                records = json.load(f)
            if not isinstance(records, list):
                raise ValueError("Catalog root must be a JSON array")
            return [to_entity(record) for record in records]
        except (OSError, ValueError, KeyError, TypeError, DomainException) as e:
            logger.exception(
                "Failed to read trip catalog",
                extra={"file_path": str(self.file_path)},
            )
            raise CatalogUnavailableException(
                f"Trip catalog is unavailable: {self.file_path}"
            ) from e

    def save_all(self, trips: list[Trip]) -> None:
        """カタログファイルを原子的に書き換える"""
        records = [trip.to_dict() for trip in trips]
        directory = self.file_path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=directory, prefix=f".{self.file_path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(records, f, indent=2, ensure_ascii=False)
                    f.flush()
                    os.fsync(f.fileno())
                os.replace(tmp_name, self.file_path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            logger.exception(
                "Failed to write trip catalog",
                extra={"file_path": str(self.file_path)},
            )
            raise PersistenceException(
                f"Failed to save trip catalog: {self.file_path}"
            ) from e

        logger.debug("Trip catalog saved", extra={"count": len(records)})

from services.safari.config import DYNAMODB_BACKEND, CatalogConfig
from services.safari.domain.repository import TripCatalogRepository

from .dynamodb_trip_repository import DynamoDBTripRepository
from .json_file_trip_repository import JsonFileTripRepository


def build_trip_repository(config: CatalogConfig) -> TripCatalogRepository:
    """設定に応じたカタログリポジトリを生成する"""
    if config.backend == DYNAMODB_BACKEND:
        return DynamoDBTripRepository(table_name=config.table_name)
    return JsonFileTripRepository(file_path=config.file_path)


__all__ = ["DynamoDBTripRepository", "JsonFileTripRepository", "build_trip_repository"]

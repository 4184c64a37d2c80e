import os

import boto3
from boto3.dynamodb.conditions import Key
from botocore.exceptions import BotoCoreError, ClientError

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

CATALOG_PK = "CATALOG"
ENTITY_TYPE = "SAFARI_TRIP"
_KEY_ATTRIBUTES = ("PK", "SK", "entity_type")


class DynamoDBTripRepository(TripCatalogRepository):
    """DynamoDBを使用したTripCatalogRepository の具象実装

    カタログは PK=CATALOG の単一パーティションに SK=TRIP#<id> で格納する。
    予約前の再読み込みで古い値を読まないよう、読み込みは強整合で行う。
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    @property
    def catalog_key(self) -> str:
        return f"dynamodb:{self.table_name}"

    def load_all(self) -> list[Trip]:
        """カタログの全アイテムを取得する（ページング対応）"""
        kwargs: dict = {
            "KeyConditionExpression": Key("PK").eq(CATALOG_PK)
            & Key("SK").begins_with("TRIP#"),
            "ConsistentRead": True,
        }
        items: list[dict] = []
        try:
            while True:
                response = self.table.query(**kwargs)
                items.extend(response.get("Items", []))
                last_key = response.get("LastEvaluatedKey")
                if not last_key:
                    break
                kwargs["ExclusiveStartKey"] = last_key
            return [self._to_entity(item) for item in items]
        except (
            ClientError,
            BotoCoreError,
            ValueError,
            KeyError,
            TypeError,
            DomainException,
        ) as e:
            logger.exception(
                "Failed to read trip catalog", extra={"table_name": self.table_name}
            )
            raise CatalogUnavailableException(
                f"Trip catalog is unavailable: {self.table_name}"
            ) from e

    def save_all(self, trips: list[Trip]) -> None:
        """カタログの全旅行を書き込む"""
        try:
            with self.table.batch_writer(overwrite_by_pkeys=["PK", "SK"]) as batch:
                for trip in trips:
                    batch.put_item(Item=self._to_item(trip))
        except (ClientError, BotoCoreError) as e:
            logger.exception(
                "Failed to write trip catalog", extra={"table_name": self.table_name}
            )
            raise PersistenceException(
                f"Failed to save trip catalog: {self.table_name}"
            ) from e

    def _to_item(self, trip: Trip) -> dict:
        """Trip を DynamoDB アイテムに変換する"""
        return {
            "PK": CATALOG_PK,
            "SK": f"TRIP#{trip.id}",
            "entity_type": ENTITY_TYPE,
            **trip.to_dict(),
        }

    def _to_entity(self, item: dict) -> Trip:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        record = {k: v for k, v in item.items() if k not in _KEY_ATTRIBUTES}
        return to_entity(record)

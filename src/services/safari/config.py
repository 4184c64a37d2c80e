import os
from dataclasses import dataclass

JSON_BACKEND = "json"
DYNAMODB_BACKEND = "dynamodb"
DEFAULT_CATALOG_FILE_PATH = "data/safari_trips.json"


@dataclass(frozen=True)
class CatalogConfig:
    """カタログストアの設定（環境変数から読み込む）"""

    backend: str = JSON_BACKEND
    file_path: str = DEFAULT_CATALOG_FILE_PATH
    table_name: str | None = None
    currency: str = "USD"

    def __post_init__(self) -> None:
        if self.backend not in (JSON_BACKEND, DYNAMODB_BACKEND):
            raise ValueError(f"Unsupported catalog backend: {self.backend}")
        if self.backend == DYNAMODB_BACKEND and not self.table_name:
            raise ValueError("TABLE_NAME is required for the dynamodb backend")

    @classmethod
    def from_env(cls) -> "CatalogConfig":
        return cls(
            backend=os.getenv("CATALOG_BACKEND", JSON_BACKEND).lower(),
            file_path=os.getenv("CATALOG_FILE_PATH", DEFAULT_CATALOG_FILE_PATH),
            table_name=os.getenv("TABLE_NAME") or None,
            currency=os.getenv("DEFAULT_CURRENCY", "USD"),
        )

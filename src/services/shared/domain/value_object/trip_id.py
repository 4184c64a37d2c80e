import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class TripId:
    """サファリ旅行ID

    Value Object として不変性を保証。
    同じ値を持つ TripId は同一とみなされる。
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("TripId cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> "TripId":
        """衝突確率を無視できる 128bit のランダム ID (UUID4) を生成"""
        return cls(value=str(uuid.uuid4()))

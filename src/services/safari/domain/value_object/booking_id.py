import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class BookingId:
    """座席予約ID（Value Object）

    予約完了時の確認番号としても利用者に返す。
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("BookingId cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> "BookingId":
        return cls(value=str(uuid.uuid4()))

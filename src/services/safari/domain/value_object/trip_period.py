from dataclasses import dataclass
from datetime import date, timedelta


@dataclass(frozen=True)
class TripPeriod:
    """旅行期間(開始日 + 日数)

    終了日は独立したフィールドを持たず、開始日 + 日数で求める。
    """

    start_date: date
    days: int

    def __post_init__(self) -> None:
        if isinstance(self.days, bool) or not isinstance(self.days, int):
            raise ValueError("Days must be an integer")
        if self.days < 1:
            raise ValueError("Days must be a positive integer")
        try:
            self.start_date + timedelta(days=self.days)
        except OverflowError as e:
            raise ValueError(
                "Trip period ends beyond the supported date range"
            ) from e

    @classmethod
    def from_string(cls, start_date: str, days: int) -> "TripPeriod":
        try:
            parsed = date.fromisoformat(start_date)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid date format: {start_date}") from e
        return cls(start_date=parsed, days=days)

    @property
    def end_date(self) -> date:
        return self.start_date + timedelta(days=self.days)

    def starts_on_or_after(self, d: date) -> bool:
        return self.start_date >= d

    def ends_on_or_before(self, d: date) -> bool:
        return self.end_date <= d

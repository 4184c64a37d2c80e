from dataclasses import dataclass
from decimal import Decimal

from .currency import Currency


@dataclass(frozen=True)
class Money:
    """金額（通貨情報を含む）

    Value Object として不変性を保証。
    金額の演算メソッドを提供。
    """

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", Decimal(str(self.amount)))
        if not self.amount.is_finite():
            raise ValueError(f"Amount must be finite: {self.amount}")
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def multiply(self, factor: int) -> "Money":
        """金額を整数倍する（人数・日数の掛け算用）"""
        if factor < 0:
            raise ValueError("Factor cannot be negative")
        return Money(amount=self.amount * factor, currency=self.currency)

    def is_between(self, lower: Decimal | None, upper: Decimal | None) -> bool:
        """金額が [lower, upper] に収まるか（None の境界は無視）"""
        if lower is not None and self.amount < lower:
            return False
        if upper is not None and self.amount > upper:
            return False
        return True

    @classmethod
    def of(cls, amount: Decimal | int | str, currency_code: str) -> "Money":
        """プリミティブ値から Money を生成"""
        return cls(amount=Decimal(str(amount)), currency=Currency(currency_code))

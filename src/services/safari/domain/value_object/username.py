from dataclasses import dataclass


@dataclass(frozen=True)
class Username:
    """利用者の識別子（IdP の preferred_username クレーム）"""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("Username cannot be empty")

    def __str__(self) -> str:
        return self.value

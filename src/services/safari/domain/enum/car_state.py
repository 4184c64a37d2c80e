from enum import Enum


class CarState(str, Enum):
    """車両の使用感（順序付き）

    rank が小さいほど状態が良い。検索では「指定した状態以下の使用感」で絞り込む。
    """

    SLIGHTLY_USED = "slightly used"
    MODERATELY_USED = "moderately used"
    HEAVILY_USED = "heavily used"

    @property
    def rank(self) -> int:
        return _WEAR_RANK[self]

    def is_at_most(self, other: "CarState") -> bool:
        """other と同じか、それより使用感が少ないか"""
        return self.rank <= other.rank


_WEAR_RANK = {
    CarState.SLIGHTLY_USED: 1,
    CarState.MODERATELY_USED: 2,
    CarState.HEAVILY_USED: 3,
}

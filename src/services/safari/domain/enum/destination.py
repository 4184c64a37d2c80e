from enum import Enum


class Destination(str, Enum):
    """旅程に含められる目的地（固定リスト）"""

    ARUSHA = "Arusha"
    TARANGIRE = "Tarangire"
    SERENGETI = "Serengeti"
    NGORONGORO = "Ngorongoro"
    MANYARA = "Manyara"
    KILIMANJARO = "Kilimanjaro"
    NATRON = "Natron"

    @classmethod
    def names(cls) -> list[str]:
        return [d.value for d in cls]

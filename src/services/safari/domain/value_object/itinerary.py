from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from services.safari.domain.enum import Destination


@dataclass(frozen=True)
class Itinerary:
    """旅程(訪問順の目的地リスト)"""

    destinations: tuple[Destination, ...]

    def __post_init__(self) -> None:
        if not self.destinations:
            raise ValueError("Itinerary must contain at least one destination")
        object.__setattr__(
            self, "destinations", tuple(Destination(d) for d in self.destinations)
        )

    def __iter__(self) -> Iterator[Destination]:
        return iter(self.destinations)

    def __len__(self) -> int:
        return len(self.destinations)

    @classmethod
    def of(cls, names: Iterable[str]) -> "Itinerary":
        return cls(destinations=tuple(Destination(n) for n in names))

    def names(self) -> list[str]:
        return [d.value for d in self.destinations]

    def includes_any(self, wanted: Iterable[Destination]) -> bool:
        """いずれかの目的地を含むか"""
        return not set(self.destinations).isdisjoint(wanted)

    def includes_all(self, wanted: Iterable[Destination]) -> bool:
        """全ての目的地を含むか"""
        return set(wanted).issubset(self.destinations)

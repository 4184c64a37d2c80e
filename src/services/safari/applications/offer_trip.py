from collections.abc import Mapping
from typing import Any

from services.safari.domain.entity import Trip
from services.safari.domain.factory import TripFactory
from services.safari.domain.repository import TripCatalogRepository
from services.safari.domain.validator import TripOfferParser, TripOfferValidator
from services.safari.domain.value_object import Username
from services.shared.utils import get_logger

logger = get_logger()


class OfferTripService:
    """旅行オファー登録のユースケース

    生の入力値をパース・検証し、Factory で生成した旅行をカタログに追加する。
    """

    def __init__(
        self,
        repository: TripCatalogRepository,
        factory: TripFactory,
        parser: TripOfferParser | None = None,
        validator: TripOfferValidator | None = None,
    ) -> None:
        self._repository = repository
        self._factory = factory
        self._parser = parser or TripOfferParser()
        self._validator = validator or TripOfferValidator()

    def offer(self, raw_offer: Mapping[str, Any], offered_by: Username) -> Trip:
        """旅行を提供する"""
        offer = self._parser.parse(raw_offer)
        self._validator.validate(offer)

        trip = self._factory.create(offer, offered_by)
        self._repository.save(trip)

        logger.info(
            "Trip offered",
            extra={"trip_id": str(trip.id), "offered_by": str(offered_by)},
        )
        return trip

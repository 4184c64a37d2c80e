from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.safari.applications.offer_trip import OfferTripService
from services.safari.config import CatalogConfig
from services.safari.domain.factory import TripFactory
from services.safari.handlers.http import (
    current_user,
    handle_error,
    read_body,
    unauthorized,
)
from services.safari.handlers.response_models import to_trip_response
from services.safari.infrastructure import build_trip_repository
from services.shared.domain import Currency
from services.shared.utils import api_response

logger = Logger()

config = CatalogConfig.from_env()
repository = build_trip_repository(config)
factory = TripFactory(currency=Currency(config.currency))
service = OfferTripService(repository=repository, factory=factory)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """旅行オファー登録 Lambda Handler"""
    user = current_user(event)
    if user is None:
        return unauthorized()

    logger.info("Received offer trip request", extra={"offered_by": str(user)})

    try:
        trip = service.offer(read_body(event), offered_by=user)
        return api_response(201, to_trip_response(trip))
    except Exception as e:
        return handle_error(e, logger)

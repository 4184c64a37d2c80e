from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.safari.applications.search_trips import SearchTripsService
from services.safari.config import CatalogConfig
from services.safari.handlers.http import current_user, error_response, handle_error
from services.safari.handlers.response_models import to_trip_response
from services.safari.infrastructure import build_trip_repository
from services.shared.domain import TripId
from services.shared.utils import api_response

logger = Logger()

repository = build_trip_repository(CatalogConfig.from_env())
service = SearchTripsService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """旅行詳細取得 Lambda Handler

    提供者本人が参照した場合のみ予約一覧を含める。
    """
    path_params = event.path_parameters or {}
    trip_id = path_params.get("trip_id")

    if not trip_id:
        return error_response(400, "INVALID_REQUEST", "trip_id is required")

    logger.info("Fetching trip details", extra={"trip_id": trip_id})

    try:
        trip = service.get(TripId(value=trip_id))
        is_provider = current_user(event) == trip.offered_by
        return api_response(200, to_trip_response(trip, include_bookings=is_provider))
    except Exception as e:
        return handle_error(e, logger)

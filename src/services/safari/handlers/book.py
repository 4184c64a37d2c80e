from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.safari.applications.book_trip import BookTripService
from services.safari.config import CatalogConfig
from services.safari.handlers.http import (
    current_user,
    error_response,
    handle_error,
    read_body,
    unauthorized,
)
from services.safari.handlers.request_models import BookTripRequest
from services.safari.handlers.response_models import to_receipt_response
from services.safari.infrastructure import build_trip_repository
from services.shared.domain import TripId
from services.shared.utils import api_response

logger = Logger()

repository = build_trip_repository(CatalogConfig.from_env())
service = BookTripService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """座席予約 Lambda Handler"""
    user = current_user(event)
    if user is None:
        return unauthorized()

    path_params = event.path_parameters or {}
    trip_id = path_params.get("trip_id")
    if not trip_id:
        return error_response(400, "INVALID_REQUEST", "trip_id is required")

    try:
        request = BookTripRequest.model_validate(read_body(event))
        logger.info(
            "Received book trip request",
            extra={
                "trip_id": trip_id,
                "seats": request.seats,
                "booking_user": str(user),
            },
        )
        receipt = service.book(TripId(value=trip_id), request.seats, user)
        return api_response(200, to_receipt_response(receipt))
    except Exception as e:
        return handle_error(e, logger)

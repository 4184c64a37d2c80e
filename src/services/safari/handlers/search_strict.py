from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.safari.applications.search_trips import SearchTripsService
from services.safari.config import CatalogConfig
from services.safari.handlers.http import handle_error
from services.safari.handlers.request_models import StrictSearchTripsQuery
from services.safari.handlers.response_models import to_trip_list_response
from services.safari.infrastructure import build_trip_repository
from services.shared.utils import api_response

logger = Logger()

repository = build_trip_repository(CatalogConfig.from_env())
service = SearchTripsService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約向け旅行検索 Lambda Handler（全ての目的地を含む旅行のみ）"""
    try:
        query = StrictSearchTripsQuery.model_validate(
            event.query_string_parameters or {}
        )
        logger.info(
            "Searching trips (all destinations)",
            extra={"query": query.model_dump(mode="json")},
        )
        trips = service.search_strict(query.to_criteria())
        return api_response(200, to_trip_list_response(trips))
    except Exception as e:
        return handle_error(e, logger)

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.safari.applications.search_trips import SearchTripsService
from services.safari.config import CatalogConfig
from services.safari.handlers.http import handle_error
from services.safari.handlers.request_models import SearchTripsQuery
from services.safari.handlers.response_models import to_search_response
from services.safari.infrastructure import build_trip_repository
from services.shared.utils import api_response

logger = Logger()

repository = build_trip_repository(CatalogConfig.from_env())
service = SearchTripsService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """旅行一覧・絞り込み検索 Lambda Handler

    いずれかの目的地を含む旅行を返す。stats は絞り込み前のカタログ全体の範囲。
    """
    try:
        query = SearchTripsQuery.model_validate(event.query_string_parameters or {})
        logger.info("Searching trips", extra={"query": query.model_dump(mode="json")})
        result = service.search(query.to_criteria())
        return api_response(200, to_search_response(result))
    except Exception as e:
        return handle_error(e, logger)

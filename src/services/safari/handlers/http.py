import json
from urllib.parse import parse_qs

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEventV2
from pydantic import ValidationError

from services.safari.domain.exception import (
    InsufficientSeatsException,
    SelfBookingForbiddenException,
    TripValidationException,
)
from services.safari.domain.value_object import Username
from services.safari.handlers.response_models import ErrorResponse
from services.shared.domain.exception import (
    BusinessRuleViolationException,
    CatalogUnavailableException,
    PersistenceException,
    ResourceNotFoundException,
)
from services.shared.utils import api_response

USERNAME_CLAIM = "preferred_username"


class InvalidRequestBodyException(ValueError):
    """リクエストボディを解釈できない場合"""

    pass


def current_user(event: APIGatewayProxyEventV2) -> Username | None:
    """JWT オーソライザーのクレームから利用者を取り出す"""
    authorizer = event.request_context.authorizer
    claims = (authorizer.jwt_claim if authorizer else None) or {}
    username = claims.get(USERNAME_CLAIM)
    if not isinstance(username, str) or not username.strip():
        return None
    return Username(value=username)


def read_body(event: APIGatewayProxyEventV2) -> dict:
    """JSON またはフォーム形式のボディを辞書にする"""
    body = event.decoded_body
    if not body:
        return {}

    headers = event.headers or {}
    content_type = next(
        (v for k, v in headers.items() if k.lower() == "content-type"), ""
    )
    if content_type.startswith("application/x-www-form-urlencoded"):
        return {key: values[-1] for key, values in parse_qs(body).items()}

    try:
        parsed = json.loads(body)
    except json.JSONDecodeError as e:
        raise InvalidRequestBodyException("Request body must be valid JSON") from e
    if not isinstance(parsed, dict):
        raise InvalidRequestBodyException("Request body must be a JSON object")
    return parsed


def error_response(
    status_code: int, error_code: str, message: str, details: list | None = None
) -> dict:
    """エラーレスポンスを生成"""
    body = ErrorResponse(
        error_code=error_code,
        message=message,
        details=details,
    ).model_dump(exclude_none=True)
    return api_response(status_code, body)


def unauthorized() -> dict:
    return error_response(401, "UNAUTHORIZED", "Unauthorized")


def handle_error(e: Exception, logger: Logger) -> dict:
    """例外を HTTP エラーレスポンスに変換する"""
    if isinstance(e, ValidationError):
        details = [{"loc": list(err["loc"]), "msg": err["msg"]} for err in e.errors()]
        return error_response(400, "INVALID_REQUEST", "Invalid request", details)
    if isinstance(e, InvalidRequestBodyException):
        return error_response(400, "INVALID_REQUEST", str(e))
    if isinstance(e, TripValidationException):
        return error_response(
            400, "VALIDATION_ERROR", e.message, [{"field": e.field}]
        )
    if isinstance(e, ResourceNotFoundException):
        return error_response(404, "NOT_FOUND", str(e))
    if isinstance(e, SelfBookingForbiddenException):
        return error_response(403, "FORBIDDEN", str(e))
    if isinstance(e, InsufficientSeatsException):
        return error_response(409, "CAPACITY_EXCEEDED", str(e))
    if isinstance(e, BusinessRuleViolationException):
        return error_response(400, "BUSINESS_RULE_VIOLATION", str(e))
    if isinstance(e, CatalogUnavailableException):
        logger.error("Trip catalog unavailable")
        return error_response(503, "CATALOG_UNAVAILABLE", "Trip catalog is unavailable")
    if isinstance(e, PersistenceException):
        logger.error("Failed to persist trip catalog")
        return error_response(500, "PERSISTENCE_ERROR", "Failed to save trip catalog")

    logger.exception("Unexpected error")
    return error_response(500, "INTERNAL_ERROR", "Internal server error")

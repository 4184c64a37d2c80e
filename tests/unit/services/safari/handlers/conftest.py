import json
from dataclasses import dataclass

import pytest


@dataclass
class LambdaContext:
    function_name: str = "safari-handler"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = (
        "arn:aws:lambda:ap-northeast-1:123456789012:function:safari-handler"
    )
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"


@pytest.fixture
def lambda_context():
    return LambdaContext()


@pytest.fixture
def api_event():
    """HTTP API (payload v2) のイベントを生成する Factory fixture"""

    def _factory(
        username: str | None = None,
        body: dict | str | None = None,
        path_parameters: dict | None = None,
        query: dict | None = None,
        content_type: str = "application/json",
    ) -> dict:
        authorizer = (
            {"jwt": {"claims": {"preferred_username": username}, "scopes": None}}
            if username
            else {}
        )
        event = {
            "version": "2.0",
            "routeKey": "$default",
            "rawPath": "/trips",
            "rawQueryString": "",
            "headers": {"content-type": content_type},
            "requestContext": {
                "accountId": "123456789012",
                "apiId": "api-id",
                "authorizer": authorizer,
                "domainName": "id.execute-api.ap-northeast-1.amazonaws.com",
                "http": {
                    "method": "POST",
                    "path": "/trips",
                    "protocol": "HTTP/1.1",
                    "sourceIp": "192.0.2.1",
                    "userAgent": "pytest",
                },
                "requestId": "request-id",
                "routeKey": "$default",
                "stage": "$default",
                "time": "01/Jun/2025:09:00:00 +0000",
                "timeEpoch": 1748768400000,
            },
            "isBase64Encoded": False,
        }
        if body is not None:
            event["body"] = body if isinstance(body, str) else json.dumps(body)
        if path_parameters is not None:
            event["pathParameters"] = path_parameters
        if query is not None:
            event["queryStringParameters"] = query
        return event

    return _factory

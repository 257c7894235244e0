import json
from http import HTTPStatus
from typing import Any, cast

import pytest

from core.utils.response import ResponseBuilder


def parse_body(resp: dict[str, Any]) -> dict[str, Any]:
    body = resp.get("body")
    if not body:
        return {}

    return cast(dict[str, Any], json.loads(body))


def test_ok_response() -> None:
    resp = ResponseBuilder.ok({"foo": "bar"}, request_id="req-1", cors_origin="https://shop.example")
    parsed = parse_body(resp)

    assert resp["statusCode"] == HTTPStatus.OK
    assert parsed["foo"] == "bar"
    assert parsed["request_id"] == "req-1"
    assert resp["headers"]["Access-Control-Allow-Origin"] == "https://shop.example"
    assert resp["headers"]["Content-Type"] == "application/json"


def test_ok_response_without_request_id_keeps_body_shape() -> None:
    parsed = parse_body(ResponseBuilder.ok({"content": []}))

    assert parsed == {"content": []}


def test_no_content_response() -> None:
    resp = ResponseBuilder.no_content()

    assert resp["statusCode"] == HTTPStatus.NO_CONTENT
    assert resp["body"] == ""
    assert resp["headers"]["Access-Control-Allow-Origin"] == "*"


@pytest.mark.parametrize(
    "func,status,error_name",
    [
        (ResponseBuilder.bad_request, HTTPStatus.BAD_REQUEST, "BAD_REQUEST"),
        (
            ResponseBuilder.internal_error,
            HTTPStatus.INTERNAL_SERVER_ERROR,
            "INTERNAL_SERVER_ERROR",
        ),
    ],
)
def test_error_responses_use_explicit_message(func, status, error_name) -> None:
    resp = func("Something failed", request_id="req-err")
    parsed = parse_body(resp)

    assert resp["statusCode"] == status
    assert parsed["error"] == error_name
    assert parsed["message"] == "Something failed"
    assert parsed["request_id"] == "req-err"
    assert "timestamp" in parsed


def test_bad_request_with_error_code_and_details() -> None:
    resp = ResponseBuilder.bad_request(
        "Invalid request parameters",
        error="INVALID_PARAMETER",
        details={"errors": [{"field": "size", "message": "Must be an integer"}]},
    )
    parsed = parse_body(resp)

    assert parsed["error"] == "INVALID_PARAMETER"
    assert parsed["details"]["errors"][0]["field"] == "size"

"""Unit tests for error response construction and id recovery."""
import json

import pytest

from rpcdispatch.jsonrpc.error_factory import (
    build_error_response,
    create_error_json_from_request_json,
    create_maybe_error_json_from_request_json,
    recover_id,
)
from rpcdispatch.jsonrpc.models import ErrorCode, JSONRPCError, JSONRPCErrors
from rpcdispatch.jsonrpc.serializer import PydanticJsonSerializer


@pytest.fixture
def serializer():
    return PydanticJsonSerializer()


def test_build_error_response_with_id(serializer):
    response = build_error_response(serializer, 5, JSONRPCErrors.method_not_found)
    assert response == '{"jsonrpc":"2.0","error":{"code":-32601,"message":"Method not found"},"id":5}'


def test_build_error_response_null_id(serializer):
    response = json.loads(build_error_response(serializer, None, JSONRPCErrors.invalid_request))
    assert response["id"] is None
    assert response["error"] == {"code": ErrorCode.INVALID_REQUEST, "message": "Invalid Request"}


def test_build_error_response_includes_data(serializer):
    error = JSONRPCError(code=42, message="Application failure", data={"reason": ["a", "b"]})
    response = json.loads(build_error_response(serializer, "req-1", error))

    assert response["error"]["data"] == {"reason": ["a", "b"]}
    assert response["id"] == "req-1"


def test_reserved_error_codes():
    assert ErrorCode.PARSE_ERROR == -32700
    assert ErrorCode.INVALID_REQUEST == -32600
    assert ErrorCode.METHOD_NOT_FOUND == -32601
    assert ErrorCode.INVALID_PARAMS == -32602
    assert ErrorCode.INTERNAL_ERROR == -32603


@pytest.mark.parametrize(
    "request_json, expected",
    [
        ('{"id": 1}', (True, 1)),
        ('{"id": "abc", "method": 5}', (True, "abc")),
        ('{"id": 1.5}', (True, 1.5)),
        ('{"id": null}', (True, None)),
        ('{"id": {"nested": true}}', (True, None)),
        ('{"id": true}', (True, None)),
        ('{"method": "notify"}', (False, None)),
        ("not-json", (False, None)),
        ("[1, 2]", (False, None)),
    ],
)
def test_recover_id(serializer, request_json, expected):
    assert recover_id(serializer, request_json) == expected


def test_error_json_always_produced(serializer):
    response = json.loads(
        create_error_json_from_request_json(serializer, '{"method":"x"}', JSONRPCErrors.parse_error)
    )
    assert response["id"] is None
    assert response["error"]["code"] == ErrorCode.PARSE_ERROR


def test_maybe_error_json_skips_notifications(serializer):
    error = JSONRPCErrors.method_not_found
    assert create_maybe_error_json_from_request_json(serializer, '{"method":"x"}', error) is None

    response = json.loads(
        create_maybe_error_json_from_request_json(serializer, '{"method":"x","id":"q"}', error)
    )
    assert response["id"] == "q"

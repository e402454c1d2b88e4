"""Unit tests for envelope decoding and encoding."""

import json

import pytest

from figma_mcp.core.exceptions import BackendError, EnvelopeError
from figma_mcp.protocol.envelope import (
    decode_body,
    encode_failure,
    encode_success,
    format_sse_event,
    parse_request,
)

REQUEST = {
    "jsonrpc": "2.0",
    "id": 1,
    "method": "tools/call",
    "params": {"name": "get-file", "arguments": {"fileKey": "AbC123"}},
}


def test_decode_parsed_body_passthrough():
    assert decode_body(REQUEST) is REQUEST


def test_decode_bytes_and_str():
    raw = json.dumps(REQUEST)
    assert decode_body(raw) == REQUEST
    assert decode_body(raw.encode()) == REQUEST


def test_decode_json_string_body():
    """A JSON string literal holding the request is unwrapped."""
    double_encoded = json.dumps(json.dumps(REQUEST))
    assert decode_body(double_encoded) == REQUEST


@pytest.mark.parametrize("raw", [None, b"", "", "   "])
def test_decode_missing_body(raw):
    with pytest.raises(EnvelopeError, match="Missing request body"):
        decode_body(raw)


@pytest.mark.parametrize("raw", ["not json", b"{\"jsonrpc\": ", b"\x80abc"])
def test_decode_invalid_json(raw):
    with pytest.raises(EnvelopeError, match="Invalid JSON body"):
        decode_body(raw)


@pytest.mark.parametrize("raw", ["[1, 2]", "42", [REQUEST]])
def test_decode_non_object(raw):
    with pytest.raises(EnvelopeError, match="JSON object"):
        decode_body(raw)


def test_parse_request():
    request = parse_request(REQUEST)
    assert request.id == 1
    assert request.method == "tools/call"
    assert request.params["name"] == "get-file"
    assert not request.is_notification


def test_parse_request_missing_method():
    with pytest.raises(EnvelopeError, match="method"):
        parse_request({"jsonrpc": "2.0", "id": 1})


def test_parse_request_wrong_version():
    with pytest.raises(EnvelopeError, match="jsonrpc"):
        parse_request({"jsonrpc": "1.0", "id": 1, "method": "ping"})


def test_notification_detection():
    assert parse_request({"jsonrpc": "2.0", "method": "notifications/initialized"}).is_notification
    assert parse_request({"jsonrpc": "2.0", "method": "ping"}).is_notification


def test_encode_success_passes_result_through():
    result = {"content": [{"type": "text", "text": "https://img"}]}
    assert encode_success("abc", result) == {"jsonrpc": "2.0", "id": "abc", "result": result}


def test_encode_failure_uses_message():
    assert encode_failure(BackendError(500, "boom")) == {"error": "Figma API error 500: boom"}


def test_encode_failure_without_message():
    assert encode_failure(RuntimeError()) == {"error": "RuntimeError"}


def test_format_sse_event():
    assert format_sse_event({"a": 1}) == 'data: {"a":1}\n\n'

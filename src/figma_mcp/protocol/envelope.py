"""Decode inbound request bodies and encode JSON-RPC replies."""

import json
from typing import Any

from pydantic import ValidationError

from figma_mcp.core.exceptions import EnvelopeError
from figma_mcp.models.schemas import JsonRpcRequest, RequestId

JSONRPC_VERSION = "2.0"


def decode_body(raw: bytes | str | dict | list | None) -> dict[str, Any]:
    """Turn a request body into a JSON object.

    ``raw`` may already be parsed, or be raw JSON text. A JSON string literal
    holding JSON text is decoded one more level.

    Raises:
        EnvelopeError: If the body is missing, not JSON, or not an object.
    """
    if raw is None or (isinstance(raw, (bytes, str)) and not raw.strip()):
        raise EnvelopeError("Missing request body")

    body: Any = raw
    if isinstance(body, (bytes, str)):
        body = _loads(body)
    if isinstance(body, str):
        body = _loads(body)

    if not isinstance(body, dict):
        raise EnvelopeError("Request body must be a JSON object")
    return body


def _loads(text: bytes | str) -> Any:
    try:
        return json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise EnvelopeError(f"Invalid JSON body: {e}") from e


def parse_request(body: dict[str, Any]) -> JsonRpcRequest:
    """Validate the JSON-RPC request shape.

    Raises:
        EnvelopeError: If required fields are missing or mistyped.
    """
    try:
        return JsonRpcRequest.model_validate(body)
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) or "<body>" for err in e.errors())
        raise EnvelopeError(f"Invalid JSON-RPC request: {fields}") from e


def encode_success(request_id: RequestId | None, result: dict[str, Any]) -> dict[str, Any]:
    """Wrap a result in a JSON-RPC response."""
    return {"jsonrpc": JSONRPC_VERSION, "id": request_id, "result": result}


def encode_failure(exc: BaseException) -> dict[str, str]:
    """Body for a failed POST: the error's message, or its type when it has none."""
    return {"error": str(exc) or exc.__class__.__name__}


def format_sse_event(payload: dict[str, Any]) -> str:
    """Frame a JSON-RPC notification as an SSE ``data:`` event."""
    return f"data: {json.dumps(payload, separators=(',', ':'))}\n\n"

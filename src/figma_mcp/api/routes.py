"""HTTP entry point: dispatches by method to SSE, JSON-RPC or a status reply."""

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse, StreamingResponse

from figma_mcp.api.sse import SSE_HEADERS, KeepAliveSession
from figma_mcp.config import settings
from figma_mcp.core.exceptions import EnvelopeError
from figma_mcp.core.logging import bind_context, get_logger, unbind_context
from figma_mcp.protocol.dispatcher import SERVER_NAME, JsonRpcDispatcher
from figma_mcp.protocol.envelope import decode_body, encode_failure, parse_request

logger = get_logger(__name__)

router = APIRouter()

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}

SUPPORTED_METHODS = ["OPTIONS", "GET", "POST"]

# Global dispatcher instance
dispatcher: JsonRpcDispatcher | None = None


def set_dispatcher(instance: JsonRpcDispatcher | None) -> None:
    """Set the global dispatcher instance."""
    global dispatcher
    dispatcher = instance


def get_dispatcher() -> JsonRpcDispatcher:
    """Return the dispatcher created at startup."""
    if dispatcher is None:
        raise RuntimeError("Dispatcher not initialized")
    return dispatcher


def _json(content: dict, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    return JSONResponse(content=content, status_code=status_code, headers=CORS_HEADERS)


async def handle(request: Request) -> Response:
    """Select exactly one handling path for the request method."""
    if request.method == "OPTIONS":
        return Response(status_code=status.HTTP_200_OK, headers=CORS_HEADERS)
    if request.method == "GET":
        return open_sse_stream(request)
    if request.method == "POST":
        return await handle_rpc(request)
    return _json(server_status())


# No method list: every verb, including non-standard ones, reaches handle().
router.add_route("/{path:path}", handle, include_in_schema=False)


def server_status() -> dict:
    """Fallback body for methods without a handler."""
    return {
        "ok": True,
        "server": SERVER_NAME,
        "env": settings.has_token,
        "methods": SUPPORTED_METHODS,
    }


def open_sse_stream(request: Request) -> StreamingResponse:
    """Start a keep-alive SSE stream for this connection."""
    session = KeepAliveSession(
        interval=settings.sse_keepalive_seconds,
        is_disconnected=request.is_disconnected,
    )
    return StreamingResponse(
        session.events(),
        media_type="text/event-stream",
        headers={**SSE_HEADERS, **CORS_HEADERS},
    )


async def handle_rpc(request: Request) -> Response:
    """Decode the envelope, run it and encode the reply.

    Envelope problems answer 400; every other failure answers 500 with
    ``{"error": message}``.
    """
    try:
        envelope = parse_request(decode_body(await request.body()))
    except EnvelopeError as e:
        logger.warning("Rejected request body", error=str(e))
        return _json(encode_failure(e), status.HTTP_400_BAD_REQUEST)

    bind_context(rpc_method=envelope.method, rpc_id=envelope.id)
    try:
        reply = await get_dispatcher().dispatch(envelope)
    except EnvelopeError as e:
        logger.warning("Rejected request params", error=str(e))
        return _json(encode_failure(e), status.HTTP_400_BAD_REQUEST)
    except Exception as e:
        logger.error("Request handling failed", error=str(e), error_type=type(e).__name__)
        return _json(encode_failure(e), status.HTTP_500_INTERNAL_SERVER_ERROR)
    finally:
        unbind_context("rpc_method", "rpc_id")

    if reply is None:
        return Response(status_code=status.HTTP_202_ACCEPTED, headers=CORS_HEADERS)
    return _json(reply)

"""Structured logging configuration for the Figma MCP server.

- structlog for structured console/JSON logging
- Context propagation via contextvars (service, version, rpc_id, rpc_method)
- Credential headers are masked before rendering
- Silences noisy library loggers (uvicorn.access, httpx, etc.)
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

_SECRET_HEADERS = frozenset({"x-figma-token", "authorization"})


def _mask_secrets(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Processor that masks credential values in a logged ``headers`` mapping."""
    headers = event_dict.get("headers")
    if isinstance(headers, dict):
        event_dict["headers"] = {
            name: "***" if name.lower() in _SECRET_HEADERS and value else value
            for name, value in headers.items()
        }
    return event_dict


def setup_logging(
    service_name: str,
    service_version: str = "0.1.0",
    log_level: str = "INFO",
    log_format: str = "console",
) -> None:
    """Configure structured logging for the server.

    Args:
        service_name: Name of the service (e.g., "figma-mcp")
        service_version: Service version (e.g., "0.1.0")
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR)
        log_format: Output format - "json" for production, "console" for development
    """
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
        _mask_secrets,
    ]

    if log_format == "json":
        processors = shared_processors + [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )

    # Bind service context that will appear in all logs
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        service=service_name,
        version=service_version,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a logger instance with optional name binding.

    The returned proxy resolves its configuration on first use, so module-level
    loggers created before setup_logging() still follow it.

    Args:
        name: Optional logger name (typically __name__)

    Returns:
        A bound structlog logger
    """
    if name:
        return structlog.get_logger(logger_name=name)
    return structlog.get_logger()


def bind_context(**kwargs: Any) -> None:
    """Bind additional context variables to all subsequent logs.

    Example:
        bind_context(rpc_id=7, rpc_method="tools/call")
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def unbind_context(*keys: str) -> None:
    """Remove specific context variables.

    Use this instead of clearing everything so the service/version binding
    made at startup survives across requests.
    """
    structlog.contextvars.unbind_contextvars(*keys)

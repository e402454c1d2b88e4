"""Error types raised while handling a tool invocation."""


class FigmaMcpError(Exception):
    """Base class for all errors raised by the server."""


class ConfigurationError(FigmaMcpError):
    """A required setting (the Figma access token) is missing."""


class EnvelopeError(FigmaMcpError):
    """The request body is missing, is not JSON, or is not a JSON-RPC request."""


class UnknownMethodError(FigmaMcpError):
    """The JSON-RPC method is not one the server implements."""

    def __init__(self, method: str):
        self.method = method
        super().__init__(f"Unknown method: {method}")


class UnknownToolError(FigmaMcpError):
    """The requested tool is not registered."""

    def __init__(self, tool_name: str):
        self.tool_name = tool_name
        super().__init__(f"Unknown tool: {tool_name}")


class ToolValidationError(FigmaMcpError):
    """Tool arguments failed schema validation."""

    def __init__(self, tool_name: str, errors: list[str]):
        self.tool_name = tool_name
        self.errors = errors
        super().__init__(f"Invalid arguments for tool '{tool_name}': " + "; ".join(errors))


class BackendError(FigmaMcpError):
    """The Figma API answered with a non-2xx status."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"Figma API error {status_code}: {message}")


class ImageUrlMissingError(FigmaMcpError):
    """The export call succeeded but no URL came back for the requested node."""

    def __init__(self, node_id: str):
        self.node_id = node_id
        super().__init__(f"No image URL returned for node {node_id}")

"""
Exception hierarchy for the WHMCS MCP server.

Every class carries the `ErrorKind` it is reported as, so the dispatcher can
turn any of them into an error envelope without inspecting messages.
"""

from typing import Optional

from core.models import ErrorKind


class BillingError(Exception):
    """Base class for all tool-call failures."""

    kind: ErrorKind = ErrorKind.TRANSPORT_ERROR
    status_code: Optional[int] = None


class UnknownToolError(BillingError):
    """Raised when a tool name is not in the registry."""

    kind = ErrorKind.UNKNOWN_TOOL

    def __init__(self, tool_name: str):
        super().__init__(f"Unknown tool: {tool_name}")
        self.tool_name = tool_name


class InvalidArgumentsError(BillingError):
    """Raised when call arguments do not fit the tool's declared parameters."""

    kind = ErrorKind.INVALID_ARGUMENTS

    def __init__(self, tool_name: str, problems: list[str]):
        super().__init__(f"Invalid arguments for {tool_name}: {'; '.join(problems)}")
        self.tool_name = tool_name
        self.problems = problems


class GatewayError(BillingError):
    """Raised when the WHMCS API call itself fails."""

    def __init__(self, message: str):
        super().__init__(f"WHMCS API error: {message}")


class TransportError(GatewayError):
    """The request never got a response (DNS, connection, bad URL...)."""

    kind = ErrorKind.TRANSPORT_ERROR


class RemoteStatusError(GatewayError):
    """WHMCS answered with a non-2xx status."""

    kind = ErrorKind.REMOTE_ERROR

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code


class InvalidResponseError(GatewayError):
    """WHMCS answered 2xx but the body is not JSON."""

    kind = ErrorKind.INVALID_RESPONSE

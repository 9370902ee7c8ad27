# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (all six WHMCS tools)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes the core/ registry over MCP.  Each registered tool is a thin
#   wrapper that forwards (name, arguments) to the Dispatcher and turns the
#   resulting envelope into an MCP tool result.
#
# HOW IT WORKS (the flow):
#   1. An MCP client calls a tool by name (e.g. "get_invoices")
#   2. FastMCP routes the call to the matching WHMCSTool below
#   3. WHMCSTool.run() hands the arguments to core.dispatcher.Dispatcher
#   4. The dispatcher POSTs once to WHMCS and returns a ToolResponse
#   5. Success → one text block with the pretty-printed JSON
#      Failure → ToolError, which FastMCP returns as a result with isError=true
#
# UNKNOWN TOOLS:
#   UnknownToolGuard catches names outside the registry before FastMCP's own
#   lookup and sends them through the Dispatcher too, so every error result
#   reads "Error: ...", including "Error: Unknown tool: <name>".
#
# SCHEMAS:
#   Tools are Tool subclasses, not @mcp.tool() functions: the advertised
#   inputSchema is the registry schema verbatim (plain "number"/"string"
#   types, one "required" list), not one generated from a signature.
#
# RUNNING THIS SERVER:
#   a) python -m tools.mcp_server       (from the project root)
#   b) whmcs-mcp-server                 (console script, after pip install)
#   c) spawned over stdio by the operator console (agent/billing_agent.py)
# =============================================================================

import json
import logging
import sys
from typing import Any, Optional

from dotenv import load_dotenv
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.server.middleware import Middleware, MiddlewareContext
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent
from pydantic import Field

from core.config import WHMCSConfig, load_config
from core.dispatcher import Dispatcher
from core.gateway import WHMCSGateway
from core.models import ToolDescriptor, ToolResponse

SERVER_NAME = "whmcs-server"

SERVER_INSTRUCTIONS = (
    "Read-only access to a WHMCS billing installation: clients, invoices, "
    "orders, products and support tickets. Every tool returns the raw WHMCS "
    "JSON response."
)

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because stdout IS the MCP transport.  Anything printed to
# stdout would corrupt the JSON-RPC stream.
#
# Colors: CYAN = incoming call, GREEN = response, YELLOW = status/errors.
# Credentials never pass through these helpers; only tool arguments do.
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

# Responses can be whole client lists; log only the head of them.
_MAX_LOGGED_CHARS = 300

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(tool_name: str, params: dict) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, response: ToolResponse) -> ToolResponse:
    """Log the (truncated) response text in GREEN, then return it."""
    compact = response.text
    try:
        compact = json.dumps(json.loads(compact), separators=(",", ":"), ensure_ascii=False)
    except ValueError:
        pass
    if len(compact) > _MAX_LOGGED_CHARS:
        compact = compact[:_MAX_LOGGED_CHARS] + "…"
    logging.info(f"{_GREEN}  ← {tool_name} response: {compact}{_RESET}")
    return response


# =============================================================================
# WHMCSTool — one registry descriptor, served over MCP
# =============================================================================
class WHMCSTool(Tool):
    """A FastMCP tool whose behavior is "ask the dispatcher"."""

    dispatcher: Any = Field(default=None, exclude=True)

    @classmethod
    def from_descriptor(cls, descriptor: ToolDescriptor, dispatcher: Dispatcher) -> "WHMCSTool":
        return cls(
            name=descriptor.name,
            description=descriptor.description,
            parameters=descriptor.input_schema(),
            dispatcher=dispatcher,
        )

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        _log_request(self.name, arguments or {})

        response = await self.dispatcher.call(self.name, arguments)
        if response.is_error:
            _log_status(f"{response.error_kind.value}: {response.text}")
            raise ToolError(response.text)

        _log_response(self.name, response)
        return ToolResult(content=[TextContent(type="text", text=response.text)])


class UnknownToolGuard(Middleware):
    """Answer calls to unregistered tool names with the dispatcher's error envelope."""

    def __init__(self, dispatcher: Dispatcher):
        self.dispatcher = dispatcher
        self.known = {descriptor.name for descriptor in dispatcher.list_tools()}

    async def on_call_tool(self, context: MiddlewareContext, call_next):
        name = context.message.name
        if name in self.known:
            return await call_next(context)

        _log_request(name, context.message.arguments or {})
        response = await self.dispatcher.call(name, context.message.arguments)
        _log_status(f"{response.error_kind.value}: {response.text}")
        raise ToolError(response.text)


# =============================================================================
# Server factory
# =============================================================================
# Collaborators are injected: pass a config (or a ready gateway) and the
# environment is never consulted.  Only main() reads the environment.
# =============================================================================
def create_server(
    config: Optional[WHMCSConfig] = None,
    gateway: Optional[WHMCSGateway] = None,
) -> FastMCP:
    """Build a FastMCP server advertising every registry tool."""
    if gateway is None:
        gateway = WHMCSGateway(config if config is not None else load_config())
    dispatcher = Dispatcher(gateway)

    mcp = FastMCP(SERVER_NAME, instructions=SERVER_INSTRUCTIONS)
    mcp.add_middleware(UnknownToolGuard(dispatcher))
    for descriptor in dispatcher.list_tools():
        mcp.add_tool(WHMCSTool.from_descriptor(descriptor, dispatcher))
    return mcp


# =============================================================================
# Server entry point
# =============================================================================
def main() -> None:
    load_dotenv()
    config = load_config()

    missing = config.missing_settings()
    if missing:
        # Not fatal: tools/list still works, tool calls will come back as errors.
        logging.warning(f"{_YELLOW}Missing required environment variables: "
                        f"{', '.join(missing)}{_RESET}")

    mcp = create_server(config)
    logging.info("WHMCS MCP server started on stdio")
    mcp.run()


if __name__ == "__main__":
    main()

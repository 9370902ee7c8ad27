# =============================================================================
# core/dispatcher.py  —  Tool name → WHMCS action, outcome → envelope
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Receives (tool name, argument map), looks the tool up in the registry,
#   decodes the arguments into the tool's typed query, asks the gateway to
#   run the matching WHMCS action, and wraps the result in a ToolResponse.
#
# THE ERROR BOUNDARY:
#   This is the ONLY place failures are converted.  Whatever goes wrong
#   (unknown tool, bad arguments, HTTP failure, or anything unexpected) the
#   caller gets a ToolResponse with is_error=True and an error kind.  call()
#   never raises.
# =============================================================================

import logging
from typing import Any, Mapping, Optional

from core.exceptions import BillingError, GatewayError
from core.gateway import WHMCSGateway
from core.models import ErrorKind, ToolDescriptor, ToolResponse
from core.registry import decode_arguments, get_tool, list_tools

logger = logging.getLogger(__name__)


class Dispatcher:
    def __init__(self, gateway: WHMCSGateway):
        self.gateway = gateway

    def list_tools(self) -> list[ToolDescriptor]:
        return list_tools()

    async def call(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> ToolResponse:
        """Run tool `name` once and return its envelope."""
        try:
            tool = get_tool(name)
            query = decode_arguments(tool, arguments)
            payload = await self.gateway.call(tool.action, query.to_form())
        except BillingError as e:
            logger.warning("Tool %s failed (%s): %s", name, e.kind.value, e)
            return ToolResponse.failure(e, e.kind, e.status_code)
        except Exception as e:
            logger.exception("Unexpected failure in tool %s", name)
            wrapped = GatewayError(f"{type(e).__name__}: {e}")
            return ToolResponse.failure(wrapped, ErrorKind.TRANSPORT_ERROR)

        return ToolResponse.success(payload)

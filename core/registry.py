# =============================================================================
# core/registry.py  —  The static tool catalog
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Declares the six read-only WHMCS tools, maps each to its remote action,
#   and decodes the untyped argument map of a tool call into that tool's
#   typed query (core/models.py).
#
# NAMING:
#   Tools use the get_* prefix: read-only retrieval, safe to retry.
#   The remote action names are WHMCS's own and are not derived from them
#   (note "GetClientsDetails", plural "Clients").
#
# DECODING RULES:
#   - required parameters must be present and not None
#   - "string" accepts str, or an int (clients often send ids as numbers)
#   - "number" accepts a non-negative integral int/float; bools are rejected
#   - undeclared arguments are dropped; they never reach the form body
# =============================================================================

import logging
from typing import Any, Mapping, Optional

from core.exceptions import InvalidArgumentsError, UnknownToolError
from core.models import (
    ClientDetailsQuery,
    ClientListQuery,
    InvoiceQuery,
    OrderQuery,
    ProductQuery,
    Query,
    TicketQuery,
    ToolDescriptor,
    ToolParameter,
    parameters_of,
)

logger = logging.getLogger(__name__)


def _descriptor(name: str, description: str, action: str, query_type: type) -> ToolDescriptor:
    return ToolDescriptor(
        name=name,
        description=description,
        action=action,
        query_type=query_type,
        parameters=parameters_of(query_type),
    )


TOOLS: tuple[ToolDescriptor, ...] = (
    _descriptor("get_client_details", "Get the details of a specific client",
                "GetClientsDetails", ClientDetailsQuery),
    _descriptor("get_clients", "Get a list of clients",
                "GetClients", ClientListQuery),
    _descriptor("get_invoices", "Get invoices",
                "GetInvoices", InvoiceQuery),
    _descriptor("get_orders", "Get orders",
                "GetOrders", OrderQuery),
    _descriptor("get_products", "Get available products",
                "GetProducts", ProductQuery),
    _descriptor("get_tickets", "Get support tickets",
                "GetTickets", TicketQuery),
)

_BY_NAME: dict[str, ToolDescriptor] = {tool.name: tool for tool in TOOLS}


def list_tools() -> list[ToolDescriptor]:
    """Every declared tool, in catalog order."""
    return list(TOOLS)


def get_tool(name: str) -> ToolDescriptor:
    """Exact-match lookup.  Raises UnknownToolError for anything else."""
    try:
        return _BY_NAME[name]
    except KeyError:
        raise UnknownToolError(name) from None


def _coerce(param: ToolParameter, value: Any) -> tuple[Any, Optional[str]]:
    """Return (decoded value, problem).  Exactly one of them is meaningful."""
    if param.type == "string":
        if isinstance(value, str):
            return value, None
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value), None
        return None, f"{param.name} must be a string"

    # "number"
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None, f"{param.name} must be a number"
    if isinstance(value, float):
        if not value.is_integer():
            return None, f"{param.name} must be a whole number"
        value = int(value)
    if value < 0:
        return None, f"{param.name} must not be negative"
    return value, None


def decode_arguments(tool: ToolDescriptor, arguments: Optional[Mapping[str, Any]]) -> Query:
    """Turn a raw argument map into `tool.query_type`, or raise InvalidArgumentsError."""
    arguments = arguments or {}
    values: dict[str, Any] = {}
    problems: list[str] = []

    for param in tool.parameters:
        value = arguments.get(param.name)
        if value is None:
            if param.required:
                problems.append(f"{param.name} is required")
            continue
        decoded, problem = _coerce(param, value)
        if problem:
            problems.append(problem)
        else:
            values[param.name] = decoded

    ignored = set(arguments) - {p.name for p in tool.parameters}
    if ignored:
        logger.debug("Ignoring undeclared arguments for %s: %s", tool.name, sorted(ignored))

    if problems:
        raise InvalidArgumentsError(tool.name, problems)
    return tool.query_type(**values)

# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the *shape* of everything that flows through the
# server: the tool catalog advertised to MCP clients, the typed queries a
# tool call is decoded into, and the response envelope every call returns.
#
# The WHMCS payload itself is NOT modeled here.  It is opaque JSON that is
# passed through verbatim, so there is nothing to declare.
# =============================================================================

import json
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Optional


# -----------------------------------------------------------------------------
# ErrorKind — the closed set of ways a tool call can fail
# -----------------------------------------------------------------------------
class ErrorKind(str, Enum):
    UNKNOWN_TOOL = "unknown_tool"
    INVALID_ARGUMENTS = "invalid_arguments"
    TRANSPORT_ERROR = "transport_error"
    REMOTE_ERROR = "remote_error"            # WHMCS answered with a non-2xx status
    INVALID_RESPONSE = "invalid_response"    # WHMCS answered, but not with JSON


# -----------------------------------------------------------------------------
# ToolParameter / ToolDescriptor — the advertised tool catalog
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ToolParameter:
    """One entry of a tool's input schema."""

    name: str
    type: str                          # JSON schema type: "string" | "number"
    description: str
    required: bool = False

    def to_schema(self) -> dict:
        return {"type": self.type, "description": self.description}


@dataclass(frozen=True)
class ToolDescriptor:
    """A tool as MCP clients see it, plus the WHMCS action it maps to.

    `action` is the remote identifier (e.g. "GetClientsDetails"); `name` is the
    locally advertised one (e.g. "get_client_details").  They are never equal.
    """

    name: str
    description: str
    action: str
    query_type: type
    parameters: tuple[ToolParameter, ...] = ()

    @property
    def required(self) -> list[str]:
        return [p.name for p in self.parameters if p.required]

    def input_schema(self) -> dict:
        """Render the JSON schema advertised in `tools/list`."""
        schema: dict[str, Any] = {
            "type": "object",
            "properties": {p.name: p.to_schema() for p in self.parameters},
        }
        if self.required:
            schema["required"] = self.required
        return schema


# -----------------------------------------------------------------------------
# Typed queries — one per tool
# -----------------------------------------------------------------------------
# Each field carries its schema entry in `metadata`, so a query class is the
# single source of truth for both decoding and advertising.  Fields left as
# None were not supplied by the caller and are omitted from the form body.
# -----------------------------------------------------------------------------
def _param(type_: str, description: str, required: bool = False):
    metadata = {"type": type_, "description": description, "required": required}
    if required:
        return field(metadata=metadata)
    return field(default=None, metadata=metadata)


def parameters_of(query_type: type) -> tuple[ToolParameter, ...]:
    """Derive the schema entries declared on a query dataclass."""
    return tuple(
        ToolParameter(
            name=f.name,
            type=f.metadata["type"],
            description=f.metadata["description"],
            required=f.metadata["required"],
        )
        for f in fields(query_type)
    )


@dataclass(frozen=True)
class Query:
    """Base for typed tool queries."""

    def to_form(self) -> dict[str, str]:
        """Form fields for the supplied (non-None) values, stringified."""
        return {
            f.name: str(getattr(self, f.name))
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


@dataclass(frozen=True)
class ClientDetailsQuery(Query):
    clientid: str = _param("string", "Client ID", required=True)


@dataclass(frozen=True)
class ClientListQuery(Query):
    limitstart: Optional[int] = _param("number", "Start index (optional)")
    limitnum: Optional[int] = _param("number", "Number of results (optional)")
    search: Optional[str] = _param("string", "Search term (optional)")


@dataclass(frozen=True)
class InvoiceQuery(Query):
    limitstart: Optional[int] = _param("number", "Start index (optional)")
    limitnum: Optional[int] = _param("number", "Number of results (optional)")
    userid: Optional[str] = _param("string", "User ID (optional)")
    status: Optional[str] = _param("string", "Invoice status (optional)")


@dataclass(frozen=True)
class OrderQuery(Query):
    limitstart: Optional[int] = _param("number", "Start index (optional)")
    limitnum: Optional[int] = _param("number", "Number of results (optional)")
    userid: Optional[str] = _param("string", "User ID (optional)")
    status: Optional[str] = _param("string", "Order status (optional)")


@dataclass(frozen=True)
class ProductQuery(Query):
    pid: Optional[str] = _param("string", "Specific product ID (optional)")
    gid: Optional[str] = _param("string", "Product group ID (optional)")


@dataclass(frozen=True)
class TicketQuery(Query):
    limitstart: Optional[int] = _param("number", "Start index (optional)")
    limitnum: Optional[int] = _param("number", "Number of results (optional)")
    clientid: Optional[str] = _param("string", "Client ID (optional)")
    status: Optional[str] = _param("string", "Ticket status (optional)")


# -----------------------------------------------------------------------------
# ToolResponse — the envelope every tool call returns
# -----------------------------------------------------------------------------
# Exactly one text block, plus an error flag.  The error kind and status code
# are kept structured so callers can branch on them; `text` is for display.
# -----------------------------------------------------------------------------
@dataclass
class ToolResponse:
    """The outcome of one tool call, success or failure."""

    text: str
    is_error: bool = False
    error_kind: Optional[ErrorKind] = None
    status_code: Optional[int] = None

    @classmethod
    def success(cls, payload: Any) -> "ToolResponse":
        return cls(text=json.dumps(payload, indent=2, ensure_ascii=False))

    @classmethod
    def failure(cls, exc: Exception, kind: ErrorKind, status_code: Optional[int] = None) -> "ToolResponse":
        return cls(
            text=f"Error: {exc}",
            is_error=True,
            error_kind=kind,
            status_code=status_code,
        )

    @property
    def content(self) -> list[dict]:
        return [{"type": "text", "text": self.text}]

    @property
    def meta(self) -> dict:
        if not self.is_error:
            return {}
        meta: dict[str, Any] = {"error_kind": self.error_kind.value}
        if self.status_code is not None:
            meta["status_code"] = self.status_code
        return meta

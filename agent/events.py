# =============================================================================
# agent/events.py  —  Reading ADK events for the console
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Pulls the three things main.py prints out of an ADK Event:
#     - tool calls the agent makes        (part.function_call)
#     - failed tool results               (part.function_response)
#     - the agent's text                  (part.text)
#
# FAILED TOOL RESULTS:
#   ADK hands an MCP tool result back as the dumped CallToolResult, e.g.
#     {"content": [{"type": "text", "text": "Error: ..."}], "isError": true}
#   A tool that blew up inside ADK itself comes back as {"error": "..."}.
#   Both are reported; successful results are not (they can be whole client
#   lists).
#
# Only getattr() is used on events, so nothing here imports Google ADK.
# =============================================================================

from typing import Any, Optional


def _parts(event: Any) -> list:
    content = getattr(event, "content", None)
    return list(getattr(content, "parts", None) or [])


def tool_calls(event: Any) -> list[str]:
    """Names of the tools the agent asked for in this event."""
    return [
        part.function_call.name
        for part in _parts(event)
        if getattr(part, "function_call", None)
    ]


def error_text(response: Optional[dict]) -> Optional[str]:
    """The error message of a tool result, or None if the call succeeded."""
    if not isinstance(response, dict):
        return None
    if response.get("isError"):
        texts = [
            block.get("text", "")
            for block in response.get("content") or []
            if isinstance(block, dict) and block.get("type") == "text"
        ]
        return "\n".join(texts) or "(no error text)"
    if response.get("error"):
        return str(response["error"])
    return None


def tool_failures(event: Any) -> list[tuple[str, str]]:
    """(tool name, error text) for every failed tool result in this event."""
    failures = []
    for part in _parts(event):
        function_response = getattr(part, "function_response", None)
        if not function_response:
            continue
        message = error_text(function_response.response)
        if message is not None:
            failures.append((function_response.name, message))
    return failures


def final_text(event: Any) -> Optional[str]:
    """The last text part of this event, if it has any."""
    texts = [part.text for part in _parts(event) if getattr(part, "text", None)]
    return texts[-1] if texts else None

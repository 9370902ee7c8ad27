# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP server that publishes the WHMCS tools.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between MCP and core/.  It:
#     1. Advertises each core.registry descriptor as an MCP tool
#     2. Forwards tool calls to core.dispatcher.Dispatcher
#     3. Turns ToolResponse envelopes into MCP results (text + isError)
#     4. Logs every call to stderr
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT build HTTP requests (core/gateway.py)
#   - They do NOT validate arguments (core/registry.py)
#   - They do NOT read WHMCS settings, except in the main() entry point
# =============================================================================

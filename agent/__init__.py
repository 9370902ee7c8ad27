# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains the Google ADK agent behind the operator console.
#
# ARCHITECTURAL ROLE:
#   The agent is an MCP CLIENT of our own server.  It:
#     1. Receives a billing question ("Which invoices of client 42 are unpaid?")
#     2. Decides which WHMCS tools to call, and with which filters
#     3. Reads the raw JSON the tools return
#     4. Answers in plain language
#
# WHAT THE AGENT IS NOT:
#   - It is NOT needed to run the MCP server (tools/ works on its own)
#   - It does NOT talk to WHMCS directly; every request goes through MCP
# =============================================================================

# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains everything the WHMCS server actually does:
#
#   config.py      → WHMCSConfig, read once from the environment
#   models.py      → tool descriptors, typed queries, response envelope
#   exceptions.py  → failure hierarchy (each class knows its ErrorKind)
#   registry.py    → the six tools and argument decoding
#   gateway.py     → the single HTTP POST to WHMCS (httpx)
#   dispatcher.py  → name → action routing and the error boundary
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP or Google ADK.  The MCP server
#   (tools/) and the operator console (agent/) are wiring around it.
# =============================================================================

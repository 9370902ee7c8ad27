# =============================================================================
# agent/billing_agent.py  —  Google ADK Agent Configuration (LiteLLM model)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Builds the Google ADK agent behind the operator console (main.py).  The
#   agent reasons with an LLM reached through LiteLlm and gets its data from
#   our own MCP server (tools/mcp_server.py), which it spawns over stdio.
#
#   ┌──────────────────────────┐      stdio       ┌──────────────────────┐
#   │  Google ADK Agent        │ ───────────────▶ │  FastMCP Server      │
#   │  prompt + LiteLlm model  │   MCP requests   │  (tools/mcp_server)  │
#   └──────────────────────────┘                  └──────────────────────┘
#                                                            │ HTTP POST
#                                                            ▼
#                                                 ┌──────────────────────┐
#                                                 │  WHMCS includes/api  │
#                                                 └──────────────────────┘
#
# MODEL:
#   "openrouter/openai/gpt-4o" by default (LiteLlm reads OPENROUTER_API_KEY
#   from the environment).  Set BILLING_AGENT_MODEL to any LiteLLM model
#   string to switch providers.
#
# MCP CONNECTION:
#   The server subprocess is started with the SAME interpreter and the SAME
#   environment as this process, from the project root, so it sees the
#   installed dependencies and the WHMCS_* variables (or .env file).
# =============================================================================

import os
import sys
from typing import Optional

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset, StdioConnectionParams
from mcp import StdioServerParameters

from agent.prompt import get_billing_assistant_prompt

DEFAULT_MODEL = "openrouter/openai/gpt-4o"

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def server_parameters() -> StdioServerParameters:
    """How to launch tools/mcp_server.py as an MCP stdio subprocess."""
    return StdioServerParameters(
        command=sys.executable,
        args=["-m", "tools.mcp_server"],
        cwd=PROJECT_ROOT,
        env=dict(os.environ),
    )


def create_agent(model: Optional[str] = None) -> Agent:
    """Create the WHMCS billing assistant.

    Args:
        model: LiteLLM model string.  Falls back to $BILLING_AGENT_MODEL,
            then DEFAULT_MODEL.

    Returns:
        A configured Google ADK Agent.  The MCP server is not started until
        the agent first needs its tools.
    """
    mcp_tools = MCPToolset(
        connection_params=StdioConnectionParams(server_params=server_parameters()),
    )

    return Agent(
        name="whmcs_billing_assistant",
        model=LiteLlm(model=model or os.getenv("BILLING_AGENT_MODEL", DEFAULT_MODEL)),
        instruction=get_billing_assistant_prompt(),
        tools=[mcp_tools],
    )

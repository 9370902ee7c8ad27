# =============================================================================
# main.py  —  Entry Point for the WHMCS Billing Assistant console
# =============================================================================
#
# HOW TO RUN:
#   pip install -e ".[console]"
#   python main.py
#
# WHAT HAPPENS:
#   1. Loads .env (WHMCS_* settings, OPENROUTER_API_KEY, BILLING_AGENT_MODEL)
#   2. Creates the Google ADK agent (agent/billing_agent.py)
#   3. Opens an in-memory session
#   4. Reads questions from the terminal and streams each one to the agent
#   5. Prints every tool call the agent makes, any tool error WHMCS or the
#      server reported, and the agent's final answer
#
# To serve the tools to some other MCP client instead, run the server
# alone:  python -m tools.mcp_server
# =============================================================================

import asyncio

from dotenv import load_dotenv

# Must happen BEFORE the agent is created: LiteLlm reads its API key, and the
# spawned MCP server inherits WHMCS_*, from this process's environment.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.billing_agent import create_agent
from agent.events import final_text, tool_calls, tool_failures

APP_NAME = "whmcs_billing_assistant"
USER_ID = "operator"


async def run_console():
    """Run the billing assistant interactively until the operator quits."""
    print("=" * 70)
    print("  WHMCS BILLING ASSISTANT")
    print("  Powered by Google ADK + LiteLLM + FastMCP")
    print("=" * 70)
    print("\n🔧 Initializing agent...")
    agent = create_agent()

    session_service = InMemorySessionService()
    runner = Runner(
        agent=agent,
        app_name=APP_NAME,
        session_service=session_service,
    )
    session = await session_service.create_session(app_name=APP_NAME, user_id=USER_ID)

    print("✅ Agent initialized and ready!\n")
    print("💬 Ask about clients, invoices, orders, products or tickets.")
    print("   (Type 'quit' to exit)\n")
    print("-" * 70)

    while True:
        try:
            user_input = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\n👋 Goodbye!")
            break

        if user_input.lower() in ("quit", "exit", "q"):
            print("\n👋 Goodbye!")
            break

        if not user_input:
            continue

        user_message = types.Content(role="user", parts=[types.Part(text=user_input)])

        print("\n🤖 Agent is thinking...\n")
        print("-" * 70)

        final_response = ""
        async for event in runner.run_async(
            user_id=USER_ID,
            session_id=session.id,
            new_message=user_message,
        ):
            for name in tool_calls(event):
                print(f"  🔧 Calling tool: {name}")
            for name, message in tool_failures(event):
                print(f"  ❌ {name} failed: {message}")
            final_response = final_text(event) or final_response

        print("-" * 70)
        if final_response:
            print(f"\n🤖 Agent:\n\n{final_response}")
        else:
            print("\n⚠️  No response generated. The agent may have encountered an error.")

        print("\n" + "=" * 70)


def main():
    asyncio.run(run_console())


if __name__ == "__main__":
    main()

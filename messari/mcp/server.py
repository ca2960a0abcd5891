"""
Messari AI ToolKit MCP Server (FastMCP, stdio)

Exposes a single tool, ``messari-copilot``, which forwards a chat
conversation to Messari's AI chat-completion endpoint and returns the
assistant's answer as text.

Configuration:
- MESSARI_API_KEY (required), read from the environment or a ``.env`` file
- MESSARI_BASE_URL (optional)

Run with the ``messari-mcp`` console script.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Annotated, Any

from dotenv import load_dotenv
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import BaseModel, Field

from messari.client.client import MessariClient
from messari.client.types import MessariError

# Load environment variables
load_dotenv()

logger = logging.getLogger("messari.mcp")

# ============================================================================
# CONFIGURATION
# ============================================================================

SERVER_NAME = "Messari AI ToolKit MCP Server"
COPILOT_TOOL_NAME = "messari-copilot"

COPILOT_DESCRIPTION = """This tool queries Messari AI for comprehensive crypto research across these datasets:
1. News/Content - Latest crypto news, blogs, podcasts
2. Exchanges - CEX/DEX volumes, market share, assets listed
3. Onchain Data - Active addresses, transaction fees, total transactions.
4. Token Unlocks - Upcoming supply unlocks, vesting schedules, and token emission details
5. Market Data - Asset prices, trading volume, market cap, TVL, and historical performance
6. Fundraising - Investment data, funding rounds, venture capital activity.
7. Protocol Research - Technical analysis of how protocols work, tokenomics, and yield mechanisms
8. Social Data - Twitter followers and Reddit subscribers metrics, growth trends

Examples:
- "Which DEXs have the highest trading volume this month?"
- "When is Arbitrum's next major token unlock?"
- "How does Morpho generate yield for users?"
- "Which cryptocurrency has gained the most Twitter followers in 2023?"
- "What did Vitalik Buterin say about rollups in his recent blog posts?\""""


class ChatMessage(BaseModel):
    role: str = Field(..., description="Message author, e.g. 'user' or 'assistant'")
    content: str = Field(..., description="Message text")


# ============================================================================
# MESSARI CLIENT
# ============================================================================

# Global client instance - created on first tool call
messari_client: MessariClient | None = None


def get_client() -> MessariClient:
    """Get the shared Messari client, creating it from the environment."""
    global messari_client
    if messari_client is None:
        api_key = os.getenv("MESSARI_API_KEY")
        if not api_key:
            raise ToolError("MESSARI_API_KEY environment variable is not set")
        messari_client = MessariClient(api_key=api_key)
    return messari_client


async def ask_copilot(client: MessariClient, messages: list[Any]) -> str:
    """Send ``messages`` to Messari AI and return the first answer's text.

    Raises:
        ToolError: If ``messages`` is empty or the request fails
    """
    if not messages:
        raise ToolError(f"Invalid arguments for {COPILOT_TOOL_NAME}: 'messages' must be a non-empty array")

    payload = [m.model_dump() if isinstance(m, BaseModel) else dict(m) for m in messages]
    try:
        response = await client.ai.create_chat_completion({"messages": payload})
    except MessariError as e:
        raise ToolError(f"Error: {e}") from e

    try:
        return response["messages"][0]["content"]
    except (KeyError, IndexError, TypeError) as e:
        raise ToolError("Error: Messari AI returned no messages") from e


# ============================================================================
# FASTMCP SERVER
# ============================================================================

mcp = FastMCP(
    name=SERVER_NAME,
    instructions="You are a helpful assistant that can answer questions related to crypto research.",
)


@mcp.tool(name=COPILOT_TOOL_NAME, description=COPILOT_DESCRIPTION)
async def messari_copilot(
    messages: Annotated[list[ChatMessage], Field(description="Conversation so far, oldest first")],
) -> str:
    """Answer a crypto research question with Messari AI."""
    return await ask_copilot(get_client(), messages)


# ============================================================================
# MAIN
# ============================================================================


def main() -> None:
    # stdout carries the MCP protocol
    logging.basicConfig(level=logging.INFO, stream=sys.stderr)

    if not os.getenv("MESSARI_API_KEY"):
        logger.error("MESSARI_API_KEY environment variable is not set.")
        logger.error("Please create a .env file with your API key or set it in your environment.")
        sys.exit(1)

    logger.info("Messari MCP Server running on stdio")
    mcp.run()


if __name__ == "__main__":
    main()

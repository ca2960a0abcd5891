"""MCP server exposing Messari AI as the ``messari-copilot`` tool."""

from messari.mcp.server import COPILOT_TOOL_NAME, ask_copilot, main, mcp

__all__ = ["COPILOT_TOOL_NAME", "ask_copilot", "main", "mcp"]

"""gdocs MCP - Model Context Protocol server for Google Docs.

This module provides an MCP server that exposes gdocs functionality
to LLM clients.
"""

from .server import mcp, run_server

__all__ = ["mcp", "run_server"]

"""gdocs - Google Docs access over MCP.

Namespace package containing:
- gdocs.sdk: Core SDK for reading, creating, updating and searching Google Docs
- gdocs.cli: Command-line interface
- gdocs.mcp: Model Context Protocol server for LLM integration
"""

__version__ = "1.0.0"

"""gdocs MCP Server - Exposes Google Docs operations via MCP.

Four tools are registered: read, create, update and search. Each one
delegates to the dispatch table in gdocs.mcp.tools and turns its error
envelope into an MCP tool error.
"""

import logging
import os
import threading
from typing import Optional

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError

from gdocs.sdk import config
from gdocs.sdk.auth import CredentialHandle
from gdocs.sdk.docs import GoogleDocumentStore
from gdocs.sdk.docs.store import DocumentStore

from . import tools

logger = logging.getLogger(__name__)

# The server name comes from config, which .env may relocate
load_dotenv()

# Create the MCP server
mcp = FastMCP(config.get_config_value("server.name", "google-docs-mcp-server"))

_store: Optional[DocumentStore] = None
_store_lock = threading.Lock()


def get_store() -> DocumentStore:
    """Return the process document store, creating it on first use."""
    global _store
    with _store_lock:
        if _store is None:
            _store = GoogleDocumentStore(CredentialHandle.from_config())
        return _store


def set_store(store: Optional[DocumentStore]):
    """Replace the process document store (None resets it)."""
    global _store
    with _store_lock:
        _store = store


def _call(name: str, **arguments) -> str:
    args = {k: v for k, v in arguments.items() if v is not None}
    response = tools.invoke(name, args, get_store())
    if response["isError"]:
        raise ToolError(response["text"])
    return response["text"]


@mcp.tool()
async def read_google_document(
    documentId: str,
    maxLength: Optional[int] = None,
    startPosition: Optional[int] = None
) -> str:
    """
    Read the plain text of a Google Doc.

    Args:
        documentId: The Google Doc ID, or a URL containing it
        maxLength: Optional. Maximum number of characters to return
        startPosition: Optional. Character offset to start reading from

    Returns:
        The document text (or the requested slice of it)
    """
    return _call(
        "read_google_document",
        documentId=documentId,
        maxLength=maxLength,
        startPosition=startPosition,
    )


@mcp.tool()
async def create_google_document(title: str, content: Optional[str] = None) -> str:
    """
    Create a new Google Doc.

    Args:
        title: Title for the new document
        content: Optional initial body text

    Returns:
        Confirmation including the new document ID and URL
    """
    return _call("create_google_document", title=title, content=content)


@mcp.tool()
async def update_google_document(
    documentId: str,
    content: str,
    startPosition: Optional[int] = None,
    endPosition: Optional[int] = None
) -> str:
    """
    Add text to a Google Doc.

    With no positions the content is appended to the end of the document.
    With startPosition only, it is inserted at that index. With both, the
    range [startPosition, endPosition) is replaced by the content.

    Args:
        documentId: The Google Doc ID, or a URL containing it
        content: Text to add
        startPosition: Optional. Index to insert at
        endPosition: Optional. End of the range to replace (requires startPosition)

    Returns:
        Confirmation message
    """
    return _call(
        "update_google_document",
        documentId=documentId,
        content=content,
        startPosition=startPosition,
        endPosition=endPosition,
    )


@mcp.tool()
async def search_google_documents(query: str, maxResults: Optional[int] = None) -> str:
    """
    Full-text search over Google Docs.

    Args:
        query: Text to search for
        maxResults: Optional. Maximum number of documents (default 10)

    Returns:
        JSON array of {id, title, snippet, url, modifiedTime}
    """
    return _call("search_google_documents", query=query, maxResults=maxResults)


# =============================================================================
# Server entry point
# =============================================================================

def run_server():
    """Run the MCP server with stdio transport."""
    # stdout carries the protocol; logging.basicConfig writes to stderr
    if not logging.root.handlers:
        log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        logging.basicConfig(level=getattr(logging, log_level, logging.INFO),
                            format='%(asctime)s - %(levelname)s - %(name)s - %(message)s')
    logging.getLogger('googleapiclient.discovery').setLevel(logging.WARNING)
    logging.getLogger('googleapiclient.discovery_cache').setLevel(logging.WARNING)
    logger.info(f"Starting MCP server with tools: {', '.join(tools.TOOLS)}")
    mcp.run()


if __name__ == "__main__":
    run_server()

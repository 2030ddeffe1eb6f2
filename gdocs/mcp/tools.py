"""Tool dispatch table for the gdocs MCP server.

Each tool is a plain handler with a declared argument contract. `invoke`
wraps every handler the same way: required arguments are checked, and
any failure becomes an error envelope instead of propagating to the host.
"""

import json
import logging
from collections import namedtuple
from typing import Any, Optional

from gdocs.sdk import docs
from gdocs.sdk.docs.search import DEFAULT_MAX_RESULTS
from gdocs.sdk.docs.store import DocumentStore
from gdocs.sdk.exceptions import GDocsError, InternalError, MissingArgumentError, ValidationError

logger = logging.getLogger(__name__)

Tool = namedtuple("Tool", ["name", "description", "required", "optional", "handler"])


def _read(store: DocumentStore, args: dict) -> str:
    document = docs.read_document(store, args["documentId"])
    text = docs.slice_text(
        document["text"],
        start_position=args.get("startPosition"),
        max_length=args.get("maxLength"),
    )
    logger.info(f"Read document {document['id']} ({len(text)} characters returned)")
    return text


def _create(store: DocumentStore, args: dict) -> str:
    result = docs.create_document(store, args["title"], args.get("content"))
    return f"Document created. ID: {result['id']}\nURL: {result['url']}"


def _update(store: DocumentStore, args: dict) -> str:
    result = docs.update_document(
        store,
        args["documentId"],
        args["content"],
        start_position=args.get("startPosition"),
        end_position=args.get("endPosition"),
    )
    return f"Document updated: {result['id']}"


def _search(store: DocumentStore, args: dict) -> str:
    max_results = args.get("maxResults")
    if max_results is None:
        max_results = DEFAULT_MAX_RESULTS
    results = docs.search_documents(store, args["query"], max_results)
    logger.info(f"Search '{args['query']}' returned {len(results)} document(s)")
    return json.dumps(results, indent=2, ensure_ascii=False)


TOOLS = {
    tool.name: tool for tool in [
        Tool(
            name="read_google_document",
            description="Read the plain text of a Google Doc.",
            required=("documentId",),
            optional=("maxLength", "startPosition"),
            handler=_read,
        ),
        Tool(
            name="create_google_document",
            description="Create a new Google Doc.",
            required=("title",),
            optional=("content",),
            handler=_create,
        ),
        Tool(
            name="update_google_document",
            description="Append, insert or replace text in a Google Doc.",
            required=("documentId", "content"),
            optional=("startPosition", "endPosition"),
            handler=_update,
        ),
        Tool(
            name="search_google_documents",
            description="Full-text search over Google Docs.",
            required=("query",),
            optional=("maxResults",),
            handler=_search,
        ),
    ]
}


def success_response(text: str) -> dict[str, Any]:
    return {"text": text, "isError": False}


def error_response(error: GDocsError) -> dict[str, Any]:
    return {"text": str(error), "isError": True}


def _check_required(args: dict, required) -> None:
    for field in required:
        if args.get(field) is None:
            raise MissingArgumentError(f"Missing required argument: {field}")


def invoke(name: str, args: Optional[dict], store: DocumentStore) -> dict[str, Any]:
    """
    Run a tool by name and return its response envelope.

    Args:
        name: Tool name from TOOLS
        args: Tool arguments keyed by their wire names
        store: Document store handed to the handler

    Returns:
        Dict with `text` and `isError`
    """
    args = args or {}
    logger.debug(f"Running tool {name} with arguments: {sorted(args)}")
    try:
        tool = TOOLS.get(name)
        if tool is None:
            raise ValidationError(f"Unknown tool: {name}")
        _check_required(args, tool.required)
        text = tool.handler(store, args)
        return success_response(text)
    except GDocsError as e:
        logger.error(f"Tool {name} failed ({e.code}): {e}")
        return error_response(e)
    except Exception as e:
        logger.exception(f"Unexpected error in tool {name}")
        return error_response(InternalError(f"{name} failed: {e}"))

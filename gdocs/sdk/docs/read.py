"""Google Docs reading operations."""

import logging
from typing import Optional

from .store import DocumentStore, document_url
from .validators import normalize_document_id, validate_position

logger = logging.getLogger(__name__)

SNIPPET_LENGTH = 200
ELLIPSIS = "..."


def read_document(store: DocumentStore, reference: str) -> dict:
    """
    Read a document and its plain text.

    Args:
        store: The document store to read from
        reference: Document ID or URL containing one

    Returns:
        Dict with:
            - id: Document ID
            - title: Document title
            - url: URL to the document
            - text: Plain text content

    Raises:
        NotFoundError: If the reference does not resolve to a document.
    """
    doc_id = normalize_document_id(reference)
    doc = store.get(doc_id)
    text = extract_text(doc)
    logger.debug(f"Read document {doc_id} ({len(text)} characters)")

    return {
        "id": doc.get("documentId", doc_id),
        "title": doc.get("title", ""),
        "url": document_url(doc.get("documentId", doc_id)),
        "text": text,
    }


def extract_text(doc: dict) -> str:
    """
    Extract plain text from a document structure.

    Only paragraph text runs are collected; tables, images and other
    structural elements are skipped.

    Args:
        doc: The document object from the API

    Returns:
        Plain text content
    """
    body = doc.get("body") or {}
    text_parts = []

    for element in body.get("content") or []:
        paragraph = element.get("paragraph")
        if paragraph:
            text_parts.append(extract_paragraph_text(paragraph))

    return "".join(text_parts)


def extract_paragraph_text(paragraph: dict) -> str:
    """
    Extract text from a paragraph element.

    Args:
        paragraph: A paragraph element from the document

    Returns:
        Plain text content of the paragraph
    """
    text = ""
    for element in paragraph.get("elements") or []:
        text_run = element.get("textRun")
        if text_run:
            text += text_run.get("content") or ""
    return text


def slice_text(text: str, start_position: Optional[int] = None, max_length: Optional[int] = None) -> str:
    """
    Return a window of already-extracted text.

    Args:
        text: Full document text
        start_position: Character offset to start from (default 0)
        max_length: Maximum number of characters to return (default: all)
    """
    validate_position("startPosition", start_position)
    validate_position("maxLength", max_length)

    start = start_position or 0
    if max_length is None:
        return text[start:]
    return text[start:start + max_length]


def summarize_text(text: str, limit: int = SNIPPET_LENGTH) -> str:
    """Truncate text to `limit` characters, marking the cut with an ellipsis."""
    if len(text) <= limit:
        return text
    return text[:limit] + ELLIPSIS

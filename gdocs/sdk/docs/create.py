"""Google Docs creation operations."""

import logging
from typing import Optional

from .store import DocumentStore, document_url
from .update import build_edit_requests

logger = logging.getLogger(__name__)


def create_document(store: DocumentStore, title: str, content: Optional[str] = None) -> dict:
    """
    Create a new Google Doc.

    Args:
        store: The document store to create in
        title: The title for the new document
        content: Optional initial body text, appended after creation

    Returns:
        Dict with document info:
            - id: Document ID
            - title: Document title
            - url: URL to open the document
    """
    doc_id = store.create(title)

    if content:
        store.batch_update(doc_id, build_edit_requests(content))

    logger.info(f"Created document {doc_id}")
    return {
        "id": doc_id,
        "title": title,
        "url": document_url(doc_id)
    }

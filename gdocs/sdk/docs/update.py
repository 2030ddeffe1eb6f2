"""Google Docs update operations."""

import logging
from typing import Optional

from .store import DocumentStore
from .validators import normalize_document_id, validate_edit_range

logger = logging.getLogger(__name__)


def build_edit_requests(
    content: str,
    start_position: Optional[int] = None,
    end_position: Optional[int] = None
) -> list:
    """
    Translate an edit into Docs API batchUpdate requests.

    - No positions: append the content at the end of the body.
    - Start only: insert at start_position, nothing deleted.
    - Start and end: delete [start, end) then insert at start.

    Both indices of a ranged replace refer to the document before the
    edit. The batch is applied atomically, so the insert still lands at
    start_position after the delete.

    Args:
        content: Text to insert
        start_position: Index to insert at (and start of the deleted range)
        end_position: End of the range to delete (exclusive)

    Returns:
        List of request dicts for documents.batchUpdate

    Raises:
        InvalidRangeError: If end_position is given without start_position,
            or the positions are not valid indices.
    """
    validate_edit_range(start_position, end_position)

    if start_position is None:
        return [
            {
                "insertText": {
                    "text": content,
                    "endOfSegmentLocation": {"segmentId": ""}
                }
            }
        ]

    requests = []
    if end_position is not None:
        requests.append({
            "deleteContentRange": {
                "range": {
                    "startIndex": start_position,
                    "endIndex": end_position
                }
            }
        })
    requests.append({
        "insertText": {
            "text": content,
            "location": {"index": start_position}
        }
    })
    return requests


def update_document(
    store: DocumentStore,
    reference: str,
    content: str,
    start_position: Optional[int] = None,
    end_position: Optional[int] = None
) -> dict:
    """
    Append, insert or replace text in a document.

    Args:
        store: The document store to write to
        reference: Document ID or URL containing one
        content: Text to add
        start_position: Optional index to insert at
        end_position: Optional end of the range to replace

    Returns:
        Dict with:
            - id: Normalized document ID
            - requests: Number of requests submitted
    """
    requests = build_edit_requests(content, start_position, end_position)
    doc_id = normalize_document_id(reference)
    store.batch_update(doc_id, requests)
    logger.debug(f"Updated document {doc_id} with {len(requests)} request(s)")
    return {"id": doc_id, "requests": len(requests)}

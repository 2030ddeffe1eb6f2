"""Google Docs search operations."""

import logging

from .read import read_document, summarize_text
from .store import DocumentStore, document_url

logger = logging.getLogger(__name__)

DEFAULT_MAX_RESULTS = 10


def search_documents(store: DocumentStore, query: str, max_results: int = DEFAULT_MAX_RESULTS) -> list:
    """
    Full-text search over Google Docs, with a text snippet per hit.

    The query is handed to Drive's `fullText contains` operator as is.
    Each hit is read one at a time, in listing order; a hit whose body
    cannot be read is logged and left out of the results.

    Args:
        store: The document store to search
        query: Text to search for
        max_results: Maximum number of documents to list (default 10)

    Returns:
        List of dicts with id, title, snippet, url and modifiedTime
    """
    files = store.list(query, max_results)
    results = []

    for file in files:
        file_id = file.get("id")
        if not file_id:
            continue
        try:
            document = read_document(store, file_id)
        except Exception as e:
            logger.warning(f"Skipping search hit {file_id}: {e}")
            continue

        results.append({
            "id": file_id,
            "title": file.get("name") or document["title"],
            "snippet": summarize_text(document["text"]),
            "url": file.get("webViewLink") or document_url(file_id),
            "modifiedTime": file.get("modifiedTime"),
        })

    logger.debug(f"Search '{query}' listed {len(files)} file(s), returned {len(results)}")
    return results

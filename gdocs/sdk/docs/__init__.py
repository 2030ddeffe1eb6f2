"""Google Docs SDK module.

Provides functions for reading, creating, updating, and searching Google Docs
against an explicit DocumentStore.
"""

from .store import DocumentStore, GoogleDocumentStore, document_url
from .validators import normalize_document_id
from .read import read_document, extract_text, slice_text, summarize_text
from .create import create_document
from .update import build_edit_requests, update_document
from .search import search_documents

__all__ = [
    "DocumentStore",
    "GoogleDocumentStore",
    "document_url",
    "normalize_document_id",
    "read_document",
    "extract_text",
    "slice_text",
    "summarize_text",
    "create_document",
    "build_edit_requests",
    "update_document",
    "search_documents",
]

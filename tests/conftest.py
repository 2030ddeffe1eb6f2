"""
Test configuration and shared fixtures for gdocs tests.

This module provides:
- An in-memory DocumentStore standing in for the Google APIs
- A builder for Docs API document structures
- Config isolation so tests never touch ~/.config/gdocs-mcp
"""

import pytest
from typing import Dict, List, Optional

from gdocs.sdk.docs.store import DocumentStore
from gdocs.sdk.exceptions import NotFoundError


def build_document(doc_id: str, title: str, paragraphs: List[str]) -> dict:
    """Build a Docs API document whose paragraphs each hold one text run."""
    return {
        "documentId": doc_id,
        "title": title,
        "body": {
            "content": [
                {"paragraph": {"elements": [{"textRun": {"content": text}}]}}
                for text in paragraphs
            ]
        },
    }


class FakeDocumentStore(DocumentStore):
    """In-memory DocumentStore that records every call made to it."""

    def __init__(self, documents: Optional[Dict[str, dict]] = None,
                 files: Optional[List[dict]] = None,
                 failures: Optional[Dict[str, Exception]] = None):
        self.documents = dict(documents or {})
        self.files = list(files or [])
        self.failures = dict(failures or {})
        self.calls = []
        self.batches = []

    def get(self, doc_id: str) -> dict:
        self.calls.append(("get", doc_id))
        if doc_id in self.failures:
            raise self.failures[doc_id]
        if doc_id not in self.documents:
            raise NotFoundError(f"Document not found: {doc_id}")
        return self.documents[doc_id]

    def create(self, title: str) -> str:
        doc_id = f"CreatedDocument{len(self.documents) + 1:010d}"
        self.calls.append(("create", title))
        self.documents[doc_id] = build_document(doc_id, title, [])
        return doc_id

    def batch_update(self, doc_id: str, requests: list) -> dict:
        self.calls.append(("batch_update", doc_id))
        if doc_id in self.failures:
            raise self.failures[doc_id]
        self.batches.append((doc_id, requests))
        return {"documentId": doc_id, "replies": [{} for _ in requests]}

    def list(self, query: str, page_size: int) -> List[dict]:
        self.calls.append(("list", query, page_size))
        return self.files[:page_size]


@pytest.fixture
def make_document():
    """Factory fixture: make_document(doc_id, title, paragraphs) -> document dict."""
    return build_document


@pytest.fixture
def fake_store():
    """Factory fixture returning a FakeDocumentStore."""
    def _make(**kwargs) -> FakeDocumentStore:
        return FakeDocumentStore(**kwargs)
    return _make


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point gdocs at an empty config directory for every test."""
    config_dir = tmp_path / "gdocs-config"
    monkeypatch.setenv("GDOCS_CONFIG_DIR", str(config_dir))
    monkeypatch.delenv("GDOCS_CONFIG_FILE", raising=False)
    monkeypatch.delenv("CREDENTIALS_PATH", raising=False)
    monkeypatch.delenv("TOKEN_PATH", raising=False)
    return config_dir


"""Document store interface and its Google API implementation."""

import abc
import logging
import threading
from functools import wraps
from typing import List

import httplib2
from google.auth.exceptions import RefreshError, TransportError
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from ..auth import CredentialHandle
from ..exceptions import AuthorizationError, GDocsError, NotFoundError, RemoteApiError

logger = logging.getLogger(__name__)

GOOGLE_DOC_MIME_TYPE = "application/vnd.google-apps.document"


def document_url(doc_id: str) -> str:
    """URL to open a Google Doc in the browser."""
    return f"https://docs.google.com/document/d/{doc_id}/edit"


class DocumentStore(abc.ABC):
    """Operations the gdocs SDK needs from a document backend."""

    @abc.abstractmethod
    def get(self, doc_id: str) -> dict:
        """Return the structured document. Raises NotFoundError if missing."""

    @abc.abstractmethod
    def create(self, title: str) -> str:
        """Create an empty document and return its ID."""

    @abc.abstractmethod
    def batch_update(self, doc_id: str, requests: list) -> dict:
        """Apply a list of edit requests atomically."""

    @abc.abstractmethod
    def list(self, query: str, page_size: int) -> List[dict]:
        """
        List documents whose full text contains `query`.

        Each item carries id, name, modifiedTime and webViewLink.
        """


def _translate_errors(action: str):
    """Map Google API client failures onto the gdocs exception taxonomy."""
    def decorator(f):
        @wraps(f)
        def wrapper(self, *args, **kwargs):
            try:
                return f(self, *args, **kwargs)
            except GDocsError:
                raise
            except HttpError as e:
                status = int(e.resp.status)
                reason = getattr(e, "reason", None) or str(e)
                target = f" {args[0]}" if args else ""
                if status == 404:
                    raise NotFoundError(f"Document not found:{target}") from e
                if status == 401:
                    raise AuthorizationError(f"Google API rejected the credential: {reason}") from e
                logger.error(f"Google API error during {action}{target}: {status} {reason}")
                raise RemoteApiError(
                    f"Failed to {action}{target}: {reason}", status_code=status
                ) from e
            except RefreshError as e:
                # The stored grant was revoked or expired; re-authorize next time
                logger.error(f"Credential refresh failed during {action}: {e}")
                self.reset()
                raise AuthorizationError(f"Google API credential could not be refreshed: {e}") from e
            except (TransportError, httplib2.HttpLib2Error, OSError) as e:
                logger.error(f"Network error during {action}: {e}")
                raise RemoteApiError(f"Failed to {action}: {e}") from e
        return wrapper
    return decorator


class GoogleDocumentStore(DocumentStore):
    """
    DocumentStore backed by the Google Docs v1 and Drive v3 APIs.

    API service objects are built on first use from the credential handle,
    so constructing a store never triggers authorization.
    """

    def __init__(self, credentials: CredentialHandle):
        self.credentials = credentials
        self._docs_service = None
        self._drive_service = None
        self._lock = threading.Lock()

    def _services(self):
        with self._lock:
            if self._docs_service is None:
                creds = self.credentials.authorize()
                self._docs_service = build("docs", "v1", credentials=creds, cache_discovery=False)
                self._drive_service = build("drive", "v3", credentials=creds, cache_discovery=False)
            return self._docs_service, self._drive_service

    def reset(self):
        """Drop the API services and the cached credential."""
        with self._lock:
            self._docs_service = None
            self._drive_service = None
        self.credentials.reset()

    @_translate_errors("read document")
    def get(self, doc_id: str) -> dict:
        docs_service, _ = self._services()
        return docs_service.documents().get(documentId=doc_id).execute()

    @_translate_errors("create document")
    def create(self, title: str) -> str:
        docs_service, _ = self._services()
        doc = docs_service.documents().create(body={"title": title}).execute()
        doc_id = doc.get("documentId")
        if not doc_id:
            raise RemoteApiError("Create response did not include a document ID.")
        return doc_id

    @_translate_errors("update document")
    def batch_update(self, doc_id: str, requests: list) -> dict:
        docs_service, _ = self._services()
        return docs_service.documents().batchUpdate(
            documentId=doc_id,
            body={"requests": requests}
        ).execute()

    @_translate_errors("search documents")
    def list(self, query: str, page_size: int) -> List[dict]:
        _, drive_service = self._services()
        results = drive_service.files().list(
            q=f"mimeType='{GOOGLE_DOC_MIME_TYPE}' and fullText contains '{query}'",
            pageSize=page_size,
            fields="files(id, name, createdTime, modifiedTime, webViewLink)"
        ).execute()
        return results.get("files", [])

"""gdocs SDK - Core library for Google Docs access.

This SDK is used by:
- The gdocs CLI
- The gdocs MCP server
- Third-party applications

Example usage:
    from gdocs.sdk import auth, docs

    store = docs.GoogleDocumentStore(auth.CredentialHandle.from_config())
    document = docs.read_document(store, "https://docs.google.com/document/d/<id>/edit")
    print(document["text"])
"""

from . import config
from . import exceptions
from . import auth
from . import docs

__all__ = ["config", "exceptions", "auth", "docs"]

"""Authentication and credential management for gdocs SDK.

Provides a lazily-authorized credential handle. A stored token file is
used first (refreshed when expired); otherwise the installed-app OAuth
flow runs against the client secrets file and the resulting token is
persisted for later processes.
"""

import contextlib
import logging
import sys
import threading
from pathlib import Path
from typing import Any, Optional

from . import config
from .exceptions import AuthorizationError

logger = logging.getLogger(__name__)

# Scopes required for reading, writing and searching documents
REQUIRED_SCOPES = [
    "https://www.googleapis.com/auth/documents",
    "https://www.googleapis.com/auth/drive",
]


class CredentialHandle:
    """
    Owns the process credential and authorizes it at most once.

    Authorization is guarded by a lock; a caller that finds the handle
    already authorized gets the cached credential back.
    """

    def __init__(
        self,
        credentials_path: Path,
        token_path: Path,
        scopes: Optional[list] = None,
        interactive: bool = True,
    ):
        self.credentials_path = Path(credentials_path)
        self.token_path = Path(token_path)
        self.scopes = list(scopes or REQUIRED_SCOPES)
        self.interactive = interactive
        self._credentials = None
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls) -> "CredentialHandle":
        """Build a handle from the gdocs config file and environment."""
        return cls(
            credentials_path=config.get_credentials_path(),
            token_path=config.get_token_path(),
            interactive=bool(config.get_config_value("auth.interactive", True)),
        )

    def is_authorized(self) -> bool:
        return self._credentials is not None

    def authorize(self, force: bool = False) -> Any:
        """
        Return a usable credential, obtaining one if needed.

        Args:
            force: Skip the cached credential and stored token and run the
                OAuth flow. The stored token is only replaced on success.

        Returns:
            A google.oauth2.credentials.Credentials object

        Raises:
            AuthorizationError: If no usable credential can be obtained
        """
        if self._credentials is not None and not force:
            return self._credentials

        with self._lock:
            if self._credentials is not None and not force:
                return self._credentials
            try:
                creds = None if force else self._load_stored_token()
                if creds is None:
                    creds = self._run_flow()
            except AuthorizationError:
                raise
            except Exception as e:
                logger.error(f"Authorization failed: {e}")
                raise AuthorizationError(f"Google API authorization failed: {e}") from e
            self._credentials = creds
            return creds

    def reset(self):
        """Forget the cached credential so the next call re-authorizes."""
        with self._lock:
            self._credentials = None

    def _load_stored_token(self):
        """Load the persisted token, refreshing it if expired. None if unusable."""
        from google.oauth2.credentials import Credentials
        from google.auth.transport.requests import Request
        from google.auth.exceptions import RefreshError

        if not self.token_path.exists():
            logger.debug(f"No stored token at {self.token_path}")
            return None

        try:
            creds = Credentials.from_authorized_user_file(str(self.token_path), self.scopes)
        except ValueError as e:
            logger.warning(f"Ignoring malformed token file {self.token_path}: {e}")
            return None

        if creds.valid:
            logger.info(f"Authorized with stored token: {self.token_path}")
            return creds

        if creds.refresh_token:
            logger.debug("Stored token expired, refreshing")
            try:
                creds.refresh(Request())
            except RefreshError as e:
                logger.warning(f"Could not refresh stored token: {e}")
                return None
            self._save_token(creds)
            logger.info(f"Refreshed stored token: {self.token_path}")
            return creds

        logger.warning(f"Stored token at {self.token_path} is expired and has no refresh token")
        return None

    def _run_flow(self):
        """Run the installed-app OAuth flow and persist the new token."""
        from google_auth_oauthlib.flow import InstalledAppFlow

        if not self.interactive:
            raise AuthorizationError(
                f"No usable token at {self.token_path} and interactive authorization is disabled. "
                "Run 'gdocs auth login' first."
            )
        if not self.credentials_path.exists():
            raise AuthorizationError(
                f"Client secrets file not found: {self.credentials_path}. "
                "Download OAuth client credentials from the Google Cloud Console."
            )

        logger.info(f"Starting OAuth flow using client credentials: {self.credentials_path}")
        flow = InstalledAppFlow.from_client_secrets_file(str(self.credentials_path), self.scopes)
        # The flow prints its prompt; stdout may be carrying the MCP protocol
        with contextlib.redirect_stdout(sys.stderr):
            creds = flow.run_local_server(port=0)
        logger.info("User authorization completed via browser.")
        self._save_token(creds)
        return creds

    def _save_token(self, creds):
        self.token_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.token_path, "w") as token_file:
            token_file.write(creds.to_json())
        logger.info(f"Token saved to {self.token_path}")

"""
Unit tests for CredentialHandle authorization.

Token loading and the browser flow are replaced per test, so nothing here
touches the network or opens a browser.
"""

import threading
import time
from unittest.mock import MagicMock

import pytest

from gdocs.sdk.auth import CredentialHandle, REQUIRED_SCOPES
from gdocs.sdk.exceptions import AuthorizationError


@pytest.fixture
def handle(tmp_path):
    return CredentialHandle(
        credentials_path=tmp_path / "credentials.json",
        token_path=tmp_path / "token.json",
    )


def test_not_authorized_until_authorize(handle, monkeypatch):
    creds = MagicMock()
    monkeypatch.setattr(handle, "_load_stored_token", lambda: creds)

    assert handle.is_authorized() is False
    assert handle.authorize() is creds
    assert handle.is_authorized() is True


def test_stored_token_skips_flow(handle, monkeypatch):
    creds = MagicMock()
    flow = MagicMock()
    monkeypatch.setattr(handle, "_load_stored_token", lambda: creds)
    monkeypatch.setattr(handle, "_run_flow", flow)

    handle.authorize()

    flow.assert_not_called()


def test_missing_token_runs_flow(handle, monkeypatch):
    creds = MagicMock()
    monkeypatch.setattr(handle, "_load_stored_token", lambda: None)
    monkeypatch.setattr(handle, "_run_flow", lambda: creds)

    assert handle.authorize() is creds


def test_authorize_is_cached(handle, monkeypatch):
    loader = MagicMock(return_value=MagicMock())
    monkeypatch.setattr(handle, "_load_stored_token", loader)

    first = handle.authorize()
    second = handle.authorize()

    assert first is second
    loader.assert_called_once()


def test_concurrent_authorize_converges(handle, monkeypatch):
    calls = []

    def slow_loader():
        calls.append(1)
        time.sleep(0.05)
        return object()

    monkeypatch.setattr(handle, "_load_stored_token", slow_loader)
    results = []
    threads = [threading.Thread(target=lambda: results.append(handle.authorize())) for _ in range(5)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(calls) == 1
    assert len(set(map(id, results))) == 1


def test_missing_client_secrets_is_authorization_error(handle, monkeypatch):
    monkeypatch.setattr(handle, "_load_stored_token", lambda: None)

    with pytest.raises(AuthorizationError) as exc:
        handle.authorize()
    assert "credentials.json" in str(exc.value)
    assert handle.is_authorized() is False


def test_non_interactive_refuses_flow(handle, monkeypatch):
    handle.interactive = False
    handle.credentials_path.write_text("{}")
    monkeypatch.setattr(handle, "_load_stored_token", lambda: None)

    with pytest.raises(AuthorizationError) as exc:
        handle.authorize()
    assert "gdocs auth login" in str(exc.value)


def test_unexpected_failure_is_wrapped(handle, monkeypatch):
    def broken():
        raise ValueError("bad token file")

    monkeypatch.setattr(handle, "_load_stored_token", broken)

    with pytest.raises(AuthorizationError) as exc:
        handle.authorize()
    assert "bad token file" in str(exc.value)


def test_flow_persists_token(handle, monkeypatch):
    handle.credentials_path.write_text("{}")
    creds = MagicMock()
    creds.to_json.return_value = '{"token": "abc"}'
    flow = MagicMock()
    flow.run_local_server.return_value = creds
    from_secrets = MagicMock(return_value=flow)
    monkeypatch.setattr(
        "google_auth_oauthlib.flow.InstalledAppFlow.from_client_secrets_file", from_secrets
    )

    assert handle._run_flow() is creds

    from_secrets.assert_called_once_with(str(handle.credentials_path), REQUIRED_SCOPES)
    assert handle.token_path.read_text() == '{"token": "abc"}'


def test_reset_forgets_credential(handle, monkeypatch):
    monkeypatch.setattr(handle, "_load_stored_token", lambda: MagicMock())
    handle.authorize()

    handle.reset()

    assert handle.is_authorized() is False


def test_from_config_uses_env_paths(tmp_path, monkeypatch):
    monkeypatch.setenv("CREDENTIALS_PATH", str(tmp_path / "client.json"))
    monkeypatch.setenv("TOKEN_PATH", str(tmp_path / "tok.json"))

    handle = CredentialHandle.from_config()

    assert handle.credentials_path == tmp_path / "client.json"
    assert handle.token_path == tmp_path / "tok.json"
    assert handle.interactive is True


def test_malformed_token_falls_back_to_flow(handle, monkeypatch):
    handle.token_path.write_text("not json")
    creds = MagicMock()
    monkeypatch.setattr(handle, "_run_flow", lambda: creds)

    assert handle.authorize() is creds


def test_force_skips_stored_token(handle, monkeypatch):
    stored, fresh = MagicMock(), MagicMock()
    monkeypatch.setattr(handle, "_load_stored_token", lambda: stored)
    monkeypatch.setattr(handle, "_run_flow", lambda: fresh)
    assert handle.authorize() is stored

    assert handle.authorize(force=True) is fresh
    assert handle.authorize() is fresh

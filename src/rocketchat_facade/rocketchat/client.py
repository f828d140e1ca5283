"""Process-wide Rocket.Chat client instances.

Lazily builds one shared httpx.AsyncClient, one CredentialStore and one
SessionManager from application settings, and hands resource clients that
share them to the API layer (as FastAPI dependencies).
"""

import httpx

from rocketchat_facade.config import get_settings
from rocketchat_facade.rocketchat.auth import SessionManager
from rocketchat_facade.rocketchat.credentials import CredentialStore
from rocketchat_facade.rocketchat.messages import MessageClient
from rocketchat_facade.rocketchat.rooms import RoomClient

_http_client: httpx.AsyncClient | None = None
_store: CredentialStore | None = None
_session_manager: SessionManager | None = None


def get_http_client() -> httpx.AsyncClient:
    """Return the cached async HTTP client, created with the configured timeout."""
    global _http_client
    if _http_client is None:
        settings = get_settings()
        _http_client = httpx.AsyncClient(
            timeout=httpx.Timeout(settings.request_timeout_seconds)
        )
    return _http_client


def get_credential_store() -> CredentialStore:
    """Return the cached credential store built from settings."""
    global _store
    if _store is None:
        _store = CredentialStore.from_settings(get_settings())
    return _store


def get_session_manager() -> SessionManager:
    """Return the cached session manager."""
    global _session_manager
    if _session_manager is None:
        _session_manager = SessionManager(get_credential_store(), get_http_client())
    return _session_manager


def get_room_client() -> RoomClient:
    """Return a room client bound to the shared store, session and HTTP client."""
    return RoomClient(get_credential_store(), get_session_manager(), get_http_client())


def get_message_client() -> MessageClient:
    """Return a message client bound to the shared store, session and HTTP client."""
    return MessageClient(get_credential_store(), get_session_manager(), get_http_client())


async def close_client() -> None:
    """Close the shared HTTP client and drop all cached instances."""
    if _http_client is not None:
        await _http_client.aclose()
    reset_client()


def reset_client() -> None:
    """Reset all cached instances. Used at shutdown and in tests."""
    global _http_client, _store, _session_manager
    _http_client = None
    _store = None
    _session_manager = None

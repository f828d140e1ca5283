"""Rocket.Chat access: session handling and resource clients."""

from rocketchat_facade.rocketchat.auth import SessionManager
from rocketchat_facade.rocketchat.client import (
    close_client,
    get_credential_store,
    get_http_client,
    get_message_client,
    get_room_client,
    get_session_manager,
    reset_client,
)
from rocketchat_facade.rocketchat.credentials import CredentialStore
from rocketchat_facade.rocketchat.endpoints import Endpoint
from rocketchat_facade.rocketchat.messages import MessageClient
from rocketchat_facade.rocketchat.rooms import RoomClient

__all__ = [
    "close_client",
    "CredentialStore",
    "Endpoint",
    "get_credential_store",
    "get_http_client",
    "get_message_client",
    "get_room_client",
    "get_session_manager",
    "MessageClient",
    "reset_client",
    "RoomClient",
    "SessionManager",
]

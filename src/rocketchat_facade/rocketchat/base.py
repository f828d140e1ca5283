"""Base class for resource clients: authenticate, then call."""

import logging
from typing import Any

import httpx

from rocketchat_facade.errors import RocketChatError
from rocketchat_facade.rocketchat.auth import SessionManager
from rocketchat_facade.rocketchat.credentials import CredentialStore
from rocketchat_facade.rocketchat.endpoints import Endpoint
from rocketchat_facade.rocketchat.transport import request_json

logger = logging.getLogger(__name__)


class ResourceClient:
    """Wraps one family of upstream endpoints behind the session guard.

    Every call first ensures a session exists (logging in if needed; a failed
    login propagates as AuthenticationError), then sends the request with the
    session headers read from the store at that moment. A 401 on the call
    itself is not retried; it surfaces as the operation's own error.
    """

    def __init__(
        self, store: CredentialStore, session: SessionManager, http: httpx.AsyncClient
    ) -> None:
        self._store = store
        self._session = session
        self._http = http

    async def _call(
        self,
        method: str,
        endpoint: Endpoint,
        *segments: str,
        error_cls: type[RocketChatError],
        action: str,
        **kwargs: Any,
    ) -> dict:
        await self._session.ensure_authenticated()
        return await request_json(
            self._http,
            method,
            self._store.url(endpoint, *segments),
            error_cls=error_cls,
            action=action,
            headers=self._store.auth_headers(),
            **kwargs,
        )

    @staticmethod
    def _require(
        payload: dict,
        key: str,
        expected: type,
        error_cls: type[RocketChatError],
        action: str,
    ) -> Any:
        """Return ``payload[key]``, raising error_cls if absent or of the wrong type."""
        value = payload.get(key)
        if key not in payload or not isinstance(value, expected):
            logger.error("Failed to %s: %s", action, payload)
            raise error_cls(f"Failed to {action}: response has no '{key}'", response=payload)
        return value

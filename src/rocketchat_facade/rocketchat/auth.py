"""Session manager: the login exchange and the authenticated-session guard."""

import logging

import httpx
from pydantic import ValidationError

from rocketchat_facade.errors import AuthenticationError
from rocketchat_facade.models.auth import AuthResult
from rocketchat_facade.rocketchat.credentials import CredentialStore
from rocketchat_facade.rocketchat.endpoints import Endpoint
from rocketchat_facade.rocketchat.transport import request_json

logger = logging.getLogger(__name__)


class SessionManager:
    """Logs in to Rocket.Chat and keeps the credential store's session current.

    There is no expiry tracking or refresh loop: a session is considered
    valid until the process restarts or ``login()`` runs again. Concurrent
    callers that find no session may each log in; redundant logins are
    harmless since the last one wins.
    """

    def __init__(self, store: CredentialStore, http: httpx.AsyncClient) -> None:
        self.store = store
        self._http = http

    def is_authenticated(self) -> bool:
        """True iff a non-empty token and user id are cached. No network I/O."""
        return self.store.has_session()

    async def login(self) -> AuthResult:
        """Exchange the configured username/password for a session.

        Overwrites any cached session on success. Raises AuthenticationError on
        transport failure, non-2xx, or a payload without ``data.authToken`` and
        ``data.userId``. Never retries.
        """
        logger.debug("Authenticating with Rocket.Chat API at %s", self.store.base_url)
        payload = await request_json(
            self._http,
            "POST",
            self.store.url(Endpoint.LOGIN),
            error_cls=AuthenticationError,
            action="authenticate with Rocket.Chat",
            json={"username": self.store.username, "password": self.store.password},
        )

        try:
            result = AuthResult.model_validate(payload)
        except ValidationError as exc:
            logger.error("Login response missing session fields: %s", exc)
            raise AuthenticationError(
                "Failed to authenticate with Rocket.Chat: response has no authToken/userId",
                response=payload,
            ) from exc

        self.store.set_session(result.auth_token, result.user_id)
        logger.info("Authenticated with Rocket.Chat as user %s", result.user_id)
        return result

    async def ensure_authenticated(self) -> None:
        """Log in only when no session is cached."""
        if not self.is_authenticated():
            await self.login()

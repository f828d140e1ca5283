"""Credential store: upstream location, login credentials and the cached session."""

from urllib.parse import quote

from rocketchat_facade.config import Settings
from rocketchat_facade.rocketchat.endpoints import Endpoint


class CredentialStore:
    """Holds the base URL, login credentials and the current session.

    One instance is shared by the session manager and every resource client.
    The session (token + user id) is overwritten by each login with no
    locking: two concurrent logins both succeed and the last write wins.
    Callers re-read the session immediately before each upstream call.
    """

    def __init__(self, base_url: str, username: str, password: str) -> None:
        self.base_url = base_url.rstrip("/")
        self.username = username
        self.password = password
        self.auth_token: str | None = None
        self.user_id: str | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "CredentialStore":
        return cls(
            base_url=settings.rocketchat_url,
            username=settings.rocketchat_user,
            password=settings.rocketchat_password,
        )

    def has_session(self) -> bool:
        """True iff both the token and the user id are non-empty."""
        return bool(self.auth_token) and bool(self.user_id)

    def set_session(self, auth_token: str, user_id: str) -> None:
        self.auth_token = auth_token
        self.user_id = user_id

    def auth_headers(self) -> dict[str, str]:
        """Session headers sent on every authenticated call."""
        return {
            "X-Auth-Token": self.auth_token or "",
            "X-User-Id": self.user_id or "",
        }

    def url(self, endpoint: Endpoint, *segments: str) -> str:
        """Absolute URL for an endpoint, with optional path segments appended."""
        path = endpoint.value
        for segment in segments:
            path += "/" + quote(segment, safe="")
        return self.base_url + path

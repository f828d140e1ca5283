"""Shared test fixtures."""

import httpx
import pytest
from fastapi.testclient import TestClient

from rocketchat_facade.app import app
from rocketchat_facade.rocketchat.auth import SessionManager
from rocketchat_facade.rocketchat.credentials import CredentialStore
from rocketchat_facade.rocketchat.messages import MessageClient
from rocketchat_facade.rocketchat.rooms import RoomClient

BASE_URL = "https://chat.example.com/api/v1"

LOGIN_RESPONSE = {
    "status": "success",
    "data": {
        "authToken": "token-abc",
        "userId": "U-bot",
        "me": {
            "_id": "U-bot",
            "username": "facade-bot",
            "name": "Facade Bot",
            "emails": [{"address": "bot@example.com", "verified": True}],
        },
    },
}


class FakeRocketChat:
    """In-memory upstream: canned responses per (method, path), requests recorded.

    Paths are relative to BASE_URL, e.g. ("GET", "/channels.list").
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], httpx.Response | Exception] = {}
        self.requests: list[httpx.Request] = []

    def respond(
        self,
        method: str,
        path: str,
        json=None,
        status_code: int = 200,
        text: str | None = None,
    ) -> None:
        if text is not None:
            response = httpx.Response(status_code, text=text)
        else:
            response = httpx.Response(status_code, json=json)
        self.routes[(method, path)] = response

    def fail(self, method: str, path: str, exc: Exception) -> None:
        self.routes[(method, path)] = exc

    def calls(self, method: str, path: str) -> list[httpx.Request]:
        return [
            r for r in self.requests if r.method == method and self._path(r) == path
        ]

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, self._path(request)))
        if route is None:
            return httpx.Response(404, json={"success": False, "error": "Not found"})
        if isinstance(route, Exception):
            raise route
        return route

    @staticmethod
    def _path(request: httpx.Request) -> str:
        return request.url.path.removeprefix("/api/v1")


@pytest.fixture(scope="session")
def client() -> TestClient:
    """Create a TestClient for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def upstream() -> FakeRocketChat:
    """Fake upstream that accepts the configured login."""
    fake = FakeRocketChat()
    fake.respond("POST", "/login", json=LOGIN_RESPONSE)
    return fake


@pytest.fixture
async def http(upstream: FakeRocketChat):
    async with httpx.AsyncClient(transport=httpx.MockTransport(upstream.handle)) as http_client:
        yield http_client


@pytest.fixture
def store() -> CredentialStore:
    return CredentialStore(BASE_URL, "facade-bot", "s3cret")


@pytest.fixture
def session(store: CredentialStore, http: httpx.AsyncClient) -> SessionManager:
    return SessionManager(store, http)


@pytest.fixture
def rooms(store: CredentialStore, session: SessionManager, http: httpx.AsyncClient) -> RoomClient:
    return RoomClient(store, session, http)


@pytest.fixture
def messages(
    store: CredentialStore, session: SessionManager, http: httpx.AsyncClient
) -> MessageClient:
    return MessageClient(store, session, http)

"""Error taxonomy for Rocket.Chat operations.

Every resource client operation either returns a fully populated entity or
raises one of these. Each error keeps the upstream context that caused it:
the decoded response body when there was one, and the transport exception
as ``__cause__`` when the call itself failed.
"""

from typing import Any


class RocketChatError(Exception):
    """Base class for failures talking to the Rocket.Chat API."""

    status_code: int = 502

    def __init__(self, detail: str, response: Any = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.response = response


class AuthenticationError(RocketChatError):
    """Login was rejected, unreachable, or returned an unusable payload."""

    status_code = 401


class ChannelListError(RocketChatError):
    """Listing public channels failed."""


class ChannelCreateError(RocketChatError):
    """Creating a channel failed (e.g. the name is already taken)."""


class ChannelInfoError(RocketChatError):
    """Fetching channel info failed."""


class MessageSendError(RocketChatError):
    """Posting a plain message failed."""


class MessageUploadError(RocketChatError):
    """Uploading a file message failed."""


class MessageListError(RocketChatError):
    """Listing the messages of a room failed."""


class SearchError(RocketChatError):
    """Searching messages failed."""

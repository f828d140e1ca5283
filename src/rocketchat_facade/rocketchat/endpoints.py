"""Rocket.Chat REST endpoint paths, relative to the configured base URL."""

from enum import Enum


class Endpoint(str, Enum):
    """Upstream endpoints used by the facade."""

    LOGIN = "/login"
    CHANNELS_LIST = "/channels.list"
    CHANNELS_CREATE = "/channels.create"
    CHANNELS_INFO = "/channels.info"
    CHANNELS_MESSAGES = "/channels.messages"
    CHAT_SEARCH = "/chat.search"
    CHAT_POST_MESSAGE = "/chat.postMessage"
    ROOMS_UPLOAD = "/rooms.upload"  # Followed by /{roomId}

"""Entity models for the Rocket.Chat facade."""

from rocketchat_facade.models.auth import AuthenticatedUser, AuthResult
from rocketchat_facade.models.message import Attachment, FileUpload, Message, MessageAuthor
from rocketchat_facade.models.room import Room, RoomCreator

__all__ = [
    "Attachment",
    "AuthenticatedUser",
    "AuthResult",
    "FileUpload",
    "Message",
    "MessageAuthor",
    "Room",
    "RoomCreator",
]

"""Message models translated from Rocket.Chat message payloads."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from rocketchat_facade.models.fields import Flag, NullableList, Timestamp


class MessageAuthor(BaseModel):
    """The user who posted a message."""

    model_config = ConfigDict(populate_by_name=True)

    id: str | None = Field(default=None, validation_alias="_id")
    username: str | None = None
    name: str | None = None  # Display name


class Attachment(BaseModel):
    """A file or rich attachment on a message."""

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = None
    type: str | None = None  # e.g., "file"
    description: str | None = None
    link: str | None = Field(default=None, validation_alias="title_link")
    link_is_download: Flag = Field(default=False, validation_alias="title_link_download")
    image_url: str | None = None
    image_type: str | None = None  # MIME type, e.g. "image/png"
    image_size_bytes: int | None = Field(default=None, validation_alias="image_size")


class Message(BaseModel):
    """A Rocket.Chat message. Immutable once translated."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str | None = Field(default=None, validation_alias="_id")
    room_id: str | None = Field(default=None, validation_alias="rid")
    body: str | None = Field(default=None, validation_alias="msg")
    timestamp: Timestamp | None = Field(default=None, validation_alias="ts")
    author: MessageAuthor | None = Field(default=None, validation_alias="u")
    attachments: Annotated[list[Attachment], NullableList] = Field(default_factory=list)

    @classmethod
    def from_api(cls, payload: dict) -> "Message":
        """Translate an upstream message object into a Message."""
        return cls.model_validate(payload)


class FileUpload(BaseModel):
    """A file to attach to an outgoing message."""

    filename: str
    content: bytes
    content_type: str = "application/octet-stream"

"""Message client: send, upload, list and search messages."""

import logging

from rocketchat_facade.errors import (
    MessageListError,
    MessageSendError,
    MessageUploadError,
    SearchError,
)
from rocketchat_facade.models.message import FileUpload, Message
from rocketchat_facade.rocketchat.base import ResourceClient
from rocketchat_facade.rocketchat.endpoints import Endpoint

logger = logging.getLogger(__name__)

DEFAULT_MESSAGE_LIMIT = 50


class MessageClient(ResourceClient):
    """Message operations. Each upstream message object becomes a ``Message``."""

    async def send_message(self, room_id: str, text: str) -> Message:
        """Post a plain text message to a room."""
        logger.debug("Sending message to room %s", room_id)
        payload = await self._call(
            "POST",
            Endpoint.CHAT_POST_MESSAGE,
            error_cls=MessageSendError,
            action="send message",
            json={"roomId": room_id, "text": text},
        )
        message = self._require(payload, "message", dict, MessageSendError, "send message")
        return Message.from_api(message)

    async def send_message_with_attachment(
        self, room_id: str, text: str, files: list[FileUpload] | None
    ) -> Message:
        """Post a message with a file attached.

        Rocket.Chat's upload endpoint takes one file per multipart request, so
        only the first file is sent and the rest are dropped. With no files
        this is a plain ``send_message``.
        """
        if not files:
            return await self.send_message(room_id, text)

        logger.debug("Sending message with %d file(s) to room %s", len(files), room_id)
        if len(files) > 1:
            logger.debug(
                "Upload accepts one file; dropping %d extra file(s) for room %s",
                len(files) - 1,
                room_id,
            )
        upload = files[0]

        payload = await self._call(
            "POST",
            Endpoint.ROOMS_UPLOAD,
            room_id,
            error_cls=MessageUploadError,
            action="upload file",
            data={"msg": text, "roomId": room_id},
            files={"file": (upload.filename, upload.content, upload.content_type)},
        )
        if payload.get("success") is not True:
            logger.error("Failed to upload file: %s", payload)
            raise MessageUploadError("Failed to upload file", response=payload)
        message = self._require(payload, "message", dict, MessageUploadError, "upload file")
        logger.debug("File %s uploaded to room %s", upload.filename, room_id)
        return Message.from_api(message)

    async def get_messages(
        self, room_id: str, limit: int = DEFAULT_MESSAGE_LIMIT
    ) -> list[Message]:
        """Return up to ``limit`` messages from a room, in upstream order."""
        logger.debug("Getting messages from room %s", room_id)
        payload = await self._call(
            "GET",
            Endpoint.CHANNELS_MESSAGES,
            error_cls=MessageListError,
            action="retrieve messages",
            params={"roomId": room_id, "count": limit},
        )
        messages = self._require(
            payload, "messages", list, MessageListError, "retrieve messages"
        )
        logger.debug("Retrieved %d messages", len(messages))
        return [Message.from_api(message) for message in messages]

    async def search_messages(
        self, search_text: str, room_id: str | None = None
    ) -> list[Message]:
        """Search message text, in one room or (room_id=None) across all rooms."""
        params = {"searchText": search_text}
        if room_id is None:
            logger.debug("Searching for messages containing: %s in all rooms", search_text)
        else:
            logger.debug(
                "Searching for messages containing: %s in room: %s", search_text, room_id
            )
            params["roomId"] = room_id

        payload = await self._call(
            "GET",
            Endpoint.CHAT_SEARCH,
            error_cls=SearchError,
            action="search messages",
            params=params,
        )
        messages = self._require(payload, "messages", list, SearchError, "search messages")
        logger.debug("Found %d messages matching search criteria", len(messages))
        return [Message.from_api(message) for message in messages]

"""Facade endpoints over the Rocket.Chat resource clients.

Thin pass-through: each route calls one client operation and returns its
entity. Client errors propagate to the exception handlers in ``app.py``,
except on /login, which reports failure in its own body.
"""

import logging

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from fastapi.responses import JSONResponse

from rocketchat_facade.api.schemas import MessageRequest, StatusResponse
from rocketchat_facade.errors import AuthenticationError
from rocketchat_facade.models.message import FileUpload, Message
from rocketchat_facade.models.room import Room
from rocketchat_facade.rocketchat.auth import SessionManager
from rocketchat_facade.rocketchat.client import (
    get_message_client,
    get_room_client,
    get_session_manager,
)
from rocketchat_facade.rocketchat.messages import DEFAULT_MESSAGE_LIMIT, MessageClient
from rocketchat_facade.rocketchat.rooms import RoomClient

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/rocketchat", tags=["rocketchat"])


@router.post("/login", response_model=StatusResponse)
async def login(session: SessionManager = Depends(get_session_manager)):
    """Force a fresh login with the configured credentials."""
    try:
        await session.login()
    except AuthenticationError as exc:
        logger.error("Login trigger failed: %s", exc.detail)
        return JSONResponse(
            status_code=400,
            content={
                "status": "error",
                "message": exc.detail,
            },
        )
    logger.info("Successfully authenticated with Rocket.Chat")
    return StatusResponse(
        status="success", message="Successfully authenticated with Rocket.Chat"
    )


@router.get("/channels", response_model=list[Room])
async def list_channels(rooms: RoomClient = Depends(get_room_client)):
    return await rooms.list_public_channels()


@router.get("/channels/{room_id}", response_model=Room)
async def get_channel_info(room_id: str, rooms: RoomClient = Depends(get_room_client)):
    return await rooms.get_channel_info(room_id)


@router.post("/channels", response_model=Room)
async def create_channel(
    name: str = Query(min_length=1, pattern=r"\S"),
    members: list[str] | None = Query(default=None),
    read_only: bool = False,
    description: str | None = None,
    rooms: RoomClient = Depends(get_room_client),
):
    """Create a public channel. ``members`` may be repeated (?members=a&members=b)."""
    return await rooms.create_channel(name, members or [], read_only, description)


@router.get("/channels/{room_id}/messages", response_model=list[Message])
async def get_messages(
    room_id: str,
    limit: int = Query(default=DEFAULT_MESSAGE_LIMIT, ge=1),
    messages: MessageClient = Depends(get_message_client),
):
    return await messages.get_messages(room_id, limit)


@router.post("/channels/{room_id}/messages", response_model=Message)
async def send_message(
    room_id: str,
    request: MessageRequest,
    messages: MessageClient = Depends(get_message_client),
):
    return await messages.send_message(room_id, request.message)


@router.post("/channels/{room_id}/uploads", response_model=Message)
async def upload_message(
    room_id: str,
    files: list[UploadFile] = File(...),
    message: str = Form(""),
    messages: MessageClient = Depends(get_message_client),
):
    """Send a message with a file. Only the first uploaded file is forwarded."""
    uploads = [
        FileUpload(
            filename=upload.filename or "upload",
            content=await upload.read(),
            content_type=upload.content_type or "application/octet-stream",
        )
        for upload in files
    ]
    return await messages.send_message_with_attachment(room_id, message, uploads)


@router.get("/messages/search", response_model=list[Message])
async def search_messages(
    search_text: str = Query(min_length=1),
    room_id: str | None = None,
    messages: MessageClient = Depends(get_message_client),
):
    """Search all rooms, or a single room when ``room_id`` is given."""
    return await messages.search_messages(search_text, room_id)

"""Request and response bodies of the facade API."""

from pydantic import BaseModel, Field


class MessageRequest(BaseModel):
    """Body of POST /channels/{room_id}/messages."""

    message: str = Field(min_length=1, pattern=r"\S")  # Not blank


class StatusResponse(BaseModel):
    """Outcome of the login trigger."""

    status: str  # "success" or "error"
    message: str

"""Room (channel) model translated from Rocket.Chat room payloads."""

from pydantic import BaseModel, ConfigDict, Field

from rocketchat_facade.models.fields import Flag, Timestamp


class RoomCreator(BaseModel):
    """The user who created a room."""

    model_config = ConfigDict(populate_by_name=True)

    id: str | None = Field(default=None, validation_alias="_id")
    username: str | None = None


class Room(BaseModel):
    """A Rocket.Chat room.

    Built from the upstream payload by ``Room.from_api``. Keys absent from the
    payload leave the field at its default; a present but unparsable ``ts`` or
    ``_updatedAt`` raises ``pydantic.ValidationError``.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str | None = Field(default=None, validation_alias="_id")
    name: str | None = None
    kind: str | None = Field(default=None, validation_alias="t")  # c: channel, d: direct, p: private group
    creator: RoomCreator | None = Field(default=None, validation_alias="u")
    topic: str | None = None
    description: str | None = None
    read_only: Flag = Field(default=False, validation_alias="ro")
    is_default: Flag = Field(default=False, validation_alias="default")
    created_at: Timestamp | None = Field(default=None, validation_alias="ts")
    updated_at: Timestamp | None = Field(default=None, validation_alias="_updatedAt")

    @classmethod
    def from_api(cls, payload: dict) -> "Room":
        """Translate an upstream room object into a Room."""
        return cls.model_validate(payload)

"""Room client: list, create and inspect public channels."""

import logging

from rocketchat_facade.errors import ChannelCreateError, ChannelInfoError, ChannelListError
from rocketchat_facade.models.room import Room
from rocketchat_facade.rocketchat.base import ResourceClient
from rocketchat_facade.rocketchat.endpoints import Endpoint

logger = logging.getLogger(__name__)


class RoomClient(ResourceClient):
    """Channel operations. Each upstream room object becomes a ``Room``."""

    async def list_public_channels(self) -> list[Room]:
        """Return all public channels visible to the logged-in user."""
        logger.debug("Getting public channels")
        payload = await self._call(
            "GET",
            Endpoint.CHANNELS_LIST,
            error_cls=ChannelListError,
            action="retrieve channels",
        )
        channels = self._require(
            payload, "channels", list, ChannelListError, "retrieve channels"
        )
        logger.debug("Retrieved %s channels", payload.get("count", len(channels)))
        return [Room.from_api(channel) for channel in channels]

    async def create_channel(
        self,
        name: str,
        members: list[str] | None = None,
        read_only: bool = False,
        description: str | None = None,
    ) -> Room:
        """Create a public channel.

        ``description`` is only sent when non-empty. A name collision upstream
        comes back without a ``channel`` object and raises ChannelCreateError.
        """
        logger.debug("Creating channel %s", name)
        body: dict = {
            "name": name,
            "members": list(members or []),
            "readOnly": read_only,
        }
        if description:
            body["description"] = description

        payload = await self._call(
            "POST",
            Endpoint.CHANNELS_CREATE,
            error_cls=ChannelCreateError,
            action="create channel",
            json=body,
        )
        channel = self._require(payload, "channel", dict, ChannelCreateError, "create channel")
        logger.info("Created channel %s", name)
        return Room.from_api(channel)

    async def get_channel_info(self, room_id: str) -> Room:
        """Fetch a single channel by room id."""
        logger.debug("Getting info for channel %s", room_id)
        payload = await self._call(
            "GET",
            Endpoint.CHANNELS_INFO,
            error_cls=ChannelInfoError,
            action="retrieve channel info",
            params={"roomId": room_id},
        )
        channel = self._require(
            payload, "channel", dict, ChannelInfoError, "retrieve channel info"
        )
        return Room.from_api(channel)

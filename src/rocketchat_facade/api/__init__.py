"""HTTP facade: FastAPI routes over the Rocket.Chat clients."""

from rocketchat_facade.api.router import router

__all__ = ["router"]

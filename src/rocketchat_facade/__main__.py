"""Run the facade with uvicorn: ``python -m rocketchat_facade``."""

import uvicorn

from rocketchat_facade.config import get_settings


def main() -> None:
    settings = get_settings()
    # log_config=None keeps uvicorn from replacing the JSON logging set up in the lifespan
    uvicorn.run(
        "rocketchat_facade.app:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()

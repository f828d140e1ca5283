"""Structured JSON logging configuration.

Configures Python stdlib logging to emit one JSON object per line on stdout,
with ``severity``/``timestamp``/``logger`` field names that log collectors
pick up without extra parsing.

Usage:
    from rocketchat_facade.logging_config import configure_logging
    configure_logging("INFO")
"""

import copy
import logging
import logging.config

LOGGING_CONFIG: dict = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "format": "%(asctime)s %(levelname)s %(name)s %(funcName)s %(message)s",
            "rename_fields": {
                "levelname": "severity",
                "asctime": "timestamp",
                "name": "logger",
            },
            "static_fields": {
                "service": "rocketchat-facade",
            },
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json",
            "stream": "ext://sys.stdout",
        },
    },
    "loggers": {
        # httpx logs every request line at INFO, including query strings
        "httpx": {"level": "WARNING"},
    },
    "root": {
        "level": "INFO",
        "handlers": ["console"],
    },
}


def configure_logging(level: str = "INFO") -> None:
    """Apply structured JSON logging configuration.

    Call once at application startup (in the FastAPI lifespan). The root
    level comes from ``settings.log_level``; an unknown level name falls
    back to INFO.
    """
    config = copy.deepcopy(LOGGING_CONFIG)
    level_name = level.upper()
    if not isinstance(logging.getLevelName(level_name), int):
        level_name = "INFO"
    config["root"]["level"] = level_name
    logging.config.dictConfig(config)

"""Shared request helper: one upstream call, decoded to a JSON object.

Converts transport failures, non-2xx statuses and non-object bodies into the
caller's error type. Never retries.
"""

import logging
from typing import Any

import httpx

from rocketchat_facade.errors import RocketChatError

logger = logging.getLogger(__name__)


async def request_json(
    http: httpx.AsyncClient,
    method: str,
    url: str,
    *,
    error_cls: type[RocketChatError],
    action: str,
    **kwargs: Any,
) -> dict:
    """Send a request and return the decoded JSON object.

    Args:
        http: Shared async HTTP client.
        method: HTTP verb.
        url: Absolute upstream URL.
        error_cls: Error raised on any failure.
        action: Short description for log lines and error messages ("list channels").
        **kwargs: Passed through to ``httpx.AsyncClient.request``.
    """
    try:
        response = await http.request(method, url, **kwargs)
    except httpx.HTTPError as exc:
        logger.error("Error trying to %s: %s", action, exc)
        raise error_cls(f"Failed to {action}: {exc}") from exc

    body = _decode(response)

    if response.is_error:
        detail = upstream_detail(body) or response.reason_phrase
        logger.error(
            "Failed to %s (HTTP %d): %s", action, response.status_code, detail
        )
        raise error_cls(f"Failed to {action}: {detail}", response=body)

    if not isinstance(body, dict):
        logger.error("Failed to %s: response was not a JSON object", action)
        raise error_cls(
            f"Failed to {action}: response was not a JSON object", response=body
        )

    return body


def upstream_detail(body: Any) -> str | None:
    """Pull the error message Rocket.Chat puts in failed responses, if any."""
    if isinstance(body, dict):
        for key in ("error", "message", "reason"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    return None


def _decode(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text

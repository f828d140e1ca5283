"""Annotated field types shared by the upstream payload models."""

import re
from datetime import datetime
from typing import Annotated

from pydantic import AwareDatetime, BeforeValidator

# Date, "T", time, then "Z" or a numeric offset, e.g. 2024-01-01T00:00:00.123Z
_ISO_INSTANT = re.compile(
    r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}(:\d{2}(\.\d+)?)?(Z|[+-]\d{2}:?\d{2})$"
)


def _require_iso_instant(value):
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not _ISO_INSTANT.match(value):
        raise ValueError(f"expected an ISO-8601 timestamp with offset, got {value!r}")
    return value


def _null_as_false(value):
    return False if value is None else value


def _null_as_empty(value):
    return [] if value is None else value


# Present timestamps must be ISO-8601 strings with Z or an offset; numbers,
# date-only and offset-less strings are rejected.
Timestamp = Annotated[AwareDatetime, BeforeValidator(_require_iso_instant)]

# Upstream sometimes sends null for flags and lists; null reads as absent.
Flag = Annotated[bool, BeforeValidator(_null_as_false)]
NullableList = BeforeValidator(_null_as_empty)

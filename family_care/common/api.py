from __future__ import annotations

import re
from typing import Any

from rest_framework import serializers
from rest_framework.request import Request

from .exceptions import ApiError

_LEADING_INT = re.compile(r"\s*(\d+)")

# Largest value an INTEGER column accepts (signed 64-bit).
MAX_DB_INT = 2**63 - 1


def request_payload(request: Request) -> dict[str, Any]:
    """Return the request body as a mapping; anything else counts as empty."""
    data = request.data
    if isinstance(data, dict):
        return data
    return {}


def validate_or_raise(
    serializer_class: type[serializers.Serializer],
    data: dict[str, Any],
    *,
    error_code: str,
) -> dict[str, Any]:
    """Validate ``data`` and collapse any field error into one ``error_code``."""
    serializer = serializer_class(data=data)
    if not serializer.is_valid():
        raise ApiError(error_code)
    return serializer.validated_data


def fits_db_integer(value: float) -> bool:
    return -MAX_DB_INT <= value <= MAX_DB_INT


def parse_positive_int(value: object) -> int | None:
    """Leading-integer parse of an id.

    ``None`` unless the result is positive and small enough to store.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        parsed = value
    else:
        match = _LEADING_INT.match(str(value or ""))
        if match is None:
            return None
        parsed = int(match.group(1))
    return parsed if 0 < parsed <= MAX_DB_INT else None

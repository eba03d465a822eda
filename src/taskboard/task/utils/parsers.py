"""Parsers for raw request values."""

import math
from datetime import UTC, datetime
from typing import Any

__all__ = ["parse_numeric_id", "parse_timestamp"]


def parse_numeric_id(value: Any) -> int | float | None:  # noqa: ANN401
    """Coerce a raw identifier into a number.

    Numeric strings are accepted with surrounding whitespace. Negative numbers,
    zero and fractional values are syntactically valid identifiers; whether a
    row exists for them is left to the lookup.

    Args:
        value: Raw value from a path segment, query string or JSON body.

    Returns:
        The integer or float value, or None if the value is not numeric.
    """
    if isinstance(value, bool):
        return None

    if isinstance(value, int):
        return value

    if isinstance(value, float):
        if math.isnan(value):
            return None
        return int(value) if value.is_integer() else value

    if not isinstance(value, str):
        return None

    text = value.strip()
    try:
        return int(text)
    except ValueError:
        pass

    try:
        number = float(text)
    except ValueError:
        return None

    if math.isnan(number):
        return None
    return int(number) if number.is_integer() else number


def parse_timestamp(value: str) -> datetime | None:
    """Parse an ISO-8601 date or timestamp.

    Naive values are interpreted as UTC. The result is always UTC.

    Args:
        value: Date (``2024-05-01``) or timestamp (``2024-05-01T10:00:00Z``).

    Returns:
        The parsed timestamp, or None if the value cannot be parsed.
    """
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)

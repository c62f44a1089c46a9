"""
Date scalar coercion.

External callers send calendar dates in loose formats ("3/23/2020",
"2020-03-23", "March 23, 2020", full ISO-8601 date-times). Internally every
date is held in one canonical form, an ISO-8601 UTC date-time with
millisecond precision::

    2020-03-23T00:00:00.000Z

On output only the date portion (the first 10 characters) is shown.

The three functions here are pure and are wired into the GraphQL ``Date``
scalar by :mod:`orderdesk.graphql.types.scalars`.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from graphql import StringValueNode, ValueNode

from .errors import ScalarFormatError

# Tried in order before falling back to ISO-8601 parsing.
DATE_FORMATS = (
    "%m/%d/%Y",
    "%m-%d-%Y",
    "%Y-%m-%d",
    "%Y/%m/%d",
    "%B %d, %Y",
    "%b %d, %Y",
    "%d %B %Y",
    "%d %b %Y",
)

DISPLAY_LENGTH = len("YYYY-MM-DD")


def to_canonical(value: datetime) -> str:
    """Render a datetime in canonical form, converting aware values to UTC.

    Raises:
        OverflowError: If the UTC equivalent falls outside the datetime range.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    else:
        value = value.astimezone(UTC)
    # year always rendered with four digits
    return value.replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"


def _parse_datetime(text: str) -> datetime | None:
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def parse_input(value: Any) -> str:
    """Convert an externally supplied date into canonical form.

    Raises:
        ScalarFormatError: If the value is not a string or is not a
            recognizable calendar date, or its UTC equivalent falls outside
            the representable range.
    """
    if not isinstance(value, str):
        raise ScalarFormatError(
            f"Date must be a string, got {type(value).__name__}", value=value
        )

    text = value.strip()
    if not text:
        raise ScalarFormatError("Date must not be empty", value=value)

    parsed = _parse_datetime(text)
    if parsed is None:
        raise ScalarFormatError(f"Unrecognized date: {value!r}", value=value)

    try:
        return to_canonical(parsed)
    except OverflowError as e:
        raise ScalarFormatError(f"Date out of range: {value!r}", value=value) from e


def parse_literal(node: ValueNode | str, variables: dict[str, Any] | None = None) -> str:
    """Convert an inline document literal into canonical form.

    Only string literals are dates; anything else is rejected. The actual
    parsing is shared with :func:`parse_input` so a literal and a bound
    variable holding the same text always coerce identically.
    """
    _ = variables

    if isinstance(node, StringValueNode):
        return parse_input(node.value)
    if isinstance(node, str):
        return parse_input(node)

    kind = getattr(node, "kind", type(node).__name__)
    raise ScalarFormatError(f"Date literal must be a string, got {kind}", value=node)


def serialize_output(value: Any) -> str:
    """Render a canonical date for display (date portion only)."""
    if not isinstance(value, str):
        raise ScalarFormatError(
            f"Cannot serialize {type(value).__name__} as Date", value=value
        )
    return value[:DISPLAY_LENGTH]

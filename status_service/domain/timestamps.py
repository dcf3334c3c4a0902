"""Shared timestamp formatting helpers."""

from __future__ import annotations

from datetime import datetime, timezone


def domain_format_timestamp(moment: datetime) -> str:
    """Render one instant as an RFC3339 UTC timestamp with millisecond precision.

    Args:
        moment: Timezone-aware instant. Naive values are treated as UTC.

    Returns:
        str: Timestamp such as `2026-10-17T09:30:00.123Z`.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    rendered = moment.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return rendered.replace("+00:00", "Z")

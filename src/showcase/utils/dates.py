from __future__ import annotations

from datetime import datetime
from typing import Optional

from dateutil.parser import isoparse


def format_display_date(value: Optional[str]) -> str:
    """Format an ISO-8601 timestamp as ``DD/MM/YYYY``; ``""`` when empty or unparsable."""

    if not value:
        return ""
    try:
        parsed: datetime = isoparse(str(value))
    except (ValueError, TypeError, OverflowError):
        return ""
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone()
    return parsed.strftime("%d/%m/%Y")

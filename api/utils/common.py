"""
Common utility functions used across multiple routes.
"""

from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    """Naive UTC now, matching the DateTime columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def iso_format(dt: datetime) -> str:
    """Format datetime as ISO string with Z suffix. Aware values are converted to UTC first."""
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc).replace(tzinfo=None)
    return dt.isoformat() + "Z"


def iso_or_none(dt: Optional[datetime]) -> Optional[str]:
    return iso_format(dt) if dt is not None else None


def missing_fields(values: dict, required: tuple[str, ...]) -> list[str]:
    """Names in `required` whose value is None, not a string, or blank."""
    return [
        name
        for name in required
        if not isinstance(values.get(name), str) or not values[name].strip()
    ]

"""
Core prompt builder: template-based prompt construction for use by the app.
The app defines template strings and passes kwargs; the library fills them.
"""

from __future__ import annotations

from typing import Any, Iterable


class _SafeFormatDict(dict):
    """Mapping that returns empty string for missing keys (for str.format_map)."""

    def __missing__(self, key: str) -> str:
        return ""


def build_from_template(template: str, **kwargs: Any) -> str:
    """
    Fill a template with the given keyword arguments.
    Missing keys are replaced with empty string.
    """
    if not template:
        return ""
    safe = {k: ("" if v is None else v) for k, v in kwargs.items()}
    return template.format_map(_SafeFormatDict(safe))


def numbered_list(items: Iterable[str], start: int = 1) -> str:
    """Render items as `1. a\\n2. b` lines."""
    return "\n".join(f"{i}. {item}" for i, item in enumerate(items, start=start))

from __future__ import annotations

import re
from datetime import datetime
from typing import Iterable, Optional

LEADING_INTEGER = re.compile(r"\s*([+-]?[0-9]+)")


def parse_id(value: Optional[str]) -> Optional[int]:
    """Read the leading integer of ``value`` (``"12abc"`` is 12); None if there is none."""
    if value is None:
        return None
    match = LEADING_INTEGER.match(value)
    if match is None:
        return None
    return int(match.group(1))


def format_long_date(value: Optional[datetime]) -> str:
    """Render a date as e.g. ``June 1, 2024``; empty when unknown."""
    if value is None:
        return ""
    return f"{value:%B} {value.day}, {value.year}"


def join_values(values: Iterable[object], separator: str = ", ") -> str:
    return separator.join(str(value) for value in values)


def photo_label(count: int) -> str:
    return "photo" if count == 1 else "photos"

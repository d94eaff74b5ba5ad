"""Mini README: Month filter helpers for Pennywise.

The month filter travels as a ``YYYY-MM`` string through forms, query
strings and storage. Parsing lives here so the projector and the
application state validate it the same way without importing the web stack.
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

_MONTH_PATTERN = re.compile(r"^\s*(\d{4})-(\d{1,2})\s*$")


def parse_month(value: str) -> Tuple[int, int]:
    """Validate a ``YYYY-MM`` string and return ``(year, month)``."""

    match = _MONTH_PATTERN.match(value or "")
    if not match:
        raise ValueError(f"Month filter '{value}' must use the YYYY-MM format")
    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        raise ValueError(f"Month filter '{value}' has an invalid month")
    return year, month


def normalise_month(value: Optional[str]) -> str:
    """Return ``value`` as a canonical ``YYYY-MM`` string, or ``""`` when blank."""

    if value is None or not value.strip():
        return ""
    year, month = parse_month(value)
    return f"{year:04d}-{month:02d}"

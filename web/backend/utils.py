#!/usr/bin/env python3
"""
Utility functions for the web application.
"""

import re
from typing import Optional
from datetime import datetime


def slugify(text: str) -> str:
    """
    Turn a display name into an id-friendly slug.

    Args:
        text: Display name, e.g. "Full-time Employment Contract".

    Returns:
        Lowercase slug, e.g. "full-time-employment-contract".
    """
    slug = re.sub(r"[^\w\s-]", "", (text or "").lower())
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip("-")


def safe_datetime_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Safely convert datetime to ISO format string.

    Args:
        dt: Datetime object.

    Returns:
        ISO format string or None.
    """
    if dt is None:
        return None
    return dt.isoformat()

"""Transaction id and display date generation."""

from __future__ import annotations
from datetime import datetime, timezone
from typing import Optional


def generate_transaction_id(now: Optional[datetime] = None) -> str:
    """
    Build a transaction id from the creation timestamp.
    
    Examples:
        2026-10-19 09:05:03.123456 UTC -> '2026-10-19T09:05:03.123Z'
    """
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def format_display_date(now: Optional[datetime] = None) -> str:
    """
    Format a creation date the en-IN way (day/month/year, no padding).
    
    Examples:
        2026-01-05 -> '5/1/2026'
    """
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is not None:
        now = now.astimezone()
    return f"{now.day}/{now.month}/{now.year}"

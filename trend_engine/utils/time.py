"""
Time helpers for bucketing series timestamps onto timeframe boundaries.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def ensure_utc(ts: datetime) -> datetime:
    """
    Return a timezone-aware datetime, treating naive values as UTC.

    Args:
        ts: Timestamp to normalize

    Returns:
        Aware datetime (unchanged if it already carries tzinfo)
    """
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts


def floor_to_interval(ts: datetime, interval_minutes: int) -> datetime:
    """
    Align a timestamp to the start of its interval bucket.

    Buckets are multiples of ``interval_minutes`` counted from the Unix epoch,
    so 5m buckets start at :00, :05, :10 and 1d buckets at midnight UTC.

    Args:
        ts: Timestamp to align
        interval_minutes: Bucket width in minutes

    Returns:
        Bucket start in the timezone of ``ts``; naive in, naive (UTC) out
    """
    aware = ensure_utc(ts)
    interval = timedelta(minutes=interval_minutes)
    elapsed = aware - EPOCH
    bucket_start = EPOCH + (elapsed // interval) * interval
    if ts.tzinfo is None:
        return bucket_start.replace(tzinfo=None)
    return bucket_start.astimezone(ts.tzinfo)


def is_strictly_ascending(timestamps: list[datetime]) -> Optional[int]:
    """
    Find the first position where a timestamp sequence stops strictly ascending.

    Args:
        timestamps: Timestamps in series order

    Returns:
        Index of the first offending element, or None if strictly ascending
    """
    for i in range(1, len(timestamps)):
        if timestamps[i] <= timestamps[i - 1]:
            return i
    return None


def format_timestamp(ts: Optional[datetime]) -> Optional[str]:
    """
    Format a timestamp for serialized results and logging.

    Args:
        ts: Timestamp to format

    Returns:
        ISO8601 string, or None when no timestamp is present
    """
    return ts.isoformat() if ts is not None else None

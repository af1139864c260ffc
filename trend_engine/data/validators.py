"""
Series validation shared by every indicator.

Checks run in a fixed order: presence and length first, then timestamp
ordering, so the same bad input always produces the same error kind.
"""

from typing import Optional, Sequence

from ..errors import InsufficientDataError, UnsortedInputError
from ..utils.time import is_strictly_ascending
from .models import Price


def validate_series(prices: Optional[Sequence[Price]], required_points: int,
                    indicator_name: Optional[str] = None) -> None:
    """
    Validate a price series before an indicator computes over it.

    Args:
        prices: Price series in chronological order
        required_points: Minimum number of points the indicator needs
        indicator_name: Indicator short name for error context

    Raises:
        InsufficientDataError: If the series is missing or too short
        UnsortedInputError: If timestamps are not strictly ascending
    """
    actual = len(prices) if prices else 0
    context = {"indicator": indicator_name} if indicator_name else None

    if actual == 0 or actual < required_points:
        raise InsufficientDataError.for_counts(max(required_points, 1), actual, context=context)

    offending = is_strictly_ascending([p.timestamp for p in prices])
    if offending is not None:
        raise UnsortedInputError(
            "Prices must be sorted by timestamp in strictly ascending order",
            index=offending,
            timestamp=prices[offending].timestamp,
            previous_timestamp=prices[offending - 1].timestamp,
            context=context
        )

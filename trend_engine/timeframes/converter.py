"""
Timeframe converter.

Aggregates a fine-grained candle series into a coarser timeframe. Buckets are
aligned to multiples of the target duration since the Unix epoch:

    - 5m  → 00:00, 00:05, 00:10, ...
    - 1h  → 00:00, 01:00, 02:00, ...
    - 1d  → midnight UTC

Each bucket folds to one bar: first open, last close, max high, min low and
summed volume. Partial buckets (typically the last one) are still emitted.
"""

from datetime import datetime
from typing import Iterable

from ..data.models import Candle, Timeframe
from ..errors import ValidationError
from ..logging.config import get_logger
from ..utils.time import floor_to_interval

logger = get_logger(__name__)


class TimeframeConverter:
    """Upward-only candle aggregation between timeframes."""

    def can_convert(self, source: Timeframe, target: Timeframe) -> bool:
        """True only when ``target`` is a whole multiple (>1x) of ``source``."""
        return target.minutes > source.minutes and target.minutes % source.minutes == 0

    def aggregate(self, candles: Iterable[Candle], target: Timeframe) -> list[Candle]:
        """
        Aggregate candles into ``target`` buckets.

        Args:
            candles: Source candles in any order
            target: Timeframe to aggregate into

        Returns:
            Aggregated candles in ascending order, stamped with their bucket start
        """
        ordered = sorted(candles, key=lambda c: c.timestamp)
        if not ordered:
            return []

        buckets: dict[datetime, list[Candle]] = {}
        for candle in ordered:
            bucket_start = floor_to_interval(candle.timestamp, target.minutes)
            buckets.setdefault(bucket_start, []).append(candle)

        aggregated = [self._fold(start, members) for start, members in buckets.items()]

        logger.debug(
            "Candles aggregated",
            target=target.label,
            source_count=len(ordered),
            bucket_count=len(aggregated)
        )
        return aggregated

    def aggregate_from(self, candles: Iterable[Candle], source: Timeframe, target: Timeframe) -> list[Candle]:
        """
        Aggregate after checking that ``source`` can be converted to ``target``.

        Raises:
            ValidationError: If the conversion is downward or not a whole multiple
        """
        if not self.can_convert(source, target):
            raise ValidationError(
                f"Cannot convert {source.label} candles to {target.label}",
                field="target",
                value=target.label,
                context={"source": source.label}
            )
        return self.aggregate(candles, target)

    @staticmethod
    def _fold(bucket_start: datetime, members: list[Candle]) -> Candle:
        return Candle(
            timestamp=bucket_start,
            open=members[0].open,
            high=max(c.high for c in members),
            low=min(c.low for c in members),
            close=members[-1].close,
            volume=sum(c.volume for c in members),
        )

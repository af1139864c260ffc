#!/usr/bin/env python3
"""
Basic Usage Example - Trend Engine

This script demonstrates the indicator and alignment engine with a simulated
crypto price walk. It shows how to:
- Load per-symbol configuration
- Serve series through the in-memory market data provider
- Calculate single and batched indicators
- Run one indicator across timeframes and read the alignment verdict

Run: python examples/basic_usage.py
"""

import json
import math
from datetime import datetime, timedelta, timezone
from typing import List

from trend_engine.data.models import Candle, Price, Timeframe
from trend_engine.data.provider import InMemoryMarketDataProvider
from trend_engine.engine import IndicatorEngine
from trend_engine.indicators.factory import IndicatorType
from trend_engine.logging import configure_logging


def create_minute_candles(start: datetime, minutes: int, base_price: float) -> List[Candle]:
    """Create a drifting, oscillating 1-minute candle series."""
    candles = []
    previous = base_price
    for i in range(minutes):
        close = base_price * (1 + 0.00002 * i) + 40.0 * math.sin(i / 90.0)
        candles.append(Candle(
            timestamp=start + timedelta(minutes=i),
            open=previous,
            high=max(previous, close) + 5.0,
            low=min(previous, close) - 5.0,
            close=close,
            volume=1000.0 + (i % 60) * 10,
        ))
        previous = close
    return candles


def main():
    """Run the demo."""
    configure_logging(level="WARNING")

    print("🚀 Trend Engine Basic Usage Demo")
    print("=" * 50)

    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    end = start + timedelta(days=3)
    candles = create_minute_candles(start, 3 * 1440, 45000.0)
    prices = [Price.create("BTC-USD", c.close, c.timestamp) for c in candles]

    provider = InMemoryMarketDataProvider(prices={"BTC-USD": prices}, candles={"BTC-USD": candles})
    engine = IndicatorEngine(provider)

    print("1. Resolving configuration per symbol...")
    for symbol in ("BTC-USD", "ETH-USD"):
        config = engine.components_for(symbol).config
        print(f"   {symbol}: dispersion ratio {config.alignment.dispersion_ratio}, "
              f"Bollinger k {config.indicators.bollinger_k}")
    print()

    print("2. Supported indicators:")
    for indicator_type in engine.list_supported_indicators():
        description = engine.describe_indicator(indicator_type)
        low, high = description.default_period_range
        print(f"   {description.short_name:<6} {description.name} (periods {low}-{high})")
    print()

    print("3. RSI(14) over the full price window:")
    rsi = engine.calculate_indicator("BTC-USD", IndicatorType.RELATIVE_STRENGTH_INDEX, 14, start, end)
    print(f"   {json.dumps(rsi.to_dict())}")
    print()

    print("4. Indicator batch:")
    batch = engine.calculate_multiple_indicators(
        "BTC-USD",
        [
            (IndicatorType.SIMPLE_MOVING_AVERAGE, 20),
            (IndicatorType.BOLLINGER_BANDS, 20),
            (IndicatorType.MACD, 26),
            (IndicatorType.WILLIAMS_PERCENT_R, 14),
        ],
        start,
        end,
    )
    for indicator_type, result in batch.items():
        print(f"   {indicator_type.value}: {result.value:.4f}")
    print()

    print("5. SMA(12) alignment across timeframes:")
    timeframes = [Timeframe.FIVE_MINUTES, Timeframe.FIFTEEN_MINUTES, Timeframe.HOUR, Timeframe.FOUR_HOURS]
    results, alignment = engine.calculate_multi_timeframe_from_provider(
        "BTC-USD", timeframes, IndicatorType.SIMPLE_MOVING_AVERAGE, 12, start, end
    )
    for timeframe, result in results.items():
        print(f"   {timeframe.label:>3}: {result.value:.2f}")
    print(f"   {json.dumps(alignment.to_dict(), indent=2)}")
    print()

    print("✅ Demo completed successfully!")


if __name__ == "__main__":
    main()

"""
Trend Engine - Technical Indicator & Multi-Timeframe Alignment Engine

Turns time-ordered price and candle series into technical indicator signals,
aggregates candles across timeframes and scores how consistently an indicator
agrees across those timeframes.
"""

__version__ = "0.1.0"
__author__ = "Trend Engine Team"

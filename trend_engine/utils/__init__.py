"""
Utility functions module.

Time Semantics:
- Series timestamps are timezone-aware datetimes; naive values are read as UTC
- Timeframe buckets are aligned to multiples of their duration since the Unix epoch
- Aggregated bars keep the timezone of the source candles
"""

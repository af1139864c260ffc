"""
Logging configuration and utilities for the trend engine.
"""
from .config import configure_logging, get_analysis_logger, get_logger, log_unit_failure

__all__ = ["configure_logging", "get_logger", "get_analysis_logger", "log_unit_failure"]

"""
Validation errors raised synchronously at the call boundary.

Non-positive periods, blank symbols, inverted time ranges and inconsistent
indicator configurations are rejected before any computation begins.
"""

from typing import Optional, Dict, Any


class ValidationError(Exception):
    """Invalid argument supplied to an engine operation."""
    
    def __init__(self, message: str, field: Optional[str] = None,
                 value: Any = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.field = field
        self.value = value
        self.context = context or {}
        self.recoverable = False


class InvalidConfigurationError(ValidationError):
    """Indicator or engine configuration is internally inconsistent."""

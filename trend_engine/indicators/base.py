"""Shared contract for every indicator"""

from abc import ABC, abstractmethod
from typing import Sequence

from ..data.models import Price
from ..data.validators import validate_series
from ..errors import (
    DataQualityError,
    IndicatorCalculationError,
    ValidationError,
)
from ..logging.config import get_logger
from ..models.results import IndicatorResult

logger = get_logger(__name__)


def require_positive_period(period: int, field: str = "period") -> int:
    """Reject non-positive or non-integer periods."""
    if isinstance(period, bool) or not isinstance(period, int):
        raise ValidationError(f"{field} must be an integer", field=field, value=period)
    if period <= 0:
        raise ValidationError(f"{field} must be greater than 0", field=field, value=period)
    return period


class Indicator(ABC):
    """
    Pure calculation unit mapping an ordered price series to one result.

    Subclasses set ``name``/``short_name``, report ``required_points`` and
    implement ``_compute``; ``calculate`` enforces the shared preconditions.
    """

    name: str = "Indicator"
    short_name: str = "IND"

    def __init__(self, period: int):
        self.period = require_positive_period(period)

    @property
    def required_points(self) -> int:
        """Minimum series length for a calculation."""
        return self.period

    def calculate(self, prices: Sequence[Price]) -> IndicatorResult:
        """
        Calculate the indicator over a price series

        Args:
            prices: Prices in strictly ascending timestamp order

        Returns:
            Indicator result whose window spans the whole input series

        Raises:
            InsufficientDataError: If fewer than ``required_points`` prices are given
            UnsortedInputError: If timestamps are not strictly ascending
            IndicatorCalculationError: If the formula fails unexpectedly
        """
        validate_series(prices, self.required_points, self.short_name)

        try:
            result = self._compute([p.value for p in prices], prices[0].timestamp, prices[-1].timestamp)
        except (DataQualityError, ValidationError):
            raise
        except Exception as e:
            raise IndicatorCalculationError(
                f"{self.name} calculation failed: {str(e)}",
                indicator_name=self.short_name,
                calculation_input={"price_count": len(prices), "period": self.period}
            ) from e

        logger.debug(
            "Indicator calculated",
            indicator=self.short_name,
            period=self.period,
            points=len(prices),
            value=result.value
        )
        return result

    @abstractmethod
    def _compute(self, values: list[float], start_time, end_time) -> IndicatorResult:
        """Evaluate the formula over validated values."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(period={self.period})"


def window_high_low(values: list[float], period: int) -> tuple[float, float]:
    """Highest and lowest value over the last ``period`` values."""
    window = values[-period:]
    return max(window), min(window)

"""
Multi-timeframe indicator orchestration.

Runs indicators over independently prepared inputs and collects the results
into keyed maps. Every (timeframe, indicator) unit is pure and writes only its
own key, so units fan out across a bounded thread pool and fan back in under
a lock. A unit that fails is logged and left out of the map; it never aborts
its siblings. Cancellation is cooperative and checked before each unit starts.
"""

import os
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Hashable, Iterable, Optional, Sequence, TypeVar

from ..config.defaults import OrchestratorParams, PriceParams
from ..data.models import Candle, Price, Timeframe, prices_from_candles
from ..errors import DataQualityError, IndicatorCalculationError, ValidationError
from ..indicators.base import Indicator
from ..indicators.factory import IndicatorFactory, IndicatorType
from ..logging.config import get_analysis_logger, log_unit_failure
from ..models.results import IndicatorResult
from ..timeframes.converter import TimeframeConverter

logger = get_analysis_logger(__name__)

K = TypeVar("K", bound=Hashable)

IndicatorRequest = tuple[IndicatorType, int]

_UNIT_ERRORS = (DataQualityError, ValidationError, IndicatorCalculationError)


class MultiTimeframeIndicatorService:
    """Calculates indicators across timeframes and batches of indicators."""

    def __init__(self, factory: IndicatorFactory, converter: Optional[TimeframeConverter] = None,
                 params: Optional[OrchestratorParams] = None, price_params: Optional[PriceParams] = None):
        self.factory = factory
        self.converter = converter or TimeframeConverter()
        self.params = params or OrchestratorParams()
        self.price_params = price_params or PriceParams()

    def calculate_across_timeframes(
        self,
        symbol: str,
        candles: Sequence[Candle],
        timeframes: Iterable[Timeframe],
        indicator_type: IndicatorType,
        period: int,
        cancel_event: Optional[threading.Event] = None,
    ) -> dict[Timeframe, IndicatorResult]:
        """
        Run one indicator over ``candles`` aggregated to each timeframe.

        Args:
            symbol: Symbol the candles belong to
            candles: Source candles (typically 1-minute)
            timeframes: Target timeframes
            indicator_type: Indicator to run
            period: Indicator period
            cancel_event: Optional event; once set, units not yet started are skipped

        Returns:
            Result per timeframe; timeframes that failed are omitted

        Raises:
            ValidationError: If the indicator type or period is invalid
        """
        targets = list(dict.fromkeys(timeframes or []))
        source = list(candles or [])
        indicator = self.factory.create_indicator(indicator_type, period)

        if not source or not targets:
            logger.debug("No source candles or timeframes, nothing to calculate", symbol=symbol)
            return {}

        def unit(timeframe: Timeframe) -> Callable[[], IndicatorResult]:
            def run() -> IndicatorResult:
                bars = self.converter.aggregate(source, timeframe)
                prices = prices_from_candles(symbol, bars, max_price=self.price_params.max_price)
                return indicator.calculate(prices)
            return run

        results = self._fan_out(
            symbol,
            {tf: unit(tf) for tf in targets},
            label=lambda tf: tf.label,
            cancel_event=cancel_event,
        )

        logger.info(
            "Multi-timeframe indicator calculated",
            symbol=symbol,
            indicator=indicator.short_name,
            period=period,
            requested=len(targets),
            calculated=len(results)
        )
        return {tf: results[tf] for tf in Timeframe.ordered(results)}

    def calculate_indicators(
        self,
        symbol: str,
        prices: Sequence[Price],
        requests: Iterable[IndicatorRequest],
        cancel_event: Optional[threading.Event] = None,
    ) -> dict[IndicatorType, IndicatorResult]:
        """
        Run several different indicators over the same price window.

        A request with an invalid period is treated like any other failing
        unit and omitted. When the same type is requested twice the last
        request wins.

        Returns:
            Result per indicator type; failing indicators are omitted
        """
        series = list(prices or [])
        units = {}
        for indicator_type, period in requests or []:
            units[indicator_type] = self._indicator_unit(indicator_type, period, series)

        if not units:
            return {}

        results = self._fan_out(
            symbol,
            units,
            label=lambda t: getattr(t, "value", str(t)),
            cancel_event=cancel_event,
        )

        logger.info(
            "Indicator batch calculated",
            symbol=symbol,
            requested=len(units),
            calculated=len(results)
        )
        return results

    def calculate_timeframe_matrix(
        self,
        symbol: str,
        candles: Sequence[Candle],
        timeframes: Iterable[Timeframe],
        requests: Iterable[IndicatorRequest],
        cancel_event: Optional[threading.Event] = None,
    ) -> dict[Timeframe, dict[IndicatorType, IndicatorResult]]:
        """
        Run a batch of indicators on every timeframe.

        Each timeframe is aggregated once and each (timeframe, indicator)
        pair is an independent unit.

        Returns:
            Nested map timeframe -> indicator type -> result; a timeframe with
            no successful indicator maps to an empty dict
        """
        targets = list(dict.fromkeys(timeframes or []))
        source = list(candles or [])
        request_list = list(requests or [])

        if not source or not targets or not request_list:
            return {}

        series_by_timeframe = {}
        for tf in targets:
            bars = self.converter.aggregate(source, tf)
            try:
                series_by_timeframe[tf] = prices_from_candles(symbol, bars, max_price=self.price_params.max_price)
            except ValidationError as e:
                log_unit_failure(logger, tf.label, symbol, e)

        units = {}
        for tf, series in series_by_timeframe.items():
            for indicator_type, period in request_list:
                units[(tf, indicator_type)] = self._indicator_unit(indicator_type, period, series)

        flat = self._fan_out(
            symbol,
            units,
            label=lambda key: f"{key[0].label}:{getattr(key[1], 'value', key[1])}",
            cancel_event=cancel_event,
        )

        matrix: dict[Timeframe, dict[IndicatorType, IndicatorResult]] = {tf: {} for tf in Timeframe.ordered(targets)}
        for (tf, indicator_type), result in flat.items():
            matrix[tf][indicator_type] = result

        logger.info(
            "Timeframe matrix calculated",
            symbol=symbol,
            timeframes=len(targets),
            indicators=len(request_list),
            calculated=len(flat)
        )
        return matrix

    def _indicator_unit(self, indicator_type: IndicatorType, period: int,
                        prices: list[Price]) -> Callable[[], IndicatorResult]:
        def run() -> IndicatorResult:
            indicator: Indicator = self.factory.create_indicator(indicator_type, period)
            return indicator.calculate(prices)
        return run

    def _max_workers(self, unit_count: int) -> int:
        limit = self.params.max_workers or os.cpu_count() or 1
        return max(1, min(unit_count, limit))

    def _fan_out(
        self,
        symbol: str,
        units: dict[K, Callable[[], IndicatorResult]],
        label: Callable[[K], str],
        cancel_event: Optional[threading.Event] = None,
    ) -> dict[K, IndicatorResult]:
        """Execute units on a bounded pool; collect successes by key."""
        results: dict[K, IndicatorResult] = {}
        lock = threading.Lock()

        def execute(key: K, work: Callable[[], IndicatorResult]) -> None:
            if cancel_event is not None and cancel_event.is_set():
                logger.debug("Unit skipped after cancellation", symbol=symbol, unit=label(key))
                return
            try:
                result = work()
            except _UNIT_ERRORS as e:
                log_unit_failure(logger, label(key), symbol, e)
                return
            with lock:
                results[key] = result

        with ThreadPoolExecutor(max_workers=self._max_workers(len(units))) as pool:
            futures = [pool.submit(execute, key, work) for key, work in units.items()]
            for future in futures:
                future.result()

        return results

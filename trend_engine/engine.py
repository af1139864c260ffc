"""
Main indicator engine façade.

Entry point for the API layer: validates requests at the boundary, asks the
market-data provider for series, then delegates to the indicator factory, the
multi-timeframe orchestrator and the alignment analyzer.

Configuration is resolved per symbol through ``ConfigLoader`` (defaults, then
``config/symbols.yaml``) unless the caller pins a config or factory.
"""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional, Sequence, Union

import structlog

from .analysis.alignment import AlignmentAnalyzer, TimeframeAlignment
from .analysis.orchestrator import IndicatorRequest, MultiTimeframeIndicatorService
from .config.defaults import EngineConfig
from .config.loader import ConfigLoader
from .data.models import Candle, Timeframe
from .data.provider import MarketDataProvider
from .errors import ValidationError
from .indicators.base import require_positive_period
from .indicators.factory import IndicatorDescription, IndicatorFactory, IndicatorType
from .models.results import EmptyResult, IndicatorResult
from .timeframes.converter import TimeframeConverter

logger = structlog.get_logger(__name__)

MultiTimeframeOutcome = tuple[dict[Timeframe, IndicatorResult], TimeframeAlignment]


@dataclass(frozen=True)
class SymbolComponents:
    """Calculators built from one resolved configuration."""
    config: EngineConfig
    factory: IndicatorFactory
    orchestrator: MultiTimeframeIndicatorService
    analyzer: AlignmentAnalyzer


class IndicatorEngine:
    """
    In-process library contract for indicator and alignment calculations.

    Pipeline:
    Provider → Price/Candle series → Timeframe aggregation → Indicators → Alignment
    """

    def __init__(self, provider: Optional[MarketDataProvider] = None,
                 config: Optional[EngineConfig] = None,
                 factory: Optional[IndicatorFactory] = None,
                 config_dir: Optional[Union[str, Path]] = None) -> None:
        """
        Initialize the engine with its collaborators.

        Args:
            provider: Market data source for the fetching operations
            config: Configuration applied to every symbol; when omitted each
                symbol resolves its own through ``config_dir``
            factory: Indicator factory applied to every symbol
            config_dir: Directory holding ``symbols.yaml``
        """
        self.provider = provider
        self.config_loader = ConfigLoader.create(config_dir)
        self.converter = TimeframeConverter()
        self._pinned = config is not None or factory is not None

        default = self._build_components(config or self.config_loader.defaults, factory)
        self.config = default.config
        self.factory = default.factory
        self.orchestrator = default.orchestrator
        self.analyzer = default.analyzer
        self._default = default

        # Per-symbol calculators, built on first use
        self._components: dict[str, SymbolComponents] = {}

        logger.info(
            "Indicator engine initialized",
            indicators=[t.value for t in self.factory.list_supported_types()],
            per_symbol_config=not self._pinned
        )

    def components_for(self, symbol: str) -> SymbolComponents:
        """
        Calculators configured for ``symbol``.

        Raises:
            InvalidConfigurationError: If the symbol's merged configuration is invalid
        """
        if self._pinned:
            return self._default

        components = self._components.get(symbol)
        if components is None:
            components = self._build_components(self.config_loader.load_config(symbol))
            self._components[symbol] = components
            logger.debug("Symbol configuration resolved", symbol=symbol)
        return components

    def _build_components(self, config: EngineConfig,
                          factory: Optional[IndicatorFactory] = None) -> SymbolComponents:
        factory = factory or IndicatorFactory.default(config.indicators)
        return SymbolComponents(
            config=config,
            factory=factory,
            orchestrator=MultiTimeframeIndicatorService(
                factory,
                self.converter,
                params=config.orchestrator,
                price_params=config.price,
            ),
            analyzer=AlignmentAnalyzer(config.alignment),
        )

    def calculate_indicator(self, symbol: str, indicator_type: IndicatorType, period: int,
                            start: datetime, end: datetime) -> IndicatorResult:
        """
        Fetch prices for ``[start, end]`` and calculate one indicator.

        Returns:
            The indicator result, or EmptyResult when the provider has no data

        Raises:
            ValidationError: For a blank symbol, non-positive period or start >= end
            InsufficientDataError: If the fetched series is too short
            UnsortedInputError: If the fetched series is out of order
        """
        self._validate_request(symbol, period, start, end)
        indicator = self.components_for(symbol).factory.create_indicator(indicator_type, period)

        prices = self._require_provider().fetch_price_series(symbol, start, end)
        if not prices:
            logger.warning("No price data available for indicator calculation", symbol=symbol,
                           indicator=indicator.short_name)
            return EmptyResult(reason=f"No price data for {symbol}")

        result = indicator.calculate(prices)

        logger.debug(
            "Indicator calculated for symbol",
            symbol=symbol,
            indicator=indicator.short_name,
            period=period,
            value=result.value
        )
        return result

    def calculate_multiple_indicators(self, symbol: str, requests: Iterable[IndicatorRequest],
                                      start: datetime, end: datetime) -> dict[IndicatorType, IndicatorResult]:
        """
        Fetch prices once and calculate several indicators over them.

        Returns:
            Result per indicator type. Failing indicators are omitted; when the
            provider has no data every requested type maps to EmptyResult.
        """
        request_list = list(requests or [])
        self._validate_symbol(symbol)
        self._validate_range(start, end)

        if not request_list:
            return {}

        prices = self._require_provider().fetch_price_series(symbol, start, end)
        if not prices:
            logger.warning("No price data available for indicator batch", symbol=symbol)
            return {indicator_type: EmptyResult(reason=f"No price data for {symbol}")
                    for indicator_type, _ in request_list}

        return self.components_for(symbol).orchestrator.calculate_indicators(symbol, prices, request_list)

    def calculate_multi_timeframe_indicators(
        self,
        symbol: str,
        candles: Sequence[Candle],
        timeframes: Iterable[Timeframe],
        indicator_type: IndicatorType,
        period: int,
    ) -> MultiTimeframeOutcome:
        """
        Calculate one indicator across timeframes and analyze its alignment.

        Returns:
            (result per timeframe, alignment verdict)
        """
        self._validate_symbol(symbol)
        require_positive_period(period)

        components = self.components_for(symbol)
        results = components.orchestrator.calculate_across_timeframes(
            symbol, candles, timeframes, indicator_type, period
        )
        alignment = components.analyzer.analyze(results)

        logger.info(
            "Multi-timeframe alignment calculated",
            symbol=symbol,
            indicator=indicator_type.value,
            timeframes=[tf.label for tf in results],
            alignment_score=alignment.alignment_score,
            trend_direction=alignment.trend_direction.value
        )
        return results, alignment

    def calculate_multi_timeframe_from_provider(
        self,
        symbol: str,
        timeframes: Iterable[Timeframe],
        indicator_type: IndicatorType,
        period: int,
        start: datetime,
        end: datetime,
    ) -> MultiTimeframeOutcome:
        """Fetch source candles for ``[start, end]`` and run the multi-timeframe analysis."""
        self._validate_request(symbol, period, start, end)

        candles = self._require_provider().fetch_candle_series(symbol, start, end)
        if not candles:
            logger.warning("No candlestick data available", symbol=symbol)

        return self.calculate_multi_timeframe_indicators(symbol, candles, timeframes, indicator_type, period)

    def list_supported_indicators(self) -> tuple[IndicatorType, ...]:
        return self.factory.list_supported_types()

    def describe_indicator(self, indicator_type: IndicatorType) -> IndicatorDescription:
        return self.factory.describe(indicator_type)

    def _require_provider(self) -> MarketDataProvider:
        if self.provider is None:
            raise ValidationError("No market data provider configured", field="provider")
        return self.provider

    def _validate_request(self, symbol: str, period: int, start: datetime, end: datetime) -> None:
        self._validate_symbol(symbol)
        require_positive_period(period)
        self._validate_range(start, end)

    @staticmethod
    def _validate_symbol(symbol: str) -> None:
        if not isinstance(symbol, str) or not symbol.strip():
            raise ValidationError("Symbol cannot be empty", field="symbol", value=symbol)

    @staticmethod
    def _validate_range(start: datetime, end: datetime) -> None:
        if start >= end:
            raise ValidationError(
                "Start time must be before end time",
                field="start",
                value=start,
                context={"end": end}
            )

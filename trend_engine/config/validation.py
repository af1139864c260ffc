"""Configuration validation utilities."""

from dataclasses import dataclass, fields
from typing import Any

from .defaults import AlignmentParams, IndicatorParams, OrchestratorParams, PriceParams


@dataclass(frozen=True)
class ConfigIssue:
    """Represents a configuration validation problem."""
    field: str
    message: str
    value: Any


_SECTIONS = {
    "indicators": IndicatorParams,
    "alignment": AlignmentParams,
    "orchestrator": OrchestratorParams,
    "price": PriceParams,
}


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_indicator_params(params: dict[str, Any]) -> list[ConfigIssue]:
        """Validate indicator parameters."""
        errors = []

        if "bollinger_k" in params:
            value = params["bollinger_k"]
            if not _is_number(value) or value <= 0:
                errors.append(ConfigIssue(
                    field="bollinger_k",
                    message="Must be a positive number",
                    value=value
                ))

        for name in ("macd_fast", "macd_slow", "macd_signal"):
            if name in params and not _is_positive_int(params[name]):
                errors.append(ConfigIssue(
                    field=name,
                    message="Must be a positive integer",
                    value=params[name]
                ))

        fast = params.get("macd_fast")
        slow = params.get("macd_slow")
        if _is_positive_int(fast) and _is_positive_int(slow) and fast >= slow:
            errors.append(ConfigIssue(
                field="macd_fast",
                message="Must be less than macd_slow",
                value=fast
            ))

        return errors

    @staticmethod
    def validate_alignment_params(params: dict[str, Any]) -> list[ConfigIssue]:
        """Validate alignment parameters."""
        errors = []

        if "dispersion_ratio" in params:
            value = params["dispersion_ratio"]
            if not _is_number(value) or value <= 0:
                errors.append(ConfigIssue(
                    field="dispersion_ratio",
                    message="Must be a positive number",
                    value=value
                ))

        if "trend_tolerance" in params:
            value = params["trend_tolerance"]
            if not _is_number(value) or value < 0:
                errors.append(ConfigIssue(
                    field="trend_tolerance",
                    message="Must be a non-negative number",
                    value=value
                ))

        for name in ("strong_score_threshold", "strong_confluence_threshold"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value < 0 or value > 1:
                    errors.append(ConfigIssue(
                        field=name,
                        message="Must be a number between 0 and 1",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_orchestrator_params(params: dict[str, Any]) -> list[ConfigIssue]:
        """Validate orchestrator parameters."""
        errors = []

        value = params.get("max_workers")
        if value is not None and not _is_positive_int(value):
            errors.append(ConfigIssue(
                field="max_workers",
                message="Must be a positive integer or null",
                value=value
            ))

        return errors

    @staticmethod
    def validate_price_params(params: dict[str, Any]) -> list[ConfigIssue]:
        """Validate price parameters."""
        errors = []

        if "max_price" in params:
            value = params["max_price"]
            if not _is_number(value) or value <= 0:
                errors.append(ConfigIssue(
                    field="max_price",
                    message="Must be a positive number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ConfigIssue]:
        """Validate a complete merged configuration."""
        errors = []

        for section, params in config.items():
            if section not in _SECTIONS:
                errors.append(ConfigIssue(field=section, message="Unknown configuration section", value=params))
                continue
            if not isinstance(params, dict):
                errors.append(ConfigIssue(field=section, message="Must be a mapping", value=params))
                continue

            known = {f.name for f in fields(_SECTIONS[section])}
            for key in params:
                if key not in known:
                    errors.append(ConfigIssue(
                        field=f"{section}.{key}",
                        message="Unknown parameter",
                        value=params[key]
                    ))

        def section(name: str) -> dict[str, Any]:
            params = config.get(name)
            return params if isinstance(params, dict) else {}

        errors.extend(ConfigValidator.validate_indicator_params(section("indicators")))
        errors.extend(ConfigValidator.validate_alignment_params(section("alignment")))
        errors.extend(ConfigValidator.validate_orchestrator_params(section("orchestrator")))
        errors.extend(ConfigValidator.validate_price_params(section("price")))

        return errors

#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from trend_engine.config.loader import ConfigLoader
from trend_engine.config.validation import ConfigIssue, ConfigValidator


def validate_symbol_config(symbol: str) -> List[ConfigIssue]:
    """Validate merged configuration for a specific symbol."""
    loader = ConfigLoader.create()
    config = loader.merge_config(symbol)
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    print("🔍 Validating trend engine configuration...")

    loader = ConfigLoader.create()

    test_symbols = [
        "BTC-USD",
        "ETH-USD",
        "DOGE-USD",
        "UNKNOWN-SYMBOL"  # Should use defaults
    ]

    all_valid = True

    for symbol in test_symbols:
        print(f"\n📊 Validating {symbol}...")

        issues = validate_symbol_config(symbol)
        if issues:
            print(f"❌ Found {len(issues)} validation issues:")
            for issue in issues:
                print(f"  • {issue.field}: {issue.message} (value: {issue.value})")
            all_valid = False
        else:
            print(f"✅ {symbol} configuration is valid")

    print(f"\n📋 Testing call-site overrides...")
    test_overrides = {
        "alignment": {
            "dispersion_ratio": 0.25,
            "strong_score_threshold": 0.9,
        },
        "orchestrator": {
            "max_workers": 4,
        },
    }

    issues = ConfigValidator.validate_config(loader.merge_config("BTC-USD", test_overrides))
    if issues:
        print(f"❌ Override validation failed:")
        for issue in issues:
            print(f"  • {issue.field}: {issue.message}")
        all_valid = False
    else:
        print(f"✅ Override validation passed")

    if all_valid:
        print(f"\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print(f"\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()

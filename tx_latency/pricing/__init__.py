"""Pricing: reference exchange rate and fee conversion."""

from tx_latency.pricing.oracle import CoinGeckoOracle, PriceOracle
from tx_latency.pricing.fees import FeeBreakdown, FeeCalculator

__all__ = ["CoinGeckoOracle", "PriceOracle", "FeeBreakdown", "FeeCalculator"]

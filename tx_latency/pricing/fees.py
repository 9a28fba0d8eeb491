"""
Fee & Cost Computation

Native fee comes straight from the settled record; the reference fee is
native_fee × rate. A failed rate fetch degrades the reference fee to zero
but keeps the native fee.
"""

from dataclasses import dataclass
from typing import Optional

from tx_latency.pricing.oracle import PriceOracle


@dataclass(frozen=True)
class FeeBreakdown:
    native_fee: float = 0.0  # HBAR
    reference_fee: float = 0.0  # USD
    rate: Optional[float] = None
    error: Optional[str] = None


class FeeCalculator:
    """Converts the native fee into the reference currency."""

    def __init__(self, oracle: PriceOracle):
        self.oracle = oracle

    def compute(self, native_fee: Optional[float]) -> FeeBreakdown:
        """
        Compute fees for a settled transaction.

        Args:
            native_fee: Fee in HBAR, or None if the settled record was unavailable

        Returns:
            FeeBreakdown (never raises)
        """
        if native_fee is None:
            return FeeBreakdown(error="native fee unavailable")

        try:
            outcome = self.oracle.fetch_rate()
        except Exception as e:
            outcome = None
            error = f"price fetch failed: {e}"
        else:
            error = outcome.error

        if outcome is None or not outcome.ok:
            print(f"[Fees] Reference fee unavailable: {error}")
            return FeeBreakdown(native_fee=native_fee, error=error)

        rate = float(outcome.value)
        return FeeBreakdown(native_fee=native_fee, reference_fee=native_fee * rate, rate=rate)

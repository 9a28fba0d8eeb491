"""
Price Oracle

Fetches the native-to-reference exchange rate (HBAR/USD by default) from
the CoinGecko simple price endpoint.
"""

from typing import Protocol

import requests

from tx_latency.core.config import PriceConfig
from tx_latency.core.outcome import Outcome


class PriceOracle(Protocol):
    def fetch_rate(self) -> Outcome:
        """Current rate as Outcome(value=float > 0) or a failure."""
        ...


class CoinGeckoOracle:
    """CoinGecko ``/simple/price`` client."""

    def __init__(self, config: PriceConfig):
        self.config = config
        self.session = requests.Session()

    def fetch_rate(self) -> Outcome:
        url = f"{self.config.api_url.rstrip('/')}/simple/price"
        params = {"ids": self.config.coin_id, "vs_currencies": self.config.vs_currency}
        try:
            resp = self.session.get(url, params=params, timeout=self.config.timeout_sec)
            resp.raise_for_status()
            payload = resp.json()
            rate = float(payload[self.config.coin_id][self.config.vs_currency])
        except (requests.RequestException, ValueError, KeyError, TypeError) as e:
            return Outcome.failure(f"price fetch failed: {e}")

        if rate <= 0:
            return Outcome.failure(f"non-positive rate {rate} for {self.config.coin_id}")
        return Outcome.success(rate)

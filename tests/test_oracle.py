"""Tests for CoinGeckoOracle (network mocked)."""

from unittest.mock import Mock

import requests

from tx_latency.core.config import PriceConfig
from tx_latency.pricing.oracle import CoinGeckoOracle


def make_oracle(response=None, side_effect=None):
    oracle = CoinGeckoOracle(PriceConfig())
    oracle.session = Mock()
    if side_effect is not None:
        oracle.session.get.side_effect = side_effect
    else:
        oracle.session.get.return_value = response
    return oracle


def test_fetch_rate_parses_payload():
    resp = Mock(status_code=200, json=lambda: {"hedera-hashgraph": {"usd": 0.0712}})
    oracle = make_oracle(resp)

    outcome = oracle.fetch_rate()

    assert outcome.ok
    assert outcome.value == 0.0712
    url = oracle.session.get.call_args.args[0]
    assert url == "https://api.coingecko.com/api/v3/simple/price"
    assert oracle.session.get.call_args.kwargs["params"] == {
        "ids": "hedera-hashgraph",
        "vs_currencies": "usd",
    }


def test_network_error_is_failure():
    oracle = make_oracle(side_effect=requests.ConnectionError("dns failure"))

    outcome = oracle.fetch_rate()

    assert not outcome.ok
    assert "dns failure" in outcome.error


def test_http_error_is_failure():
    resp = Mock(status_code=429)
    resp.raise_for_status.side_effect = requests.HTTPError("429 Too Many Requests")

    assert not make_oracle(resp).fetch_rate().ok


def test_missing_coin_is_failure():
    resp = Mock(status_code=200, json=lambda: {})

    assert not make_oracle(resp).fetch_rate().ok


def test_non_positive_rate_is_failure():
    resp = Mock(status_code=200, json=lambda: {"hedera-hashgraph": {"usd": 0}})

    outcome = make_oracle(resp).fetch_rate()

    assert not outcome.ok
    assert "non-positive" in outcome.error

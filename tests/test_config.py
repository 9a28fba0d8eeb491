"""Tests for Config loading and validation."""

import pytest

from tx_latency.core.config import Config


ENV_VARS = [
    "NETWORK", "ACCOUNT_ID", "PRIVATE_KEY", "CHAIN_ID", "SCOPE_URL", "SEND_TX_INTERVAL",
    "BALANCE_ALERT_CONDITION_IN_HBAR", "SLACK_API_URL", "SLACK_CHANNEL", "SLACK_AUTH",
    "UPLOAD_METHOD", "S3_BUCKET", "GCP_PROJECT_ID", "GCP_KEY_FILE_PATH", "GCP_BUCKET",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)


def test_defaults():
    config = Config()

    assert config.hedera.network == "testnet"
    assert config.schedule.interval_sec == 60.0
    assert config.probe.max_receipt_attempts == 3
    assert config.probe.amount_hbar == 10.0
    assert config.upload.method == "AWS"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("NETWORK", "mainnet")
    monkeypatch.setenv("ACCOUNT_ID", "0.0.4321")
    monkeypatch.setenv("PRIVATE_KEY", "302e0201")
    monkeypatch.setenv("CHAIN_ID", "295")
    monkeypatch.setenv("SEND_TX_INTERVAL", "30000")
    monkeypatch.setenv("BALANCE_ALERT_CONDITION_IN_HBAR", "25.5")
    monkeypatch.setenv("UPLOAD_METHOD", "GCP")
    monkeypatch.setenv("GCP_BUCKET", "latency")

    config = Config()

    assert config.hedera.network == "mainnet"
    assert config.hedera.account_id == "0.0.4321"
    assert config.hedera.chain_id == 295
    assert config.schedule.interval_sec == 30.0
    assert config.alert.balance_floor_hbar == 25.5
    assert config.upload.method == "GCP"
    assert config.upload.gcp_bucket == "latency"
    assert config.validate() == []


def test_missing_credentials_reported():
    errors = Config().validate()

    assert any("ACCOUNT_ID" in e for e in errors)
    assert any("PRIVATE_KEY" in e for e in errors)


def test_from_dict_nested():
    config = Config.from_dict({
        "hedera": {"account_id": "0.0.1", "private_key": "k", "chain_id": 296},
        "probe": {"max_receipt_attempts": 5},
        "upload": {"method": "FTP"},
    })

    assert config.hedera.chain_id == 296
    assert config.probe.max_receipt_attempts == 5
    assert config.schedule.interval_ms == 60_000
    assert any("UPLOAD_METHOD" in e for e in config.validate())


def test_from_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "hedera:\n"
        "  account_id: '0.0.77'\n"
        "  private_key: abc\n"
        "schedule:\n"
        "  interval_ms: 5000\n"
        "alert:\n"
        "  balance_floor_hbar: 100\n"
    )

    config = Config.from_yaml(str(path))

    assert config.hedera.account_id == "0.0.77"
    assert config.schedule.interval_sec == 5.0
    assert config.alert.balance_floor_hbar == 100
    assert config.validate() == []


def test_env_overrides_yaml(tmp_path, monkeypatch):
    path = tmp_path / "config.yaml"
    path.write_text("hedera:\n  account_id: '0.0.77'\n")
    monkeypatch.setenv("ACCOUNT_ID", "0.0.88")

    assert Config.from_yaml(str(path)).hedera.account_id == "0.0.88"


def test_invalid_ranges():
    config = Config.from_dict({
        "hedera": {"account_id": "0.0.1", "private_key": "k"},
        "schedule": {"interval_ms": 0},
        "probe": {"max_receipt_attempts": 0, "amount_hbar": 0},
    })
    errors = config.validate()

    assert len(errors) == 3

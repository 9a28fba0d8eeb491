"""
Configuration management for the latency measurement bot.

Defaults live on the dataclasses below. Values can be loaded from YAML or a
dict, and environment variables (usually populated from a .env file)
override both.
"""

import os
from dataclasses import dataclass, field
from typing import Literal


@dataclass
class HederaConfig:
    """Network selection and operator credentials."""

    network: Literal["testnet", "mainnet"] = "testnet"
    account_id: str = ""  # Operator account, e.g. "0.0.12345" (from env)
    private_key: str = ""  # Operator private key (from env)
    chain_id: int = 0  # Reported verbatim in every record
    scope_url: str = "https://hashscan.io/testnet"  # Explorer used in alert links


@dataclass
class ScheduleConfig:
    """Measurement cadence."""

    interval_ms: int = 60_000  # One cycle per minute

    @property
    def interval_sec(self) -> float:
        return self.interval_ms / 1000.0


@dataclass
class ProbeConfig:
    """Transfer probe parameters."""

    amount_hbar: float = 10.0  # Credited and debited on the operator (net zero)
    max_receipt_attempts: int = 3  # Total receipt queries while status is UNKNOWN
    receipt_retry_delay_sec: float = 0.0  # Fixed pause between receipt queries


@dataclass
class PriceConfig:
    """Reference-currency price source."""

    api_url: str = "https://api.coingecko.com/api/v3"
    coin_id: str = "hedera-hashgraph"
    vs_currency: str = "usd"
    timeout_sec: float = 10.0


@dataclass
class AlertConfig:
    """Low balance alerting."""

    balance_floor_hbar: float = 0.0  # Alert if balance < floor (0 = never)
    slack_api_url: str = ""  # e.g. https://slack.com/api/chat.postMessage
    slack_channel: str = ""
    slack_auth: str = ""  # Bot token
    timeout_sec: float = 10.0


@dataclass
class UploadConfig:
    """Where measurement records are delivered."""

    method: Literal["AWS", "GCP"] = "AWS"
    s3_bucket: str = ""
    gcp_project_id: str = ""
    gcp_key_file_path: str = ""
    gcp_bucket: str = ""
    gcs_prefix: str = "tx-latency-measurement/hedera"
    work_dir: str = "."  # Where the temporary parquet file is written
    spool_dir: str = ""  # Local JSONL spool for undelivered records ("" = off)


UPLOAD_METHODS = ("AWS", "GCP")


@dataclass
class Config:
    """
    Complete system configuration.

    Environment variables (override config file):
    - NETWORK: "testnet" or "mainnet"
    - ACCOUNT_ID / PRIVATE_KEY: operator credentials
    - CHAIN_ID: network identifier written to each record
    - SCOPE_URL: explorer base URL for alert links
    - SEND_TX_INTERVAL: cycle interval in milliseconds
    - BALANCE_ALERT_CONDITION_IN_HBAR: balance floor
    - SLACK_API_URL / SLACK_CHANNEL / SLACK_AUTH: alert delivery
    - UPLOAD_METHOD: "AWS" or "GCP"
    - S3_BUCKET, GCP_PROJECT_ID, GCP_KEY_FILE_PATH, GCP_BUCKET: storage
    """

    hedera: HederaConfig = field(default_factory=HederaConfig)
    schedule: ScheduleConfig = field(default_factory=ScheduleConfig)
    probe: ProbeConfig = field(default_factory=ProbeConfig)
    price: PriceConfig = field(default_factory=PriceConfig)
    alert: AlertConfig = field(default_factory=AlertConfig)
    upload: UploadConfig = field(default_factory=UploadConfig)

    def __post_init__(self):
        """Load environment variable overrides."""
        if os.getenv("NETWORK"):
            self.hedera.network = "mainnet" if os.getenv("NETWORK") == "mainnet" else "testnet"

        if os.getenv("ACCOUNT_ID"):
            self.hedera.account_id = os.getenv("ACCOUNT_ID", "")

        if os.getenv("PRIVATE_KEY"):
            self.hedera.private_key = os.getenv("PRIVATE_KEY", "")

        if os.getenv("CHAIN_ID"):
            self.hedera.chain_id = int(os.getenv("CHAIN_ID", "0"))

        if os.getenv("SCOPE_URL"):
            self.hedera.scope_url = os.getenv("SCOPE_URL", "")

        if os.getenv("SEND_TX_INTERVAL"):
            self.schedule.interval_ms = int(float(os.getenv("SEND_TX_INTERVAL", "60000")))

        if os.getenv("BALANCE_ALERT_CONDITION_IN_HBAR"):
            self.alert.balance_floor_hbar = float(os.getenv("BALANCE_ALERT_CONDITION_IN_HBAR", "0"))

        for attr, var in (
            ("slack_api_url", "SLACK_API_URL"),
            ("slack_channel", "SLACK_CHANNEL"),
            ("slack_auth", "SLACK_AUTH"),
        ):
            if os.getenv(var):
                setattr(self.alert, attr, os.getenv(var, ""))

        for attr, var in (
            ("method", "UPLOAD_METHOD"),
            ("s3_bucket", "S3_BUCKET"),
            ("gcp_project_id", "GCP_PROJECT_ID"),
            ("gcp_key_file_path", "GCP_KEY_FILE_PATH"),
            ("gcp_bucket", "GCP_BUCKET"),
        ):
            if os.getenv(var):
                setattr(self.upload, attr, os.getenv(var, ""))

    @classmethod
    def from_yaml(cls, path: str) -> "Config":
        """Load config from YAML file."""
        import yaml

        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """Load config from dictionary."""
        from dataclasses import is_dataclass, fields

        def build(dc_type, data):
            if not is_dataclass(dc_type):
                return data
            kwargs = {}
            for f in fields(dc_type):
                if f.name in data:
                    val = data[f.name]
                    if hasattr(f.type, "__dataclass_fields__") and isinstance(val, dict):
                        kwargs[f.name] = build(f.type, val)
                    else:
                        kwargs[f.name] = val
            return dc_type(**kwargs)

        return build(cls, data)

    def validate(self) -> list[str]:
        """
        Validate configuration parameters.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not self.hedera.account_id:
            errors.append("ACCOUNT_ID environment variable required")

        if not self.hedera.private_key:
            errors.append(
                "PRIVATE_KEY environment variable required "
                "(create an account at https://portal.hedera.com/register)"
            )

        if self.schedule.interval_ms <= 0:
            errors.append("schedule.interval_ms (SEND_TX_INTERVAL) must be > 0")

        if self.probe.max_receipt_attempts < 1:
            errors.append("probe.max_receipt_attempts must be >= 1")

        if self.probe.amount_hbar <= 0:
            errors.append("probe.amount_hbar must be > 0")

        if self.upload.method not in UPLOAD_METHODS:
            errors.append(f"UPLOAD_METHOD must be one of {', '.join(UPLOAD_METHODS)}")

        return errors

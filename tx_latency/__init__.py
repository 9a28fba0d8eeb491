"""
Transaction Latency Measurement for Hedera

Periodically submits a zero-net-value HBAR transfer, measures end-to-end
latency and fee, and ships one telemetry row per cycle to cloud storage.

Components:
- Scheduler: Fires one measurement cycle per interval, never overlapping
- Ledger Client: Hedera SDK adapter (ping, balance, submit, receipt, record)
- Transfer Probe: Submits the transfer and resolves its consensus receipt
- Fee Calculator: Native fee from the settled record, converted to USD
- Price Oracle: CoinGecko HBAR/USD rate
- Balance Monitor: Alerts when the operator balance drops below a floor
- Record Builder: Assembles the immutable MeasurementRecord
- Reporter: Parquet encoding, S3/GCS upload, console fallback
"""

__version__ = "0.1.0"

from tx_latency.core.config import Config
from tx_latency.core.scheduler import Scheduler
from tx_latency.core.cycle import MeasurementCycle
from tx_latency.reporting.record import MeasurementRecord

__all__ = [
    "Config",
    "Scheduler",
    "MeasurementCycle",
    "MeasurementRecord",
]

"""
Measurement record and its builder.

A MeasurementRecord is either a success (no error, transaction id set,
non-negative latency) or a failure (error set, success fields zeroed).
The builder refuses to produce anything in between.
"""

import json
from dataclasses import dataclass

from tx_latency.execution.outcomes import TransferOutcome
from tx_latency.pricing.fees import FeeBreakdown


@dataclass(frozen=True)
class MeasurementRecord:
    """One telemetry row. Timestamps and durations in milliseconds."""

    executed_at: int
    chain_id: int
    transaction_id: str = ""
    start_time: int = 0
    end_time: int = 0
    native_fee: float = 0.0  # HBAR
    reference_fee: float = 0.0  # USD
    ping_time: int = 0
    block_resource_usage: int = 0
    block_tx_count: int = 0
    error_description: str = ""

    @property
    def latency(self) -> int:
        return self.end_time - self.start_time

    @property
    def succeeded(self) -> bool:
        return self.error_description == ""

    def to_row(self) -> dict:
        """Row keyed by warehouse column names."""
        return {
            "executedAt": self.executed_at,
            "txhash": self.transaction_id,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "chainId": self.chain_id,
            "latency": self.latency,
            "error": self.error_description,
            "txFee": self.native_fee,
            "txFeeInUSD": self.reference_fee,
            "resourceUsedOfLatestBlock": self.block_resource_usage,
            "numOfTxInLatestBlock": self.block_tx_count,
            "pingTime": self.ping_time,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_row())


class RecordBuilder:
    """Assembles the record for one cycle. Pure, no I/O."""

    def __init__(self, executed_at: int, chain_id: int):
        self.executed_at = executed_at
        self.chain_id = chain_id
        self.ping_time = 0
        self.start_time = 0

    def succeeded(self, outcome: TransferOutcome, fees: FeeBreakdown) -> MeasurementRecord:
        """Build a success record from a resolved transfer and its fees."""
        if not outcome.ok:
            raise ValueError(f"cannot build success record from failed transfer: {outcome.error_description}")
        if not outcome.transaction_id:
            raise ValueError("success record requires a transaction id")
        if outcome.end_time < outcome.start_time:
            raise ValueError(
                f"negative latency: start={outcome.start_time} end={outcome.end_time}"
            )
        return MeasurementRecord(
            executed_at=self.executed_at,
            chain_id=self.chain_id,
            transaction_id=outcome.transaction_id,
            start_time=outcome.start_time,
            end_time=outcome.end_time,
            native_fee=fees.native_fee,
            reference_fee=fees.reference_fee,
            ping_time=self.ping_time,
        )

    def failed(self, description: str) -> MeasurementRecord:
        """Build a failure record; success fields stay zeroed."""
        if not description:
            raise ValueError("failure record requires an error description")
        return MeasurementRecord(
            executed_at=self.executed_at,
            chain_id=self.chain_id,
            start_time=self.start_time,
            end_time=self.start_time,
            ping_time=self.ping_time,
            error_description=description,
        )

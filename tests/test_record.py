"""Tests for MeasurementRecord and RecordBuilder."""

import json

import pytest

from tx_latency.execution.outcomes import TransferOutcome
from tx_latency.pricing.fees import FeeBreakdown
from tx_latency.reporting.record import MeasurementRecord, RecordBuilder


def success_outcome(**overrides):
    fields = dict(
        status="SUCCESS",
        transaction_id="0.0.1234@1700000000.000000001",
        start_time=1_000,
        end_time=3_250,
        native_fee=0.0001,
        receipt_attempts=1,
    )
    fields.update(overrides)
    return TransferOutcome(**fields)


def test_success_record():
    builder = RecordBuilder(executed_at=900, chain_id=295)
    builder.ping_time = 80
    record = builder.succeeded(success_outcome(), FeeBreakdown(native_fee=0.0001, reference_fee=0.000005))

    assert record.succeeded
    assert record.latency == 2_250
    assert record.ping_time == 80
    assert record.reference_fee == pytest.approx(0.000005)


def test_failure_record_zeroes_success_fields():
    builder = RecordBuilder(executed_at=900, chain_id=295)
    builder.start_time = 1_000
    builder.ping_time = 40
    record = builder.failed("consensus rejected: Consensus status in transaction receipt is FAIL_FEE")

    assert not record.succeeded
    assert record.transaction_id == ""
    assert record.latency == 0
    assert record.native_fee == 0.0
    assert record.reference_fee == 0.0
    assert record.ping_time == 40


def test_failure_requires_description():
    with pytest.raises(ValueError):
        RecordBuilder(executed_at=1, chain_id=1).failed("")


def test_success_requires_transaction_id():
    with pytest.raises(ValueError):
        RecordBuilder(executed_at=1, chain_id=1).succeeded(success_outcome(transaction_id=""), FeeBreakdown())


def test_success_rejects_negative_latency():
    with pytest.raises(ValueError):
        RecordBuilder(executed_at=1, chain_id=1).succeeded(
            success_outcome(start_time=5_000, end_time=4_000), FeeBreakdown()
        )


def test_success_rejects_failed_outcome():
    failed = TransferOutcome(error_code="submission_error", error_msg="boom")
    with pytest.raises(ValueError):
        RecordBuilder(executed_at=1, chain_id=1).succeeded(failed, FeeBreakdown())


def test_record_is_immutable():
    record = MeasurementRecord(executed_at=1, chain_id=1)
    with pytest.raises(AttributeError):
        record.transaction_id = "x"


def test_row_uses_warehouse_columns():
    record = MeasurementRecord(
        executed_at=1, chain_id=296, transaction_id="tx", start_time=10, end_time=25, native_fee=0.5
    )
    row = record.to_row()

    assert list(row) == [
        "executedAt", "txhash", "startTime", "endTime", "chainId", "latency", "error",
        "txFee", "txFeeInUSD", "resourceUsedOfLatestBlock", "numOfTxInLatestBlock", "pingTime",
    ]
    assert row["latency"] == 15
    assert json.loads(record.to_json())["txhash"] == "tx"

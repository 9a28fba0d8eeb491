"""Reporting: measurement record, parquet encoding, storage delivery."""

from tx_latency.reporting.record import MeasurementRecord, RecordBuilder
from tx_latency.reporting.reporter import Reporter

__all__ = ["MeasurementRecord", "RecordBuilder", "Reporter"]

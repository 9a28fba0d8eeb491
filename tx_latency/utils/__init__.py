"""Utilities: timing helpers, local record spool."""

from tx_latency.utils.timing import now_ms, file_timestamp
from tx_latency.utils.spool import RecordSpool

__all__ = [
    "now_ms",
    "file_timestamp",
    "RecordSpool",
]

"""Ledger client interface and receipt/record types."""

from tx_latency.ledger.client import (
    LedgerClient,
    Receipt,
    SettledRecord,
    STATUS_SUCCESS,
    STATUS_UNKNOWN,
)

__all__ = ["LedgerClient", "Receipt", "SettledRecord", "STATUS_SUCCESS", "STATUS_UNKNOWN"]

"""
Transfer Probe

Submits one zero-net-value transfer and resolves its consensus receipt.
A receipt status of UNKNOWN means the network has not finalized consensus
yet, so the same submission is re-queried a bounded number of times
(no backoff). Anything other than SUCCESS after that is a failed probe.
"""

import time
from typing import Any, Callable, Optional

from tx_latency.execution.outcomes import TransferOutcome
from tx_latency.ledger.client import LedgerClient, STATUS_SUCCESS, STATUS_UNKNOWN
from tx_latency.utils.timing import now_ms


DEFAULT_PROBE_AMOUNT_HBAR = 10.0
DEFAULT_MAX_RECEIPT_ATTEMPTS = 3


class TransferProbe:
    """
    Latency probe for the ledger.

    Flow:
    1. Record start time
    2. Submit signed net-zero transfer (ledger client builds and signs it)
    3. Poll the receipt until status is not UNKNOWN, at most
       max_receipt_attempts queries
    4. On SUCCESS record end time and transaction id
    5. Fetch the settled record for the fee actually charged
    """

    def __init__(
        self,
        ledger: LedgerClient,
        probe_amount_hbar: float = DEFAULT_PROBE_AMOUNT_HBAR,
        max_receipt_attempts: int = DEFAULT_MAX_RECEIPT_ATTEMPTS,
        receipt_retry_delay_sec: float = 0.0,
        clock: Callable[[], int] = now_ms,
    ):
        """
        Initialize probe.

        Args:
            ledger: Connected, authenticated ledger client
            probe_amount_hbar: Amount credited and debited on the operator
            max_receipt_attempts: Total receipt queries allowed while UNKNOWN
            receipt_retry_delay_sec: Fixed pause between receipt queries
            clock: Epoch-millisecond clock
        """
        if max_receipt_attempts < 1:
            raise ValueError(f"max_receipt_attempts must be >= 1, got {max_receipt_attempts}")
        self.ledger = ledger
        self.probe_amount_hbar = probe_amount_hbar
        self.max_receipt_attempts = max_receipt_attempts
        self.receipt_retry_delay_sec = receipt_retry_delay_sec
        self.clock = clock

    def execute(self) -> TransferOutcome:
        """
        Run one probe transfer.

        Returns:
            TransferOutcome (never raises for ledger errors)
        """
        start = self.clock()

        try:
            handle = self.ledger.submit_transfer(self.probe_amount_hbar)
        except Exception as e:
            print(f"[Probe] Submission failed: {e}")
            return TransferOutcome(start_time=start, error_code="submission_error", error_msg=str(e))

        try:
            status, attempts = self.resolve_status(handle)
        except Exception as e:
            print(f"[Probe] Receipt query failed: {e}")
            return TransferOutcome(start_time=start, error_code="receipt_error", error_msg=str(e))

        if status == STATUS_UNKNOWN:
            return TransferOutcome(
                status=status,
                start_time=start,
                receipt_attempts=attempts,
                error_code="unresolved_consensus",
                error_msg=f"Consensus status in transaction receipt is {status} after {attempts} attempts",
            )
        if status != STATUS_SUCCESS:
            return TransferOutcome(
                status=status,
                start_time=start,
                receipt_attempts=attempts,
                error_code="consensus_rejected",
                error_msg=f"Consensus status in transaction receipt is {status}",
            )

        end = self.clock()
        transaction_id = self.ledger.transaction_id_of(handle)
        native_fee = self._fetch_fee(handle)

        return TransferOutcome(
            status=status,
            transaction_id=transaction_id,
            start_time=start,
            end_time=max(end, start),
            native_fee=native_fee,
            receipt_attempts=attempts,
        )

    def resolve_status(self, handle: Any) -> tuple[str, int]:
        """
        Query the receipt until consensus is no longer UNKNOWN.

        Returns:
            (final status name, number of receipt queries made)
        """
        attempts = 0
        status = STATUS_UNKNOWN
        while attempts < self.max_receipt_attempts:
            if attempts > 0 and self.receipt_retry_delay_sec > 0:
                time.sleep(self.receipt_retry_delay_sec)
            attempts += 1
            status = self.ledger.get_receipt(handle).status
            if status != STATUS_UNKNOWN:
                break
            print(f"[Probe] Receipt status UNKNOWN (attempt {attempts}/{self.max_receipt_attempts})")
        return status, attempts

    def _fetch_fee(self, handle: Any) -> Optional[float]:
        """Fee from the settled record; None if the record can't be fetched."""
        try:
            return float(self.ledger.get_record(handle).transaction_fee)
        except Exception as e:
            print(f"[Probe] Record fetch failed, fee unavailable: {e}")
            return None

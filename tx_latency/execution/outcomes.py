"""
Transfer probe result structure (TransferOutcome).
"""

from dataclasses import dataclass
from typing import Literal, Optional


ErrorCode = Literal[
    "submission_error",
    "receipt_error",
    "unresolved_consensus",
    "consensus_rejected",
]


@dataclass(frozen=True)
class TransferOutcome:
    """
    Result of one probe transfer.

    On success: status "SUCCESS", transaction_id set, end_time >= start_time.
    On failure: error_code/error_msg set; the other fields are whatever was
    observed before the failure.
    """

    status: Optional[str] = None  # Final consensus status name
    transaction_id: str = ""
    start_time: int = 0  # epoch ms
    end_time: int = 0  # epoch ms
    native_fee: Optional[float] = None  # HBAR from settled record, None if unavailable
    receipt_attempts: int = 0
    error_code: Optional[ErrorCode] = None
    error_msg: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error_code is None

    @property
    def latency(self) -> int:
        return self.end_time - self.start_time

    @property
    def error_description(self) -> str:
        """Human-readable failure reason ("" on success)."""
        if self.ok:
            return ""
        classification = self.error_code.replace("_", " ")
        return f"{classification}: {self.error_msg}" if self.error_msg else classification

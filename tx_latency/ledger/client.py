"""
Ledger client interface.

The measurement pipeline only talks to the network through this protocol so
the authenticated session can be injected (and faked in tests).
"""

from dataclasses import dataclass
from typing import Any, Protocol


STATUS_SUCCESS = "SUCCESS"
STATUS_UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class Receipt:
    """Consensus receipt for a submitted transaction."""

    status: str  # Response code name, e.g. "SUCCESS", "UNKNOWN"
    transaction_id: str = ""


@dataclass(frozen=True)
class SettledRecord:
    """Post-consensus transaction record."""

    transaction_id: str
    transaction_fee: float  # HBAR actually charged


class LedgerClient(Protocol):
    """Operations the pipeline consumes from the ledger SDK."""

    @property
    def operator_account_id(self) -> str: ...

    def get_network_info(self) -> Any:
        """Lightweight network round trip, used for ping time."""
        ...

    def get_account_balance(self) -> float:
        """Operator balance in HBAR."""
        ...

    def submit_transfer(self, amount_hbar: float) -> Any:
        """Sign and submit a net-zero transfer; returns a submission handle."""
        ...

    def get_receipt(self, handle: Any) -> Receipt: ...

    def get_record(self, handle: Any) -> SettledRecord: ...

    def transaction_id_of(self, handle: Any) -> str: ...

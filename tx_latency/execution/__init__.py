"""Transaction execution: transfer probe and receipt resolution."""

from tx_latency.execution.probe import TransferProbe
from tx_latency.execution.outcomes import TransferOutcome

__all__ = ["TransferProbe", "TransferOutcome"]

"""
Outcome: success/failure result for best-effort operations.

Used where a failure should degrade the measurement instead of aborting it
(rate fetch, alert delivery, report upload).
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Outcome:
    """Discriminated result: either ``ok`` with a value or failed with an error."""

    ok: bool
    value: Any = None
    error: Optional[str] = None

    @classmethod
    def success(cls, value: Any = None) -> "Outcome":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str) -> "Outcome":
        return cls(ok=False, error=error or "unknown error")

"""
Timing helpers.

All measurement timestamps are integer milliseconds since the Unix epoch.
"""

import time
from datetime import datetime
from typing import Optional


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


def file_timestamp(at: Optional[datetime] = None) -> str:
    """
    Local timestamp used in report filenames.

    Returns:
        String formatted as YYYYMMDD_HHMMSS (e.g. "20220101_032921")
    """
    return (at or datetime.now()).strftime("%Y%m%d_%H%M%S")

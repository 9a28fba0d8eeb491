"""Core system components: config, scheduler, measurement cycle."""

from tx_latency.core.config import Config
from tx_latency.core.cycle import MeasurementCycle
from tx_latency.core.outcome import Outcome
from tx_latency.core.scheduler import Scheduler

__all__ = [
    "Config",
    "MeasurementCycle",
    "Outcome",
    "Scheduler",
]
